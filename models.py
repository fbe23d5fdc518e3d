"""SQLAlchemy database models for administrators, properties, clients and rentals."""
from sqlalchemy import (
    Column, Integer, String, Text, Numeric, Date, ForeignKey
)
from sqlalchemy.orm import relationship

from database import Base

STATUS_AVAILABLE = "disponivel"
STATUS_RENTED = "alugada"


class Administrator(Base):
    __tablename__ = "administradores"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column("senha_hash", String(255), nullable=False)


class Property(Base):
    __tablename__ = "casas"

    id = Column(Integer, primary_key=True, index=True)
    title = Column("titulo", String(255), nullable=False)
    address = Column("endereco", String(255))
    description = Column("descricao", Text)
    # Monthly rate, or daily rate when PRICING_MODE is "diario".
    price = Column("valor_mensal", Numeric(10, 2), nullable=False)
    status = Column(String(20), nullable=False, default=STATUS_AVAILABLE)

    images = relationship("PropertyImage", back_populates="property")
    rental = relationship("Rental", back_populates="property", uselist=False)


class PropertyImage(Base):
    __tablename__ = "imagens_casas"

    id = Column(Integer, primary_key=True, index=True)
    property_id = Column("casa_id", Integer, ForeignKey("casas.id"), nullable=False)
    filename = Column("caminho_arquivo", String(255), nullable=False)

    property = relationship("Property", back_populates="images")


class Client(Base):
    __tablename__ = "clientes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column("nome", String(255), nullable=False)
    national_id = Column("rg", String(50))
    phone = Column("telefone", String(50))
    email = Column(String(255))

    rental = relationship("Rental", back_populates="client", uselist=False)


class Rental(Base):
    __tablename__ = "alugueis"

    id = Column(Integer, primary_key=True, index=True)
    # unique: a property has at most one rental at a time
    property_id = Column("casa_id", Integer, ForeignKey("casas.id"), nullable=False, unique=True)
    client_id = Column("cliente_id", Integer, ForeignKey("clientes.id"), nullable=False)
    start_date = Column("data_inicio", Date, nullable=False)
    end_date = Column("data_fim", Date, nullable=False)
    total = Column("valor_total", Numeric(10, 2), nullable=False)

    property = relationship("Property", back_populates="rental")
    client = relationship("Client", back_populates="rental")
