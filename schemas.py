"""Pydantic schemas for form validation and page projections."""
from datetime import date
from decimal import Decimal
from typing import Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from errors import ValidationFailure

FormT = TypeVar("FormT", bound=BaseModel)


def parse_form(model: Type[FormT], data) -> FormT:
    """Validate submitted form data, turning pydantic errors into ValidationFailure."""
    # blank inputs count as missing; uploaded files are handled separately
    fields = {key: value for key, value in dict(data).items() if isinstance(value, str) and value != ""}
    try:
        return model.model_validate(fields)
    except ValidationError as exc:
        raise ValidationFailure(str(exc)) from exc


class LoginForm(BaseModel):
    email: str
    password: str = Field(..., alias="senha", max_length=72)


class PropertyForm(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    title: str = Field(..., alias="titulo", min_length=1)
    address: Optional[str] = Field(None, alias="endereco")
    description: Optional[str] = Field(None, alias="descricao")
    price: Decimal = Field(..., alias="valor_mensal", ge=0, max_digits=10, decimal_places=2)


class ClientForm(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(..., alias="nome", min_length=1)
    national_id: Optional[str] = Field(None, alias="rg")
    phone: Optional[str] = Field(None, alias="telefone")
    email: Optional[str] = None


class RentalForm(ClientForm):
    start_date: date = Field(..., alias="data_inicio")
    end_date: date = Field(..., alias="data_fim")
    informed_total: Optional[Decimal] = Field(None, alias="valor_total", ge=0)

    def client_fields(self) -> ClientForm:
        return ClientForm(
            name=self.name,
            national_id=self.national_id,
            phone=self.phone,
            email=self.email,
        )


class RemoveRentalForm(BaseModel):
    rental_id: int = Field(..., alias="aluguel_id")
    client_id: int = Field(..., alias="cliente_id")
    property_id: int = Field(..., alias="casa_id")


class PropertyListItem(BaseModel):
    """A row of the property management view, with its active rental if any."""
    id: int
    title: str
    status: str
    price: Decimal
    rental_id: Optional[int] = None
    client_id: Optional[int] = None


class RentalDetail(BaseModel):
    rental_id: int
    start_date: date
    end_date: date
    total: Decimal
    client_id: int
    property_id: int
    property_title: str
    client_name: str
    client_national_id: Optional[str] = None
    client_phone: Optional[str] = None
    client_email: Optional[str] = None


class ReportRow(BaseModel):
    property_title: str
    client_name: str
    client_email: Optional[str] = None
    client_phone: Optional[str] = None
    start_date: date
    end_date: date
    total: Decimal


class DashboardStats(BaseModel):
    total_properties: int
    rented_properties: int
