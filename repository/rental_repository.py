from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from models import Client, Property, Rental


def create_rental(db: Session, **fields) -> Rental:
    rental = Rental(**fields)
    db.add(rental)
    db.flush()
    return rental


def get_rental(db: Session, rental_id: int) -> Optional[Rental]:
    return db.query(Rental).filter(Rental.id == rental_id).first()


def get_rental_for_property(db: Session, property_id: int) -> Optional[Rental]:
    return db.query(Rental).filter(Rental.property_id == property_id).first()


def update_rental(db: Session, rental: Rental, **fields) -> Rental:
    for key, value in fields.items():
        setattr(rental, key, value)
    db.flush()
    return rental


def delete_rental(db: Session, rental: Rental) -> None:
    db.delete(rental)
    db.flush()


def get_rental_detail(db: Session, rental_id: int):
    return (
        db.query(
            Rental.id.label("rental_id"),
            Rental.start_date,
            Rental.end_date,
            Rental.total,
            Rental.client_id,
            Property.id.label("property_id"),
            Property.title.label("property_title"),
            Client.name.label("client_name"),
            Client.national_id.label("client_national_id"),
            Client.phone.label("client_phone"),
            Client.email.label("client_email"),
        )
        .join(Property, Rental.property_id == Property.id)
        .join(Client, Rental.client_id == Client.id)
        .filter(Rental.id == rental_id)
        .first()
    )


def list_report(db: Session) -> list:
    return (
        db.query(
            Property.title.label("property_title"),
            Client.name.label("client_name"),
            Client.email.label("client_email"),
            Client.phone.label("client_phone"),
            Rental.start_date,
            Rental.end_date,
            Rental.total,
        )
        .join(Property, Rental.property_id == Property.id)
        .join(Client, Rental.client_id == Client.id)
        .order_by(Rental.start_date.desc())
        .all()
    )
