from __future__ import annotations

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from models import STATUS_AVAILABLE, STATUS_RENTED, Property, Rental


def create_property(db: Session, **fields) -> Property:
    prop = Property(status=STATUS_AVAILABLE, **fields)
    db.add(prop)
    db.flush()
    return prop


def get_property(db: Session, property_id: int) -> Optional[Property]:
    return db.query(Property).filter(Property.id == property_id).first()


def update_property(db: Session, prop: Property, **fields) -> Property:
    for key, value in fields.items():
        setattr(prop, key, value)
    db.flush()
    return prop


def delete_property(db: Session, prop: Property) -> None:
    db.delete(prop)
    db.flush()


def list_properties_with_rental(db: Session) -> list:
    """Properties, newest first, joined with their active rental when rented."""
    return (
        db.query(
            Property.id,
            Property.title,
            Property.status,
            Property.price,
            Rental.id.label("rental_id"),
            Rental.client_id.label("client_id"),
        )
        .outerjoin(
            Rental,
            (Rental.property_id == Property.id) & (Property.status == STATUS_RENTED),
        )
        .order_by(Property.id.desc())
        .all()
    )


def claim_available(db: Session, property_id: int) -> bool:
    """Flip an available property to rented; False if it was not available.

    The status test and the write are one statement, so a concurrent
    registration that committed first makes this return False.
    """
    updated = (
        db.query(Property)
        .filter(Property.id == property_id, Property.status == STATUS_AVAILABLE)
        .update({Property.status: STATUS_RENTED}, synchronize_session=False)
    )
    return updated == 1


def mark_available(db: Session, property_id: int) -> int:
    return (
        db.query(Property)
        .filter(Property.id == property_id)
        .update({Property.status: STATUS_AVAILABLE}, synchronize_session=False)
    )


def count_properties(db: Session) -> int:
    return db.query(func.count(Property.id)).scalar() or 0


def count_rented(db: Session) -> int:
    return (
        db.query(func.count(Property.id))
        .filter(Property.status == STATUS_RENTED)
        .scalar()
        or 0
    )
