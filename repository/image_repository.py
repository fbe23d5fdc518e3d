from __future__ import annotations

from typing import Iterable

from sqlalchemy.orm import Session

from models import PropertyImage


def add_images(db: Session, property_id: int, filenames: Iterable[str]) -> list[PropertyImage]:
    images = [PropertyImage(property_id=property_id, filename=name) for name in filenames]
    db.add_all(images)
    db.flush()
    return images


def list_images(db: Session, property_id: int) -> list[PropertyImage]:
    return (
        db.query(PropertyImage)
        .filter(PropertyImage.property_id == property_id)
        .order_by(PropertyImage.id)
        .all()
    )


def delete_images(db: Session, images: Iterable[PropertyImage]) -> None:
    for image in images:
        db.delete(image)
    db.flush()
