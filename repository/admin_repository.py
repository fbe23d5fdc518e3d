from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from models import Administrator


def get_admin_by_email(db: Session, email: str) -> Optional[Administrator]:
    return db.query(Administrator).filter(Administrator.email == email).first()


def create_admin(db: Session, email: str, password_hash: str) -> Administrator:
    admin = Administrator(email=email, password_hash=password_hash)
    db.add(admin)
    db.flush()
    return admin
