from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from models import Client


def create_client(db: Session, **fields) -> Client:
    client = Client(**fields)
    db.add(client)
    db.flush()
    return client


def get_client(db: Session, client_id: int) -> Optional[Client]:
    return db.query(Client).filter(Client.id == client_id).first()


def update_client(db: Session, client: Client, **fields) -> Client:
    for key, value in fields.items():
        setattr(client, key, value)
    db.flush()
    return client


def delete_client(db: Session, client: Client) -> None:
    db.delete(client)
    db.flush()
