"""Rental registration, removal and editing as atomic units.

Each public method runs in a single transaction. The property status column
mirrors the existence of a rental: ``alugada`` iff a rental row references the
property. Every write path here keeps the two in step.
"""
import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

import pricing
from config import settings
from database import atomic
from errors import Conflict, NotFound, ValidationFailure
from repository import client_repository, property_repository, rental_repository
from schemas import ClientForm, RentalDetail, ReportRow

logger = logging.getLogger(__name__)


class RentalService:

    def __init__(self, db: Session, pricing_mode: Optional[str] = None):
        self.db = db
        self.pricing_mode = pricing_mode or settings.PRICING_MODE

    def _total(self, start: date, end: date, rate, informed_total: Optional[Decimal]) -> Decimal:
        return pricing.compute_total(self.pricing_mode, start, end, rate, informed_total)

    def register(
        self,
        property_id: int,
        client_fields: ClientForm,
        start_date: date,
        end_date: date,
        informed_total: Optional[Decimal] = None,
    ):
        """Create client and rental for an available property and mark it rented."""
        with atomic(self.db):
            prop = property_repository.get_property(self.db, property_id)
            if prop is None:
                raise NotFound(f"Property {property_id} not found")

            # Re-checked in the same statement that writes the status.
            if not property_repository.claim_available(self.db, property_id):
                raise Conflict(f"Property {property_id} is not available")

            total = self._total(start_date, end_date, prop.price, informed_total)
            client = client_repository.create_client(self.db, **client_fields.model_dump())
            try:
                rental = rental_repository.create_rental(
                    self.db,
                    property_id=property_id,
                    client_id=client.id,
                    start_date=start_date,
                    end_date=end_date,
                    total=total,
                )
            except IntegrityError as exc:
                raise Conflict(f"Property {property_id} already has a rental") from exc

        logger.info(
            "Rental %s registered for property %s (client %s, total %s)",
            rental.id, property_id, client.id, total,
        )
        return rental

    def remove(self, rental_id: int, client_id: int, property_id: int) -> None:
        """Delete a rental and its client, and make the property available again."""
        with atomic(self.db):
            rental = rental_repository.get_rental(self.db, rental_id)
            if rental is None:
                raise NotFound(f"Rental {rental_id} not found")
            client = client_repository.get_client(self.db, client_id)
            if client is None:
                raise NotFound(f"Client {client_id} not found")
            prop = property_repository.get_property(self.db, property_id)
            if prop is None:
                raise NotFound(f"Property {property_id} not found")

            if rental.client_id != client_id or rental.property_id != property_id:
                raise ValidationFailure(
                    f"Rental {rental_id} does not link client {client_id} and property {property_id}"
                )

            rental_repository.delete_rental(self.db, rental)
            client_repository.delete_client(self.db, client)
            property_repository.mark_available(self.db, property_id)

        logger.info("Rental %s removed; property %s available", rental_id, property_id)

    def edit(
        self,
        rental_id: int,
        client_fields: ClientForm,
        start_date: date,
        end_date: date,
        informed_total: Optional[Decimal] = None,
    ):
        """Update the client and dates of a rental, recomputing its total."""
        with atomic(self.db):
            rental = rental_repository.get_rental(self.db, rental_id)
            if rental is None:
                raise NotFound(f"Rental {rental_id} not found")
            client = client_repository.get_client(self.db, rental.client_id)
            prop = property_repository.get_property(self.db, rental.property_id)
            if client is None or prop is None:
                raise NotFound(f"Rental {rental_id} references missing rows")

            client_repository.update_client(self.db, client, **client_fields.model_dump())
            total = self._total(start_date, end_date, prop.price, informed_total)
            rental_repository.update_rental(
                self.db,
                rental,
                start_date=start_date,
                end_date=end_date,
                total=total,
            )

        logger.info("Rental %s updated (total %s)", rental_id, total)
        return rental

    def get_for_edit(self, rental_id: int) -> RentalDetail:
        row = rental_repository.get_rental_detail(self.db, rental_id)
        if row is None:
            raise NotFound(f"Rental {rental_id} not found")
        return RentalDetail(**row._asdict())

    def report(self) -> List[ReportRow]:
        return [ReportRow(**row._asdict()) for row in rental_repository.list_report(self.db)]
