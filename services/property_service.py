"""Property management: creation with images, editing, listing and deletion."""
import logging
from typing import List, Optional, Sequence

from sqlalchemy.orm import Session

from config import settings
from database import atomic
from errors import Conflict, NotFound, ValidationFailure
from models import STATUS_AVAILABLE, STATUS_RENTED, Property
from repository import image_repository, property_repository, rental_repository
from schemas import DashboardStats, PropertyForm, PropertyListItem
from storage import UploadStorage

logger = logging.getLogger(__name__)


def _submitted(uploads) -> list:
    # an empty file input still posts one part with no filename
    return [upload for upload in (uploads or []) if getattr(upload, "filename", None)]


class PropertyService:

    def __init__(self, db: Session, storage: UploadStorage, max_images: Optional[int] = None):
        self.db = db
        self.storage = storage
        self.max_images = max_images if max_images is not None else settings.MAX_IMAGES_PER_PROPERTY

    def create(self, fields: PropertyForm, uploads: Sequence = ()) -> Property:
        """Store the uploaded images, then insert the property and its image rows.

        Files are written before the transaction opens and are not removed if it
        fails; their names are logged so they can be cleaned up by hand.
        """
        uploads = _submitted(uploads)
        if len(uploads) > self.max_images:
            raise ValidationFailure(f"At most {self.max_images} images per property")
        for upload in uploads:
            self.storage.check_name(upload.filename)

        stored = []
        try:
            for upload in uploads:
                stored.append(self.storage.save(upload.file, upload.filename))
        except Exception:
            if stored:
                logger.warning("Image upload failed; orphaned uploads: %s", ", ".join(stored))
            raise

        try:
            with atomic(self.db):
                prop = property_repository.create_property(self.db, **fields.model_dump())
                image_repository.add_images(self.db, prop.id, stored)
        except Exception:
            if stored:
                logger.warning("Property insert failed; orphaned uploads: %s", ", ".join(stored))
            raise

        logger.info("Property %s created with %d image(s)", prop.id, len(stored))
        return prop

    def get(self, property_id: int) -> Property:
        prop = property_repository.get_property(self.db, property_id)
        if prop is None:
            raise NotFound(f"Property {property_id} not found")
        return prop

    def get_available(self, property_id: int) -> Property:
        prop = self.get(property_id)
        if prop.status != STATUS_AVAILABLE:
            raise NotFound(f"Property {property_id} is already rented")
        return prop

    def update(self, property_id: int, fields: PropertyForm) -> Property:
        with atomic(self.db):
            prop = self.get(property_id)
            property_repository.update_property(self.db, prop, **fields.model_dump())
        logger.info("Property %s updated", property_id)
        return prop

    def delete(self, property_id: int) -> int:
        """Delete a property, its image rows and their stored files.

        Returns the number of stored files actually removed. A property that is
        currently rented cannot be deleted; remove its rental first.
        """
        removed = 0
        with atomic(self.db):
            prop = self.get(property_id)
            if prop.status == STATUS_RENTED or rental_repository.get_rental_for_property(self.db, property_id):
                raise Conflict(f"Property {property_id} has an active rental")

            images = image_repository.list_images(self.db, property_id)
            filenames = [image.filename for image in images]
            image_repository.delete_images(self.db, images)
            property_repository.delete_property(self.db, prop)

            for filename in filenames:
                if self.storage.delete(filename):
                    removed += 1

        logger.info("Property %s deleted (%d of %d files removed)", property_id, removed, len(filenames))
        return removed

    def list(self) -> List[PropertyListItem]:
        return [
            PropertyListItem(**row._asdict())
            for row in property_repository.list_properties_with_rental(self.db)
        ]

    def stats(self) -> DashboardStats:
        return DashboardStats(
            total_properties=property_repository.count_properties(self.db),
            rented_properties=property_repository.count_rented(self.db),
        )
