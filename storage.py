"""Disk storage for uploaded property images."""
import logging
import os
import shutil
import uuid
from typing import BinaryIO

from config import settings
from errors import StorageFailure, ValidationFailure

logger = logging.getLogger(__name__)


class UploadStorage:
    def __init__(self, upload_dir: str, allowed_extensions=None):
        self.upload_dir = upload_dir
        self.allowed_extensions = {ext.lower() for ext in (allowed_extensions or ())}
        os.makedirs(upload_dir, exist_ok=True)

    def path_for(self, filename: str) -> str:
        return os.path.join(self.upload_dir, os.path.basename(filename))

    def check_name(self, original_name: str) -> str:
        """Return the lower-cased extension of an acceptable upload name."""
        file_extension = os.path.splitext(original_name or "")[1].lower()
        if self.allowed_extensions and file_extension.lstrip(".") not in self.allowed_extensions:
            raise ValidationFailure(f"File type not allowed: {original_name!r}")
        return file_extension

    def save(self, fileobj: BinaryIO, original_name: str) -> str:
        """Write the bytes under a unique name and return that name."""
        file_extension = self.check_name(original_name)
        unique_filename = f"{uuid.uuid4().hex}{file_extension}"
        file_path = self.path_for(unique_filename)

        try:
            with open(file_path, "wb") as buffer:
                shutil.copyfileobj(fileobj, buffer)
        except OSError as exc:
            raise StorageFailure(f"Could not save file {original_name!r}") from exc

        logger.debug("Stored upload %s as %s", original_name, unique_filename)
        return unique_filename

    def delete(self, filename: str) -> bool:
        """Remove a stored file. A file that is already gone is not an error."""
        try:
            os.remove(self.path_for(filename))
        except FileNotFoundError:
            logger.info("Stored file %s already absent", filename)
            return False
        except OSError as exc:
            raise StorageFailure(f"Could not delete file {filename!r}") from exc
        return True


def get_storage() -> UploadStorage:
    """Dependency providing the configured upload storage."""
    return UploadStorage(settings.UPLOAD_FOLDER, settings.ALLOWED_IMAGE_EXTENSIONS)
