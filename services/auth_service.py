import logging

from passlib.context import CryptContext
from sqlalchemy.orm import Session

from database import atomic
from errors import AuthFailure, Conflict
from models import Administrator
from repository import admin_repository

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

INVALID_CREDENTIALS = "Invalid email or password"


class AuthService:
    def __init__(self, db: Session):
        self.db = db

    def login(self, email: str, password: str) -> Administrator:
        """Return the administrator for valid credentials.

        An unknown email and a wrong password raise the same AuthFailure.
        """
        admin = admin_repository.get_admin_by_email(self.db, email)
        if admin is None or not self._verify(password, admin.password_hash):
            logger.info("Failed login attempt for %s", email)
            raise AuthFailure(INVALID_CREDENTIALS)

        logger.info("Administrator %s logged in", admin.id)
        return admin

    @staticmethod
    def _verify(password: str, password_hash: str) -> bool:
        try:
            return pwd_context.verify(password, password_hash)
        except ValueError:
            # unrecognised or corrupt stored hash
            logger.warning("Stored password hash could not be verified")
            return False

    def create_admin(self, email: str, password: str) -> Administrator:
        with atomic(self.db):
            if admin_repository.get_admin_by_email(self.db, email):
                raise Conflict(f"Administrator {email} already exists")
            admin = admin_repository.create_admin(self.db, email, pwd_context.hash(password))
        return admin
