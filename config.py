"""Configuration settings for the Apêgo administrative backend."""
import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _split_set(value: str) -> set:
    return {item.strip().lower() for item in value.split(",") if item.strip()}


class Settings:
    PROJECT_NAME: str = "Apêgo Admin"
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./apego.db")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key-change-me")
    SESSION_COOKIE: str = os.getenv("SESSION_COOKIE", "apego_session")
    UPLOAD_FOLDER: str = os.getenv("UPLOAD_FOLDER", os.path.join("static", "uploads"))
    ALLOWED_IMAGE_EXTENSIONS: set = _split_set(
        os.getenv("ALLOWED_IMAGE_EXTENSIONS", "png,jpg,jpeg,gif,webp")
    )
    MAX_IMAGES_PER_PROPERTY: int = int(os.getenv("MAX_IMAGES_PER_PROPERTY", "10"))
    # mensal | diario | informado
    PRICING_MODE: str = os.getenv("PRICING_MODE", "mensal")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
TEMPLATES_DIR = os.path.join(BASE_DIR, "templates")
STATIC_DIR = os.path.join(BASE_DIR, "static")
