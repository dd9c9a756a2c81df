import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))


def _split_list(value):
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "hausaufgaben-dev-key-change-in-production")

    # PostgreSQL (Render) oder SQLite lokal
    DATABASE_URL = os.getenv('DATABASE_URL')

    if DATABASE_URL:
        # Render liefert postgres://, SQLAlchemy braucht postgresql://
        if DATABASE_URL.startswith("postgres://"):
            DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)
        SQLALCHEMY_DATABASE_URI = DATABASE_URL
    else:
        SQLALCHEMY_DATABASE_URI = "sqlite:///" + os.path.join(BASE_DIR, "instance", "app.db")

    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Bildablage: ein Unterordner pro Kategorie
    IMAGE_FOLDER = os.getenv("IMAGE_FOLDER", os.path.join(BASE_DIR, 'uploads', 'images'))
    IMAGE_CATEGORIES = _split_list(os.getenv("IMAGE_CATEGORIES", "Mathe,Englisch,Deutsch,Allgemein"))
    DEFAULT_IMAGE_CATEGORY = os.getenv("DEFAULT_IMAGE_CATEGORY", "Allgemein")

    MAX_FILES_PER_UPLOAD = int(os.getenv("MAX_FILES_PER_UPLOAD", "10"))
    MAX_IMAGE_SIZE = int(os.getenv("MAX_IMAGE_SIZE", str(10 * 1024 * 1024)))  # 10 MB
    # ganzer Batch plus Formular-Overhead
    MAX_CONTENT_LENGTH = MAX_FILES_PER_UPLOAD * MAX_IMAGE_SIZE + 1024 * 1024

    ANALYTICS_WINDOW_HOURS = int(os.getenv("ANALYTICS_WINDOW_HOURS", "24"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
