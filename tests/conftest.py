"""
Pytest configuration and fixtures
"""
import io
import os

import pytest
from werkzeug.datastructures import FileStorage

from hausaufgaben import create_app, db

CATEGORIES = ["Mathe", "Englisch", "Deutsch", "Allgemein"]


@pytest.fixture
def make_app(tmp_path):
    created = []

    def _make_app(**overrides):
        config = {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": "sqlite://",
            "IMAGE_FOLDER": str(tmp_path / "images"),
            "IMAGE_CATEGORIES": list(CATEGORIES),
            "DEFAULT_IMAGE_CATEGORY": "Allgemein",
            "MAX_FILES_PER_UPLOAD": 10,
            "MAX_IMAGE_SIZE": 10 * 1024 * 1024,
        }
        config.update(overrides)
        app = create_app(config)
        created.append(app)
        return app

    yield _make_app

    for app in created:
        with app.app_context():
            db.session.remove()
            db.drop_all()


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def image_root(app):
    return app.config["IMAGE_FOLDER"]


def upload_tuple(name, size, content_type="image/png"):
    """Multipart file entry for the Flask test client."""
    return (io.BytesIO(b"\x89" * size), name, content_type)


def file_storage(name, size, content_type="image/png"):
    return FileStorage(stream=io.BytesIO(b"\x89" * size), filename=name, content_type=content_type)


def deny_scandir(monkeypatch, category):
    """Make listing one category directory fail with a permission error."""
    real_scandir = os.scandir

    def scandir(path="."):
        if os.path.basename(os.fspath(path)) == category:
            raise PermissionError(13, "Permission denied", path)
        return real_scandir(path)

    monkeypatch.setattr("hausaufgaben.storage.scanner.os.scandir", scandir)
