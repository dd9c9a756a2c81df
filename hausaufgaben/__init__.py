import logging
import os
import time

from flask import Flask, current_app
from flask_sqlalchemy import SQLAlchemy

from hausaufgaben.config import Config

db = SQLAlchemy()


def get_image_service():
    return current_app.extensions["image_service"]


def get_homework():
    return current_app.extensions["homework"]


def create_app(config_overrides=None):
    app = Flask(__name__)

    # KONFIGURATION
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.logger.setLevel(app.config["LOG_LEVEL"])

    categories = list(app.config["IMAGE_CATEGORIES"])
    if app.config["DEFAULT_IMAGE_CATEGORY"] not in categories:
        categories.append(app.config["DEFAULT_IMAGE_CATEGORY"])

    # Bildordner anlegen, falls nicht vorhanden
    image_root = app.config["IMAGE_FOLDER"]
    if not os.path.exists(image_root):
        os.makedirs(image_root)
        app.logger.info("✅ Bildordner angelegt: %s", image_root)

    if app.config["SQLALCHEMY_DATABASE_URI"].startswith("sqlite:///"):
        os.makedirs(os.path.dirname(app.config["SQLALCHEMY_DATABASE_URI"][len("sqlite:///"):]) or ".",
                    exist_ok=True)

    # Erweiterungen initialisieren
    db.init_app(app)

    from hausaufgaben import analytics
    from hausaufgaben.errors import register_error_handlers
    from hausaufgaben.models.homework import HomeworkStore
    from hausaufgaben.storage.categories import CategoryManager
    from hausaufgaben.storage.metadata import MetadataStore
    from hausaufgaben.storage.scanner import ImageScanner
    from hausaufgaben.storage.service import ImageService

    with app.app_context():
        from hausaufgaben.models.analytics_event import AnalyticsEvent  # noqa: F401
        db.create_all()

    image_service = ImageService(
        categories=CategoryManager(image_root, categories),
        metadata=MetadataStore(ImageScanner(image_root)),
        default_category=app.config["DEFAULT_IMAGE_CATEGORY"],
        max_files=app.config["MAX_FILES_PER_UPLOAD"],
        max_file_size=app.config["MAX_IMAGE_SIZE"],
        on_event=analytics.record_event,
    )
    image_service.startup()

    app.extensions["image_service"] = image_service
    app.extensions["homework"] = HomeworkStore()
    app.extensions["started_at"] = time.monotonic()

    register_error_handlers(app)

    @app.after_request
    def add_cors_headers(response):
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, PUT, DELETE"
        response.headers["Access-Control-Allow-Headers"] = (
            "Origin, X-Requested-With, Content-Type, Accept"
        )
        return response

    # Blueprints registrieren
    from hausaufgaben.routes.analytics import analytics_bp
    from hausaufgaben.routes.homework import homework_bp
    from hausaufgaben.routes.images import images_bp

    app.register_blueprint(homework_bp)
    app.register_blueprint(images_bp)
    app.register_blueprint(analytics_bp)

    return app
