"""Error taxonomy of the image store and its JSON error envelope."""
from flask import jsonify, request
from werkzeug.exceptions import HTTPException


class ImageStoreError(Exception):
    status_code = 500
    message = "Interner Fehler"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        self.message = message or self.message

    def to_dict(self):
        return {"success": False, "error": self.message}


class ValidationError(ImageStoreError):
    status_code = 400
    message = "Ungültige Anfrage"


class UploadValidationError(ValidationError):
    """A batch violated one of the upload limits (count, size or type)."""

    def __init__(self, constraint, message):
        super().__init__(message)
        self.constraint = constraint

    def to_dict(self):
        payload = super().to_dict()
        payload["constraint"] = self.constraint
        return payload


class NoFilesError(ValidationError):
    message = "Keine Bilder hochgeladen"


class NotFoundError(ImageStoreError):
    status_code = 404
    message = "Bild nicht gefunden"


class DivergenceError(NotFoundError):
    """Metadata references a file that is no longer on disk."""

    message = "Bilddatei fehlt auf dem Datenträger"


class StorageError(ImageStoreError):
    status_code = 500
    message = "Fehler beim Zugriff auf das Bildverzeichnis"


class ScanError(StorageError):
    message = "Fehler beim Lesen des Bildverzeichnisses"


def _envelope(message, status_code):
    return jsonify({"success": False, "error": message}), status_code


def register_error_handlers(app):

    @app.errorhandler(ImageStoreError)
    def handle_image_store_error(error):
        if error.status_code >= 500:
            app.logger.error("❌ %s", error.message)
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        # HTML-Fehlerseiten nur außerhalb der API
        if not request.path.startswith("/api"):
            return error
        if error.code == 413:
            return _envelope("Anfrage zu groß", 413)
        return _envelope(error.description or error.name, error.code)

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        app.logger.exception("❌ Unerwarteter Fehler: %s", error)
        return _envelope("Interner Serverfehler", 500)
