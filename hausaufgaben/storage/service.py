import logging
import os
from datetime import datetime, timezone

from hausaufgaben.errors import (
    DivergenceError,
    NoFilesError,
    NotFoundError,
    ScanError,
    StorageError,
    UploadValidationError,
)
from hausaufgaben.models.image import ImageRecord
from hausaufgaben.utils.file_rules import allowed_file, generate_filename, is_image_mimetype

logger = logging.getLogger(__name__)


def _stream_size(file):
    stream = file.stream
    position = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(position)
    return size


class ImageService:
    """Uploads, deletes and lookups across the category directories.

    Every mutation goes to disk first; the metadata store is only updated
    once the filesystem operation succeeded.
    """

    def __init__(self, categories, metadata, default_category, max_files=10,
                 max_file_size=10 * 1024 * 1024, on_event=None):
        self.categories = categories
        self.metadata = metadata
        self.default_category = default_category
        self.max_files = max_files
        self.max_file_size = max_file_size
        self.on_event = on_event

    def startup(self):
        for category in self.categories.names():
            self.categories.ensure_directory(category)
            try:
                self.metadata.refresh(category)
            except ScanError as exc:
                logger.warning("⚠️ Kategorie %s beim Start nicht eingelesen: %s", category, exc)
        logger.info("✅ Bildablage bereit: %s", ", ".join(self.categories.names()))

    def _emit(self, name, **details):
        if self.on_event is not None:
            self.on_event(name, details)

    # Lesen

    def list_images(self, category):
        self.categories.require(category)
        return self.metadata.refresh(category)

    def category_summary(self):
        summary = []
        total = 0
        for category in self.categories.names():
            try:
                count = len(self.metadata.refresh(category))
            except ScanError as exc:
                logger.warning("⚠️ Metadaten für %s nicht verfügbar: %s", category, exc)
                summary.append({"name": category, "imageCount": None, "available": False})
                continue
            total += count
            summary.append({"name": category, "imageCount": count, "available": True})
        return summary, total

    def locate_file(self, filename):
        record = self.metadata.find(filename)
        if record is None:
            raise NotFoundError()
        path = os.path.join(self.categories.directory(record.category), record.filename)
        if not os.path.isfile(path):
            logger.warning("⚠️ Metadaten und Datenträger weichen ab: %s fehlt", path)
            raise DivergenceError(
                f"Bild '{filename}' ist registriert, fehlt aber auf dem Datenträger"
            )
        return record, path

    # Hochladen

    def _validate_batch(self, files):
        if len(files) > self.max_files:
            raise UploadValidationError(
                "count", f"Maximal {self.max_files} Bilder pro Upload erlaubt ({len(files)} gesendet)"
            )
        for file in files:
            if not is_image_mimetype(file.mimetype) or not allowed_file(file.filename):
                raise UploadValidationError(
                    "type", f"'{file.filename}' ist kein erlaubtes Bildformat"
                )
            if _stream_size(file) > self.max_file_size:
                limit_mb = self.max_file_size // (1024 * 1024)
                raise UploadValidationError(
                    "size", f"'{file.filename}' ist größer als {limit_mb} MB"
                )

    def upload(self, files, category=None):
        category = (category or "").strip() or self.default_category
        self.categories.require(category)

        files = [file for file in files if file and file.filename]
        if not files:
            raise NoFilesError()
        self._validate_batch(files)

        directory = self.categories.ensure_directory(category)
        written = []
        records = []
        try:
            for file in files:
                filename = generate_filename(file.filename)
                while os.path.exists(os.path.join(directory, filename)):
                    filename = generate_filename(file.filename)
                path = os.path.join(directory, filename)
                file.save(path)
                written.append(path)
                records.append(ImageRecord(
                    filename=filename,
                    original_name=file.filename,
                    category=category,
                    uploaded_at=datetime.now(timezone.utc),
                    size=os.path.getsize(path),
                    mime_type=file.mimetype,
                ))
        except OSError as exc:
            for path in written:
                try:
                    os.remove(path)
                except OSError:
                    logger.warning("Teilupload nicht entfernt: %s", path)
            raise StorageError("Bilder konnten nicht gespeichert werden") from exc

        self.metadata.insert(category, records)
        logger.info("📸 %d Bild(er) in %s gespeichert", len(records), category)
        self._emit("image_upload", category=category, count=len(records))
        return category, records

    # Löschen

    def delete_image(self, filename):
        record = self.metadata.find(filename)
        if record is None:
            raise NotFoundError()

        path = os.path.join(self.categories.directory(record.category), record.filename)
        try:
            os.remove(path)
        except FileNotFoundError:
            logger.warning("⚠️ %s fehlte bereits auf dem Datenträger", path)
        except OSError as exc:
            raise StorageError(f"Bild '{filename}' konnte nicht gelöscht werden") from exc

        self.metadata.remove(record.category, record.filename)
        logger.info("🗑️ Bild gelöscht: %s/%s", record.category, record.filename)
        self._emit("image_delete", category=record.category, filename=record.filename)
        return record

    def delete_category(self, category):
        self.categories.require(category)
        cached = len(self.metadata.get(category))
        try:
            deleted = self.categories.purge(category)
        except StorageError:
            # Teil der Dateien ist schon weg, Cache an die Platte angleichen
            try:
                self.metadata.refresh(category)
            except ScanError:
                self.metadata.clear(category)
            raise
        self.metadata.clear(category)
        if deleted != cached:
            logger.info(
                "Kategorie %s: %d Dateien gelöscht, Cache kannte %d", category, deleted, cached
            )
        self._emit("category_purge", category=category, count=deleted)
        return deleted
