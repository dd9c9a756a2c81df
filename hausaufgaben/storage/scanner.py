import logging
import os
import stat
from datetime import datetime, timezone

from hausaufgaben.errors import ScanError
from hausaufgaben.models.image import ImageRecord
from hausaufgaben.utils.file_rules import allowed_file, guess_mimetype, original_name_from

logger = logging.getLogger(__name__)


class ImageScanner:
    """Read-only view of the per-category image directories under ``root``."""

    def __init__(self, root):
        self.root = root

    def category_path(self, category):
        return os.path.join(self.root, category)

    def scan(self, category):
        """Yield an ImageRecord for every recognized image in the category directory.

        A missing directory yields nothing. Any other directory read error is
        raised as ScanError; callers must not treat a partially consumed scan
        as a result.
        """
        path = self.category_path(category)
        try:
            info = os.stat(path)
        except FileNotFoundError:
            return
        except OSError as exc:
            logger.warning("Kategorie %s nicht erreichbar: %s", category, exc)
            raise ScanError(f"Fehler beim Lesen der Kategorie '{category}'") from exc
        if not stat.S_ISDIR(info.st_mode):
            return

        try:
            with os.scandir(path) as entries:
                names = sorted(entry.name for entry in entries if entry.is_file())
        except OSError as exc:
            logger.warning("Kategorie %s nicht lesbar: %s", category, exc)
            raise ScanError(f"Fehler beim Lesen der Kategorie '{category}'") from exc

        for name in names:
            if not allowed_file(name):
                continue
            try:
                file_info = os.stat(os.path.join(path, name))
            except FileNotFoundError:
                # zwischen Auflistung und stat gelöscht
                continue
            except OSError as exc:
                raise ScanError(f"Fehler beim Lesen der Kategorie '{category}'") from exc

            yield ImageRecord(
                filename=name,
                original_name=original_name_from(name),
                category=category,
                uploaded_at=datetime.fromtimestamp(file_info.st_mtime, tz=timezone.utc),
                size=file_info.st_size,
                mime_type=guess_mimetype(name),
            )
