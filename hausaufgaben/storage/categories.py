import logging
import os

from hausaufgaben.errors import StorageError, ValidationError

logger = logging.getLogger(__name__)


class CategoryManager:
    """Closed set of categories, each backed by one directory under ``root``."""

    def __init__(self, root, names):
        self.root = root
        self._names = list(dict.fromkeys(names))

    def names(self):
        return list(self._names)

    def exists(self, category):
        return category in self._names

    def require(self, category):
        if not self.exists(category):
            raise ValidationError(
                f"Unbekannte Kategorie '{category}'. Erlaubt: {', '.join(self._names)}"
            )
        return category

    def directory(self, category):
        return os.path.join(self.root, category)

    def ensure_directory(self, category):
        path = self.directory(category)
        try:
            os.makedirs(path, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Ordner für Kategorie '{category}' konnte nicht angelegt werden") from exc
        return path

    def purge(self, category):
        """Delete every file of the category and return how many were removed from disk."""
        path = self.directory(category)
        if not os.path.isdir(path):
            return 0

        try:
            with os.scandir(path) as entries:
                files = [entry.path for entry in entries if entry.is_file()]
        except OSError as exc:
            raise StorageError(f"Fehler beim Lesen der Kategorie '{category}'") from exc

        deleted = 0
        for file_path in files:
            try:
                os.remove(file_path)
            except FileNotFoundError:
                continue
            except OSError as exc:
                raise StorageError(
                    f"Datei in Kategorie '{category}' konnte nicht gelöscht werden "
                    f"({deleted} bereits gelöscht)"
                ) from exc
            deleted += 1

        try:
            os.rmdir(path)
        except OSError as exc:
            logger.info("Ordner %s nicht entfernt: %s", path, exc)

        return deleted
