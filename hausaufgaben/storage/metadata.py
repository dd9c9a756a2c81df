import logging

logger = logging.getLogger(__name__)


class MetadataStore:
    """In-memory cache of the image records per category.

    The disk is authoritative: ``refresh`` rebuilds a category's snapshot from
    the scanner and read paths that need strong consistency call it before
    ``get``. ``insert`` and ``remove`` only keep the cache close to disk
    between refreshes.
    """

    def __init__(self, scanner):
        self.scanner = scanner
        self._snapshots = {}

    def refresh(self, category):
        # erst vollständig scannen, dann ersetzen
        records = list(self.scanner.scan(category))
        self._snapshots[category] = records
        logger.debug("Kategorie %s neu eingelesen: %d Bilder", category, len(records))
        return list(records)

    def get(self, category):
        return list(self._snapshots.get(category, []))

    def insert(self, category, records):
        self._snapshots.setdefault(category, []).extend(records)

    def remove(self, category, filename):
        records = self._snapshots.get(category, [])
        for index, record in enumerate(records):
            if record.filename == filename:
                del records[index]
                return True
        return False

    def clear(self, category):
        self._snapshots[category] = []

    def find(self, filename):
        for records in self._snapshots.values():
            for record in records:
                if record.filename == filename:
                    return record
        return None

    def categories(self):
        return list(self._snapshots)
