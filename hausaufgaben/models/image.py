from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ImageRecord:
    filename: str
    original_name: str
    category: str
    uploaded_at: datetime
    size: int
    mime_type: str = None

    def to_dict(self):
        return {
            "filename": self.filename,
            "originalName": self.original_name,
            "category": self.category,
            "uploadedAt": self.uploaded_at.isoformat(),
            "size": self.size,
            "mimeType": self.mime_type,
        }

    def __repr__(self):
        return f"<ImageRecord {self.category}/{self.filename}>"
