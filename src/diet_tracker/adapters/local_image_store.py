"""Filesystem-backed image store."""

from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from uuid import UUID

from diet_tracker.services.images import ImageStore

ANALYZED_IMAGES_DIR = "analyzed_images"


@dataclass
class LocalImageStore(ImageStore):
    """Writes images below a configured upload directory."""

    root: Path
    url_prefix: str = "/uploads"

    def save(self, user_id: UUID, content: bytes, extension: str) -> str:
        """Write the image and return the path it is served under."""
        directory = self.root / ANALYZED_IMAGES_DIR
        directory.mkdir(parents=True, exist_ok=True)
        timestamp = int(datetime.now(tz=UTC).timestamp() * 1000)
        filename = f"{user_id}_{timestamp}{extension}"
        (directory / filename).write_bytes(content)
        return f"{self.url_prefix.rstrip('/')}/{ANALYZED_IMAGES_DIR}/{filename}"
