"""Storage of uploaded food photos."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from diet_tracker.domain.errors import ValidationError

ALLOWED_IMAGE_TYPES = {
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
}
MAX_IMAGE_BYTES = 10 * 1024 * 1024


class ImageStore(Protocol):
    """Interface for persisting image files."""

    def save(self, user_id: UUID, content: bytes, extension: str) -> str:
        """Store the image and return its public path."""


@dataclass
class ImageService:
    """Validates uploads before handing them to the store."""

    store: ImageStore
    max_bytes: int = MAX_IMAGE_BYTES

    def validate(self, content: bytes, content_type: str | None) -> str:
        """Return the file extension for an acceptable upload."""
        if not content:
            raise ValidationError("No image provided")
        if len(content) > self.max_bytes:
            raise ValidationError("Image is too large")
        extension = ALLOWED_IMAGE_TYPES.get((content_type or "").lower())
        if extension is None:
            raise ValidationError(
                "Invalid file type. Only JPEG, PNG, GIF, and WebP images are allowed."
            )
        return extension

    def save_analyzed_image(
        self, user_id: UUID, content: bytes, content_type: str | None
    ) -> str:
        """Store a photo submitted for analysis and return its path."""
        extension = self.validate(content, content_type)
        return self.store.save(user_id, content, extension)
