"""Helpers turning raw user input into media log fields."""

from lawncare.domain.common.exceptions import ValidationError
from lawncare.domain.journal.entities import MediaType


def parse_tags(text: str) -> list[str]:
    """
    Split comma separated tag input.

    Tags are trimmed, empty entries dropped, and the entered order kept:
    "problem, , dry spot" -> ["problem", "dry spot"].
    """
    return [tag.strip() for tag in text.split(",") if tag.strip()]


def media_type_from_mime(mime_type: str) -> MediaType:
    """
    Classify an uploaded file by its MIME type.

    Raises:
        ValidationError: If the file is neither an image nor a video
    """
    normalized = mime_type.strip().lower()
    if normalized.startswith("image/"):
        return "image"
    if normalized.startswith("video/"):
        return "video"
    raise ValidationError("Only image or video files can be logged", field="mime_type", value=mime_type)
