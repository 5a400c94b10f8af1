"""MediaLog entity: a photo or video of the lawn with a note."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal, get_args

from lawncare.domain.common.entity import Entity
from lawncare.domain.common.exceptions import ValidationError
from lawncare.domain.common.value_objects import MediaLogId

MediaType = Literal["image", "video"]

MEDIA_TYPES: tuple[str, ...] = get_args(MediaType)


@dataclass
class MediaLog(Entity[MediaLogId]):
    """
    Photo/video log entry.

    Business Rules:
    - Media type is image or video; the media URL itself is opaque
    - Tags keep the order they were entered in
    - Likes are toggled independently of edits
    """

    id: MediaLogId
    date: datetime
    media_url: str
    media_type: MediaType
    note: str = ""
    tags: list[str] = field(default_factory=list)
    liked: bool = False

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.media_type not in MEDIA_TYPES:
            raise ValidationError("Unknown media type", field="media_type", value=self.media_type)

    def toggle_like(self) -> bool:
        """Flip the like flag and return the new value."""
        self.liked = not self.liked
        return self.liked

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags
