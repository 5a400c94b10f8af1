"""Pydantic schemas for media log endpoints."""

from datetime import datetime
from typing import Any, Self

from pydantic import BaseModel, Field, field_validator, model_validator

from lawncare.domain.journal.entities import MediaType
from lawncare.domain.journal.services import parse_tags


def _normalize_tags(value: Any) -> Any:
    """Accept comma separated text or a list; trim and drop empty tags."""
    if isinstance(value, str):
        return parse_tags(value)
    if isinstance(value, list):
        return [tag.strip() for tag in value if isinstance(tag, str) and tag.strip()]
    return value


class MediaLog(BaseModel):
    """Schema for MediaLog response."""

    id: str
    date: datetime
    media_url: str
    media_type: MediaType
    note: str
    tags: list[str]
    liked: bool


class MediaLogCreateRequest(BaseModel):
    """
    Schema for logging a photo or video.

    The media type is given directly or derived from the uploaded file's
    MIME type.
    """

    media_url: str = Field(..., min_length=1, description="Encoded media, e.g. a data URL")
    media_type: MediaType | None = Field(None, description="image or video")
    mime_type: str | None = Field(None, description="MIME type of the uploaded file")
    note: str = Field("", description="Free text note")
    tags: list[str] = Field(default_factory=list, description="Tags, list or comma separated")

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, value: Any) -> Any:
        return _normalize_tags(value)

    @model_validator(mode="after")
    def validate_media_type(self) -> Self:
        """Require a media type or a MIME type to derive it from."""
        if self.media_type is None and not self.mime_type:
            msg = "Provide media_type or mime_type"
            raise ValueError(msg)
        return self


class MediaLogUpdateRequest(BaseModel):
    """Schema for editing the note and tags of a media log."""

    note: str = Field("", description="Free text note")
    tags: list[str] = Field(default_factory=list, description="Tags, list or comma separated")

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, value: Any) -> Any:
        return _normalize_tags(value)


class MediaLogResponse(BaseModel):
    """Schema for media log create/update/like responses."""

    success: bool = Field(..., description="Whether the operation was successful")
    message: str = Field(..., description="Response message")
    media_log: MediaLog


class MediaLogsListResponse(BaseModel):
    """Schema for list of media logs response, newest first."""

    media_logs: list[MediaLog]
