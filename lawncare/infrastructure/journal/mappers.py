"""Mapper for MediaLog Domain ↔ API schema conversion."""

from lawncare.domain.journal.entities import MediaLog, MediaType
from lawncare.domain.journal.services import media_type_from_mime
from lawncare.infrastructure.journal import schemas


class MediaLogMapper:
    """Mapper for MediaLog."""

    def media_type(self, request: schemas.MediaLogCreateRequest) -> MediaType:
        """
        Media type of a new log, taken from the request or its MIME type.

        Raises:
            ValidationError: If the MIME type is neither image nor video
        """
        if request.media_type is not None:
            return request.media_type
        assert request.mime_type is not None
        return media_type_from_mime(request.mime_type)

    def to_schema(self, log: MediaLog) -> schemas.MediaLog:
        return schemas.MediaLog(
            id=log.id.value,
            date=log.date,
            media_url=log.media_url,
            media_type=log.media_type,
            note=log.note,
            tags=list(log.tags),
            liked=log.liked,
        )
