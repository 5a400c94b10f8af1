from .media_log_schemas import (
    MediaLog,
    MediaLogCreateRequest,
    MediaLogResponse,
    MediaLogsListResponse,
    MediaLogUpdateRequest,
)

__all__ = [
    "MediaLog",
    "MediaLogCreateRequest",
    "MediaLogResponse",
    "MediaLogUpdateRequest",
    "MediaLogsListResponse",
]
