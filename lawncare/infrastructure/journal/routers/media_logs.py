"""API routes for photo and video logs."""

from fastapi import APIRouter, Depends, Query
from starlette import status

from lawncare.application.lawn_care.lawn_care_store import LawnCareStore
from lawncare.domain.common.value_objects import MediaLogId
from lawncare.exceptions import MediaLogNotFoundError
from lawncare.infrastructure.common.di import get_lawn_care_store
from lawncare.infrastructure.common.schemas import SuccessResponse
from lawncare.infrastructure.journal.mappers import MediaLogMapper
from lawncare.infrastructure.journal.schemas import (
    MediaLog,
    MediaLogCreateRequest,
    MediaLogResponse,
    MediaLogsListResponse,
    MediaLogUpdateRequest,
)

router = APIRouter(prefix="/media-logs", tags=["media-logs"])

mapper = MediaLogMapper()


def _media_log_response(store: LawnCareStore, log_id: MediaLogId, message: str) -> MediaLogResponse:
    log = store.get_media_log(log_id)
    if log is None:
        raise MediaLogNotFoundError(log_id.value)
    return MediaLogResponse(success=True, message=message, media_log=mapper.to_schema(log))


@router.get("", response_model=MediaLogsListResponse, status_code=status.HTTP_200_OK)
def list_media_logs(
    tag: str | None = Query(None, description="Only logs carrying this tag"),
    store: LawnCareStore = Depends(get_lawn_care_store),
) -> MediaLogsListResponse:
    """List media logs, newest first."""
    return MediaLogsListResponse(
        media_logs=[mapper.to_schema(log) for log in store.list_media_logs(tag=tag)]
    )


@router.get("/{log_id}", response_model=MediaLog, status_code=status.HTTP_200_OK)
def get_media_log(log_id: str, store: LawnCareStore = Depends(get_lawn_care_store)) -> MediaLog:
    """
    Get a single media log.

    Raises:
        MediaLogNotFoundError: If the log does not exist
    """
    log = store.get_media_log(MediaLogId(log_id))
    if log is None:
        raise MediaLogNotFoundError(log_id)
    return mapper.to_schema(log)


@router.post("", response_model=MediaLogResponse, status_code=status.HTTP_201_CREATED)
def add_media_log(
    request: MediaLogCreateRequest,
    store: LawnCareStore = Depends(get_lawn_care_store),
) -> MediaLogResponse:
    """
    Log a photo or video.

    Raises:
        ValidationError: If the MIME type is neither image nor video
    """
    log_id = store.add_media_log(
        media_url=request.media_url,
        media_type=mapper.media_type(request),
        note=request.note,
        tags=request.tags,
    )
    return _media_log_response(store, log_id, "Media log added successfully")


@router.put("/{log_id}", response_model=MediaLogResponse, status_code=status.HTTP_200_OK)
def update_media_log(
    log_id: str,
    request: MediaLogUpdateRequest,
    store: LawnCareStore = Depends(get_lawn_care_store),
) -> MediaLogResponse:
    """
    Edit the note and tags of a media log.

    Raises:
        MediaLogNotFoundError: If the log does not exist
    """
    log = store.get_media_log(MediaLogId(log_id))
    if log is None:
        raise MediaLogNotFoundError(log_id)
    log.note = request.note
    log.tags = request.tags
    if not store.update_media_log(log):
        raise MediaLogNotFoundError(log_id)
    return _media_log_response(store, log.id, "Media log updated successfully")


@router.post("/{log_id}/like", response_model=MediaLogResponse, status_code=status.HTTP_200_OK)
def toggle_media_log_like(
    log_id: str,
    store: LawnCareStore = Depends(get_lawn_care_store),
) -> MediaLogResponse:
    """
    Like or unlike a media log.

    Raises:
        MediaLogNotFoundError: If the log does not exist
    """
    if not store.toggle_media_log_like(MediaLogId(log_id)):
        raise MediaLogNotFoundError(log_id)
    return _media_log_response(store, MediaLogId(log_id), "Media log like toggled")


@router.delete("/{log_id}", response_model=SuccessResponse, status_code=status.HTTP_200_OK)
def delete_media_log(
    log_id: str,
    store: LawnCareStore = Depends(get_lawn_care_store),
) -> SuccessResponse:
    """
    Delete a media log.

    Raises:
        MediaLogNotFoundError: If the log does not exist
    """
    if not store.delete_media_log(MediaLogId(log_id)):
        raise MediaLogNotFoundError(log_id)
    return SuccessResponse(success=True, message="Media log deleted successfully")
