from .media_log import MEDIA_TYPES, MediaLog, MediaType

__all__ = ["MEDIA_TYPES", "MediaLog", "MediaType"]
