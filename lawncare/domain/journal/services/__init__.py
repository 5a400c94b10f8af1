from .media_helpers import media_type_from_mime, parse_tags

__all__ = ["media_type_from_mime", "parse_tags"]
