"""Tests for MediaLog and the media input helpers."""

from datetime import UTC, datetime

import pytest

from lawncare.domain.common.exceptions import ValidationError
from lawncare.domain.common.value_objects import MediaLogId
from lawncare.domain.journal.entities import MediaLog
from lawncare.domain.journal.services import media_type_from_mime, parse_tags


class TestMediaLog:
    def _make_log(self, **overrides: object) -> MediaLog:
        values: dict[str, object] = {
            "id": MediaLogId("ml-1"),
            "date": datetime(2024, 5, 10, tzinfo=UTC),
            "media_url": "data:image/png;base64,AAAA",
            "media_type": "image",
        }
        values.update(overrides)
        return MediaLog(**values)  # type: ignore[arg-type]

    def test_defaults(self) -> None:
        log = self._make_log()
        assert log.note == ""
        assert log.tags == []
        assert log.liked is False

    def test_toggle_like(self) -> None:
        log = self._make_log()
        assert log.toggle_like() is True
        assert log.toggle_like() is False

    def test_has_tag(self) -> None:
        log = self._make_log(tags=["dry", "problem"])
        assert log.has_tag("dry")
        assert not log.has_tag("healthy")

    def test_rejects_unknown_media_type(self) -> None:
        with pytest.raises(ValidationError, match="Unknown media type"):
            self._make_log(media_type="audio")


class TestParseTags:
    def test_trims_and_drops_empty(self) -> None:
        assert parse_tags(" problem, , dry spot ,") == ["problem", "dry spot"]

    def test_keeps_order(self) -> None:
        assert parse_tags("b,a,c") == ["b", "a", "c"]

    def test_empty_input(self) -> None:
        assert parse_tags("") == []


class TestMediaTypeFromMime:
    @pytest.mark.parametrize(
        ("mime_type", "expected"),
        [("image/jpeg", "image"), ("IMAGE/PNG", "image"), ("video/mp4", "video")],
    )
    def test_classifies(self, mime_type: str, expected: str) -> None:
        assert media_type_from_mime(mime_type) == expected

    def test_rejects_other_files(self) -> None:
        with pytest.raises(ValidationError, match="Only image or video"):
            media_type_from_mime("application/pdf")
