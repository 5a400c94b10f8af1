"""Tests for the Task entity."""

from datetime import UTC, date, datetime

import pytest

from lawncare.domain.common.exceptions import ValidationError
from lawncare.domain.common.value_objects import TaskId
from lawncare.domain.schedule.entities import Task


def _make_task(**overrides: object) -> Task:
    values: dict[str, object] = {
        "id": TaskId("1"),
        "type": "Mowing",
        "date": datetime(2024, 5, 10, 23, 30, tzinfo=UTC),
        "duration": 30,
    }
    values.update(overrides)
    return Task(**values)  # type: ignore[arg-type]


class TestTask:
    def test_new_task_is_incomplete(self) -> None:
        task = _make_task()
        assert task.completed is False
        assert task.recommended_amount is None
        assert task.recommended_unit is None

    def test_toggle_completion_reports_new_state(self) -> None:
        task = _make_task()
        assert task.toggle_completion() is True
        assert task.completed is True
        assert task.toggle_completion() is False
        assert task.completed is False

    def test_falls_on_compares_calendar_day(self) -> None:
        task = _make_task()
        assert task.falls_on(date(2024, 5, 10))
        assert not task.falls_on(date(2024, 5, 11))

    def test_rejects_unknown_type(self) -> None:
        with pytest.raises(ValidationError, match="Unknown task type"):
            _make_task(type="Weeding")

    @pytest.mark.parametrize("duration", [0, -5])
    def test_rejects_non_positive_duration(self, duration: int) -> None:
        with pytest.raises(ValidationError, match="Duration must be positive"):
            _make_task(duration=duration)

    def test_rejects_unknown_unit(self) -> None:
        with pytest.raises(ValidationError, match="Unknown recommended unit"):
            _make_task(recommended_amount=25, recommended_unit="mm")

    def test_set_recommendation(self) -> None:
        task = _make_task(type="Watering")
        task.set_recommendation(67, "min")
        assert (task.recommended_amount, task.recommended_unit) == (67, "min")
        task.set_recommendation(None, None)
        assert task.recommended_amount is None

    def test_set_recommendation_rejects_unknown_unit(self) -> None:
        with pytest.raises(ValidationError, match="Unknown recommended unit"):
            _make_task().set_recommendation(25, "mm")  # type: ignore[arg-type]
