"""Tests for half-up rounding."""

from lawncare.domain.common.rounding import round_half_up


class TestRoundHalfUp:
    def test_halves_round_up(self) -> None:
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(7.5) == 8

    def test_rounds_to_nearest(self) -> None:
        assert round_half_up(33.333) == 33
        assert round_half_up(33.6) == 34
        assert round_half_up(1000.0) == 1000

    def test_zero(self) -> None:
        assert round_half_up(0) == 0
        assert round_half_up(0.49) == 0
