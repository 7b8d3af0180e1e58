"""Tests for weight unit conversion."""

import pytest

from health_tracker.domain.units import convert_weight


def test_convert_weight_kg_to_lbs() -> None:
    assert convert_weight(80, "kg", "lbs") == 176.4


def test_convert_weight_lbs_to_kg() -> None:
    assert convert_weight(176.4, "lbs", "kg") == 80.0


def test_convert_weight_same_unit_only_rounds() -> None:
    assert convert_weight(70.26, "kg", "kg") == 70.3


def test_convert_weight_rejects_unknown_units() -> None:
    with pytest.raises(ValueError, match="stone"):
        convert_weight(12, "stone", "kg")


def test_convert_weight_round_trip_stays_close() -> None:
    kilograms = convert_weight(150, "lbs", "kg")

    assert kilograms == 68.0
    assert 149.9 <= convert_weight(kilograms, "kg", "lbs") <= 150.0
