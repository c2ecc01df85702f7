"""Tests for the historical event comparison."""

import pytest

from asteroid_impact.exceptions import InvalidParameterError
from asteroid_impact.history import HISTORICAL_EVENTS, compare_with_history, severity_label


class TestHistoricalEvents:
    def test_four_reference_events(self):
        names = [ev.name for ev in HISTORICAL_EVENTS]
        assert names == ["Chelyabinsk", "Tunguska", "Chicxulub", "Barringer Crater"]

    def test_table_is_immutable(self):
        with pytest.raises(AttributeError):
            HISTORICAL_EVENTS[0].energy_kilotons = 1  # type: ignore[misc]
        assert isinstance(HISTORICAL_EVENTS, tuple)


class TestCompareWithHistory:
    def test_tunguska_exact_match(self):
        cmp = compare_with_history(15_000)
        assert cmp.event.name == "Tunguska"
        assert cmp.ratio == pytest.approx(1.0)
        assert cmp.comparison_text == "similar to Tunguska"

    def test_chelyabinsk_like(self):
        cmp = compare_with_history(596)
        assert cmp.event.name == "Chelyabinsk"
        assert cmp.comparison_text == "similar to Chelyabinsk"

    def test_smaller_than_closest(self):
        cmp = compare_with_history(100)
        assert cmp.event.name == "Chelyabinsk"
        assert cmp.comparison_text == "5.0× smaller than Chelyabinsk"

    def test_more_powerful_than_closest(self):
        cmp = compare_with_history(50_000)
        assert cmp.event.name == "Tunguska"
        assert cmp.comparison_text == "3.3× more powerful than Tunguska"

    def test_beyond_chicxulub(self):
        cmp = compare_with_history(1e9)
        assert cmp.event.name == "Chicxulub"
        assert cmp.ratio == pytest.approx(10.0)
        assert cmp.comparison_text == "10.0× more powerful than Chicxulub"

    def test_barringer_range(self):
        assert compare_with_history(2_000).event.name == "Barringer Crater"

    def test_nearest_is_by_log_distance(self):
        # 8,000 kt is linearly closer to Barringer (2,500) but log-closer to Tunguska
        assert compare_with_history(8_000).event.name == "Tunguska"

    @pytest.mark.parametrize("bad", [0, -10, float("nan"), float("inf")])
    def test_rejects_non_positive_energy(self, bad):
        with pytest.raises(InvalidParameterError):
            compare_with_history(bad)


class TestSeverityLabel:
    @pytest.mark.parametrize(
        "kt, label",
        [
            (10, "LIGHT"),
            (50, "LIGHT"),
            (51, "MODERATE"),
            (500, "MODERATE"),
            (501, "SEVERE"),
            (15_000, "SEVERE"),
            (15_001, "CATASTROPHIC"),
        ],
    )
    def test_thresholds(self, kt, label):
        assert severity_label(kt) == label

    def test_comparison_carries_label(self):
        assert compare_with_history(20_000).severity_label == "CATASTROPHIC"
