"""
tests/test_justification.py
────────────────────────────
Tests for the suitability explainer.
"""
import pytest

from cleardrops.analytics.justification import explain, reason_heading
from cleardrops.data.models import Reading
from config.water_quality import (
    REASON_ALL_OK,
    REASON_PH,
    REASON_TDS_HIGH,
    REASON_TDS_LOW,
    REASON_TEMPERATURE,
    REASON_TURBIDITY,
    REASON_UNKNOWN,
)


def _reading(label="0", acidity=7.0, turbidity=2.0, tds=500.0, temperature=20.0) -> Reading:
    return Reading(
        acidity=acidity,
        turbidity=turbidity,
        total_dissolved_solids=tds,
        temperature=temperature,
        classification_label=label,
    )


class TestSuitableLabel:
    def test_in_range(self):
        assert explain(_reading("1")) == [REASON_ALL_OK]

    def test_never_second_guessed(self):
        r = _reading("1", acidity=13.0, turbidity=400.0, tds=9000.0, temperature=80.0)
        assert explain(r) == [REASON_ALL_OK]

    def test_missing_values_still_ok(self):
        assert explain(Reading(classification_label="1")) == [REASON_ALL_OK]


class TestUnknownLabel:
    @pytest.mark.parametrize("label", ["", "2", "unknown", "1.0", " 1", "true"])
    def test_unknown(self, label):
        assert explain(_reading(label)) == [REASON_UNKNOWN]


class TestUnsuitableLabel:
    def test_all_in_range_gives_no_reasons(self):
        assert explain(_reading("0")) == []

    def test_all_out_of_range_in_rule_order(self):
        r = _reading("0", acidity=9.0, turbidity=10.0, tds=1500.0, temperature=30.0)
        assert explain(r) == [REASON_PH, REASON_TURBIDITY, REASON_TDS_HIGH, REASON_TEMPERATURE]

    def test_all_missing(self):
        assert explain(Reading(classification_label="0")) == [
            REASON_PH,
            REASON_TURBIDITY,
            REASON_TDS_HIGH,
            REASON_TEMPERATURE,
        ]

    @pytest.mark.parametrize("acidity", [6.4, 8.6, None])
    def test_ph_out_of_range(self, acidity):
        assert explain(_reading(acidity=acidity)) == [REASON_PH]

    @pytest.mark.parametrize("acidity", [6.5, 8.5])
    def test_ph_bounds_inclusive(self, acidity):
        assert explain(_reading(acidity=acidity)) == []

    def test_turbidity_boundary(self):
        assert explain(_reading(turbidity=5.0)) == []
        assert explain(_reading(turbidity=5.01)) == [REASON_TURBIDITY]
        assert explain(_reading(turbidity=None)) == [REASON_TURBIDITY]

    def test_tds_too_low(self):
        assert explain(_reading(tds=9.9)) == [REASON_TDS_LOW]
        assert explain(_reading(tds=10.0)) == []

    def test_tds_too_high(self):
        assert explain(_reading(tds=1000.5)) == [REASON_TDS_HIGH]
        assert explain(_reading(tds=1000.0)) == []

    def test_missing_tds_reports_only_maximum(self):
        reasons = explain(_reading(tds=None))
        assert reasons == [REASON_TDS_HIGH]
        assert REASON_TDS_LOW not in reasons

    @pytest.mark.parametrize("temperature", [9.9, 25.1, None])
    def test_temperature_out_of_range(self, temperature):
        assert explain(_reading(temperature=temperature)) == [REASON_TEMPERATURE]

    def test_nan_compares_as_in_range(self):
        # NaN is a number: it fails every comparison, so no threshold trips
        assert explain(_reading(acidity=float("nan"))) == []

    def test_fresh_list_each_call(self):
        r = _reading(acidity=9.0)
        first = explain(r)
        first.append("mutated")
        assert explain(r) == [REASON_PH]


class TestReasonHeading:
    def test_singular(self):
        assert reason_heading([REASON_PH]) == "Reason"
        assert reason_heading([]) == "Reason"

    def test_plural(self):
        assert reason_heading([REASON_PH, REASON_TURBIDITY]) == "Reasons"
