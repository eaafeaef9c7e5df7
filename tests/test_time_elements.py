"""
Tests for TimeElement construction and free-text parsing:
- parse_temporal dispatch (timestamp, age, gestational age, onset label)
- explicit constructors and their validation order
- rendering back to text
"""

from datetime import datetime, timezone

import pytest

import phenopackets.schema.v2 as pps2

from ppktools.errors import ErrorKind, TimeElementError
from ppktools.time_elements import (
    age,
    age_range,
    as_time_element,
    from_ontology_class,
    gestational_age,
    interval,
    interval_from_datetimes,
    parse_temporal,
    parse_timestamp,
    time_element_to_str,
    timestamp,
    timestamp_from_datetime,
)


# ----------------
# parse_temporal
# ----------------


def test_timestamp_string_parses_to_epoch_seconds():
    te = parse_temporal("2021-05-14T10:35:00Z")
    assert te.WhichOneof("element") == "timestamp"
    assert te.timestamp.seconds == 1620988500
    assert te.timestamp.nanos == 0


def test_timestamp_keeps_fractional_seconds():
    te = parse_temporal("2019-07-21T00:25:54.662Z")
    assert te.timestamp.nanos == 662_000_000


@pytest.mark.parametrize("value", ["P6Y3M", "P38Y7M", "P3D", "P1Y2M3D", "P0D"])
def test_duration_parses_to_age(value):
    te = parse_temporal(value)
    assert te.WhichOneof("element") == "age"
    assert te.age.iso8601duration == value


def test_gestational_age_string():
    te = parse_temporal("32w4d")
    assert te.WhichOneof("element") == "gestational_age"
    assert (te.gestational_age.weeks, te.gestational_age.days) == (32, 4)


def test_onset_label_parses_to_ontology_class():
    te = parse_temporal("Congenital onset")
    assert te.WhichOneof("element") == "ontology_class"
    assert te.ontology_class.id == "HP:0003577"
    assert te.ontology_class.label == "Congenital onset"


@pytest.mark.parametrize(
    "value, kind",
    [
        ("not-a-dateZ", ErrorKind.INVALID_TIMESTAMP),
        ("2021-13-14T10:35:00Z", ErrorKind.INVALID_TIMESTAMP),
        ("P", ErrorKind.INVALID_DURATION),
        ("P1W", ErrorKind.INVALID_DURATION),
        ("P3M1Y", ErrorKind.INVALID_DURATION),
        ("P6Y3MT2H", ErrorKind.INVALID_DURATION),
        ("P32w4d", ErrorKind.INVALID_DURATION),  # 'P' is checked before the gestational form
        ("P1YZ", ErrorKind.INVALID_TIMESTAMP),  # 'Z' is checked before 'P'
        ("P6Y\n", ErrorKind.INVALID_DURATION),
        ("32w4d\n", ErrorKind.UNRECOGNIZED_TEMPORAL_EXPRESSION),
        ("32w8d", ErrorKind.INVALID_GESTATIONAL_AGE),
        ("Not a real onset", ErrorKind.UNRECOGNIZED_TEMPORAL_EXPRESSION),
        ("congenital onset", ErrorKind.UNRECOGNIZED_TEMPORAL_EXPRESSION),  # lookup is case-sensitive
        ("32w", ErrorKind.UNRECOGNIZED_TEMPORAL_EXPRESSION),
        ("", ErrorKind.UNRECOGNIZED_TEMPORAL_EXPRESSION),
    ],
)
def test_parse_errors(value, kind):
    with pytest.raises(TimeElementError) as excinfo:
        parse_temporal(value)
    assert excinfo.value.kind is kind
    assert excinfo.value.value == value


def test_overlong_gestational_weeks_are_typed_errors():
    value = "1" * 5000 + "w1d"
    with pytest.raises(TimeElementError) as excinfo:
        parse_temporal(value)
    assert excinfo.value.kind is ErrorKind.INVALID_GESTATIONAL_AGE
    assert excinfo.value.value == value


def test_non_string_input_is_unrecognized():
    with pytest.raises(TimeElementError) as excinfo:
        parse_temporal(42)
    assert excinfo.value.kind is ErrorKind.UNRECOGNIZED_TEMPORAL_EXPRESSION


def test_onset_result_is_a_copy():
    first = parse_temporal("Fetal onset")
    first.ontology_class.label = "changed"
    assert parse_temporal("Fetal onset").ontology_class.label == "Fetal onset"


# ---------------------
# Explicit constructors
# ---------------------


def test_age_rejects_bad_duration():
    with pytest.raises(TimeElementError, match=r"Invalid iso8601 string \(x\) for Age"):
        age("x")


def test_age_rejects_trailing_newline():
    with pytest.raises(TimeElementError) as excinfo:
        age("P6Y3M\n")
    assert excinfo.value.kind is ErrorKind.INVALID_DURATION


def test_age_range_reports_first_invalid_bound():
    te = age_range("P1Y", "P2Y")
    assert te.age_range.start.iso8601duration == "P1Y"
    assert te.age_range.end.iso8601duration == "P2Y"

    with pytest.raises(TimeElementError) as excinfo:
        age_range("bad-start", "bad-end")
    assert excinfo.value.kind is ErrorKind.INVALID_DURATION
    assert excinfo.value.value == "bad-start"

    with pytest.raises(TimeElementError) as excinfo:
        age_range("P1Y", "bad-end")
    assert excinfo.value.value == "bad-end"


@pytest.mark.parametrize("weeks, days", [(0, 0), (32, 4), (40, 7)])
def test_gestational_age_bounds(weeks, days):
    te = gestational_age(weeks, days)
    assert te.gestational_age.weeks == weeks
    assert te.gestational_age.days == days


def test_gestational_age_days_checked_before_weeks():
    with pytest.raises(TimeElementError, match=r"Invalid days \(8\) for GestationalAge"):
        gestational_age(-12, 8)
    with pytest.raises(TimeElementError, match=r"Invalid weeks \(-12\) for GestationalAge"):
        gestational_age(-12, 3)
    with pytest.raises(TimeElementError) as excinfo:
        gestational_age(12, -1)
    assert excinfo.value.kind is ErrorKind.INVALID_GESTATIONAL_AGE


def test_timestamp_constructors_agree():
    from_str = timestamp("2021-05-14T10:35:00Z")
    from_dt = timestamp_from_datetime(datetime(2021, 5, 14, 10, 35, tzinfo=timezone.utc))
    assert from_str == from_dt


def test_parse_timestamp_error():
    with pytest.raises(TimeElementError) as excinfo:
        parse_timestamp("yesterday")
    assert excinfo.value.kind is ErrorKind.INVALID_TIMESTAMP


def test_interval_end_may_precede_start():
    te = interval("2021-05-14T10:35:00Z", "2020-01-01T00:00:00Z")
    assert te.interval.start.seconds > te.interval.end.seconds


def test_interval_from_datetimes():
    start = datetime(2020, 1, 1, tzinfo=timezone.utc)
    end = datetime(2021, 5, 14, 10, 35, tzinfo=timezone.utc)
    te = interval_from_datetimes(start, end)
    assert te.interval.end.seconds == 1620988500
    assert te == interval("2020-01-01T00:00:00Z", "2021-05-14T10:35:00Z")


def test_from_ontology_class_wraps_any_term():
    clz = pps2.OntologyClass(id="HP:0410280", label="Pediatric onset")
    te = from_ontology_class(clz)
    assert te.ontology_class == clz


def test_as_time_element_passes_through():
    te = age("P1Y")
    assert as_time_element(te) is te
    assert as_time_element(None) is None
    assert as_time_element("P1Y") == te


# ---------
# Rendering
# ---------


@pytest.mark.parametrize(
    "value",
    ["P6Y3M", "32w4d", "2021-05-14T10:35:00Z", "2019-07-21T00:25:54.662Z", "Congenital onset", "Late onset"],
)
def test_round_trip_through_text(value):
    te = parse_temporal(value)
    assert time_element_to_str(te) == value
    assert parse_temporal(time_element_to_str(te)) == te


def test_ranges_render_as_start_slash_end():
    assert time_element_to_str(age_range("P1Y", "P2Y")) == "P1Y/P2Y"
    assert (
        time_element_to_str(interval("2020-01-01T00:00:00Z", "2021-05-14T10:35:00Z"))
        == "2020-01-01T00:00:00Z/2021-05-14T10:35:00Z"
    )


def test_empty_time_element_cannot_be_rendered():
    with pytest.raises(ValueError):
        time_element_to_str(pps2.TimeElement())
