"""
TimeElement construction and parsing.

A TimeElement says *when* something happened (onset of a disease, age at last
encounter, time of death, ...). Its `element` oneof holds exactly one of:

    age              ISO-8601 duration since birth      "P6Y3M"
    age_range        two ages bounding an uncertain age
    gestational_age  completed weeks + residual days    "32w4d"
    timestamp        absolute instant                   "2021-05-14T10:35:00Z"
    interval         two absolute instants
    ontology_class   an HPO onset term                  "Congenital onset"

`parse_temporal` classifies a free-text value using a fixed priority order:

    1. ends with 'Z'          -> timestamp
    2. starts with 'P'        -> age
    3. '<digits>w<digits>d'   -> gestational age
    4. exact onset label      -> ontology class

Only the first matching rule fires, so a value is never ambiguous between two
variants. The remaining variants are built with the explicit constructors.
"""

import re
from datetime import datetime
from typing import Optional, Union

import phenopackets.schema.v2 as pps2
from google.protobuf.timestamp_pb2 import Timestamp

from .constants.onset import get_onset_by_label
from .errors import ErrorKind, TimeElementError

# Years, months and days, each optional but in that order. No weeks or time part.
ISO8601_DURATION = re.compile(r"^P(?:(?P<years>\d+)Y)?(?:(?P<months>\d+)M)?(?:(?P<days>\d+)D)?\Z")
GESTATIONAL_AGE = re.compile(r"^(?P<weeks>\d+)w(?P<days>\d+)d\Z")

_MAX_DAYS_IN_GESTATIONAL_WEEK = 7
_INT32_MAX = 2**31 - 1


# ---------------------
# Validation primitives
# ---------------------


def _check_iso8601_duration(value: str) -> None:
    m = ISO8601_DURATION.match(value) if isinstance(value, str) else None
    # a bare "P" matches the pattern but carries no duration
    if not m or not any(m.groupdict().values()):
        raise TimeElementError(
            ErrorKind.INVALID_DURATION, value, f"Invalid iso8601 string ({value}) for Age"
        )


def parse_timestamp(value: str) -> Timestamp:
    """Parse an RFC-3339 instant (e.g. '2019-07-21T00:25:54.662Z') into a protobuf Timestamp."""
    ts = Timestamp()
    try:
        ts.FromJsonString(value)
    except (ValueError, TypeError, AttributeError) as e:
        raise TimeElementError(
            ErrorKind.INVALID_TIMESTAMP, value, f"Could not parse timestamp ({value}): {e}"
        ) from e
    return ts


def _timestamp_from_datetime(dt: datetime) -> Timestamp:
    # naive datetimes are taken as UTC
    ts = Timestamp()
    ts.FromDatetime(dt)
    return ts


# -------------------------
# Explicit constructors
# -------------------------


def age(iso8601duration: str) -> pps2.TimeElement:
    """Age since birth, e.g. age('P38Y7M')."""
    _check_iso8601_duration(iso8601duration)
    return pps2.TimeElement(age=pps2.Age(iso8601duration=iso8601duration))


def age_range(start: str, end: str) -> pps2.TimeElement:
    """
    Age range between two ISO-8601 durations.
    Each bound is checked independently; the first invalid one is reported.
    """
    _check_iso8601_duration(start)
    _check_iso8601_duration(end)
    return pps2.TimeElement(
        age_range=pps2.AgeRange(
            start=pps2.Age(iso8601duration=start),
            end=pps2.Age(iso8601duration=end),
        )
    )


def gestational_age(weeks: int, days: int) -> pps2.TimeElement:
    """
    Gestational age as completed weeks plus residual days.
    `days` may be 0 through 7 inclusive; `weeks` must be non-negative.
    """
    if days < 0 or days > _MAX_DAYS_IN_GESTATIONAL_WEEK:
        raise TimeElementError(
            ErrorKind.INVALID_GESTATIONAL_AGE, (weeks, days),
            f"Invalid days ({days}) for GestationalAge",
        )
    if weeks < 0 or weeks > _INT32_MAX:
        raise TimeElementError(
            ErrorKind.INVALID_GESTATIONAL_AGE, (weeks, days),
            f"Invalid weeks ({weeks}) for GestationalAge",
        )
    return pps2.TimeElement(gestational_age=pps2.GestationalAge(weeks=weeks, days=days))


def timestamp(value: str) -> pps2.TimeElement:
    return pps2.TimeElement(timestamp=parse_timestamp(value))


def timestamp_from_datetime(dt: datetime) -> pps2.TimeElement:
    return pps2.TimeElement(timestamp=_timestamp_from_datetime(dt))


def interval(start: str, end: str) -> pps2.TimeElement:
    """
    Time interval between two instants.
    The end is not required to come after the start.
    """
    return pps2.TimeElement(
        interval=pps2.TimeInterval(start=parse_timestamp(start), end=parse_timestamp(end))
    )


def interval_from_datetimes(start: datetime, end: datetime) -> pps2.TimeElement:
    return pps2.TimeElement(
        interval=pps2.TimeInterval(
            start=_timestamp_from_datetime(start), end=_timestamp_from_datetime(end)
        )
    )


def from_ontology_class(clz: pps2.OntologyClass) -> pps2.TimeElement:
    return pps2.TimeElement(ontology_class=clz)


# ---------------------
# Free-text dispatch
# ---------------------


def parse_temporal(value: str) -> pps2.TimeElement:
    """
    Classify and parse `value` into a TimeElement.

    Examples:
        "2021-05-14T10:35:00Z" -> timestamp
        "P6Y3M"                -> age
        "32w4d"                -> gestational_age(32, 4)
        "Congenital onset"     -> ontology_class HP:0003577

    Raises TimeElementError with the kind of the first rule that matched, or
    UNRECOGNIZED_TEMPORAL_EXPRESSION if none did.
    """
    if not isinstance(value, str):
        raise TimeElementError(
            ErrorKind.UNRECOGNIZED_TEMPORAL_EXPRESSION, value,
            f"Malformed onset string ({value!r})",
        )

    if value.endswith("Z"):
        return timestamp(value)

    if value.startswith("P"):
        return age(value)

    m = GESTATIONAL_AGE.match(value)
    if m:
        # int() itself can fail on very long digit runs
        try:
            return gestational_age(int(m.group("weeks")), int(m.group("days")))
        except ValueError as e:
            raise TimeElementError(
                ErrorKind.INVALID_GESTATIONAL_AGE, value,
                f"Malformed GestationalAge string ({value}): {e}",
            ) from e

    onset = get_onset_by_label(value)
    if onset is not None:
        return from_ontology_class(onset)

    raise TimeElementError(
        ErrorKind.UNRECOGNIZED_TEMPORAL_EXPRESSION, value, f"Malformed onset string ({value})"
    )


def time_element_to_str(element: pps2.TimeElement) -> str:
    """
    Render a TimeElement as text.

    Ages, gestational ages, timestamps and onset terms come back in the form
    parse_temporal accepts. Ranges and intervals are written as 'start/end'.
    """
    which = element.WhichOneof("element")
    if which == "age":
        return element.age.iso8601duration
    if which == "gestational_age":
        return f"{element.gestational_age.weeks}w{element.gestational_age.days}d"
    if which == "timestamp":
        return element.timestamp.ToJsonString()
    if which == "ontology_class":
        return element.ontology_class.label
    if which == "age_range":
        return f"{element.age_range.start.iso8601duration}/{element.age_range.end.iso8601duration}"
    if which == "interval":
        return f"{element.interval.start.ToJsonString()}/{element.interval.end.ToJsonString()}"
    raise ValueError("TimeElement has no element set")


TimeLike = Union[str, pps2.TimeElement]


def as_time_element(value: Optional[TimeLike]) -> Optional[pps2.TimeElement]:
    """Pass TimeElements (and None) through; parse strings with parse_temporal."""
    if value is None or isinstance(value, pps2.TimeElement):
        return value
    return parse_temporal(value)
