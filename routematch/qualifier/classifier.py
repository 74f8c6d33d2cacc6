"""AM/PM x weekday/weekend qualifiers for service attempts."""

from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Optional, Union


class Qualifier(Enum):
    """Qualifiers produced by classify()."""

    AM = "am"
    PM = "pm"
    AM_WEEKEND = "am_weekend"
    PM_WEEKEND = "pm_weekend"


# weekend and ntc are legacy labels; classify() never produces them
QUALIFIER_LABELS = MappingProxyType(
    {
        "am": "AM",
        "pm": "PM",
        "am_weekend": "AM WEEKEND",
        "pm_weekend": "PM WEEKEND",
        "weekend": "WEEKEND",
        "ntc": "NTC",
    }
)

SATURDAY = 5
SUNDAY = 6
NOON = 12


def classify(timestamp: Optional[datetime] = None) -> Qualifier:
    """
    Classify an attempt time.

    The timestamp is read in whatever zone it carries; callers convert
    beforehand if they need a specific local time.

    Args:
        timestamp: Attempt time, defaults to now

    Returns:
        One of the four qualifiers
    """
    if timestamp is None:
        timestamp = datetime.now()
    if not isinstance(timestamp, datetime):
        raise ValueError(f"Expected datetime, got {type(timestamp).__name__}")

    is_weekend = timestamp.weekday() in (SATURDAY, SUNDAY)
    is_am = timestamp.hour < NOON

    if is_weekend:
        return Qualifier.AM_WEEKEND if is_am else Qualifier.PM_WEEKEND
    return Qualifier.AM if is_am else Qualifier.PM


def display_label(qualifier: Union[Qualifier, str, None]) -> str:
    """Upper-case display label, falling back to the upper-cased raw value."""
    if qualifier is None:
        return ""
    value = qualifier.value if isinstance(qualifier, Qualifier) else str(qualifier)
    return QUALIFIER_LABELS.get(value, value.upper())
