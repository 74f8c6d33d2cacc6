"""Service-hours qualifier badges and attempt progress.

Process serving requires attempts that earn an AM, a PM and a WEEKEND
badge. Weekday attempts between the AM and PM windows earn nothing (NTC).
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any, Optional, Union
from zoneinfo import ZoneInfo

from routematch.config import get_settings

AM = "AM"
PM = "PM"
WEEKEND = "WEEKEND"
NTC = "NTC"

REQUIRED_BADGES = (AM, PM, WEEKEND)

SATURDAY = 5
SUNDAY = 6


@dataclass(frozen=True)
class QualifierBadges:
    """Badges earned by a single attempt."""

    badges: tuple[str, ...]
    count: int
    display: str
    has_am: bool
    has_pm: bool
    has_weekend: bool
    is_ntc: bool
    is_outside_hours: bool


@dataclass(frozen=True)
class QualifierProgress:
    """Badges earned and still needed across attempts."""

    needed: list[str]
    earned: dict[str, bool] = field(default_factory=dict)

    @property
    def earned_badges(self) -> list[str]:
        return [badge for badge in REQUIRED_BADGES if self.earned.get(badge)]

    @property
    def is_complete(self) -> bool:
        return not self.needed


def _to_local(timestamp: Union[datetime, str], timezone: str) -> datetime:
    if isinstance(timestamp, str):
        timestamp = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    if not isinstance(timestamp, datetime):
        raise ValueError(f"Expected datetime, got {type(timestamp).__name__}")

    zone = ZoneInfo(timezone)
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=zone)
    return timestamp.astimezone(zone)


def get_qualifiers(
    timestamp: Union[datetime, str],
    timezone: Optional[str] = None,
) -> QualifierBadges:
    """
    Badges for an attempt made at the given time.

    Args:
        timestamp: Attempt time; naive values are taken as service-local
        timezone: IANA zone of the service area, defaults to configuration

    Returns:
        QualifierBadges for the attempt
    """
    settings = get_settings().qualifier
    local = _to_local(timestamp, timezone or settings.timezone)
    minutes = local.hour * 60 + local.minute
    is_weekend = local.weekday() in (SATURDAY, SUNDAY)

    if minutes < settings.service_start or minutes > settings.service_end:
        return QualifierBadges(
            badges=(),
            count=0,
            display="Outside Hours",
            has_am=False,
            has_pm=False,
            has_weekend=False,
            is_ntc=False,
            is_outside_hours=True,
        )

    badges = []
    if is_weekend:
        badges.append(WEEKEND)

    if minutes < settings.am_end:
        badges.append(AM)
    elif minutes >= settings.pm_start:
        badges.append(PM)
    elif not is_weekend:
        badges.append(NTC)

    return QualifierBadges(
        badges=tuple(badges),
        count=sum(1 for b in badges if b != NTC),
        display=" + ".join(badges),
        has_am=AM in badges,
        has_pm=PM in badges,
        has_weekend=WEEKEND in badges,
        is_ntc=NTC in badges,
        is_outside_hours=False,
    )


def needed_qualifiers(attempts: Optional[Iterable[Mapping[str, Any]]]) -> QualifierProgress:
    """
    Work out which badges are still needed.

    Stored has_am/has_pm/has_weekend flags win; attempts with none of them
    set are recomputed from attempt_time.
    """
    earned = {badge: False for badge in REQUIRED_BADGES}

    for attempt in attempts or []:
        flags = (attempt.get("has_am"), attempt.get("has_pm"), attempt.get("has_weekend"))
        if any(flags):
            earned[AM] = earned[AM] or bool(flags[0])
            earned[PM] = earned[PM] or bool(flags[1])
            earned[WEEKEND] = earned[WEEKEND] or bool(flags[2])
        elif attempt.get("attempt_time"):
            quals = get_qualifiers(attempt["attempt_time"])
            earned[AM] = earned[AM] or quals.has_am
            earned[PM] = earned[PM] or quals.has_pm
            earned[WEEKEND] = earned[WEEKEND] or quals.has_weekend

    needed = [badge for badge in REQUIRED_BADGES if not earned[badge]]
    return QualifierProgress(needed=needed, earned=earned)


def storage_fields(qualifiers: QualifierBadges) -> dict[str, Any]:
    """Attempt record fields for a set of badges."""
    return {
        "qualifier": qualifiers.display.lower().replace(" + ", "_"),
        "qualifier_badges": list(qualifiers.badges),
        "qualifier_count": qualifiers.count,
        "has_am": qualifiers.has_am,
        "has_pm": qualifiers.has_pm,
        "has_weekend": qualifiers.has_weekend,
        "is_ntc": qualifiers.is_ntc,
    }


def spread_date(first_attempt: Union[date, datetime], spread_type: str = "14") -> Union[date, datetime]:
    """Due date for the attempt spread: 14 days for "14", otherwise 10."""
    days = 14 if str(spread_type) == "14" else 10
    return first_attempt + timedelta(days=days)
