"""
Human-readable durations for the leaderboard ("about 2 hours", "3 days").
Same buckets as the frontend's date-fns formatDistance, so server and client
strings agree. Months are 30 days; no calendar awareness. A negative duration
(completion clock-skewed before its assignment) is formatted by its absolute
distance, as formatDistance does.
"""
import math
from fractions import Fraction
from numbers import Real

MINUTES_IN_HOUR = 60
MINUTES_IN_DAY = 1440
MINUTES_IN_ALMOST_TWO_DAYS = 2520
MINUTES_IN_MONTH = 43200
MINUTES_IN_TWO_MONTHS = 86400


def _round_half_up(value: Fraction) -> int:
    return math.floor(value + Fraction(1, 2))


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}" if n == 1 else f"{n} {unit}s"


def format_duration(ms: Real) -> str:
    """Approximate distance for a duration in milliseconds."""
    seconds = int(abs(Fraction(ms)) // 1000)
    minutes = _round_half_up(Fraction(seconds, 60))

    if minutes < 2:
        return "less than a minute" if minutes == 0 else "1 minute"
    if minutes < 45:
        return _plural(minutes, "minute")
    if minutes < 90:
        return "about 1 hour"
    if minutes < MINUTES_IN_DAY:
        hours = _round_half_up(Fraction(minutes, MINUTES_IN_HOUR))
        return "about " + _plural(hours, "hour")
    if minutes < MINUTES_IN_ALMOST_TWO_DAYS:
        return "1 day"
    if minutes < MINUTES_IN_MONTH:
        days = _round_half_up(Fraction(minutes, MINUTES_IN_DAY))
        return _plural(days, "day")
    if minutes < MINUTES_IN_TWO_MONTHS:
        months = _round_half_up(Fraction(minutes, MINUTES_IN_MONTH))
        return "about " + _plural(months, "month")

    months = minutes // MINUTES_IN_MONTH
    if months < 12:
        return _plural(_round_half_up(Fraction(minutes, MINUTES_IN_MONTH)), "month")
    years, rest = divmod(months, 12)
    if rest < 3:
        return "about " + _plural(years, "year")
    if rest < 9:
        return "over " + _plural(years, "year")
    return "almost " + _plural(years + 1, "year")
