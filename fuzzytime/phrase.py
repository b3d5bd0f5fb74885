from __future__ import annotations

from typing import Iterable, Tuple


_HOUR_WORDS = (
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
)

# Bucket edges sit 2 minutes before each multiple of 5; the first bucket wraps
# across the top of the hour. "ten to" is 6 minutes wide and "five to" 4.
EXACT_MINUTES = (58, 59, 0, 1, 2)

_BUCKETS: Tuple[Tuple[Iterable[int], str], ...] = (
    (EXACT_MINUTES, "{hour} o'clock"),
    (range(3, 8), "five past {hour}"),
    (range(8, 13), "ten past {hour}"),
    (range(13, 18), "quarter past {hour}"),
    (range(18, 23), "twenty past {hour}"),
    (range(23, 28), "twentyfive past {hour}"),
    (range(28, 33), "half past {hour}"),
    (range(33, 38), "twentyfive to {hour}"),
    (range(38, 43), "twenty to {hour}"),
    (range(43, 48), "quarter to {hour}"),
    (range(48, 54), "ten to {hour}"),
    (range(54, 58), "five to {hour}"),
)


def _build_minute_table() -> Tuple[str, ...]:
    table = [""] * 60
    for minutes, template in _BUCKETS:
        for m in minutes:
            table[m] = template
    assert all(table), "every minute needs a template"
    return tuple(table)


_TEMPLATE_BY_MINUTE = _build_minute_table()

# First minute of "twentyfive to"; from here on the phrase counts down to the
# next hour.
_FIRST_TO_MINUTE = 33


def _check_range(name: str, value: int, upper: int) -> None:
    # bool is an int subclass; True/False are not clock readings.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer")
    if not (0 <= value <= upper):
        raise ValueError(f"{name} must be 0..{upper}")


def hour_word(hour: int) -> str:
    """
    Name an hour of the day.

    0 and 12 are "midnight" and "noon"; every other hour folds onto
    one..eleven, so 3 and 15 are both "three".
    """
    _check_range("hour", hour, 23)
    if hour == 0:
        return "midnight"
    if hour == 12:
        return "noon"
    return _HOUR_WORDS[(hour - 1) % 12]


def minute_template(minute: int) -> str:
    """Return the phrase template for a minute; "{hour}" marks the hour word."""
    _check_range("minute", minute, 59)
    return _TEMPLATE_BY_MINUTE[minute]


def is_exact(minute: int) -> bool:
    _check_range("minute", minute, 59)
    return minute in EXACT_MINUTES


def format_fuzzy_time(hour: int, minute: int) -> str:
    """
    Render a wall-clock reading as a fuzzy phrase.

    Examples:
    - 03:15 -> "quarter past three"
    - 11:50 -> "ten to noon"
    - 00:01 -> "midnight"
    - 12:05 -> "five past noon"

    "to" phrases name the coming hour. The exact bucket always names the
    hour being read, so 23:58 is "eleven o'clock" rather than "midnight".
    """
    _check_range("hour", hour, 23)
    template = minute_template(minute)

    if is_exact(minute):
        word = hour_word(hour)
        if hour in (0, 12):
            # "midnight" and "noon" already name the exact hour.
            return word
        return template.format(hour=word)

    if minute >= _FIRST_TO_MINUTE:
        hour = (hour + 1) % 24
    return template.format(hour=hour_word(hour))
