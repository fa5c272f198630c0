"""Score, time and run-order token handling shared by the ranking passes."""

import math
import re

# Score tokens that mark a run that was not completed
ELIMINATION_CODES = frozenset({"E", "EL", "ELI", "R", "RET", "NC"})
NOT_CONTINUING_CODE = "NC"

# Marker for a day without any result for the rider
NO_RESULT = "-"

# Team total when a counting member did not complete the course
TEAM_ELIMINATED = "ELI"

# Tie-break sentinels: missing sorts last, an eliminated jump-off just before it
MISSING_TIEBREAK_SCORE = 999999
ELIMINATED_TIEBREAK_SCORE = 999998
MISSING_TIME_SECONDS = 999999.0

DEFAULT_RUN_ORDER = 9999

RawValue = str | int | float | None

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+))")


def is_blank(value: object) -> bool:
    """True for None and for strings holding only whitespace."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def is_elimination(token: object) -> bool:
    """Check whether a raw score (or time) token is an elimination code."""
    if token is None or isinstance(token, (bool, int, float)):
        return False
    return str(token).strip().upper() in ELIMINATION_CODES


def to_number(value: object) -> int | float | None:
    """
    Best-effort numeric parse of a sheet cell.

    Returns:
        int for integral values, float otherwise, None when not numeric
    """
    if isinstance(value, bool) or value is None:
        return None

    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        return value

    text = str(value).strip()
    if not text or "_" in text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    if number.is_integer():
        return int(number)
    return number


def is_numeric(value: object) -> bool:
    """Check whether a value resolves to a finite number."""
    return to_number(value) is not None


def coerce_score(token: RawValue) -> RawValue:
    """
    Coerce a non-eliminated score token for display and totals.

    Blank cells count as 0 penalties. Tokens that are neither numeric nor
    elimination codes are returned unchanged.
    """
    if is_blank(token):
        return 0
    number = to_number(token)
    if number is None:
        return token
    return number


def parse_run_order(value: object) -> int:
    """Parse a run-order (O.S.) cell as its leading integer."""
    if isinstance(value, bool) or value is None:
        return DEFAULT_RUN_ORDER
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return DEFAULT_RUN_ORDER
        return int(value)
    match = _LEADING_INT.match(str(value))
    if not match:
        return DEFAULT_RUN_ORDER
    return int(match.group(1))


def parse_time_seconds(token: object) -> float | None:
    """
    Parse a time token to seconds.

    Accepts ``M:SS`` (seconds may be fractional) or plain seconds.

    Returns:
        Seconds as float, or None for missing or unparseable tokens
    """
    if isinstance(token, bool) or is_blank(token):
        return None

    if isinstance(token, (int, float)):
        seconds = float(token)
        return seconds if math.isfinite(seconds) else None

    text = str(token).strip()
    if text == NO_RESULT:
        return None

    if ":" in text:
        parts = text.split(":")
        if len(parts) != 2:
            return None
        minutes_match = _LEADING_INT.match(parts[0])
        seconds_match = _LEADING_FLOAT.match(parts[1])
        minutes = int(minutes_match.group(1)) if minutes_match else 0
        seconds = float(seconds_match.group(1)) if seconds_match else 0.0
        return minutes * 60 + seconds

    number = to_number(text)
    if number is None:
        return None
    return float(number)


def format_seconds(seconds: float) -> str:
    """Format seconds as M:SS or M:SS.ss."""
    minutes, secs = divmod(seconds, 60)
    if float(secs).is_integer():
        return f"{int(minutes)}:{int(secs):02d}"
    return f"{int(minutes)}:{secs:05.2f}"


def category_display(category: str) -> str:
    """Convert a fence-height category ("080") to its label ("0,80m")."""
    if len(category) == 3 and category.isdigit():
        return f"{category[0]},{category[1:]}m"
    return category
