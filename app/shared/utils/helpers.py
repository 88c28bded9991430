# 📄 File: app/shared/utils/helpers.py

# 🧭 Purpose (Layman Explanation):
# This file contains helpful tools that make common tasks easier, like keeping numbers inside a range,
# rounding scores the way people expect, reading JSON out of chatty AI replies, and telling the time.

# 🧪 Purpose (Technical Summary):
# General purpose utility functions: safe conversions, clamping, half-up rounding, JSON object
# extraction from free-form text, UTC datetime normalisation and an injectable clock abstraction.

# 🔗 Dependencies:
# - json / re: Parsing AI replies
# - datetime: Time handling
# - typing: Type hints

# 🔄 Connected Modules / Calls From:
# Used by: care schedule engine, diagnosis accuracy scorer, plant health rules,
# season helper, Groq advisor client, command and query handlers

import json
import math
import re
from datetime import datetime, time, timezone
from typing import Any, Dict, Optional, Protocol, Union

from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

_CODE_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)
_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


# Safe conversions
def safe_int(value: Any, default: int = 0) -> int:
    """
    Safely convert value to integer.

    Args:
        value: Value to convert
        default: Default value if conversion fails

    Returns:
        Integer value or default
    """
    try:
        if isinstance(value, bool):
            return int(value)
        return int(float(str(value)))
    except (ValueError, TypeError, OverflowError):
        return default


def safe_float(value: Any, default: Optional[float] = 0.0) -> Optional[float]:
    """
    Safely convert value to float.

    Args:
        value: Value to convert
        default: Default value if conversion fails

    Returns:
        Float value or default
    """
    if isinstance(value, bool) or value is None:
        return default
    try:
        result = float(value)
    except (ValueError, TypeError):
        return default
    if not math.isfinite(result):
        return default
    return result


def is_empty_or_whitespace(value: Any) -> bool:
    """Check if value is None, empty, or only whitespace."""
    if value is None:
        return True
    if isinstance(value, str):
        return len(value.strip()) == 0
    if isinstance(value, (list, dict, tuple, set)):
        return len(value) == 0
    return False


# JSON utilities
def extract_json_object(text: str) -> Dict[str, Any]:
    """
    Pull the first-to-last brace JSON object out of a model reply.

    Markdown code fences are stripped first. Raises ValueError when no
    object can be found or the braces do not enclose valid JSON.
    """
    if not isinstance(text, str):
        raise ValueError("Reply is not text")

    cleaned = _CODE_FENCE_RE.sub("", text).strip()
    match = _JSON_OBJECT_RE.search(cleaned)
    if not match:
        raise ValueError("No JSON object found in reply")

    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON object in reply: {e}") from e

    if not isinstance(parsed, dict):
        raise ValueError("Reply JSON is not an object")
    return parsed


# Math and calculation utilities
def clamp(value: Union[int, float], min_val: Union[int, float], max_val: Union[int, float]) -> Union[int, float]:
    """Clamp value between min and max."""
    return max(min_val, min(value, max_val))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (36.5 -> 37, -0.5 -> 0)."""
    return int(math.floor(value + 0.5))


# Date and time utilities
def ensure_utc(moment: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes and convert aware ones to UTC."""
    if moment is None:
        return None
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def end_of_day(moment: datetime) -> datetime:
    """Last representable instant (23:59:59.999999) of the moment's calendar day, same tz."""
    return datetime.combine(moment.date(), time.max, tzinfo=moment.tzinfo)


class Clock(Protocol):
    """Source of the current time."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return utc_now()


class FixedClock:
    """Clock frozen at one instant, for tests and replays."""

    def __init__(self, instant: datetime):
        self.instant = ensure_utc(instant)

    def now(self) -> datetime:
        return self.instant

    def set(self, instant: datetime) -> None:
        self.instant = ensure_utc(instant)
