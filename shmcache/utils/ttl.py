"""Time-to-live normalization.

Every TTL accepted by the cache is reduced to a signed integer number of
seconds with three meanings:

    0   -> the entry never expires
    > 0 -> the entry expires that many seconds after it is stored
    < 0 -> the entry is already expired (a write becomes a delete)

Durations are resolved against the Unix epoch so that calendar-aware
``relativedelta`` values ("2 years 4 days") use real calendar arithmetic
instead of a fixed-length year.
"""

from __future__ import annotations

import math
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Union

from dateutil.relativedelta import relativedelta

from shmcache.utils.errors import InvalidArgumentError

TTL_INFINITY = 0
TTL_EXPIRED = -1

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Leading numeric prefix of a string, e.g. "123", " 42abc", "1.5e3".
_NUMERIC_PREFIX_RE = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

# Mean Gregorian month (365.2425 days / 12), used once a relativedelta
# reaches past the range ``datetime`` can represent.
_SECONDS_PER_MONTH = 2629746

TTL = Union[None, int, float, str, timedelta, relativedelta]


def _estimate_seconds(duration: relativedelta) -> int:
    months = duration.years * 12 + duration.months
    return (
        months * _SECONDS_PER_MONTH
        + duration.days * 86400
        + duration.hours * 3600
        + duration.minutes * 60
        + duration.seconds
    )


def duration_to_seconds(duration: timedelta | relativedelta) -> int:
    """Return the whole seconds a duration spans when added to the epoch.

    A ``timedelta`` has a fixed length.  A ``relativedelta`` is applied to
    the epoch with calendar arithmetic; when the result falls outside the
    years ``datetime`` supports, mean Gregorian month lengths are used
    instead.
    """
    if isinstance(duration, timedelta):
        return int(duration.total_seconds())
    try:
        return int(((EPOCH + duration) - EPOCH).total_seconds())
    except (OverflowError, ValueError):
        return _estimate_seconds(duration)


def _float_to_int(value: float) -> int:
    # Infinity and NaN have no integer value and read as 0.
    if math.isinf(value) or math.isnan(value):
        return 0
    return int(value)


def _coerce_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return _float_to_int(value)
    if isinstance(value, str):
        match = _NUMERIC_PREFIX_RE.match(value)
        if match is None:
            return 0
        number = match.group(0)
        if any(char in number for char in ".eE"):
            return _float_to_int(float(number))
        return int(number)
    raise InvalidArgumentError(f"Unsupported TTL type: {type(value).__name__}")


def normalize_ttl(ttl: TTL) -> int:
    """Normalize a raw TTL into integer seconds.

    Parameters
    ----------
    ttl:
        ``None``, seconds as ``int``/``float``/numeric ``str``, or a
        ``timedelta`` / ``relativedelta`` duration.

    Returns
    -------
    int
        ``0`` for ``None``; the elapsed seconds for a duration; otherwise the
        coerced integer when positive, else ``-1``.

    Raises
    ------
    InvalidArgumentError
        If *ttl* is of a type that cannot be read as seconds.
    """
    if ttl is None:
        return TTL_INFINITY

    if isinstance(ttl, (timedelta, relativedelta)):
        return duration_to_seconds(ttl)

    seconds = _coerce_int(ttl)
    return seconds if seconds > 0 else TTL_EXPIRED
