"""Sunset value parsing."""

from __future__ import annotations

import re
from datetime import date, datetime

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIMESTAMP_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:[Zz]|[+-]\d{2}:\d{2})$"
)


class SunsetParseError(ValueError):
    """Raised when a sunset value is not a calendar date."""


def parse_sunset_date(value: object) -> date:
    """Parse a sunset value into a calendar date.

    Accepts `YYYY-MM-DD`, an RFC 3339 timestamp (its date part is used) and the
    date/datetime objects YAML loaders produce for unquoted dates.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise SunsetParseError(f"sunset value {value!r} is not a string")

    text = value.strip()
    if _DATE_PATTERN.fullmatch(text):
        try:
            return date.fromisoformat(text)
        except ValueError as exc:
            raise SunsetParseError(f"sunset value '{text}' is not a valid date: {exc}") from exc
    if _TIMESTAMP_PATTERN.fullmatch(text):
        normalized = text.replace("t", "T").replace("z", "+00:00").replace("Z", "+00:00")
        try:
            return datetime.fromisoformat(normalized).date()
        except ValueError as exc:
            raise SunsetParseError(
                f"sunset value '{text}' is not a valid timestamp: {exc}"
            ) from exc
    raise SunsetParseError(
        f"sunset value '{text}' is not a YYYY-MM-DD date or RFC 3339 timestamp"
    )
