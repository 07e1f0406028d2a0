"""Month/year fragment parsing shared by the experience and record builders."""

import re

MONTHS_PATTERN = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|"
    r"Jul(?:y)?|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
YEAR_PATTERN = r"(?<!\d)(?:19|20)\d{2}(?!\d)"

# Zero-indexed months
_MONTH_MAP = {
    "jan": 0, "january": 0, "feb": 1, "february": 1, "mar": 2, "march": 2,
    "apr": 3, "april": 3, "may": 4, "jun": 5, "june": 5,
    "jul": 6, "july": 6, "aug": 7, "august": 7, "sep": 8, "sept": 8,
    "september": 8, "oct": 9, "october": 9, "nov": 10, "november": 10,
    "dec": 11, "december": 11,
}

_MONTH_YEAR_RE = re.compile(
    rf"(?:\b({MONTHS_PATTERN})\b\.?\s*)?({YEAR_PATTERN})", re.IGNORECASE
)
_PRESENT_RE = re.compile(r"^\s*(?:present|current)\s*$", re.IGNORECASE)
_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_month_year(fragment: str) -> tuple[int, int] | None:
    """Parse ``"June 2020"`` into ``(2020, 5)``.

    The month is zero-indexed and defaults to January when only a year is
    present. The first 4-digit year in 1900-2099 wins. Returns None when the
    fragment has no such year. Present/Current is not handled here.
    """
    match = _MONTH_YEAR_RE.search(fragment)
    if not match:
        return None
    month_str = match.group(1)
    month = _MONTH_MAP.get(month_str.lower(), 0) if month_str else 0
    return int(match.group(2)), month


def is_present(fragment: str | None) -> bool:
    """True for the open-ended end-date sentinel (Present / Current)."""
    return bool(fragment) and _PRESENT_RE.match(fragment) is not None


def months_between(start: tuple[int, int], end: tuple[int, int]) -> int:
    """Whole months from start to end; negative when end precedes start."""
    return (end[0] - start[0]) * 12 + (end[1] - start[1])


def to_iso_date(fragment: str) -> str | None:
    """Convert ``"June 2020"`` to ``"2020-06-01"``; ISO dates pass through."""
    if _ISO_DATE_RE.match(fragment):
        return fragment
    parsed = parse_month_year(fragment)
    if parsed is None:
        return None
    year, month = parsed
    return f"{year:04d}-{month + 1:02d}-01"
