"""Work experience extraction and total-years aggregation.

Every experience entry is anchored on a date-range line such as
"June 2020 - Present". Employer, position, department and location are
inferred from a small context window around that line; the bullet lines that
follow become the description.
"""

import logging
import re
from datetime import date

from nurse_match.models.schemas.structured_resume import ExperienceEntry
from nurse_match.services.date_parser import (
    MONTHS_PATTERN,
    YEAR_PATTERN,
    is_present,
    months_between,
    parse_month_year,
)
from nurse_match.services.employer_extractor import find_hospital_name, find_known_hospital
from nurse_match.services.lexicons import DEPARTMENT_UNITS, POSITION_TITLES
from nurse_match.services.line_features import (
    is_bullet,
    is_location,
    is_page_separator,
    strip_bullet,
)
from nurse_match.services.section_parser import find_section_span, is_section_boundary

logger = logging.getLogger(__name__)

PRESENT = "Present"

# "June 2020 - Present", "Jan. 2018 to Dec 2019", "2016 – 2018"
DATE_RANGE_RE = re.compile(
    rf"(?:\b({MONTHS_PATTERN})\b\.?\s*)?({YEAR_PATTERN})"
    r"\s*(?:[-–—]+|\bto\b)\s*"
    rf"(?:(?:\b({MONTHS_PATTERN})\b\.?\s*)?({YEAR_PATTERN})|\b(present|current)\b)",
    re.IGNORECASE,
)

_LINES_BEFORE = 2
_LINES_AFTER = 3

_POSITION_RES: tuple[tuple[str, re.Pattern], ...] = tuple(
    (title, re.compile(rf"(?<![\w-]){re.escape(title)}(?![\w-])", re.IGNORECASE))
    for title in POSITION_TITLES
)
_DEPARTMENT_RE = re.compile(
    r"\b[A-Z][\w/&-]*(?:[ ](?:of[ ])?[A-Z&][\w/&-]*)*[ ](?:Department|Ward|Unit)\b"
)
_UNIT_RE = re.compile(r"\b(?:" + "|".join(re.escape(u) for u in DEPARTMENT_UNITS) + r")\b")


def _format_start(month: str | None, year: str) -> str:
    return f"{month} {year}" if month else f"January {year}"


def _format_end(match: re.Match) -> str:
    if match.group(5):
        return PRESENT
    month, year = match.group(3), match.group(4)
    return f"{month} {year}" if month else f"December {year}"


def _context_window(lines: list[str], index: int) -> list[str]:
    """Lines around a date line, bullets excluded.

    Order is the date line, then the lines before it (nearest first), then
    the lines after it. Both sides stop at another date-range line so
    neighbouring entries don't leak into each other.
    """
    before: list[str] = []
    for line in reversed(lines[max(0, index - _LINES_BEFORE):index]):
        if DATE_RANGE_RE.search(line):
            break
        before.append(line)

    after: list[str] = []
    for line in lines[index + 1:index + 1 + _LINES_AFTER]:
        if DATE_RANGE_RE.search(line):
            break
        after.append(line)

    ordered = [lines[index]] + before + after
    return [line.strip() for line in ordered if line.strip() and not is_bullet(line)]


def _find_employer(window: list[str]) -> str | None:
    for rule in (find_known_hospital, find_hospital_name):
        for line in window:
            name = rule(line)
            if name:
                return name
    return None


def _find_position(window: list[str]) -> str | None:
    for line in window:
        for title, pattern in _POSITION_RES:
            if pattern.search(line):
                return title
    return None


def _find_department(window: list[str]) -> str | None:
    for pattern in (_DEPARTMENT_RE, _UNIT_RE):
        for line in window:
            match = pattern.search(line)
            if match:
                return match.group().strip()
    return None


def _find_location(window: list[str]) -> str | None:
    for line in window:
        if find_known_hospital(line) or find_hospital_name(line):
            continue
        parts = [p.strip() for p in line.split("|")]
        for part in parts[1:] if len(parts) > 1 else parts:
            if is_location(part):
                return part
    return None


def _collect_description(lines: list[str], index: int) -> str | None:
    """Collect bullet lines following a date line.

    Stops at a section header, the next date range, or two consecutive
    blank lines. Page separators are skipped.
    """
    bullets: list[str] = []
    blank_run = 0
    for line in lines[index + 1:]:
        stripped = line.strip()
        if not stripped:
            blank_run += 1
            if blank_run >= 2:
                break
            continue
        blank_run = 0

        if is_page_separator(stripped):
            continue
        if is_section_boundary(stripped) or DATE_RANGE_RE.search(stripped):
            break
        if is_bullet(stripped):
            bullet = strip_bullet(stripped)
            if bullet:
                bullets.append(bullet)

    return "\n".join(bullets) if bullets else None


def _without_education(text: str) -> str:
    span = find_section_span(text, "education")
    if span is None:
        return text
    start, end = span
    return text[:start] + "\n" + text[end:]


def extract_experience(text: str) -> list[ExperienceEntry]:
    """Return experience entries in document order."""
    lines = _without_education(text).split("\n")
    entries: list[ExperienceEntry] = []

    for i, line in enumerate(lines):
        match = DATE_RANGE_RE.search(line)
        if not match:
            continue

        window = _context_window(lines, i)
        entries.append(ExperienceEntry(
            start_date=_format_start(match.group(1), match.group(2)),
            end_date=_format_end(match),
            employer=_find_employer(window),
            position=_find_position(window),
            department=_find_department(window),
            location=_find_location(window),
            description=_collect_description(lines, i),
        ))

    logger.debug("Found %d experience entries", len(entries))
    return entries


def calculate_years_of_experience(
    entries: list[ExperienceEntry], now: date | None = None
) -> int | None:
    """Total whole years across all entries with a parseable start date.

    Open-ended entries run until ``now`` (today by default). An end date
    before its start counts as zero months. Overlapping periods are summed
    as-is. Returns None when no entry could be measured.
    """
    today = now or date.today()
    current = (today.year, today.month - 1)

    total_months = 0
    measured = 0
    for entry in entries:
        if not entry.start_date:
            continue
        start = parse_month_year(entry.start_date)
        if start is None:
            continue

        if not entry.end_date or is_present(entry.end_date):
            end = current
        else:
            end = parse_month_year(entry.end_date)
            if end is None:
                continue

        total_months += max(0, months_between(start, end))
        measured += 1

    if measured == 0:
        return None
    return total_months // 12
