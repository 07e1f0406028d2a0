"""Education entry extraction.

Each line of the education section is tested against an ordered degree
pattern library (first match wins). Institution, field of study, status,
location and dates are then looked up in small windows around the degree
line, bounded by the neighbouring degree lines.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date

from nurse_match.models.schemas.structured_resume import EducationEntry
from nurse_match.services.date_parser import MONTHS_PATTERN
from nurse_match.services.lexicons import INSTITUTION_CITY_SUFFIXES
from nurse_match.services.line_features import is_location, strip_bullet
from nurse_match.services.section_parser import find_section, is_all_caps_header

logger = logging.getLogger(__name__)

# Capitalised words joined by spaces or "and"/"of"/"&"
_FIELD = r"[A-Z][A-Za-z&-]*(?:[ ](?:and|of|&)[ ][A-Z][A-Za-z&-]*|[ ][A-Z][A-Za-z&-]*)*"


@dataclass(frozen=True)
class DegreePattern:
    name: str
    pattern: re.Pattern
    default_field: str | None = None  # used when the pattern has no field group


# Ordered most specific first; the first match on a line wins
DEGREE_PATTERNS: tuple[DegreePattern, ...] = (
    DegreePattern(
        "bsn",
        re.compile(r"(?i:Bachelor\s+of\s+Science\s+in\s+Nursing)|\bB\.?S\.?N\b\.?"),
        "Nursing",
    ),
    DegreePattern(
        "bachelor",
        re.compile(
            rf"(?i:Bachelor(?:'s)?(?:\s+Degree)?\s+(?:of|in))\s+(?:(?i:Science|Arts)\s+(?i:in)\s+)?({_FIELD})"
            rf"|\bB\.?[SA]\.?\s+(?i:in)\s+({_FIELD})"
        ),
    ),
    DegreePattern(
        "master",
        re.compile(
            rf"(?i:Master(?:'s)?(?:\s+Degree)?\s+(?:of|in))\s+(?:(?i:Science|Arts)\s+(?i:in)\s+)?({_FIELD})"
            r"|\bMBA\b|\bM\.?S\.?N\b\.?"
        ),
    ),
    DegreePattern(
        "doctorate",
        re.compile(
            rf"(?:\bPh\.?\s?D\b\.?|(?i:Doctorate|Doctor\s+of\s+Philosophy))(?:\s+(?i:in|of)\s+({_FIELD}))?"
        ),
    ),
    DegreePattern(
        "associate",
        re.compile(
            rf"(?i:Associate(?:'s)?(?:\s+Degree)?\s+(?:of|in))\s+(?:(?i:Science|Arts)\s+(?i:in)\s+)?({_FIELD})"
        ),
    ),
    DegreePattern(
        "engineering_technology",
        re.compile(r"(?i:(?:Chemical|Mechanical|Electrical|Electronics|Civil|Computer)\s+Engineering\s+Technology)"),
    ),
    DegreePattern(
        "diploma",
        re.compile(rf"(?i:Diploma\s+in)\s+({_FIELD})"),
    ),
)

_FIELD_LABEL_RE = re.compile(
    r"^(?:Focus on|Major in|Majoring in|Specialization|Concentration|Emphasis|Specializing in)[:\s]*",
    re.IGNORECASE,
)
_STATUS_RE = re.compile(
    r"^(?:(?:1st|2nd|3rd|4th|5th)\s+Year\s+Student|(?:Freshman|Sophomore|Junior|Senior)\s+Year|Graduated|Undergraduate)\b",
    re.IGNORECASE,
)
_INSTITUTION_RE = re.compile(r"University|College|Institute|School|Academy|Polytechnic", re.IGNORECASE)
_ALL_CAPS_RE = re.compile(r"^[A-Z\s&]{4,}$")

_YEAR = r"(?<!\d)((?:19|20)\d{2})(?!\d)"
_YEAR_RANGE_RE = re.compile(
    rf"{_YEAR}\s*[-–—]\s*(?:(?:\b{MONTHS_PATTERN}\.?\s*)?{_YEAR}|\b(present|current)\b)",
    re.IGNORECASE,
)
_SINGLE_YEAR_RE = re.compile(_YEAR)

_INSTITUTION_YEARS_RE = re.compile(
    r",?\s*\(?\d{4}(?:\s*[-–—]\s*(?:\d{4}|present|current))?\)?", re.IGNORECASE
)
_INSTITUTION_CITY_RE = re.compile(
    r",\s*(?:" + "|".join(INSTITUTION_CITY_SUFFIXES) + r").*$", re.IGNORECASE
)
_US_STATE_RE = re.compile(r",\s*(?:CA|NY|TX|FL)\s*$")

_MIN_YEAR = 1950
_FUTURE_YEARS = 6  # expected graduation may be a few years ahead


def match_degree(line: str) -> tuple[str, str | None] | None:
    """Return (degree text, field of study) for the first degree pattern matching the line."""
    for degree in DEGREE_PATTERNS:
        match = degree.pattern.search(line)
        if not match:
            continue
        field = next((g for g in match.groups() if g), None) or degree.default_field
        return match.group().strip(" ,-–"), field
    return None


def _clean_institution(line: str) -> str:
    cleaned = _INSTITUTION_YEARS_RE.sub("", line)
    cleaned = _INSTITUTION_CITY_RE.sub("", cleaned)
    cleaned = _US_STATE_RE.sub("", cleaned)
    return cleaned.strip().strip(",").strip()


def _is_institution_line(line: str) -> bool:
    return (
        bool(_INSTITUTION_RE.search(line))
        and len(line) < 150
        and not _ALL_CAPS_RE.match(line)
        and not is_all_caps_header(line)
        and match_degree(line) is None
    )


def _valid_year(year: int) -> bool:
    return _MIN_YEAR <= year <= date.today().year + _FUTURE_YEARS


def _apply_dates(entry: dict, lines: list[str]) -> None:
    for line in lines:
        match = _YEAR_RANGE_RE.search(line)
        if not match or not _valid_year(int(match.group(1))):
            continue
        entry["start_date"] = f"{match.group(1)}-01-01"
        if match.group(2) and _valid_year(int(match.group(2))):
            entry["end_date"] = f"{match.group(2)}-12-31"
            entry["year"] = int(match.group(2))
        return

    for line in lines:
        for match in _SINGLE_YEAR_RE.finditer(line):
            if _valid_year(int(match.group(1))):
                entry["year"] = int(match.group(1))
                return


def extract_education(text: str) -> list[EducationEntry]:
    """Return education entries in document order.

    Works within the education section, or the whole text when the résumé
    has no education header.
    """
    section = find_section(text, "education")
    search_text = section if section is not None else text
    lines = [strip_bullet(line) for line in search_text.split("\n")]
    lines = [line for line in lines if line]

    degree_hits = [(i, match_degree(line)) for i, line in enumerate(lines)]
    degree_hits = [(i, hit) for i, hit in degree_hits if hit is not None]

    entries: list[EducationEntry] = []
    used_institution_lines: set[int] = set()

    for n, (i, (degree, field)) in enumerate(degree_hits):
        prev_bound = degree_hits[n - 1][0] + 1 if n > 0 else 0
        next_bound = degree_hits[n + 1][0] if n + 1 < len(degree_hits) else len(lines)

        entry: dict = {"degree": degree, "field_of_study": field}

        for line in lines[i + 1:min(next_bound, i + 3)]:
            if _FIELD_LABEL_RE.match(line):
                entry["field_of_study"] = _FIELD_LABEL_RE.sub("", line).strip()
                break

        for line in lines[i + 1:min(next_bound, i + 4)]:
            if _STATUS_RE.match(line):
                entry["status"] = line
                break

        forward = range(i + 1, min(next_bound, i + 4))
        backward = range(max(prev_bound, i - 2), i)
        for j in list(forward) + list(backward):
            if j not in used_institution_lines and _is_institution_line(lines[j]):
                entry["institution"] = _clean_institution(lines[j])
                used_institution_lines.add(j)
                break
        else:
            remainder = lines[i].replace(degree, "", 1)
            if _INSTITUTION_RE.search(remainder):
                entry["institution"] = _clean_institution(remainder.strip(" ,-–|")) or None

        for line in lines[max(prev_bound, i - 2):min(next_bound, i + 5)]:
            if is_location(line):
                entry["institution_location"] = line
                break

        date_lines = [lines[i]] + lines[i + 1:min(next_bound, i + 6)]
        if i - 1 >= prev_bound:
            date_lines.append(lines[i - 1])
        _apply_dates(entry, date_lines)

        entries.append(EducationEntry(**entry))

    logger.debug("Found %d education entries", len(entries))
    return entries
