"""Single-value profile fields: summary, graduation year, salary, address."""

import re
from datetime import date

from nurse_match.config import settings
from nurse_match.services.lexicons import ADDRESS_KEYWORDS
from nurse_match.services.section_parser import find_section, is_all_caps_header

_MIN_SUMMARY_LENGTH = 20

# ---------------------------------------------------------------------------
# Graduation year
# ---------------------------------------------------------------------------

_EDUCATION_INDICATOR_RE = re.compile(
    r"graduat|\bBSN\b|Bachelor|Nursing|degree|university|college", re.IGNORECASE
)
_GRADUATED_RE = re.compile(r"graduat", re.IGNORECASE)
_YEAR_RE = re.compile(r"\b((?:19|20)\d{2})\b")

# ---------------------------------------------------------------------------
# Salary: first match wins, in order
# ---------------------------------------------------------------------------

SALARY_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"(?:salary|compensation|pay|wage)[\s:]*(?:PHP|₱|Php)\s*\d[\d,]*", re.IGNORECASE),
    re.compile(r"(?:PHP|₱)\s*\d[\d,]*(?:\s*[-–]\s*(?:PHP|₱)?\s*\d[\d,]*)?", re.IGNORECASE),
    re.compile(r"(?:USD|\$)\s*\d[\d,]*(?:\s*[-–]\s*(?:USD|\$)?\s*\d[\d,]*)?", re.IGNORECASE),
)

# ---------------------------------------------------------------------------
# Address
# ---------------------------------------------------------------------------

_ADDRESS_SCAN_CHARS = 1500
_ADDRESS_SCAN_LINES = 20
_CAP_WORDS = r"[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*"

ADDRESS_PATTERNS: tuple[re.Pattern, ...] = (
    # Street, City, Province, optional postal code
    re.compile(rf"^(?:[\w\s.,#-]+,\s*)?{_CAP_WORDS},\s*{_CAP_WORDS},?\s*(?:\d{{4,5}})?$"),
    # City, Province, Country
    re.compile(rf"^{_CAP_WORDS},\s*{_CAP_WORDS},\s*{_CAP_WORDS}$"),
    # City, Country
    re.compile(
        rf"^{_CAP_WORDS},\s*(?:Philippines|USA|Canada|UK|Australia|Singapore|Malaysia)$",
        re.IGNORECASE,
    ),
)

_ADDRESS_SKIP_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"^\+?\d+[\s\-()]+\d+"),  # phone
    re.compile(r"^[\w._%+-]+@[\w.-]+\.[a-zA-Z]{2,}$"),  # e-mail
    re.compile(r"^https?://", re.IGNORECASE),
    re.compile(
        r"^(?:PROFESSIONAL\s+SUMMARY|SUMMARY|OBJECTIVE|EXPERIENCE|EDUCATION|SKILLS|CERTIFICATIONS)",
        re.IGNORECASE,
    ),
)
_ADDRESS_KEYWORD_RE = re.compile("|".join(ADDRESS_KEYWORDS), re.IGNORECASE)
_ALL_CAPS_RE = re.compile(r"^[A-Z\s&]+$")


def extract_summary(text: str) -> str | None:
    """Return the professional summary as a single line, or None."""
    section = find_section(text, "summary")
    if not section:
        return None

    lines = [
        line.strip() for line in section.split("\n")
        if line.strip() and not is_all_caps_header(line)
    ]
    summary = re.sub(r"\s+", " ", " ".join(lines)).strip()
    if len(summary) <= _MIN_SUMMARY_LENGTH:
        return None
    return summary


def _first_valid_year(line: str, current_year: int) -> int | None:
    for match in _YEAR_RE.finditer(line):
        year = int(match.group(1))
        if settings.min_graduation_year <= year <= current_year:
            return year
    return None


def extract_graduation_year(text: str) -> int | None:
    """Find a graduation year near education keywords.

    Lines that mention an education keyword are checked first; then a window
    around each "graduat*" line, for years on neighbouring lines.
    """
    lines = text.split("\n")
    current_year = date.today().year

    for line in lines:
        if _EDUCATION_INDICATOR_RE.search(line):
            year = _first_valid_year(line, current_year)
            if year is not None:
                return year

    for i, line in enumerate(lines):
        if _GRADUATED_RE.search(line):
            window = " ".join(lines[max(0, i - 1):i + 3])
            year = _first_valid_year(window, current_year)
            if year is not None:
                return year

    return None


def extract_salary(text: str) -> str | None:
    """Return the raw salary expression, unmodified."""
    for pattern in SALARY_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group().strip()
    return None


def extract_address(text: str) -> str | None:
    """Return the first address-shaped line near the top of the résumé."""
    lines = [line.strip() for line in text[:_ADDRESS_SCAN_CHARS].split("\n") if line.strip()]

    for line in lines[:_ADDRESS_SCAN_LINES]:
        if any(p.search(line) for p in _ADDRESS_SKIP_PATTERNS):
            continue
        if len(line) < 10 or len(line) > 150:
            continue
        if any(p.match(line) for p in ADDRESS_PATTERNS):
            return line

        parts = line.split(",")
        if (
            2 <= len(parts) <= 4
            and not _ALL_CAPS_RE.match(line)
            and _ADDRESS_KEYWORD_RE.search(line)
        ):
            return line

    return None
