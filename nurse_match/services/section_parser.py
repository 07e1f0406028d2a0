"""Résumé section segmentation.

A section starts after a line-bounded header (any synonym, optional colon)
and ends at the next line that looks like a section header: either an
all-caps line or another recognised header. Whitelisted sub-labels such as
"Tertiary:" never end a section.
"""

import re

from nurse_match.config import settings
from nurse_match.services.lexicons import SUBSECTION_LABELS

# Section header synonyms and their canonical names
SECTION_PATTERNS: dict[str, list[str]] = {
    "summary": [
        r"(?:professional|career|executive)\s+summary",
        r"summary",
        r"(?:career\s+)?objectives?",
        r"about\s+me",
        r"(?:professional\s+)?profile",
        r"personal\s+statement",
        r"overview",
    ],
    "experience": [
        r"(?:work|professional|employment|clinical|nursing|relevant)\s+experiences?",
        r"experiences?",
        r"(?:work|employment|career)\s+history",
    ],
    "education": [
        r"education(?:al)?(?:\s+(?:background|attainment|qualifications|history))?",
        r"academic\s+(?:background|qualifications)",
    ],
    "skills": [
        r"(?:technical|professional|clinical|key|core|nursing)?\s*skills(?:\s+(?:and|&)\s+competencies)?",
        r"(?:core\s+)?competencies",
        r"(?:areas\s+of\s+)?expertise",
        r"proficiencies",
        r"technologies",
    ],
    "certifications": [
        r"(?:licen[sc]es?\s*(?:and|&)\s*)?certific(?:ations?|ates?)(?:\s*(?:and|&)\s*licen[sc]es?)?",
        r"licen[sc]es?",
        r"licensure",
    ],
    "trainings": [
        r"(?:trainings?|seminars?)(?:\s*(?:and|&)\s*(?:trainings?|seminars?))?(?:\s+attended)?",
        r"continuing\s+education",
    ],
    "affiliations": [
        r"(?:professional\s+)?(?:affiliations?|memberships?|organizations?)",
    ],
    "achievements": [
        r"(?:key\s+)?achievements?",
        r"(?:awards?|honors?|accomplishments)(?:\s*(?:and|&)\s*(?:awards?|honors?))?",
    ],
    "references": [
        r"(?:character\s+)?references?",
    ],
    "personal": [
        r"personal\s+(?:information|data|details|background)",
    ],
    "projects": [
        r"(?:key|notable|selected|personal)?\s*projects",
    ],
}

# Header search within a document, and header test for a single line
_HEADER_SEARCH: dict[str, re.Pattern] = {}
_HEADER_LINE: dict[str, re.Pattern] = {}
for _section, _patterns in SECTION_PATTERNS.items():
    _combined = "|".join(_patterns)
    _HEADER_SEARCH[_section] = re.compile(
        rf"^[ ]*(?:{_combined})[ ]*:?[ ]*$", re.IGNORECASE | re.MULTILINE
    )
    _HEADER_LINE[_section] = re.compile(rf"(?:{_combined})\s*:?", re.IGNORECASE)

_MIN_HEADER_LENGTH = 10
_UPPERCASE_RATIO = 0.7


def is_all_caps_header(line: str) -> bool:
    """All-caps header test: >= 10 chars, > 70% uppercase letters, starts uppercase."""
    stripped = line.strip()
    if len(stripped) < _MIN_HEADER_LENGTH:
        return False
    if not stripped[0].isalpha() or not stripped[0].isupper():
        return False
    letters = [c for c in stripped if c.isalpha()]
    upper = sum(1 for c in letters if c.isupper())
    return upper / len(letters) > _UPPERCASE_RATIO


def is_subsection_label(line: str) -> bool:
    """True for sub-labels like "Tertiary:" that belong to the enclosing section."""
    label = line.strip().split(":", 1)[0].strip().lower()
    return label in SUBSECTION_LABELS


def match_section_header(line: str) -> str | None:
    """Return the canonical section name if the whole line is a section header."""
    stripped = line.strip()
    if not stripped:
        return None
    for section_name, pattern in _HEADER_LINE.items():
        if pattern.fullmatch(stripped):
            return section_name
    return None


def is_section_boundary(line: str) -> bool:
    """True if the line starts a new section."""
    if not line.strip() or is_subsection_label(line):
        return False
    return is_all_caps_header(line) or match_section_header(line) is not None


def find_section_span(text: str, section: str) -> tuple[int, int] | None:
    """Return (start, end) offsets of the section body, or None if no header.

    ``start`` is the offset just after the header line. The summary section
    is capped at ``settings.summary_max_chars`` when no boundary follows it.
    """
    pattern = _HEADER_SEARCH.get(section.lower())
    if pattern is None:
        return None
    header = pattern.search(text)
    if header is None:
        return None

    start = header.end()
    if text.startswith("\n", start):
        start += 1

    offset = start
    for line in text[start:].split("\n"):
        if is_section_boundary(line):
            return start, offset
        offset += len(line) + 1

    end = len(text)
    if section.lower() == "summary":
        end = min(end, start + settings.summary_max_chars)
    return start, end


def find_section(text: str, section: str) -> str | None:
    """Return the body of a named section, or None if its header is absent."""
    span = find_section_span(text, section)
    if span is None:
        return None
    start, end = span
    return text[start:end].strip()


def parse_sections(text: str) -> dict[str, str]:
    """Map every section whose header is present to its body."""
    sections: dict[str, str] = {}
    for section_name in SECTION_PATTERNS:
        body = find_section(text, section_name)
        if body is not None:
            sections[section_name] = body
    return sections
