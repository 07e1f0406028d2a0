"""Employer and hospital mentions."""

import re

from nurse_match.services.lexicons import KNOWN_HOSPITALS

# Longest first, so "St. Luke's Medical Center" shadows "St. Luke's"
_HOSPITALS_BY_LENGTH: tuple[str, ...] = tuple(sorted(KNOWN_HOSPITALS, key=len, reverse=True))

# Capitalised words (with of/de/ng/and/& connectors) ending in a facility noun, within one line
HOSPITAL_NAME_RE = re.compile(
    r"\b[A-Z][\w.'-]*(?:[ ](?:(?:of|de|ng|and|&|the)[ ])?[A-Z][\w.'-]*)*"
    r"[ ](?:Hospital|Medical Center|Health Center|Medical Centre)\b"
)
_MIN_NAME_LENGTH = 10
_MAX_NAME_LENGTH = 80


def find_known_hospital(line: str) -> str | None:
    """Return the canonical name of a known hospital mentioned in the line."""
    lower = line.lower()
    for name in _HOSPITALS_BY_LENGTH:
        if name.lower() in lower:
            return name
    return None


def find_hospital_name(line: str) -> str | None:
    """Return a generic "... Hospital" / "... Medical Center" name in the line."""
    for match in HOSPITAL_NAME_RE.finditer(line):
        name = match.group().strip()
        if _MIN_NAME_LENGTH <= len(name) <= _MAX_NAME_LENGTH:
            return name
    return None


def _overlaps(name: str, found: list[str]) -> bool:
    lower = name.lower()
    return any(lower in f.lower() or f.lower() in lower for f in found)


def extract_employers(text: str) -> list[str]:
    """Return hospitals mentioned anywhere in the text.

    Known hospitals are reported in their canonical spelling; other
    "... Hospital"-style names are kept as written. Order is first
    appearance in the text, deduplicated case-insensitively.
    """
    lower_text = text.lower()
    positions: dict[str, int] = {}

    for name in _HOSPITALS_BY_LENGTH:
        index = lower_text.find(name.lower())
        if index < 0 or _overlaps(name, list(positions)):
            continue
        positions[name] = index

    for match in HOSPITAL_NAME_RE.finditer(text):
        name = match.group().strip()
        if not _MIN_NAME_LENGTH <= len(name) <= _MAX_NAME_LENGTH:
            continue
        if _overlaps(name, list(positions)):
            continue
        positions[name] = match.start()

    return sorted(positions, key=positions.__getitem__)
