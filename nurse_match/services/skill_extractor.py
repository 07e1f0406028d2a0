"""Clinical skill extraction.

Combines:
1. Lexicon matching of known clinical skills over the whole text
2. A scan of the skills section for comma/semicolon separated items
"""

import re

from nurse_match.services.lexicons import CLINICAL_SKILLS
from nurse_match.services.line_features import strip_bullet
from nurse_match.services.section_parser import find_section, is_all_caps_header

_CATEGORY_RE = re.compile(r"^[A-Za-z\s&/]+?:\s*")
_ITEM_SPLIT_RE = re.compile(r"[,;]")

_MIN_ITEM_LENGTH = 3
_MAX_ITEM_LENGTH = 49
_MAX_ITEM_WORDS = 6


def extract_skills_lexicon(text: str) -> list[str]:
    """Return lexicon skills found anywhere in the text (case-insensitive substring)."""
    text_lower = text.lower()
    return [skill for skill in CLINICAL_SKILLS if skill.lower() in text_lower]


def extract_skills_section(text: str) -> list[str]:
    """Return items listed in the skills section, first-seen casing preserved."""
    section = find_section(text, "skills")
    if not section:
        return []

    items: list[str] = []
    for line in section.split("\n"):
        line = line.strip()
        if not line or is_all_caps_header(line):
            continue
        cleaned = strip_bullet(line)
        cleaned = _CATEGORY_RE.sub("", cleaned, count=1)
        for item in _ITEM_SPLIT_RE.split(cleaned):
            item = item.strip().rstrip(".")
            if not _MIN_ITEM_LENGTH <= len(item) <= _MAX_ITEM_LENGTH:
                continue
            if len(item.split()) > _MAX_ITEM_WORDS:
                continue
            items.append(item)
    return items


def extract_skills(text: str) -> list[str]:
    """Return all skills, deduplicated case-insensitively in discovery order."""
    found: list[str] = []
    seen: set[str] = set()
    for skill in extract_skills_lexicon(text) + extract_skills_section(text):
        key = skill.lower()
        if key not in seen:
            seen.add(key)
            found.append(skill)
    return found
