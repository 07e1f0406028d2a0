"""Per-line features shared by the field extractors."""

import re

from nurse_match.services.lexicons import LOCATION_KEYWORDS

# Bullet markers: standard + common unicode set
BULLET_MARKERS = frozenset("•-–—►▪✓*○◆⚫→▸▹◇■□●◦➤")

_NUMBERED_RE = re.compile(r"^\d{1,2}[.)]\s")
_BULLET_PREFIX_RE = re.compile(r"^(?:[" + re.escape("".join(sorted(BULLET_MARKERS))) + r"]+|\d{1,2}[.)])\s*")
_PAGE_SEPARATOR_RE = re.compile(r"^-+\s*\d+\s*(?:of|/)\s*\d+\s*-+$", re.IGNORECASE)

_CAP_PHRASE = r"[A-Z][A-Za-z.'-]*(?:\s+[A-Z][A-Za-z.'-]*)*"
_LOCATION_SHAPE_RE = re.compile(rf"^{_CAP_PHRASE}(?:,\s+{_CAP_PHRASE})+$")
_LOCATION_KEYWORD_RE = re.compile(
    r"\b(?:" + "|".join(LOCATION_KEYWORDS) + r")\b", re.IGNORECASE
)


def is_bullet(line: str) -> bool:
    """True for lines starting with a bullet marker or "1." / "1)" numbering."""
    stripped = line.strip()
    if not stripped:
        return False
    return stripped[0] in BULLET_MARKERS or bool(_NUMBERED_RE.match(stripped))


def strip_bullet(line: str) -> str:
    """Remove a leading bullet marker or list number."""
    return _BULLET_PREFIX_RE.sub("", line.strip()).strip()


def is_page_separator(line: str) -> bool:
    """True for page-break artefacts like "-- 1 of 2 --"."""
    return bool(_PAGE_SEPARATOR_RE.match(line.strip()))


def is_location(line: str) -> bool:
    """True for "Talisay City, Negros Occidental"-shaped lines naming a place."""
    stripped = line.strip()
    if len(stripped) >= 80 or not _LOCATION_SHAPE_RE.match(stripped):
        return False
    return bool(_LOCATION_KEYWORD_RE.search(stripped))
