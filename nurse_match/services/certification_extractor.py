"""Certification and license detection.

Known types are found by an ordered detector table over the whole text.
Other certifications are picked up from lines of a dedicated certifications
section that mention a certification keyword.
"""

import re
from dataclasses import dataclass

from nurse_match.models.schemas.structured_resume import Certification
from nurse_match.services.date_parser import MONTHS_PATTERN
from nurse_match.services.lexicons import CERTIFICATION_KEYWORDS
from nurse_match.services.line_features import strip_bullet
from nurse_match.services.section_parser import find_section


@dataclass(frozen=True)
class CertificationDetector:
    type: str
    presence: re.Pattern
    detail: re.Pattern | None = None  # captures a number or score in group 1
    detail_field: str | None = None  # "number" | "score"


# Order is the discovery order of known types in the output
CERTIFICATION_DETECTORS: tuple[CertificationDetector, ...] = (
    CertificationDetector(
        "NCLEX",
        re.compile(r"NCLEX", re.IGNORECASE),
        re.compile(r"NCLEX[\s-]*(?:RN)?[\s:]*(?:#\s*)?(\d{6,})", re.IGNORECASE),
        "number",
    ),
    CertificationDetector(
        "IELTS",
        re.compile(r"IELTS", re.IGNORECASE),
        re.compile(
            r"IELTS[\s\S]{0,50}?(?:score|band|overall|result)?[\s:]*(?<![\d.])(\d(?:\.\d)?)(?![\d.])",
            re.IGNORECASE,
        ),
        "score",
    ),
    CertificationDetector(
        "PRC License",
        re.compile(r"\bPRC\b|Professional Regulation Commission", re.IGNORECASE),
        re.compile(
            r"PRC[\s-]*(?:License|Board|Registration)?\s*(?:No\.?|Number)?[\s#:]*(\d{5,})",
            re.IGNORECASE,
        ),
        "number",
    ),
    CertificationDetector(
        "BLS", re.compile(r"\bBLS\b|Basic Life Support", re.IGNORECASE),
    ),
    CertificationDetector(
        "ACLS", re.compile(r"\bACLS\b|Advanced Cardiac Life Support", re.IGNORECASE),
    ),
    CertificationDetector(
        "OSCE", re.compile(r"\bOSCE\b", re.IGNORECASE),
    ),
    CertificationDetector(
        "NLE", re.compile(r"\bNLE\b|Nurse Licensure Exam(?:ination)?", re.IGNORECASE),
    ),
)


_TRAILING_DATE_RE = re.compile(
    rf"\s*[-–—,(|]*\s*(?:\b{MONTHS_PATTERN}\.?\s*)?(?<!\d)(?:19|20)\d{{2}}(?!\d).*$", re.IGNORECASE
)
_KEYWORD_RE = re.compile(
    "|".join(rf"\b{re.escape(kw)}\b" for kw in CERTIFICATION_KEYWORDS), re.IGNORECASE
)


def _detect_known(text: str) -> list[Certification]:
    certs: list[Certification] = []
    for detector in CERTIFICATION_DETECTORS:
        if not detector.presence.search(text):
            continue

        details: list[str] = []
        if detector.detail is not None:
            for match in detector.detail.finditer(text):
                if match.group(1) not in details:
                    details.append(match.group(1))

        if not details:
            certs.append(Certification(type=detector.type))
            continue
        for value in details:
            certs.append(Certification(type=detector.type, **{detector.detail_field: value}))
    return certs


def _detect_section_entries(text: str, known: list[Certification]) -> list[Certification]:
    section = find_section(text, "certifications")
    if not section:
        return []

    seen = {c.type.lower() for c in known}
    certs: list[Certification] = []
    for line in section.split("\n"):
        cleaned = strip_bullet(line)
        cleaned = _TRAILING_DATE_RE.sub("", cleaned).strip(" ,;:-–—")
        if not 3 <= len(cleaned) <= 100:
            continue
        if not _KEYWORD_RE.search(cleaned):
            continue
        if any(d.presence.search(cleaned) for d in CERTIFICATION_DETECTORS):
            continue
        if cleaned.lower() in seen:
            continue
        seen.add(cleaned.lower())
        certs.append(Certification(type=cleaned))
    return certs


def extract_certifications(text: str) -> list[Certification]:
    """Return certifications in discovery order: known types, then section entries."""
    known = _detect_known(text)
    return known + _detect_section_entries(text, known)
