"""Résumé extraction façade.

Pipeline:
1. Text normalisation
2. Section segmentation (logged for diagnostics only; extractors look up
   the sections they need themselves)
3. Field extraction: summary, graduation year, certifications, employers,
   skills, salary, address, experience, education
4. Years-of-experience aggregation over the experience entries
"""

import logging

from nurse_match.models.schemas.structured_resume import StructuredResume
from nurse_match.services.certification_extractor import extract_certifications
from nurse_match.services.education_extractor import extract_education
from nurse_match.services.employer_extractor import extract_employers
from nurse_match.services.experience_extractor import (
    calculate_years_of_experience,
    extract_experience,
)
from nurse_match.services.profile_extractor import (
    extract_address,
    extract_graduation_year,
    extract_salary,
    extract_summary,
)
from nurse_match.services.section_parser import parse_sections
from nurse_match.services.skill_extractor import extract_skills
from nurse_match.services.text_normalizer import normalize_text

logger = logging.getLogger(__name__)


def extract_resume_data(raw_text: str) -> StructuredResume:
    """Turn decoded résumé text into a StructuredResume.

    Never raises on content: fields that can't be found are None or empty.
    """
    text = normalize_text(raw_text)
    if not text:
        return StructuredResume()

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Sections found: %s", sorted(parse_sections(text)))

    experience = extract_experience(text)
    resume = StructuredResume(
        summary=extract_summary(text),
        graduation_year=extract_graduation_year(text),
        certifications=extract_certifications(text),
        employers_mentioned=extract_employers(text),
        skills=extract_skills(text),
        salary_text=extract_salary(text),
        address=extract_address(text),
        experience=experience,
        education=extract_education(text),
        years_of_experience=calculate_years_of_experience(experience),
    )

    logger.debug(
        "Extracted %d certifications, %d skills, %d experience, %d education entries",
        len(resume.certifications),
        len(resume.skills),
        len(resume.experience),
        len(resume.education),
    )
    return resume
