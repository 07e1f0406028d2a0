"""Map a StructuredResume onto profile records and scorer input."""

from nurse_match.models.schemas.job_match import CandidateAttributes
from nurse_match.models.schemas.profile_records import (
    CertificationRecord,
    EducationRecord,
    ExperienceRecord,
    ProfileRecords,
    ProfileUpdate,
    SkillRecord,
)
from nurse_match.models.schemas.structured_resume import (
    EducationEntry,
    ExperienceEntry,
    StructuredResume,
)
from nurse_match.services.date_parser import is_present, to_iso_date


def _experience_record(entry: ExperienceEntry) -> ExperienceRecord | None:
    start_date = to_iso_date(entry.start_date) if entry.start_date else None
    if start_date is None:
        return None

    end_date = None
    if entry.end_date and not is_present(entry.end_date):
        end_date = to_iso_date(entry.end_date)

    return ExperienceRecord(
        employer=entry.employer or "Unknown",
        position=entry.position or "Nurse",
        department=entry.department,
        description=entry.description,
        location=entry.location,
        start_date=start_date,
        end_date=end_date,
    )


def _education_record(entry: EducationEntry) -> EducationRecord | None:
    if not entry.degree and not entry.institution:
        return None
    return EducationRecord(
        institution=entry.institution or "Unknown",
        degree=entry.degree or "Bachelor of Science in Nursing",
        field_of_study=entry.field_of_study,
        graduation_year=entry.year,
        institution_location=entry.institution_location,
        start_date=to_iso_date(entry.start_date) if entry.start_date else None,
        end_date=to_iso_date(entry.end_date) if entry.end_date else None,
        status=entry.status,
    )


def build_profile_records(resume: StructuredResume) -> ProfileRecords:
    """Build the full replacement set of records for one upload.

    Experience without a convertible start date is dropped, as is education
    with neither degree nor institution. Open-ended end dates become None.
    """
    profile = ProfileUpdate(
        bio=resume.summary or None,
        graduation_year=resume.graduation_year or None,
        years_of_experience=resume.years_of_experience or None,
        address=resume.address or None,
    )

    experience = [_experience_record(e) for e in resume.experience]
    education = [_education_record(e) for e in resume.education]

    return ProfileRecords(
        profile=profile,
        certifications=[
            CertificationRecord(cert_type=c.type, cert_number=c.number, score=c.score)
            for c in resume.certifications
        ],
        skills=[SkillRecord(skill_name=s) for s in resume.skills],
        experience=[r for r in experience if r is not None],
        education=[r for r in education if r is not None],
    )


def candidate_from_resume(resume: StructuredResume) -> CandidateAttributes:
    """Scorer input built straight from an extraction result."""
    return CandidateAttributes(
        certifications=[c.type for c in resume.certifications],
        skills=list(resume.skills),
        years_of_experience=resume.years_of_experience or 0,
    )
