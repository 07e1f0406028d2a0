"""Pydantic contracts shared by the extractor, the scorer and their collaborators."""

from nurse_match.models.schemas.job_match import CandidateAttributes, JobRequirement, MatchResult
from nurse_match.models.schemas.profile_records import ProfileRecords
from nurse_match.models.schemas.structured_resume import (
    Certification,
    EducationEntry,
    ExperienceEntry,
    StructuredResume,
)

__all__ = [
    "CandidateAttributes",
    "Certification",
    "EducationEntry",
    "ExperienceEntry",
    "JobRequirement",
    "MatchResult",
    "ProfileRecords",
    "StructuredResume",
]
