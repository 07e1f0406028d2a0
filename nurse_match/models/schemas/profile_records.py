"""Storage-ready records derived from a StructuredResume.

An upload replaces all previously extracted rows for the candidate, so these
records are always built from scratch.
"""

from pydantic import BaseModel


class ProfileUpdate(BaseModel):
    bio: str | None = None
    graduation_year: int | None = None
    years_of_experience: int | None = None
    address: str | None = None


class CertificationRecord(BaseModel):
    cert_type: str
    cert_number: str | None = None
    score: str | None = None


class SkillRecord(BaseModel):
    skill_name: str
    proficiency: str = "basic"


class ExperienceRecord(BaseModel):
    employer: str = "Unknown"
    position: str = "Nurse"
    department: str | None = None
    description: str | None = None
    location: str | None = None
    start_date: str  # ISO date
    end_date: str | None = None  # None while ongoing


class EducationRecord(BaseModel):
    institution: str = "Unknown"
    degree: str = "Bachelor of Science in Nursing"
    field_of_study: str | None = None
    graduation_year: int | None = None
    institution_location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    status: str | None = None


class ProfileRecords(BaseModel):
    """Everything the storage collaborator writes after one upload."""
    profile: ProfileUpdate = ProfileUpdate()
    certifications: list[CertificationRecord] = []
    skills: list[SkillRecord] = []
    experience: list[ExperienceRecord] = []
    education: list[EducationRecord] = []
