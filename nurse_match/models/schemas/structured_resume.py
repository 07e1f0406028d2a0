"""Structured career record extracted from a single résumé."""

from pydantic import BaseModel


class Certification(BaseModel):
    """A license, exam result or training certificate."""
    type: str
    number: str | None = None  # license / registration number
    score: str | None = None  # exam score, e.g. IELTS band


class ExperienceEntry(BaseModel):
    """A single employment period, anchored on a parsed date range."""
    employer: str | None = None
    position: str | None = None
    department: str | None = None
    location: str | None = None
    start_date: str | None = None  # free-form, e.g. "June 2020"
    end_date: str | None = None  # free-form or "Present"
    description: str | None = None  # newline-joined bullet lines


class EducationEntry(BaseModel):
    """A single degree, anchored on a recognised degree pattern."""
    institution: str | None = None
    degree: str | None = None
    field_of_study: str | None = None
    year: int | None = None
    start_date: str | None = None  # ISO, Jan 1 of the start year
    end_date: str | None = None  # ISO, Dec 31 of the end year
    status: str | None = None  # e.g. "4th Year Student"
    institution_location: str | None = None


class StructuredResume(BaseModel):
    """Output of the extraction façade.

    Every field is independently optional: a résumé with no recognisable
    content yields a record with all fields empty, never an error.
    """
    summary: str | None = None
    graduation_year: int | None = None
    certifications: list[Certification] = []
    employers_mentioned: list[str] = []  # deduplicated case-insensitively
    skills: list[str] = []
    salary_text: str | None = None
    experience: list[ExperienceEntry] = []
    education: list[EducationEntry] = []
    years_of_experience: int | None = None
    address: str | None = None
