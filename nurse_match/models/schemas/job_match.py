"""Job matching inputs and output."""

from pydantic import BaseModel, Field


class JobRequirement(BaseModel):
    """Requirements of a job posting, as stored by the job-posting collaborator."""
    job_id: str | None = None
    title: str | None = None
    required_certifications: list[str] = []
    required_skills: list[str] = []
    min_experience_years: int = 0


class CandidateAttributes(BaseModel):
    """Scorer view of a candidate profile."""
    certifications: list[str] = []
    skills: list[str] = []
    years_of_experience: int = 0


class MatchResult(BaseModel):
    """Score of one candidate against one job. Computed on demand, never stored."""
    job_id: str | None = None
    match_score: int = Field(default=0, ge=0, le=100)
    matched_certifications: list[str] = []  # lower-cased requirement strings
    matched_skills: list[str] = []
    experience_match: bool = False
