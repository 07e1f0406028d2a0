from nurse_match.services.job_matcher import match_jobs
from nurse_match.services.profile_records import build_profile_records, candidate_from_resume
from nurse_match.services.resume_extractor import extract_resume_data
from nurse_match.services.resume_ingest import ingest_resume

__all__ = [
    "build_profile_records",
    "candidate_from_resume",
    "extract_resume_data",
    "ingest_resume",
    "match_jobs",
]
