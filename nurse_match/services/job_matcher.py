"""Fixed-weight job matching.

Score = experience (30) + certifications (40) + skills (30). Certifications
and skills are matched by bidirectional substring over lower-cased, trimmed
strings, so "PRC License" satisfies "PRC" and the reverse.
"""

import logging
import math

from nurse_match.models.schemas.job_match import CandidateAttributes, JobRequirement, MatchResult

logger = logging.getLogger(__name__)

WEIGHTS = {
    "experience": 30,
    "certifications": 40,
    "skills": 30,
}


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _clean(values: list[str]) -> list[str]:
    cleaned = (v.lower().strip() for v in values)
    return [v for v in cleaned if v]


def _match_terms(have: list[str], required: list[str]) -> list[str]:
    """Required terms (lower-cased) satisfied by any held term."""
    return [
        req for req in required
        if any(h in req or req in h for h in have)
    ]


def _term_score(weight: int, matched: list[str], required: list[str]) -> int:
    if not required:
        return weight
    return _round_half_up(weight * len(matched) / len(required))


def _experience_score(years: int, min_years: int) -> tuple[int, bool]:
    weight = WEIGHTS["experience"]
    if years >= min_years:
        return weight, True
    if years > 0 and min_years > 0:
        return _round_half_up(weight * min(years / min_years, 1)), False
    return 0, False


def match_job(candidate: CandidateAttributes, job: JobRequirement) -> MatchResult:
    """Score one candidate against one job (0-100)."""
    experience_points, experience_match = _experience_score(
        candidate.years_of_experience, job.min_experience_years
    )

    required_certs = _clean(job.required_certifications)
    matched_certs = _match_terms(_clean(candidate.certifications), required_certs)

    required_skills = _clean(job.required_skills)
    matched_skills = _match_terms(_clean(candidate.skills), required_skills)

    score = (
        experience_points
        + _term_score(WEIGHTS["certifications"], matched_certs, required_certs)
        + _term_score(WEIGHTS["skills"], matched_skills, required_skills)
    )

    return MatchResult(
        job_id=job.job_id,
        match_score=min(100, max(0, score)),
        matched_certifications=matched_certs,
        matched_skills=matched_skills,
        experience_match=experience_match,
    )


def match_jobs(candidate: CandidateAttributes, jobs: list[JobRequirement]) -> list[MatchResult]:
    """Score every job and return results best first.

    Jobs with equal scores keep their input order.
    """
    results = [match_job(candidate, job) for job in jobs]
    results.sort(key=lambda r: r.match_score, reverse=True)

    if results:
        logger.debug("Scored %d jobs, top score %d", len(results), results[0].match_score)
    return results
