import itertools

import pytest
from pydantic import ValidationError

from nurse_match import match_jobs
from nurse_match.models.schemas.job_match import CandidateAttributes, JobRequirement
from nurse_match.services.job_matcher import WEIGHTS, match_job


def test_weights_sum_to_100():
    assert sum(WEIGHTS.values()) == 100


class TestMatchJob:
    def setup_method(self):
        self.candidate = CandidateAttributes(
            certifications=["NCLEX", "BLS", "PRC License"],
            skills=["IV Therapy", "Wound Care", "Triage"],
            years_of_experience=5,
        )

    def test_full_match_scores_100(self):
        job = JobRequirement(
            job_id="icu-1",
            required_certifications=["NCLEX", "BLS"],
            required_skills=["IV Therapy", "Triage"],
            min_experience_years=3,
        )
        result = match_job(self.candidate, job)
        assert result.match_score == 100
        assert result.job_id == "icu-1"
        assert result.experience_match is True
        assert result.matched_certifications == ["nclex", "bls"]
        assert result.matched_skills == ["iv therapy", "triage"]

    def test_certification_partial_credit(self):
        candidate = CandidateAttributes(certifications=["NCLEX"])
        job = JobRequirement(required_certifications=["NCLEX", "BLS"])
        result = match_job(candidate, job)
        # 30 experience (no minimum) + 20 certifications + 30 skills
        assert result.match_score == 80
        assert result.matched_certifications == ["nclex"]

    def test_experience_partial_credit(self):
        candidate = CandidateAttributes(years_of_experience=2)
        result = match_job(candidate, JobRequirement(min_experience_years=5))
        # 12 experience + 40 + 30
        assert result.match_score == 82
        assert result.experience_match is False

    def test_partial_credit_rounds_half_up(self):
        candidate = CandidateAttributes(years_of_experience=3)
        result = match_job(candidate, JobRequirement(min_experience_years=4))
        assert result.match_score == 23 + 70

    def test_no_experience_gets_no_experience_points(self):
        result = match_job(CandidateAttributes(), JobRequirement(min_experience_years=2))
        assert result.match_score == 70
        assert result.experience_match is False

    def test_empty_requirements_shortcut(self):
        result = match_job(CandidateAttributes(), JobRequirement())
        assert result.match_score >= 60
        assert result.match_score == 100

    def test_bidirectional_substring(self):
        candidate = CandidateAttributes(certifications=["PRC License"], skills=["Care"])
        job = JobRequirement(required_certifications=["prc"], required_skills=["  Wound Care "])
        result = match_job(candidate, job)
        assert result.matched_certifications == ["prc"]
        assert result.matched_skills == ["wound care"]

    def test_no_match(self):
        candidate = CandidateAttributes(certifications=["IELTS"], skills=["Phlebotomy"])
        job = JobRequirement(required_certifications=["NCLEX"], required_skills=["Triage"])
        result = match_job(candidate, job)
        assert result.match_score == 30
        assert result.matched_certifications == []
        assert result.matched_skills == []

    def test_blank_strings_ignored(self):
        candidate = CandidateAttributes(certifications=[""], skills=["   "])
        job = JobRequirement(required_certifications=["BLS"], required_skills=["Triage", " "])
        result = match_job(candidate, job)
        assert result.match_score == 30
        assert result.matched_certifications == []

    def test_blank_only_requirements_count_as_empty(self):
        job = JobRequirement(required_certifications=[" "], required_skills=[""])
        assert match_job(CandidateAttributes(), job).match_score == 100

    def test_invalid_requirement(self):
        with pytest.raises(ValidationError):
            JobRequirement(min_experience_years="several")


def test_score_bounds():
    term_sets = [[], ["NCLEX"], ["NCLEX", "BLS", "ACLS"], ["x"]]
    for certs, skills, required_certs, required_skills, years, min_years in itertools.product(
        term_sets, term_sets, term_sets, term_sets, [0, 1, 3], [0, 2, 7],
    ):
        result = match_job(
            CandidateAttributes(certifications=certs, skills=skills, years_of_experience=years),
            JobRequirement(
                required_certifications=required_certs,
                required_skills=required_skills,
                min_experience_years=min_years,
            ),
        )
        assert 0 <= result.match_score <= 100


def test_match_jobs_sorted_and_stable():
    candidate = CandidateAttributes(certifications=["NCLEX"], years_of_experience=1)
    jobs = [
        JobRequirement(job_id="a", required_certifications=["BLS"]),
        JobRequirement(job_id="b", required_certifications=["NCLEX"]),
        JobRequirement(job_id="c", required_certifications=["ACLS"]),
        JobRequirement(job_id="d", required_certifications=["NCLEX"], min_experience_years=4),
    ]
    results = match_jobs(candidate, jobs)
    assert [r.job_id for r in results] == ["b", "d", "a", "c"]
    assert [r.match_score for r in results] == [100, 78, 60, 60]


def test_match_jobs_empty():
    assert match_jobs(CandidateAttributes(), []) == []
