from nurse_match.models.schemas.structured_resume import (
    Certification,
    EducationEntry,
    ExperienceEntry,
    StructuredResume,
)
from nurse_match.services.profile_records import build_profile_records, candidate_from_resume


def _resume(**overrides) -> StructuredResume:
    fields = dict(
        summary="Compassionate registered nurse with ICU experience.",
        graduation_year=2018,
        years_of_experience=3,
        address="Quezon City, Metro Manila, Philippines",
        certifications=[
            Certification(type="PRC License", number="0123456"),
            Certification(type="IELTS", score="7.5"),
        ],
        skills=["Triage", "Wound Care"],
        experience=[
            ExperienceEntry(start_date="June 2020", end_date="Present"),
            ExperienceEntry(start_date="sometime", end_date="later"),
            ExperienceEntry(
                employer="Chong Hua Hospital",
                position="Ward Nurse",
                department="Emergency Room",
                location="Cebu City, Philippines",
                start_date="Jan 2018",
                end_date="Jan 2020",
            ),
        ],
        education=[
            EducationEntry(
                degree="Bachelor of Science in Nursing",
                institution_location="Manila",
                start_date="2014-01-01",
                end_date="2018-12-31",
                year=2018,
            ),
            EducationEntry(year=2010),
        ],
    )
    fields.update(overrides)
    return StructuredResume(**fields)


def test_profile_update():
    profile = build_profile_records(_resume()).profile
    assert profile.bio == "Compassionate registered nurse with ICU experience."
    assert profile.graduation_year == 2018
    assert profile.years_of_experience == 3
    assert profile.address == "Quezon City, Metro Manila, Philippines"


def test_zero_years_not_written():
    assert build_profile_records(_resume(years_of_experience=0)).profile.years_of_experience is None


def test_certification_and_skill_records():
    records = build_profile_records(_resume())
    assert [(c.cert_type, c.cert_number, c.score) for c in records.certifications] == [
        ("PRC License", "0123456", None),
        ("IELTS", None, "7.5"),
    ]
    assert [(s.skill_name, s.proficiency) for s in records.skills] == [
        ("Triage", "basic"),
        ("Wound Care", "basic"),
    ]


def test_experience_records():
    ongoing, closed = build_profile_records(_resume()).experience

    assert ongoing.employer == "Unknown"
    assert ongoing.position == "Nurse"
    assert ongoing.start_date == "2020-06-01"
    assert ongoing.end_date is None

    assert closed.employer == "Chong Hua Hospital"
    assert closed.department == "Emergency Room"
    assert closed.location == "Cebu City, Philippines"
    assert closed.start_date == "2018-01-01"
    assert closed.end_date == "2020-01-01"


def test_education_records():
    [record] = build_profile_records(_resume()).education
    assert record.institution == "Unknown"
    assert record.degree == "Bachelor of Science in Nursing"
    assert record.graduation_year == 2018
    assert record.start_date == "2014-01-01"
    assert record.end_date == "2018-12-31"


def test_rebuild_depends_only_on_new_resume():
    build_profile_records(_resume())
    records = build_profile_records(StructuredResume(skills=["Triage"]))
    assert records.certifications == []
    assert records.experience == []
    assert records.education == []
    assert [s.skill_name for s in records.skills] == ["Triage"]
    assert records.profile.bio is None


def test_candidate_from_resume():
    candidate = candidate_from_resume(_resume())
    assert candidate.certifications == ["PRC License", "IELTS"]
    assert candidate.skills == ["Triage", "Wound Care"]
    assert candidate.years_of_experience == 3


def test_candidate_without_years():
    assert candidate_from_resume(StructuredResume()).years_of_experience == 0
