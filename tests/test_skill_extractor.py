from nurse_match.services.skill_extractor import (
    extract_skills,
    extract_skills_lexicon,
    extract_skills_section,
)


def test_lexicon_match_uses_canonical_casing():
    assert extract_skills_lexicon("Skilled in wound care and iv therapy") == ["IV Therapy", "Wound Care"]


def test_section_items_split_and_category_prefix_removed():
    text = "SKILLS\n• Clinical: Phlebotomy, Suturing; Triage\nMicrosoft Office"
    assert extract_skills_section(text) == ["Phlebotomy", "Suturing", "Triage", "Microsoft Office"]


def test_section_long_items_dropped():
    text = "Skills\nAble to work long hours under pressure in busy wards, Suturing"
    assert extract_skills_section(text) == ["Suturing"]


def test_section_ends_at_all_caps_line():
    text = "Skills\nMS Word, Excel\nCOMPUTER LITERACY\nTyping"
    assert extract_skills_section(text) == ["MS Word", "Excel"]


def test_no_section():
    assert extract_skills_section("Staff Nurse at Chong Hua Hospital") == []


def test_merge_deduplicates_case_insensitively():
    text = "SKILLS\n• Clinical: Phlebotomy, Suturing; Triage\nMicrosoft Office"
    assert extract_skills(text) == ["Triage", "Phlebotomy", "Suturing", "Microsoft Office"]


def test_sample_resume(sample_resume):
    skills = extract_skills(sample_resume)
    assert "Patient Assessment" in skills
    assert "Wound Care" in skills
    assert "Critical Care" in skills
    assert skills.count("Vital Signs") == 1
    assert len({s.lower() for s in skills}) == len(skills)


def test_empty():
    assert extract_skills("") == []
