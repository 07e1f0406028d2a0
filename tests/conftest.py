"""Shared sample résumés."""

import pytest

SAMPLE_RESUME = """Maria Santos
Quezon City, Metro Manila, Philippines
maria.santos@email.com | +63 917 123 4567
Expected Salary: PHP 35,000

PROFESSIONAL SUMMARY
Compassionate registered nurse with hands-on experience in critical care and emergency response.

WORK EXPERIENCE
Staff Nurse
St. Luke's Medical Center
June 2020 - Present
• Performed patient assessment for 8-10 patients per shift
• Administered IV therapy and medication administration

Ward Nurse | Cebu City, Philippines
Chong Hua Hospital, Emergency Room
Jan 2018 - Jan 2020
• Provided wound care and patient education

EDUCATION
Bachelor of Science in Nursing
University of Santo Tomas, Manila
2014 - 2018
Graduated Cum Laude, 2018

LICENSES AND CERTIFICATIONS
PRC License No. 0123456
NCLEX-RN passed
BLS Provider, American Heart Association
Certified IV Therapy Nurse - 2019

SKILLS
Vital Signs, Triage, Infection Control
"""

MULTI_DEGREE_EDUCATION = """EDUCATION
Graduate Studies:
Master of Arts in Nursing Administration
Southwestern University
2021 - Present
Tertiary:
Bachelor of Science in Nursing
Cebu Doctors' University
Mandaue City, Cebu
2016 - 2020

SKILLS
Triage
"""


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def multi_degree_education() -> str:
    return MULTI_DEGREE_EDUCATION
