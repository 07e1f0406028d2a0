from datetime import date

from nurse_match.services.profile_extractor import (
    extract_address,
    extract_graduation_year,
    extract_salary,
    extract_summary,
)


class TestSummary:
    def test_summary_from_section(self, sample_resume):
        assert extract_summary(sample_resume) == (
            "Compassionate registered nurse with hands-on experience "
            "in critical care and emergency response."
        )

    def test_multiline_summary_joined(self):
        text = "Summary\nDedicated ICU nurse\nwith five years of bedside care.\n\nSkills\nTriage"
        assert extract_summary(text) == "Dedicated ICU nurse with five years of bedside care."

    def test_short_summary_dropped(self):
        assert extract_summary("SUMMARY\nStaff nurse.\nSKILLS\nTriage") is None

    def test_no_summary_section(self):
        assert extract_summary("Staff Nurse\nChong Hua Hospital") is None


class TestGraduationYear:
    def test_year_on_education_line(self):
        assert extract_graduation_year("Bachelor of Science in Nursing, 2019") == 2019

    def test_year_near_graduated_line(self):
        text = "Graduated with honors\nCebu Normal School\n2017"
        assert extract_graduation_year(text) == 2017

    def test_year_before_1980_rejected(self):
        assert extract_graduation_year("Graduated 1975") is None

    def test_future_year_rejected(self):
        future = date.today().year + 1
        assert extract_graduation_year(f"Expected to graduate {future}") is None

    def test_sample(self, sample_resume):
        assert extract_graduation_year(sample_resume) == 2018

    def test_none_without_education_keywords(self):
        assert extract_graduation_year("Staff Nurse 2019 - 2021") is None


class TestSalary:
    def test_labelled_salary(self):
        assert extract_salary("Expected salary: PHP 35,000 monthly") == "salary: PHP 35,000"

    def test_peso_range(self):
        assert extract_salary("Rate ₱25,000 - ₱30,000 per month") == "₱25,000 - ₱30,000"

    def test_dollar_amount(self):
        assert extract_salary("Asking $4,000 per month") == "$4,000"

    def test_currency_without_amount(self):
        assert extract_salary("SKILLS\nPHP, JavaScript, MySQL") is None
        assert extract_salary("Salary: PHP, negotiable") is None

    def test_absent(self):
        assert extract_salary("No salary expectations listed") is None


class TestAddress:
    def test_street_city_province(self):
        text = (
            "Juan Dela Cruz\n"
            "123 Rizal St., Barangay Uno, Talisay City, Negros Occidental\n"
            "juan@mail.com"
        )
        assert extract_address(text) == "123 Rizal St., Barangay Uno, Talisay City, Negros Occidental"

    def test_sample(self, sample_resume):
        assert extract_address(sample_resume) == "Quezon City, Metro Manila, Philippines"

    def test_contact_lines_skipped(self):
        text = "juan@mail.com\n+63 917 123 4567\nhttps://linkedin.com/in/juan"
        assert extract_address(text) is None
