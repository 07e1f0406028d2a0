import pytest

from nurse_match.services.text_normalizer import normalize_text


def test_line_endings_unified():
    assert normalize_text("a\r\nb\rc") == "a\nb\nc"


def test_tabs_and_space_runs_collapse():
    assert normalize_text("a\tb    c") == "a b c"


def test_blank_line_runs_collapse_to_one_blank_line():
    assert normalize_text("a\n\n\n\n\nb") == "a\n\nb"


def test_trims_outer_whitespace():
    assert normalize_text("  \n hello \n  ") == "hello"


def test_empty_string():
    assert normalize_text("") == ""


@pytest.mark.parametrize("raw", [
    "",
    "   ",
    "Staff Nurse\r\n\r\n\r\n\tICU",
    "a \n \n \n b",
    "\t\tx\t\t",
    "line one\r\rline two\n\n\n",
])
def test_idempotent(raw):
    once = normalize_text(raw)
    assert normalize_text(once) == once
