"""Tests for rule-based résumé field extraction."""

import pytest

from recruit_screen_ai.cv_pipeline.profile_extractor import (
    DEFAULT_SKILLS,
    extract_location,
    extract_name,
    extract_phone,
    extract_profile,
    extract_skills,
    extract_title,
)

RESUME_TEXT = """Sarah Martinez
Senior Accountant
Denver, CO
sarah.martinez@example.com | (303) 555-0142

7 years of experience in public accounting
CPA licensed
Month-End Close, NetSuite, Financial Reporting, GAAP reconciliation
"""


def test_empty_text_yields_documented_defaults():
    profile = extract_profile("")
    assert profile.name == "Candidate"
    assert profile.title == "Professional"
    assert profile.experience_summary == "Experienced professional"
    assert profile.experience_years is None
    assert profile.skills == ["Professional Skills", "Industry Experience"]
    assert profile.email is None
    assert profile.phone is None
    assert profile.location is None
    assert profile.raw_text == ""


def test_full_resume_fields():
    profile = extract_profile(RESUME_TEXT)
    assert profile.name == "Sarah Martinez"
    assert profile.title == "Senior Accountant"
    assert profile.experience_summary == "7 years of experience"
    assert profile.experience_years == 7
    assert profile.skills == ["CPA", "NetSuite", "Month-End Close", "Financial Reporting"]
    assert profile.email == "sarah.martinez@example.com"
    assert profile.phone == "(303) 555-0142"
    assert profile.location == "Denver, CO"
    assert profile.raw_text == RESUME_TEXT


@pytest.mark.parametrize(
    "text, expected",
    [
        ("\n\n  Jane Doe  \nEngineer", "Jane Doe"),
        ("jane doe\nEngineer", "Candidate"),
        ("Curriculum Vitae of Jane Q Doe", "Candidate"),
        ("Mary Ann Van Dyke", "Mary Ann Van Dyke"),
        ("   \n\t\n", "Candidate"),
    ],
)
def test_extract_name(text, expected):
    assert extract_name(text) == expected


def test_title_only_scans_first_five_non_blank_lines():
    text = "Jane Doe\n\nline two\nline three\n\nline four\nline five\nData Analyst"
    assert extract_title(text) == "Professional"
    text = "Jane Doe\n\nline two\n  Lead Data Analyst  \nline four"
    assert extract_title(text) == "Lead Data Analyst"


@pytest.mark.parametrize(
    "text, summary, years",
    [
        ("Over 12 yrs of exp in retail", "12 years of experience", 12),
        ("Experience: 4 years", "4 years of experience", 4),
        ("10+ years leading teams", "10 years of experience", 10),
        ("Started in 2015, still going", "Experienced professional", None),
    ],
)
def test_experience_patterns(text, summary, years):
    profile = extract_profile(text)
    assert profile.experience_summary == summary
    assert profile.experience_years == years


def test_experience_patterns_apply_in_order():
    # The "N years of experience" form wins over an earlier bare "N years".
    profile = extract_profile("Worked 2 years abroad.\nTotal: 9 years of experience")
    assert profile.experience_years == 9


def test_skills_follow_vocabulary_order_and_cap_at_six():
    text = "Git Kubernetes Docker AWS SQL Python"
    assert extract_skills(text) == ["Python", "SQL", "AWS", "Docker", "Kubernetes", "Git"]
    text = "Python Java SQL AWS Docker Kubernetes Git"
    assert extract_skills(text) == ["Python", "Java", "SQL", "AWS", "Docker", "Kubernetes"]


def test_skills_use_plain_substring_matching():
    assert extract_skills("JavaScript") == ["JavaScript", "Java"]


def test_skills_fall_back_to_generic_placeholders():
    assert extract_skills("Barista with a passion for coffee") == list(DEFAULT_SKILLS)


def test_phone_patterns_in_order():
    assert extract_phone("call 303.555.0142 today") == "303.555.0142"
    assert extract_phone("Phone: +44 20 7946 0958") == "+44 20 7946 0958"
    assert extract_phone("no digits here") is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Jane Doe\nAustin TX", "Austin TX"),
        ("Jane Doe\nSan Francisco, California", "San Francisco, California"),
        ("jane doe\nremote only", None),
    ],
)
def test_extract_location(text, expected):
    assert extract_location(text) == expected


def test_location_only_scans_first_ten_lines():
    text = "\n".join(["line"] * 10 + ["Denver, CO"])
    assert extract_location(text) is None
    text = "\n".join(["line"] * 9 + ["Denver, CO"])
    assert extract_location(text) == "Denver, CO"


@pytest.mark.parametrize(
    "text",
    [
        "\n\n\n",
        "@@@ ### $$$",
        "a" * 10000,
        "9" * 5000 + " years of experience",
        "Experience: years\n+ \n( )",
    ],
)
def test_extraction_never_fails_and_keeps_invariants(text):
    profile = extract_profile(text)
    assert profile.name
    assert profile.title
    assert profile.experience_summary
    assert len(profile.skills) >= 1


def test_extraction_is_idempotent():
    assert extract_profile(RESUME_TEXT) == extract_profile(RESUME_TEXT)


def test_unparseable_years_are_unknown_in_both_fields():
    profile = extract_profile("9" * 5000 + " years of experience")
    assert profile.experience_years is None
    assert profile.experience_summary == "Experienced professional"
