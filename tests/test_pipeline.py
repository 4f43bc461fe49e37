"""End-to-end tests: document bytes -> text -> profile -> requirements -> score."""

from io import BytesIO

import pytest
from docx import Document

from recruit_screen_ai import extract_profile, generate_qualifications, run_cv_pipeline, score
from recruit_screen_ai.cv_pipeline import cv_extractor
from recruit_screen_ai.cv_pipeline.text_extractor import DocumentDecodeError, extract_text_from_file

ACCOUNTANT_RESUME = """Sarah Martinez
Senior Accountant
Denver, CO
sarah.martinez@example.com | (303) 555-0142

7 years of experience in public accounting
CPA licensed
Month-End Close, NetSuite, Financial Reporting, GAAP reconciliation
"""

MINIMAL_ACCOUNTANT_RESUME = "Senior Accountant\nCPA\nNetSuite\nMonth-End Close\n7 years of experience"

BARISTA_RESUME = """Jordan Lee
Barista
Brewed coffee and served customers at a busy cafe.
"""


def _docx_bytes(paragraphs):
    doc = Document()
    for text in paragraphs:
        doc.add_paragraph(text)
    buf = BytesIO()
    doc.save(buf)
    return buf.getvalue()


def test_qualified_accountant_end_to_end():
    profile = extract_profile(ACCOUNTANT_RESUME)
    assert {"CPA", "NetSuite", "Month-End Close"} <= set(profile.skills)
    assert profile.experience_summary == "7 years of experience"

    result = score(profile, generate_qualifications("Senior Accountant"))
    assert result.score >= 75
    assert result.recommendation in ("Move to interview stage", "Move to interview stage immediately")
    assert result.is_qualified is True
    assert result.talent_pool.startswith("Senior Accountant - ")


def test_minimal_accountant_lacks_required_accounting_skills():
    # CPA, NetSuite and Month-End Close alone miss GAAP, Financial Statements and Reconciliation
    profile = extract_profile(MINIMAL_ACCOUNTANT_RESUME)
    assert {"CPA", "NetSuite", "Month-End Close"} <= set(profile.skills)
    assert profile.experience_summary == "7 years of experience"

    result = score(profile, generate_qualifications("Senior Accountant"))
    points = {entry.category: entry.points for entry in result.score_breakdown}
    assert points == {
        "Required Skills": 0,
        "Preferred Skills": 6,
        "Experience": 15,
        "Certifications": 20,
        "Title Relevance": 10,
        "Contact Info": 0,
    }
    assert result.score == 51
    assert result.recommendation == "Not qualified - missing key requirements"
    assert result.is_qualified is False


def test_unparseable_years_score_as_unclear_experience():
    profile = extract_profile("9" * 5000 + " years of experience")
    result = score(profile, generate_qualifications("Senior Accountant"))
    experience = next(e for e in result.score_breakdown if e.category == "Experience")
    assert experience.points == 0
    assert "Experience level unclear" in result.weaknesses


def test_unrelated_resume_end_to_end():
    profile = extract_profile(BARISTA_RESUME)
    assert profile.experience_summary == "Experienced professional"

    result = score(profile, generate_qualifications("Senior Accountant"))
    points = {entry.category: entry.points for entry in result.score_breakdown}
    assert points["Required Skills"] == 0
    assert points["Certifications"] == -20
    assert result.score < 60
    assert result.is_qualified is False
    assert result.talent_pool == "Do Not Contact"


def test_plain_text_upload():
    profile = run_cv_pipeline(ACCOUNTANT_RESUME.encode("utf-8"), "sarah.txt", "text/plain")
    assert profile.name == "Sarah Martinez"
    assert profile.location == "Denver, CO"


def test_docx_upload():
    data = _docx_bytes(["Jane Doe", "Software Engineer", "5 years of experience with Python and React"])
    text = extract_text_from_file(data, "jane.docx")
    assert text.splitlines() == ["Jane Doe", "Software Engineer", "5 years of experience with Python and React"]

    profile = run_cv_pipeline(data, "jane.docx")
    assert profile.title == "Software Engineer"
    assert profile.skills == ["React", "Python"]
    assert profile.experience_years == 5


def test_docx_upload_reads_location_like_any_other_text():
    data = _docx_bytes(["Jane Doe", "Data Analyst", "Austin, TX"])
    profile = run_cv_pipeline(data, "jane.docx")
    assert profile.location == "Austin, TX"


@pytest.mark.parametrize("filename", ["broken.docx", "legacy.doc"])
def test_unreadable_word_file_is_read_as_text(filename):
    text = extract_text_from_file(b"Jane Doe\nData Analyst", filename)
    assert text == "Jane Doe\nData Analyst"


def test_unknown_type_is_read_as_text():
    assert extract_text_from_file(b"Jane Doe", "resume.rtf", "application/rtf") == "Jane Doe"


def test_mime_type_wins_over_extension():
    data = _docx_bytes(["Jane Doe"])
    mime = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    assert extract_text_from_file(data, "upload", mime) == "Jane Doe"


def test_invalid_pdf_raises_decode_error():
    with pytest.raises(DocumentDecodeError):
        extract_text_from_file(b"this is not a pdf", "resume.pdf")


def test_decode_failure_falls_back_to_file_name(monkeypatch):
    def fail(*args, **kwargs):
        raise DocumentDecodeError("boom")

    monkeypatch.setattr(cv_extractor, "extract_text_from_file", fail)
    profile = run_cv_pipeline(b"%PDF-1.4 ...", "jane_doe-resume.pdf", "application/pdf")
    assert profile.name == "jane doe resume"
    assert profile.title == "Professional"
    assert profile.experience_summary == "Experienced professional"
    assert profile.skills == ["Professional Skills", "Industry Experience"]
    assert profile.raw_text == ""

    result = score(profile, generate_qualifications("Senior Accountant"))
    assert result.score == 0
    assert result.talent_pool == "Do Not Contact"


def test_invalid_pdf_upload_never_raises():
    profile = run_cv_pipeline(b"this is not a pdf", "Jane_Doe.pdf")
    assert profile.name == "Jane Doe"
    assert profile.raw_text == ""
