"""Tests for small text helpers."""

import pytest

from recruit_screen_ai.utils.helpers import (
    first_integer,
    name_from_filename,
    non_blank_lines,
    round_half_up,
    to_int,
)


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("jane_doe-resume.pdf", "jane doe resume"),
        ("John Smith.DOCX", "John Smith"),
        ("notes.doc", "notes"),
        ("profile.txt", "profile.txt"),
        (".pdf", "Candidate"),
        ("", "Candidate"),
    ],
)
def test_name_from_filename(filename, expected):
    assert name_from_filename(filename) == expected


def test_first_integer_reads_leading_number():
    assert first_integer("5+ years") == 5
    assert first_integer("7 years (including residency and fellowship)") == 7
    assert first_integer("Experienced professional") == 0
    assert first_integer("", default=3) == 3


def test_to_int_falls_back_for_unparseable_digits():
    assert to_int("42") == 42
    assert to_int("abc", default=-1) == -1


@pytest.mark.parametrize("value, expected", [(2.5, 3), (2.4, 2), (7.5, 8), (0.0, 0), (-2.5, -2), (-20, -20)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_non_blank_lines_skips_whitespace_lines():
    assert non_blank_lines("a\n\n   \n b \n") == ["a", " b "]
    assert non_blank_lines("") == []
