"""Helper utilities for the recruiting screen pipeline."""

import math
import re
from typing import List, Optional

_FIRST_INT_RE = re.compile(r"(\d+)")
_RESUME_EXTENSION_RE = re.compile(r"\.(pdf|doc|docx)$", re.IGNORECASE)


def non_blank_lines(text: str) -> List[str]:
    """Lines of text that contain something other than whitespace (untrimmed)."""
    if not text:
        return []
    return [line for line in text.split("\n") if line.strip()]


def first_integer(text: str, default: int = 0) -> int:
    """First run of digits in text as an int, or default when there is none."""
    match = _FIRST_INT_RE.search(text or "")
    if not match:
        return default
    return to_int(match.group(1), default)


def to_int(digits: str, default: Optional[int] = 0) -> Optional[int]:
    """int(digits), or default for digit runs too long for int() to parse."""
    try:
        return int(digits)
    except ValueError:
        return default


def name_from_filename(filename: str) -> str:
    """
    Display name guessed from an uploaded file name.
    "jane_doe-resume.pdf" -> "jane doe resume". Returns "Candidate" when nothing is left.
    """
    stem = _RESUME_EXTENSION_RE.sub("", filename or "")
    stem = re.sub(r"[_-]", " ", stem).strip()
    return stem or "Candidate"


def round_half_up(value: float) -> int:
    """Round halves up (2.5 -> 3, -2.5 -> -2), unlike the banker's rounding of round()."""
    return math.floor(value + 0.5)
