"""Utility exports."""

from .helpers import first_integer, name_from_filename, non_blank_lines, round_half_up, to_int
from .logger import get_logger

__all__ = [
    "get_logger",
    "first_integer",
    "name_from_filename",
    "non_blank_lines",
    "round_half_up",
    "to_int",
]
