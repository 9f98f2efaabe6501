"""Utility helpers for number parsing and display formatting."""

from __future__ import annotations

import re
from typing import Optional

LENGTH_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(px)?\s*$", re.IGNORECASE)


def parse_pixel_length(value: Optional[str]) -> Optional[int]:
    """Parse a unitless or ``px`` length; other units and percentages give None."""
    if value is None:
        return None
    match = LENGTH_PATTERN.match(value)
    if not match:
        return None
    return round(float(match.group(1)))


def format_megabytes(byte_size: int) -> str:
    return f"{byte_size / 1024 / 1024:.2f}"


def format_dimension(value: Optional[int]) -> str:
    return "?" if value is None else str(value)
