"""Accessibility rule checks over component source files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from .models import (
    AccessibilityFinding,
    BatchResult,
    FileFailure,
    MarkupElement,
    SourceParseError,
)
from .parser import has_attribute, scan_markup

logger = logging.getLogger("react_image_analyzer")

MISSING_ALT_MESSAGE = "Missing alt attribute on <img> tag"


def check_missing_alt(file_path: str, elements: Iterable[MarkupElement]) -> List[AccessibilityFinding]:
    """Emit one finding per element that has no ``alt`` attribute."""
    return [
        AccessibilityFinding(file_path=file_path, message=MISSING_ALT_MESSAGE)
        for element in elements
        if not has_attribute(element)
    ]


def analyze_source(file_path: str) -> List[AccessibilityFinding]:
    """Read, parse and check a single source file."""
    code = Path(file_path).read_text(encoding="utf-8", errors="replace")
    return check_missing_alt(file_path, scan_markup(code))


def analyze_sources(file_paths: Iterable[str]) -> BatchResult[AccessibilityFinding]:
    """Check each source file in order, containing failures to the file."""
    result: BatchResult[AccessibilityFinding] = BatchResult()
    for file_path in file_paths:
        try:
            findings = analyze_source(file_path)
        except (OSError, SourceParseError) as exc:
            logger.error("Error analyzing file %s: %s", file_path, exc)
            result.failures.append(FileFailure(file_path, str(exc)))
            continue
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Unexpected error analyzing file %s", file_path)
            result.failures.append(FileFailure(file_path, repr(exc)))
            continue
        result.items.extend(findings)
    return result
