"""Data models used throughout the analysis pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class SourceParseError(ValueError):
    """Raised when a source file is not valid script/markup/type syntax."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None) -> None:
        location = f" at line {line}, column {column}" if line is not None else ""
        super().__init__(f"{message}{location}")
        self.line = line
        self.column = column


class ImageDecodeError(ValueError):
    """Raised when an image file cannot be identified or decoded."""


@dataclass(frozen=True)
class MarkupAttribute:
    """A single attribute on a markup element."""

    name: str
    has_value: bool


@dataclass
class MarkupElement:
    """Parser-independent view of a tag-like construct in a source file."""

    tag_name: Optional[str]
    attributes: Tuple[MarkupAttribute, ...] = ()
    children: List["MarkupElement"] = field(default_factory=list)


@dataclass(frozen=True)
class AccessibilityFinding:
    """One accessibility violation found in a source file."""

    file_path: str
    message: str


@dataclass(frozen=True)
class ImageRecord:
    """Metadata extracted from a successfully decoded image file."""

    path: str
    byte_size: int
    width: Optional[int]
    height: Optional[int]
    format: str


@dataclass(frozen=True)
class FileFailure:
    """A file that could not be processed, and why."""

    path: str
    reason: str


@dataclass
class BatchResult(Generic[T]):
    """Successes and failures accumulated over one batch of files."""

    items: List[T] = field(default_factory=list)
    failures: List[FileFailure] = field(default_factory=list)


@dataclass
class AnalysisReport:
    """Findings and image records handed to the renderer."""

    findings: List[AccessibilityFinding]
    records: List[ImageRecord]
