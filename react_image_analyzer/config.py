"""Configuration objects and constants for the analyzer."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet

PROGRAM_NAME = "react-image-analyzer"
VERSION = "1.0.1"
DEFAULT_PROJECT_PATH = "./"

SOURCE_EXTENSIONS = frozenset({".js", ".jsx", ".ts", ".tsx"})
IMAGE_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".webp", ".svg", ".avif"})
IGNORED_DIRECTORIES = frozenset({"node_modules"})

TARGET_TAG = "img"
REQUIRED_ATTRIBUTE = "alt"

# Fixed; not exposed through AnalyzerConfig or the CLI.
OVERSIZED_THRESHOLD_BYTES = 500 * 1024


@dataclass
class AnalyzerConfig:
    """Settings that control which files a run picks up."""

    project_root: Path
    source_extensions: FrozenSet[str] = SOURCE_EXTENSIONS
    image_extensions: FrozenSet[str] = IMAGE_EXTENSIONS
    ignored_directories: FrozenSet[str] = IGNORED_DIRECTORIES
