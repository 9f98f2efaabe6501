"""Project file discovery."""

from __future__ import annotations

import logging
import os
from typing import List, Tuple

from .config import AnalyzerConfig

logger = logging.getLogger("react_image_analyzer")


def _log_walk_error(exc: OSError) -> None:
    logger.warning("Skipping unreadable directory %s: %s", exc.filename, exc)


def scan_files(config: AnalyzerConfig) -> Tuple[List[str], List[str]]:
    """Return sorted (source files, image files) found under the project root.

    Dependency directories and dot-directories are pruned before they are
    entered; dotfiles are skipped.
    """
    root = config.project_root
    source_files: List[str] = []
    image_files: List[str] = []
    try:
        for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
            dirnames[:] = [
                name
                for name in dirnames
                if not name.startswith(".") and name not in config.ignored_directories
            ]
            for name in filenames:
                if name.startswith("."):
                    continue
                suffix = os.path.splitext(name)[1]
                if suffix in config.source_extensions:
                    source_files.append(os.path.join(dirpath, name))
                elif suffix in config.image_extensions:
                    image_files.append(os.path.join(dirpath, name))
    except OSError as exc:
        logger.error("Error scanning files under %s: %s", root, exc)
        return [], []
    return sorted(source_files), sorted(image_files)
