"""High-level orchestration for scanning a project and reporting on it."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional

from rich.console import Console

from .config import DEFAULT_PROJECT_PATH, AnalyzerConfig
from .discovery import scan_files
from .images import analyze_images
from .models import AnalysisReport
from .report import build_report, render_report
from .rules import analyze_sources

logger = logging.getLogger("react_image_analyzer")


async def run_analysis(
    project_path: str = DEFAULT_PROJECT_PATH,
    console: Optional[Console] = None,
) -> Optional[AnalysisReport]:
    """Scan ``project_path``, analyse what was found and print the report.

    Returns None when the project holds no component sources; image analysis
    is skipped entirely in that case.
    """
    console = console or Console()
    config = AnalyzerConfig(project_root=Path(project_path))
    overall_start = time.perf_counter()

    source_files, image_files = scan_files(config)
    console.print(
        f"Found {len(source_files)} React files and {len(image_files)} images",
        style="blue",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
    if not source_files:
        console.print("⚠️ No React files found", style="yellow", markup=False, highlight=False, soft_wrap=True)
        return None

    accessibility = analyze_sources(source_files)
    images = await analyze_images(image_files)

    logger.info(
        "Finished in %.2fs (%d/%d sources parsed, %d/%d images decoded)",
        time.perf_counter() - overall_start,
        len(source_files) - len(accessibility.failures),
        len(source_files),
        len(images.items),
        len(image_files),
    )
    for failure in accessibility.failures + images.failures:
        logger.debug("Skipped %s: %s", failure.path, failure.reason)

    report = build_report(accessibility.items, images.items)
    render_report(report, console)
    return report
