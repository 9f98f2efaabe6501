"""Report aggregation and console rendering."""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Sequence

from rich.console import Console

from .config import OVERSIZED_THRESHOLD_BYTES
from .models import AccessibilityFinding, AnalysisReport, ImageRecord
from .utils import format_dimension, format_megabytes

ACCESSIBILITY_HEADER = "\n=== Accessibility Issues ===="
IMAGE_HEADER = "\n=== Image Analysis ===="


class ReportLine(NamedTuple):
    style: str
    text: str


def is_oversized(byte_size: int) -> bool:
    return byte_size > OVERSIZED_THRESHOLD_BYTES


def build_report(
    findings: Sequence[AccessibilityFinding],
    records: Sequence[ImageRecord],
) -> AnalysisReport:
    """Combine both analyzers' output without filtering or reordering."""
    return AnalysisReport(findings=list(findings), records=list(records))


def format_record(record: ImageRecord) -> str:
    return (
        f"{record.path}: {format_dimension(record.width)}x{format_dimension(record.height)} "
        f"({format_megabytes(record.byte_size)}MB, {record.format})"
    )


def report_lines(report: AnalysisReport) -> List[ReportLine]:
    """Lay the report out as styled console lines."""
    lines = [ReportLine("bold", ACCESSIBILITY_HEADER)]
    if not report.findings:
        lines.append(ReportLine("green", "✅ No accessibility issues found"))
    for finding in report.findings:
        lines.append(ReportLine("red", f"❌ {finding.file_path}: {finding.message}"))

    lines.append(ReportLine("bold", IMAGE_HEADER))
    if not report.records:
        lines.append(ReportLine("yellow", "⚠️ No images found"))
    for record in report.records:
        if is_oversized(record.byte_size):
            lines.append(ReportLine("yellow", f"⚠️ {format_record(record)}"))
        else:
            lines.append(ReportLine("green", f"✅ {format_record(record)}"))
    return lines


def render_report(report: AnalysisReport, console: Optional[Console] = None) -> None:
    console = console or Console()
    for line in report_lines(report):
        console.print(line.text, style=line.style, markup=False, highlight=False, soft_wrap=True)
