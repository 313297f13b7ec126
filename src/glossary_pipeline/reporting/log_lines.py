"""Stderr summary lines for glossary runs and the rules deciding when they appear."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Sequence

from glossary_pipeline.config import RunOptions
from glossary_pipeline.models import DocumentReport, ParagraphReport


@dataclass(frozen=True)
class LogLine:
    """One pending log record."""

    level: int
    message: str


def _should_log(unmatched_total: int, options: RunOptions) -> bool:
    return options.verbose or unmatched_total > 0


def _should_log_details(unmatched_total: int, options: RunOptions) -> bool:
    if unmatched_total <= 0:
        return False
    return options.verbose or not options.quiet


def generate_log_lines(report: DocumentReport, options: RunOptions) -> list[LogLine]:
    """Build the log lines for a glossary generation run.

    Args:
        report: Document-wide unmatched summary.
        options: Verbosity switches.

    Returns:
        Lines to emit, possibly empty.
    """

    if not _should_log(report.unmatched_count, options):
        return []

    lines = [
        LogLine(logging.INFO, f"Total tokens: {report.total}"),
        LogLine(logging.INFO, f"Unmatched count: {report.unmatched_count}"),
    ]
    if _should_log_details(report.unmatched_count, options):
        lines.append(LogLine(logging.WARNING, f"Unmatched tokens: {','.join(report.unmatched)}"))
    return lines


def fill_log_lines(reports: Sequence[ParagraphReport], options: RunOptions) -> list[LogLine]:
    """Build the log lines for a glossary fill run.

    Only paragraphs with unmatched glosses get a ``WARN`` line.

    Args:
        reports: Per-paragraph summaries in document order.
        options: Verbosity switches.

    Returns:
        Lines to emit, possibly empty.
    """

    total = sum(report.unmatched_count for report in reports)
    if not _should_log(total, options):
        return []

    lines = [
        LogLine(logging.INFO, f"Paragraphs updated: {len(reports)}"),
        LogLine(logging.INFO, f"Unmatched entries (sum): {total}"),
    ]
    if _should_log_details(total, options):
        for report in reports:
            if not report.unmatched_count:
                continue
            lines.append(
                LogLine(
                    logging.WARNING,
                    f"Paragraph {report.label} unmatched={report.unmatched_count}"
                    f"  (unmatched: {','.join(report.unmatched)})",
                )
            )
    return lines


def emit(lines: Sequence[LogLine], logger: logging.Logger) -> None:
    for line in lines:
        logger.log(line.level, line.message)
