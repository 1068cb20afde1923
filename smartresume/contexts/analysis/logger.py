"""
Analysis context logger.

Provides logging interface for analysis context with automatic [analysis] prefix.
All analysis modules should import from this module, not from utils.logger directly.
"""

import sys
from collections import Counter
from pathlib import Path
from typing import Optional, TextIO

from loguru import logger

from smartresume.utils.logger import start_session

CONTEXT_PREFIX = "[analysis]"


def setup_analysis_logger(
    source: Optional[Path] = None,
    delay_seconds: float = 0.0,
    sort_priority: bool = False,
    console: TextIO = sys.stdout,
) -> Path:
    """
    Start an analysis session log.

    Args:
        source: Resume file being analyzed
        delay_seconds: Simulated processing delay the run uses
        sort_priority: Whether suggestions are shown highest priority first
        console: Console stream for INFO output

    Returns:
        Path to log file

    Example:
        from smartresume.contexts.analysis.logger import setup_analysis_logger

        log_file = setup_analysis_logger(Path("resume.yaml"), delay_seconds=2.0)
    """
    return start_session(
        "analysis",
        source=source,
        settings={
            "Delay": f"{delay_seconds:.1f}s",
            "Order": "priority" if sort_priority else "rule",
        },
        console=console,
    )


# Wrapper functions with automatic [analysis] prefix


def _log_info(message: str) -> None:
    """Log info message with [analysis] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [analysis] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [analysis] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level analysis-specific logging helpers


def log_analysis_start(record, delay_seconds: float) -> None:
    """Log start of analysis with record shape."""
    name = record.personal_info.full_name or "(unnamed)"
    _log_info(f"Analyzing resume: {name}")
    _log_debug(
        f"  experience: {len(record.experience)}, education: {len(record.education)}, "
        f"skills: {len(record.skills)}"
    )
    if delay_seconds > 0:
        _log_debug(f"  Simulated processing delay: {delay_seconds:.1f}s")


def log_analysis_result(suggestions, elapsed_time: float) -> None:
    """
    Log analysis result with a breakdown by priority.

    Args:
        suggestions: Suggestions returned by evaluate()
        elapsed_time: Time spent evaluating (excluding any delay)
    """
    counts = Counter(s.priority.value for s in suggestions)
    breakdown = ", ".join(f"{counts.get(p, 0)} {p}" for p in ("high", "medium", "low"))

    _log_success(f"{len(suggestions)} suggestions found ({breakdown}) ({elapsed_time:.3f}s)")
    for s in suggestions:
        _log_debug(f"  {s.id} [{s.type.value}/{s.priority.value}] -> {s.field}")
