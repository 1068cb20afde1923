"""
Editing context logger.

Provides logging interface for editing context with automatic [edit] prefix.
All editing modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

CONTEXT_PREFIX = "[edit]"


# Wrapper functions with automatic [edit] prefix


def _log_info(message: str) -> None:
    """Log info message with [edit] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [edit] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [edit] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [edit] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level editing-specific logging helpers


def log_edit(section: str, change: Optional[str] = None, entry_id: Optional[str] = None) -> None:
    """Log a single record edit at debug level."""
    target = f"{section}[{entry_id}]" if entry_id else section
    if change:
        _log_debug(f"{target}: {change}")
    else:
        _log_debug(f"{target}: updated")


def log_record_loaded(path: Path, record) -> None:
    """Log a record loaded from disk with section counts."""
    _log_info(f"Loaded resume from {path}")
    _log_debug(
        f"  experience: {len(record.experience)}, education: {len(record.education)}, "
        f"skills: {len(record.skills)}"
    )


def log_record_rejected(path: Path, error: Exception) -> None:
    """Log a resume file that failed validation."""
    _log_error(f"Rejected resume {path}")
    _log_error(f"  {error}")


def log_record_saved(path: Path) -> None:
    _log_success(f"Saved resume to {path}")
