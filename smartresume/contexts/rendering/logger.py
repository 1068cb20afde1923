"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from smartresume.utils.logger import start_session

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(source: Optional[Path] = None, output_path: Optional[Path] = None) -> Path:
    """
    Start a rendering session log.

    Args:
        source: Resume file being rendered
        output_path: Where the preview document will be written

    Returns:
        Path to log file
    """
    return start_session(
        "render",
        source=source,
        settings={"Output": output_path} if output_path else None,
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_export_result(output_path: Path, size: int) -> None:
    """Log a written preview document."""
    _log_success(f"Preview written ({size} chars)")
    _log_info(f"  Output: {output_path}")
