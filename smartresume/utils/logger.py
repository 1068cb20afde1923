"""
Session logging for the smartresume CLIs.

Each CLI run is one session: a timestamped directory under LOGS_PATH holding
the full DEBUG log, with INFO and above echoed to the console. The log opens
with a header naming the resume file and the settings the run used, so any
log can be traced back to the input that produced it.

Context-specific wrappers live in contexts/{context}/logger.py.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

from dotenv import load_dotenv
from loguru import logger

from smartresume import __version__
from smartresume.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def session_dir(context_name: str, logs_path: Optional[Path] = None) -> Path:
    """Directory for a new session of context_name (not created)."""
    return (logs_path or LOGS_PATH) / f"{context_name}_{now()}"


def start_session(
    context_name: str,
    source: Optional[Path] = None,
    settings: Optional[Dict[str, Any]] = None,
    console: TextIO = sys.stdout,
    logs_path: Optional[Path] = None,
) -> Path:
    """
    Route loguru output for one CLI run and write the session header.

    Creates <logs_path>/<context>_<timestamp>/<context>.log at DEBUG level and
    a console sink at INFO level. Any previously configured sinks are removed.

    Args:
        context_name: Session name (e.g., "analysis", "render")
        source: Resume file the run reads
        settings: Options that change the run's output (delay, output path, ...)
        console: Console stream; pass sys.stderr when stdout carries data (e.g., --json)
        logs_path: Root for session directories (defaults to LOGS_PATH)

    Returns:
        Path to the session log file

    Example:
        log_file = start_session(
            "analysis",
            source=Path("resume.yaml"),
            settings={"Delay": "2.0s"},
        )
    """
    log_dir = session_dir(context_name, logs_path)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(console, format=CONSOLE_FORMAT, level="INFO")

    log_session_header(context_name, source, settings)

    return log_file


def log_session_header(
    context_name: str,
    source: Optional[Path] = None,
    settings: Optional[Dict[str, Any]] = None,
) -> None:
    """Log which command, resume file and settings produced this session."""
    logger.info("=" * 80)
    logger.info(f"smartresume {__version__} | {context_name} session")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Python: {sys.version.split()[0]}")

    if source is not None:
        if source.exists():
            logger.info(f"Resume: {source} ({source.stat().st_size} bytes)")
        else:
            logger.info(f"Resume: {source}")

    for key, value in (settings or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)
