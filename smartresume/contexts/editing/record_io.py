"""
Resume record file I/O.

Loads and saves ResumeRecord instances as YAML in the form's camelCase shape.
JSON files are accepted on load since they are valid YAML.
"""

from pathlib import Path
from typing import Union

from omegaconf import OmegaConf

from smartresume.contexts.editing.exceptions import InvalidRecordError
from smartresume.contexts.editing.logger import (
    log_record_loaded,
    log_record_rejected,
    log_record_saved,
)
from smartresume.contexts.editing.resume_record import ResumeRecord


def load_record(path: Union[str, Path]) -> ResumeRecord:
    """
    Load a resume record from a YAML (or JSON) file.

    The file may either hold the record at its root or under a top-level
    "resume" key.

    Args:
        path: Path to the resume file

    Returns:
        ResumeRecord instance

    Raises:
        FileNotFoundError: If path does not exist
        InvalidRecordError: If the file content is not a valid resume record
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Resume file not found: {path}")

    loaded = OmegaConf.load(path)
    if not OmegaConf.is_dict(loaded):
        error = InvalidRecordError("Resume file must contain a mapping at its root", path=path)
        log_record_rejected(path, error)
        raise error

    data = OmegaConf.to_container(loaded, resolve=True)
    if "resume" in data:
        data = data["resume"]

    try:
        record = ResumeRecord.from_dict(data)
    except InvalidRecordError as e:
        error = InvalidRecordError(e.message, e.location, path)
        log_record_rejected(path, error)
        raise error from e

    log_record_loaded(path, record)
    return record


def save_record(record: ResumeRecord, path: Union[str, Path]) -> Path:
    """
    Save a resume record as YAML.

    Args:
        record: Record to save
        path: Output file path (parent directories are created)

    Returns:
        Path to the written file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    OmegaConf.save(OmegaConf.create(record.to_dict()), path)
    log_record_saved(path)
    return path
