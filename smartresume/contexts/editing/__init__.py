"""
Editing Context

Responsibilities:
- Owns the resume record data model (immutable ResumeRecord and its entries)
- Produces new record versions for every form edit (copy-on-write)
- Applies suggestion text to the field a suggestion names
- Loads and saves records as YAML

Owns: ResumeRecord, record editing operations, record file I/O
Never: Decides what to suggest or how the record is displayed
"""

from smartresume.contexts.editing.exceptions import (
    EntryNotFoundError,
    InvalidRecordError,
    SuggestionNotApplicableError,
    UnknownFieldError,
)
from smartresume.contexts.editing.record_editor import (
    add_education,
    add_experience,
    add_skill_category,
    apply_suggestion,
    format_skill_items,
    parse_skill_items,
    remove_education,
    remove_experience,
    remove_skill_category,
    update_education,
    update_experience,
    update_personal_info,
    update_skill_category,
    update_summary,
)
from smartresume.contexts.editing.record_io import load_record, save_record
from smartresume.contexts.editing.resume_record import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ResumeRecord,
    SkillCategory,
)

__all__ = [
    # Data structure classes
    "ResumeRecord",
    "PersonalInfo",
    "ExperienceEntry",
    "EducationEntry",
    "SkillCategory",
    # Copy-on-write edits
    "update_personal_info",
    "update_summary",
    "add_experience",
    "update_experience",
    "remove_experience",
    "add_education",
    "update_education",
    "remove_education",
    "add_skill_category",
    "update_skill_category",
    "remove_skill_category",
    "parse_skill_items",
    "format_skill_items",
    "apply_suggestion",
    # File I/O
    "load_record",
    "save_record",
    # Exceptions
    "InvalidRecordError",
    "EntryNotFoundError",
    "UnknownFieldError",
    "SuggestionNotApplicableError",
]
