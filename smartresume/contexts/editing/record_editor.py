"""
Record Editor

Copy-on-write editing operations over ResumeRecord.

Each operation takes a record version and returns a new one carrying exactly
one changed field or sub-entity; the input version is never modified. These
are the operations the resume form performs on every keystroke or button
press, plus applying a suggestion's text to the field it names.
"""

from dataclasses import replace
from typing import Any, Iterable, List, Optional, Tuple

from smartresume.contexts.editing.defaults import (
    BLANK_EDUCATION,
    BLANK_EXPERIENCE,
    BLANK_SKILL_CATEGORY,
    blank_entry,
)
from smartresume.contexts.editing.exceptions import (
    EntryNotFoundError,
    SuggestionNotApplicableError,
    UnknownFieldError,
)
from smartresume.contexts.editing.logger import _log_debug, log_edit
from smartresume.contexts.editing.resume_record import (
    PersonalInfo,
    ResumeRecord,
    SECTION_TYPES,
    editable_fields,
    resolve_field_name,
)

SKILL_SEPARATOR = ", "

# Suggestion fields whose text can be written into the record
APPLICABLE_FIELDS = ("summary", "experience")


# =========================================================================
# SCALAR FIELDS
# =========================================================================


def update_personal_info(record: ResumeRecord, field_name: str, value: str) -> ResumeRecord:
    """
    Return a copy of record with one contact field changed.

    Args:
        record: Current record version
        field_name: PersonalInfo attribute or form key (e.g., "full_name" or "fullName")
        value: New text

    Raises:
        UnknownFieldError: If field_name is not a contact field
        InvalidRecordError: If value is not a string
    """
    attribute = resolve_field_name(PersonalInfo, field_name)
    if not attribute:
        raise UnknownFieldError("PersonalInfo", field_name, editable_fields(PersonalInfo))

    log_edit("personalInfo", attribute)
    return replace(record, personal_info=replace(record.personal_info, **{attribute: value}))


def update_summary(record: ResumeRecord, value: str) -> ResumeRecord:
    """Return a copy of record with a new summary."""
    log_edit("summary")
    return replace(record, summary=value)


# =========================================================================
# SEQUENCE ENTRIES
# =========================================================================


def _add_entry(record: ResumeRecord, section: str, template: dict) -> ResumeRecord:
    entry = SECTION_TYPES[section](**blank_entry(template))
    log_edit(section, "add", entry.id)
    return replace(record, **{section: getattr(record, section) + (entry,)})


def _update_entry(
    record: ResumeRecord, section: str, entry_id: str, field_name: str, value: Any
) -> ResumeRecord:
    entry_type = SECTION_TYPES[section]
    attribute = resolve_field_name(entry_type, field_name)
    if not attribute:
        raise UnknownFieldError(entry_type.__name__, field_name, editable_fields(entry_type))

    entries = getattr(record, section)
    if not any(entry.id == entry_id for entry in entries):
        raise EntryNotFoundError(section, entry_id)

    if attribute == "items":
        if isinstance(value, str):
            value = parse_skill_items(value)
        elif isinstance(value, Iterable):
            value = tuple(value)

    log_edit(section, attribute, entry_id)
    updated = tuple(
        replace(entry, **{attribute: value}) if entry.id == entry_id else entry
        for entry in entries
    )
    return replace(record, **{section: updated})


def _remove_entry(record: ResumeRecord, section: str, entry_id: str) -> ResumeRecord:
    entries = getattr(record, section)
    remaining = tuple(entry for entry in entries if entry.id != entry_id)
    if len(remaining) == len(entries):
        raise EntryNotFoundError(section, entry_id)

    log_edit(section, "remove", entry_id)
    return replace(record, **{section: remaining})


def add_experience(record: ResumeRecord) -> ResumeRecord:
    """Append a blank experience entry with a fresh id."""
    return _add_entry(record, "experience", BLANK_EXPERIENCE)


def update_experience(record: ResumeRecord, entry_id: str, field_name: str, value: Any) -> ResumeRecord:
    """
    Return a copy of record with one field of one experience entry changed.

    Raises:
        EntryNotFoundError: If no entry has entry_id
        UnknownFieldError: If field_name is not an editable ExperienceEntry field
        InvalidRecordError: If value has the wrong type for the field (e.g., None)
    """
    return _update_entry(record, "experience", entry_id, field_name, value)


def remove_experience(record: ResumeRecord, entry_id: str) -> ResumeRecord:
    return _remove_entry(record, "experience", entry_id)


def add_education(record: ResumeRecord) -> ResumeRecord:
    """Append a blank education entry with a fresh id."""
    return _add_entry(record, "education", BLANK_EDUCATION)


def update_education(record: ResumeRecord, entry_id: str, field_name: str, value: str) -> ResumeRecord:
    return _update_entry(record, "education", entry_id, field_name, value)


def remove_education(record: ResumeRecord, entry_id: str) -> ResumeRecord:
    return _remove_entry(record, "education", entry_id)


def add_skill_category(record: ResumeRecord) -> ResumeRecord:
    """Append an empty skill category with a fresh id."""
    return _add_entry(record, "skills", BLANK_SKILL_CATEGORY)


def update_skill_category(record: ResumeRecord, entry_id: str, field_name: str, value: Any) -> ResumeRecord:
    """
    Return a copy of record with a skill category's name or items changed.

    Items may be given as any iterable of strings; use parse_skill_items to
    turn the form's comma-separated text into items.
    """
    return _update_entry(record, "skills", entry_id, field_name, value)


def remove_skill_category(record: ResumeRecord, entry_id: str) -> ResumeRecord:
    return _remove_entry(record, "skills", entry_id)


def parse_skill_items(text: str) -> Tuple[str, ...]:
    """
    Split the skills input into items.

    Splits on ", " and drops empty items, so "Python, , SQL" gives
    ("Python", "SQL") and "Python,SQL" stays one item.
    """
    return tuple(item for item in text.split(SKILL_SEPARATOR) if item)


def format_skill_items(items: Iterable[str]) -> str:
    """Join skill items back into the form's comma-separated text."""
    return SKILL_SEPARATOR.join(items)


# =========================================================================
# SUGGESTIONS
# =========================================================================


def apply_suggestion(record: ResumeRecord, suggestion, entry_id: Optional[str] = None) -> ResumeRecord:
    """
    Write a suggestion's text into the field it names.

    - summary: the summary is replaced by the suggestion text
    - experience: the suggestion text is appended as a new line to the
      description of entry_id (the first entry when entry_id is None)

    Args:
        record: Current record version
        suggestion: Suggestion produced by the analysis context
        entry_id: Experience entry to extend (experience suggestions only)

    Returns:
        New record version

    Raises:
        SuggestionNotApplicableError: If the suggestion names an advisory field
            (personalInfo, skills, general) or targets experience while there is none
        EntryNotFoundError: If entry_id is given but absent
    """
    if suggestion.field not in APPLICABLE_FIELDS:
        raise SuggestionNotApplicableError(suggestion.id, suggestion.field)

    if suggestion.field == "summary":
        _log_debug(f"Applying suggestion '{suggestion.id}' to summary")
        return update_summary(record, suggestion.suggestion_text)

    if not record.experience:
        raise SuggestionNotApplicableError(suggestion.id, suggestion.field)

    if entry_id is None:
        entry_id = record.experience[0].id

    target = next((entry for entry in record.experience if entry.id == entry_id), None)
    if target is None:
        raise EntryNotFoundError("experience", entry_id)

    lines: List[str] = [target.description] if target.description else []
    lines.append(suggestion.suggestion_text)

    _log_debug(f"Applying suggestion '{suggestion.id}' to experience entry {entry_id}")
    return update_experience(record, entry_id, "description", "\n".join(lines))
