"""Custom exceptions for the editing context with record references."""

from pathlib import Path
from typing import Optional


class InvalidRecordError(ValueError):
    """
    Exception raised when a resume record is malformed.

    This is a contract violation by the caller (e.g., a missing sub-structure,
    a null text value, duplicate entry ids). Empty fields are never invalid.

    Attributes:
        message: Error description
        location: Dotted path to the offending value (e.g., 'experience[1].description')
        path: Source file the record was loaded from, if any
    """

    def __init__(
        self,
        message: str,
        location: Optional[str] = None,
        path: Optional[Path] = None,
    ):
        self.message = message
        self.location = location
        self.path = path

        parts = [message]

        if location:
            parts.append(f"At: {location}")

        if path:
            parts.append(f"Source: {path}")

        super().__init__("\n".join(parts))


class EntryNotFoundError(KeyError):
    """
    Exception raised when an edit targets an entry id absent from its sequence.

    Attributes:
        section: Record sequence name ('experience', 'education', 'skills')
        entry_id: The id that was not found
    """

    def __init__(self, section: str, entry_id: str):
        self.section = section
        self.entry_id = entry_id
        super().__init__(f"No {section} entry with id '{entry_id}'")

    def __str__(self) -> str:
        return self.args[0]


class UnknownFieldError(ValueError):
    """
    Exception raised when an edit names a field the target type does not have.

    Attributes:
        type_name: Name of the edited type (e.g., 'ExperienceEntry')
        field_name: The requested field
        valid_fields: Fields that may be edited
    """

    def __init__(self, type_name: str, field_name: str, valid_fields: tuple):
        self.type_name = type_name
        self.field_name = field_name
        self.valid_fields = valid_fields
        super().__init__(
            f"Cannot edit field '{field_name}' of {type_name}. "
            f"Editable fields: {', '.join(valid_fields)}"
        )


class SuggestionNotApplicableError(ValueError):
    """
    Exception raised when a suggestion targets a field with no text to rewrite.

    Advisory suggestions (contact info, skills, general tips) describe what to
    add; they carry no text that can be assigned to the record verbatim.
    """

    def __init__(self, suggestion_id: str, field_name: str):
        self.suggestion_id = suggestion_id
        self.field_name = field_name
        super().__init__(
            f"Suggestion '{suggestion_id}' targets '{field_name}', which cannot be applied automatically"
        )
