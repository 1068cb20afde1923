"""
Resume Record Structure

Defines the immutable data model for the resume being edited.
This structure is the interface between the Editing, Analysis and Rendering contexts.

Editing owns:
- Creating the blank record and producing new versions of it
- Converting between the form's camelCase mapping and ResumeRecord instances

Analysis and Rendering only read ResumeRecord instances.

Every class here is a frozen dataclass and every sequence is a tuple, so a
record version can never be changed after it is handed out. Edits go through
dataclasses.replace (see record_editor.py).
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Tuple

from smartresume.contexts.editing.defaults import to_attribute_name, to_form_key
from smartresume.contexts.editing.exceptions import InvalidRecordError


def _lookup(data: Mapping, attribute: str, default: Any) -> Any:
    """Read a value by form key, falling back to the attribute name."""
    form_key = to_form_key(attribute)
    if form_key in data:
        return data[form_key]
    return data.get(attribute, default)


def _text(data: Mapping, attribute: str, location: str) -> str:
    value = _lookup(data, attribute, "")
    if value is None:
        raise InvalidRecordError("Text field is null (use an empty string)", f"{location}.{attribute}")
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise InvalidRecordError(
            f"Expected text, got {type(value).__name__}", f"{location}.{attribute}"
        )
    # YAML may load phone numbers or GPAs as numbers
    return str(value)


def _mapping(value: Any, location: str) -> Mapping:
    if not isinstance(value, Mapping):
        raise InvalidRecordError(f"Expected a mapping, got {type(value).__name__}", location)
    return value


def _sequence(value: Any, location: str) -> tuple:
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise InvalidRecordError(f"Expected a list, got {type(value).__name__}", location)
    return tuple(value)


def _check_text(instance, names: Tuple[str, ...], location: str) -> None:
    """Reject null or non-string values in the named text attributes."""
    for name in names:
        value = getattr(instance, name)
        if value is None:
            raise InvalidRecordError("Text field is null (use an empty string)", f"{location}.{name}")
        if not isinstance(value, str):
            raise InvalidRecordError(f"Expected text, got {type(value).__name__}", f"{location}.{name}")


def _check_entry(entry, text_fields: Tuple[str, ...]) -> str:
    """Validate an entry's id and text fields, returning its location label."""
    type_name = type(entry).__name__
    if not isinstance(entry.id, str) or not entry.id:
        raise InvalidRecordError("Entry is missing its id", f"{type_name}.id")
    location = f"{type_name}[{entry.id}]"
    _check_text(entry, text_fields, location)
    return location


@dataclass(frozen=True)
class PersonalInfo:
    """
    Contact block at the top of the resume.

    Attributes:
        full_name: Name shown as the document heading
        email: Email address
        phone: Phone number
        location: City / region
        linkedin: LinkedIn profile URL or handle
        portfolio: Portfolio / personal site URL
    """

    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    portfolio: str = ""

    def __post_init__(self):
        _check_text(self, tuple(f.name for f in fields(self)), "personalInfo")

    @classmethod
    def from_dict(cls, data: Mapping, location: str = "personalInfo") -> "PersonalInfo":
        data = _mapping(data, location)
        return cls(**{f.name: _text(data, f.name, location) for f in fields(cls)})

    def to_dict(self) -> Dict[str, str]:
        return {to_form_key(f.name): getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class ExperienceEntry:
    """
    Single work experience entry.

    Attributes:
        id: Opaque identifier, unique within the experience sequence
        company: Employer name
        position: Job title
        start_date: Start month ("YYYY-MM")
        end_date: End month ("YYYY-MM"); not displayed when current is True
        current: Whether this is the present position
        description: Free text, one accomplishment per line
    """

    id: str
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""

    def __post_init__(self):
        location = _check_entry(
            self, ("company", "position", "start_date", "end_date", "description")
        )
        if not isinstance(self.current, bool):
            raise InvalidRecordError(
                f"Expected a boolean, got {type(self.current).__name__}", f"{location}.current"
            )

    @classmethod
    def from_dict(cls, data: Mapping, location: str) -> "ExperienceEntry":
        data = _mapping(data, location)
        current = _lookup(data, "current", False)
        if not isinstance(current, bool):
            raise InvalidRecordError(
                f"Expected a boolean, got {type(current).__name__}", f"{location}.current"
            )
        return cls(
            id=_required_id(data, location),
            company=_text(data, "company", location),
            position=_text(data, "position", location),
            start_date=_text(data, "start_date", location),
            end_date=_text(data, "end_date", location),
            current=current,
            description=_text(data, "description", location),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {to_form_key(f.name): getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class EducationEntry:
    """
    Single education entry.

    Attributes:
        id: Opaque identifier, unique within the education sequence
        institution: School name
        degree: Degree title (e.g., "Bachelor of Science")
        field: Field of study
        graduation_date: Graduation month ("YYYY-MM")
        gpa: Optional GPA, empty when not given
    """

    id: str
    institution: str = ""
    degree: str = ""
    field: str = ""
    graduation_date: str = ""
    gpa: str = ""

    def __post_init__(self):
        _check_entry(self, ("institution", "degree", "field", "graduation_date", "gpa"))

    @classmethod
    def from_dict(cls, data: Mapping, location: str) -> "EducationEntry":
        data = _mapping(data, location)
        return cls(
            id=_required_id(data, location),
            institution=_text(data, "institution", location),
            degree=_text(data, "degree", location),
            field=_text(data, "field", location),
            graduation_date=_text(data, "graduation_date", location),
            gpa=_text(data, "gpa", location),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {to_form_key(f.name): getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class SkillCategory:
    """
    Named group of skills.

    Attributes:
        id: Opaque identifier, unique within the skills sequence
        category: Category name (e.g., "Languages")
        items: Ordered skill names
    """

    id: str
    category: str = ""
    items: Tuple[str, ...] = ()

    def __post_init__(self):
        location = _check_entry(self, ("category",))
        if isinstance(self.items, list):
            object.__setattr__(self, "items", tuple(self.items))
        if not isinstance(self.items, tuple):
            raise InvalidRecordError(
                f"Expected a sequence, got {type(self.items).__name__}", f"{location}.items"
            )
        for i, item in enumerate(self.items):
            if not isinstance(item, str):
                raise InvalidRecordError(
                    f"Expected text, got {type(item).__name__}", f"{location}.items[{i}]"
                )

    @classmethod
    def from_dict(cls, data: Mapping, location: str) -> "SkillCategory":
        data = _mapping(data, location)
        raw_items = _sequence(_lookup(data, "items", ()), f"{location}.items")
        items = []
        for i, item in enumerate(raw_items):
            if not isinstance(item, str):
                raise InvalidRecordError(
                    f"Expected text, got {type(item).__name__}", f"{location}.items[{i}]"
                )
            items.append(item)
        return cls(
            id=_required_id(data, location),
            category=_text(data, "category", location),
            items=tuple(items),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "category": self.category, "items": list(self.items)}


def _required_id(data: Mapping, location: str) -> str:
    entry_id = _text(data, "id", location)
    if not entry_id:
        raise InvalidRecordError("Entry is missing its id", f"{location}.id")
    return entry_id


@dataclass(frozen=True)
class ResumeRecord:
    """
    Aggregate root for the resume being edited.

    Created once with all-empty defaults (see empty()); every edit produces a
    new record. Ids are checked for uniqueness within each sequence when the
    record is constructed.

    Attributes:
        personal_info: Contact block
        summary: Professional summary text
        experience: Ordered work experience entries
        education: Ordered education entries
        skills: Ordered skill categories
    """

    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    summary: str = ""
    experience: Tuple[ExperienceEntry, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    skills: Tuple[SkillCategory, ...] = ()

    def __post_init__(self):
        if not isinstance(self.personal_info, PersonalInfo):
            raise InvalidRecordError(
                f"Expected PersonalInfo, got {type(self.personal_info).__name__}", "personalInfo"
            )
        if not isinstance(self.summary, str):
            raise InvalidRecordError(f"Expected text, got {type(self.summary).__name__}", "summary")

        for section, entry_type in (
            ("experience", ExperienceEntry),
            ("education", EducationEntry),
            ("skills", SkillCategory),
        ):
            entries = getattr(self, section)
            if isinstance(entries, list):
                entries = tuple(entries)
                object.__setattr__(self, section, entries)
            if not isinstance(entries, tuple):
                raise InvalidRecordError(
                    f"Expected a sequence, got {type(entries).__name__}", section
                )

            seen = set()
            for i, entry in enumerate(entries):
                if not isinstance(entry, entry_type):
                    raise InvalidRecordError(
                        f"Expected {entry_type.__name__}, got {type(entry).__name__}",
                        f"{section}[{i}]",
                    )
                if entry.id in seen:
                    raise InvalidRecordError(f"Duplicate id '{entry.id}'", f"{section}[{i}].id")
                seen.add(entry.id)

    @classmethod
    def empty(cls) -> "ResumeRecord":
        """Create the initial all-empty record."""
        return cls()

    @classmethod
    def from_dict(cls, data: Mapping) -> "ResumeRecord":
        """
        Build a record from the form's camelCase mapping.

        Snake_case attribute names are accepted as well. Missing keys take
        their empty defaults.

        Args:
            data: Mapping shaped like the form data (personalInfo, summary, ...)

        Returns:
            ResumeRecord instance

        Raises:
            InvalidRecordError: If a sub-structure has the wrong shape or a text value is null
        """
        data = _mapping(data, "<record>")

        return cls(
            personal_info=PersonalInfo.from_dict(_lookup(data, "personal_info", {})),
            summary=_text(data, "summary", "<record>"),
            experience=tuple(
                ExperienceEntry.from_dict(entry, f"experience[{i}]")
                for i, entry in enumerate(_sequence(_lookup(data, "experience", ()), "experience"))
            ),
            education=tuple(
                EducationEntry.from_dict(entry, f"education[{i}]")
                for i, entry in enumerate(_sequence(_lookup(data, "education", ()), "education"))
            ),
            skills=tuple(
                SkillCategory.from_dict(entry, f"skills[{i}]")
                for i, entry in enumerate(_sequence(_lookup(data, "skills", ()), "skills"))
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the form's camelCase mapping (plain dicts and lists)."""
        return {
            "personalInfo": self.personal_info.to_dict(),
            "summary": self.summary,
            "experience": [entry.to_dict() for entry in self.experience],
            "education": [entry.to_dict() for entry in self.education],
            "skills": [entry.to_dict() for entry in self.skills],
        }


# Record attribute for each section name used by editors and suggestions
SECTION_TYPES = {
    "experience": ExperienceEntry,
    "education": EducationEntry,
    "skills": SkillCategory,
}


def editable_fields(entry_type: type) -> Tuple[str, ...]:
    """Attribute names of a record type that may be edited (everything but id)."""
    return tuple(f.name for f in fields(entry_type) if f.name != "id")


def resolve_field_name(entry_type: type, name: str) -> str:
    """Map a form key or attribute name to an attribute of entry_type, or '' if none."""
    attribute = to_attribute_name(name)
    return attribute if attribute in editable_fields(entry_type) else ""
