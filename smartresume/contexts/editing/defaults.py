"""
Default values for the resume record.

Blank entries appended by the editor, and the camelCase key map that ties the
form's data shape to the record's attribute names.
"""

import uuid
from typing import Any, Dict

# Blank entry templates (an id is assigned at creation time)
BLANK_EXPERIENCE = {
    "company": "",
    "position": "",
    "start_date": "",
    "end_date": "",
    "current": False,
    "description": "",
}

BLANK_EDUCATION = {
    "institution": "",
    "degree": "",
    "field": "",
    "graduation_date": "",
    "gpa": "",
}

BLANK_SKILL_CATEGORY = {
    "category": "",
    "items": (),
}

# Form keys (camelCase) -> record attribute names
FORM_KEYS = {
    "personalInfo": "personal_info",
    "fullName": "full_name",
    "startDate": "start_date",
    "endDate": "end_date",
    "graduationDate": "graduation_date",
}

ATTRIBUTE_KEYS = {attr: key for key, attr in FORM_KEYS.items()}


def new_entry_id() -> str:
    """Return a fresh opaque entry id."""
    return uuid.uuid4().hex


def to_attribute_name(key: str) -> str:
    """Map a form key to its record attribute name (identity for shared names)."""
    return FORM_KEYS.get(key, key)


def to_form_key(attribute: str) -> str:
    """Map a record attribute name back to its form key."""
    return ATTRIBUTE_KEYS.get(attribute, attribute)


def blank_entry(template: Dict[str, Any]) -> Dict[str, Any]:
    """Copy a blank template and assign it a new id."""
    return {"id": new_entry_id(), **template}
