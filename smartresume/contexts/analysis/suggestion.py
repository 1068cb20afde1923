"""
Suggestion data structure for the Analysis context.

A Suggestion is an output-only value: one actionable recommendation tied to
one record field. Suggestions are created fresh on every evaluation and never
modified afterwards.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List


class SuggestionType(str, Enum):
    IMPROVEMENT = "improvement"
    WARNING = "warning"
    TIP = "tip"


class Priority(str, Enum):
    """Relative urgency of a suggestion, for display ordering only."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


PRIORITY_RANK = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}


@dataclass(frozen=True)
class Suggestion:
    """
    Single actionable recommendation.

    Attributes:
        id: Fixed identifier of the rule that produced it (e.g., "summary-length")
        type: improvement, warning or tip
        field: Record field it concerns ("summary", "experience", "personalInfo", "skills", "general")
        title: Short heading
        description: What was found
        suggestion_text: Text a caller may apply verbatim to the named field
        priority: high, medium or low
    """

    id: str
    type: SuggestionType
    field: str
    title: str
    description: str
    suggestion_text: str
    priority: Priority

    def to_dict(self) -> Dict[str, str]:
        """Convert to the display mapping (camelCase keys, enum values as text)."""
        return {
            "id": self.id,
            "type": self.type.value,
            "field": self.field,
            "title": self.title,
            "description": self.description,
            "suggestionText": self.suggestion_text,
            "priority": self.priority.value,
        }


def sort_by_priority(suggestions: Iterable[Suggestion]) -> List[Suggestion]:
    """Order suggestions high -> low priority, keeping evaluation order within a priority."""
    return sorted(suggestions, key=lambda s: PRIORITY_RANK[s.priority])
