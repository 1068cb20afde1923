"""
Analysis Context

Responsibilities:
- Inspects a resume record against fixed heuristics
- Produces ordered, actionable suggestions tied to record fields

Owns: Suggestion rules, the evaluator, Suggestion values
Never: Modifies the record (applying a suggestion belongs to the Editing context)
"""

from smartresume.contexts.analysis.evaluator import analyze, evaluate
from smartresume.contexts.analysis.rules import RULES, RULES_BY_ID, SuggestionRule
from smartresume.contexts.analysis.suggestion import (
    Priority,
    Suggestion,
    SuggestionType,
    sort_by_priority,
)

__all__ = [
    "evaluate",
    "analyze",
    "RULES",
    "RULES_BY_ID",
    "SuggestionRule",
    "Suggestion",
    "SuggestionType",
    "Priority",
    "sort_by_priority",
]
