"""
Suggestion Evaluator

Runs the fixed rule list over a resume record and collects the suggestions.

evaluate() is pure: same record in, same suggestions out, no sleeping and no
reference to the record kept after it returns. analyze() is the wrapper used
by the CLI, which adds the optional "processing" delay and session logging.
"""

import time
from typing import List, Sequence

from smartresume.contexts.analysis.logger import (
    _log_debug,
    log_analysis_result,
    log_analysis_start,
)
from smartresume.contexts.analysis.rules import RULES, SuggestionRule
from smartresume.contexts.analysis.suggestion import Suggestion
from smartresume.contexts.editing.exceptions import InvalidRecordError
from smartresume.contexts.editing.resume_record import ResumeRecord


def _require_record(record) -> None:
    if not isinstance(record, ResumeRecord):
        raise InvalidRecordError(f"Expected ResumeRecord, got {type(record).__name__}")


def evaluate(record: ResumeRecord, rules: Sequence[SuggestionRule] = RULES) -> List[Suggestion]:
    """
    Produce the ordered suggestions for a record.

    Every rule runs on every call, in order; each contributes at most one
    suggestion. With the default rules the result holds between 1 and 6
    suggestions and always ends with the keywords tip.

    Args:
        record: Record snapshot to inspect
        rules: Rules to run (defaults to the standard rule list)

    Returns:
        Suggestions in rule order (not sorted by priority)

    Raises:
        InvalidRecordError: If record is not a ResumeRecord
    """
    _require_record(record)

    suggestions = []
    for rule in rules:
        suggestion = rule.check(record)
        if suggestion is not None:
            _log_debug(f"Rule '{rule.id}' fired")
            suggestions.append(suggestion)

    return suggestions


def analyze(record: ResumeRecord, delay_seconds: float = 0.0) -> List[Suggestion]:
    """
    Evaluate a record the way the suggestions panel does.

    Waits delay_seconds first (the panel's simulated processing time), then
    evaluates and logs a summary of the result.

    Args:
        record: Record snapshot to inspect
        delay_seconds: Cosmetic delay before evaluating (0 disables it)

    Returns:
        Suggestions in rule order
    """
    _require_record(record)
    log_analysis_start(record, delay_seconds)

    if delay_seconds > 0:
        time.sleep(delay_seconds)

    start = time.perf_counter()
    suggestions = evaluate(record)
    log_analysis_result(suggestions, time.perf_counter() - start)

    return suggestions
