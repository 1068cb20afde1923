"""
Suggestion rules.

Each rule pairs a predicate over the record with a factory for the suggestion
it emits. Rules are independent of each other and run in RULES order; every
rule can be exercised on its own via rule.check(record).
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from smartresume.contexts.analysis.patterns import (
    MIN_SUMMARY_LENGTH,
    REQUIRED_CONTACT_FIELDS,
    ExperiencePatterns,
)
from smartresume.contexts.analysis.suggestion import Priority, Suggestion, SuggestionType
from smartresume.contexts.editing.resume_record import ResumeRecord


@dataclass(frozen=True)
class SuggestionRule:
    """
    Predicate + suggestion factory pair.

    Attributes:
        id: Identifier carried by the produced suggestion
        applies: Returns True when the record should receive the suggestion
        build: Produces the suggestion for a record the rule applies to
    """

    id: str
    applies: Callable[[ResumeRecord], bool]
    build: Callable[[ResumeRecord], Suggestion]

    def check(self, record: ResumeRecord) -> Optional[Suggestion]:
        """Return this rule's suggestion for record, or None."""
        if self.applies(record):
            return self.build(record)
        return None


def _static(**kwargs) -> Callable[[ResumeRecord], Suggestion]:
    """Factory for suggestions whose text does not depend on the record."""

    def build(record: ResumeRecord) -> Suggestion:
        return Suggestion(**kwargs)

    return build


def missing_contact_fields(record: ResumeRecord) -> Tuple[str, ...]:
    """Required contact fields left empty, in the fixed order email, phone, location."""
    return tuple(name for name in REQUIRED_CONTACT_FIELDS if not getattr(record.personal_info, name))


# =============================================================================
# PREDICATES
# =============================================================================


def summary_too_short(record: ResumeRecord) -> bool:
    return len(record.summary) < MIN_SUMMARY_LENGTH


def has_weak_descriptions(record: ResumeRecord) -> bool:
    """True if some non-empty description uses none of the action verbs."""
    return any(
        entry.description and not ExperiencePatterns.ACTION_VERB.search(entry.description)
        for entry in record.experience
    )


def lacks_quantified_impact(record: ResumeRecord) -> bool:
    """True if there is experience but no description shows a measurable result."""
    if not record.experience:
        return False
    return not any(
        ExperiencePatterns.QUANTIFIED_IMPACT.search(entry.description)
        for entry in record.experience
    )


def contact_incomplete(record: ResumeRecord) -> bool:
    return bool(missing_contact_fields(record))


def skills_missing(record: ResumeRecord) -> bool:
    return not record.skills


def always(record: ResumeRecord) -> bool:
    return True


# =============================================================================
# FACTORIES
# =============================================================================


def build_contact_suggestion(record: ResumeRecord) -> Suggestion:
    missing = ", ".join(missing_contact_fields(record))
    return Suggestion(
        id="contact-info",
        type=SuggestionType.WARNING,
        field="personalInfo",
        title="Complete Contact Information",
        description=f"Missing {missing} in your contact information.",
        suggestion_text=(
            "Ensure all essential contact information is included so employers can easily reach you."
        ),
        priority=Priority.HIGH,
    )


# =============================================================================
# RULE LIST
# =============================================================================

RULES: List[SuggestionRule] = [
    SuggestionRule(
        id="summary-length",
        applies=summary_too_short,
        build=_static(
            id="summary-length",
            type=SuggestionType.WARNING,
            field="summary",
            title="Professional Summary Too Short",
            description=(
                "Your professional summary should be 2-3 sentences highlighting your key achievements."
            ),
            suggestion_text=(
                "Expand your summary to include specific achievements, years of experience, "
                "and key skills that make you stand out."
            ),
            priority=Priority.HIGH,
        ),
    ),
    SuggestionRule(
        id="action-verbs",
        applies=has_weak_descriptions,
        build=_static(
            id="action-verbs",
            type=SuggestionType.IMPROVEMENT,
            field="experience",
            title="Use Stronger Action Verbs",
            description="Your experience descriptions could benefit from more impactful action verbs.",
            suggestion_text=(
                "Start bullet points with strong action verbs like 'achieved', 'managed', 'led', "
                "'developed', 'implemented', or 'improved' to demonstrate impact."
            ),
            priority=Priority.MEDIUM,
        ),
    ),
    SuggestionRule(
        id="quantify-achievements",
        applies=lacks_quantified_impact,
        build=_static(
            id="quantify-achievements",
            type=SuggestionType.IMPROVEMENT,
            field="experience",
            title="Add Quantifiable Achievements",
            description="Include specific numbers, percentages, or metrics to demonstrate your impact.",
            suggestion_text=(
                "Add metrics like '25% increase in sales', '$50K cost savings', or "
                "'managed team of 10' to show concrete results."
            ),
            priority=Priority.HIGH,
        ),
    ),
    SuggestionRule(
        id="contact-info",
        applies=contact_incomplete,
        build=build_contact_suggestion,
    ),
    SuggestionRule(
        id="skills-section",
        applies=skills_missing,
        build=_static(
            id="skills-section",
            type=SuggestionType.WARNING,
            field="skills",
            title="Add Skills Section",
            description="A skills section helps recruiters quickly identify your capabilities.",
            suggestion_text=(
                "Add relevant technical skills, software proficiencies, and industry-specific competencies."
            ),
            priority=Priority.MEDIUM,
        ),
    ),
    SuggestionRule(
        id="keywords-tip",
        applies=always,
        build=_static(
            id="keywords-tip",
            type=SuggestionType.TIP,
            field="general",
            title="Include Industry Keywords",
            description="Use keywords from job descriptions to pass through ATS systems.",
            suggestion_text=(
                "Review job postings in your field and incorporate relevant keywords naturally "
                "throughout your resume."
            ),
            priority=Priority.LOW,
        ),
    ),
]

RULES_BY_ID = {rule.id: rule for rule in RULES}
