"""
Regex patterns and constants for resume analysis rules.

Pattern classes follow the convention from the other contexts:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
"""

import re
from dataclasses import dataclass

# =============================================================================
# WORD LISTS
# =============================================================================

ACTION_VERBS = (
    "achieved",
    "managed",
    "led",
    "developed",
    "implemented",
    "improved",
    "increased",
    "reduced",
    "created",
    "designed",
    "launched",
)

IMPACT_WORDS = ("increased", "decreased", "improved")

# Contact fields that must be present, in reporting order
REQUIRED_CONTACT_FIELDS = ("email", "phone", "location")

MIN_SUMMARY_LENGTH = 50


# =============================================================================
# DESCRIPTION PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ExperiencePatterns:
    """
    Regex patterns applied to experience descriptions.

    Words only match whole words, so "ledger" does not count as "led" and
    "unimproved" does not count as "improved".
    """

    ACTION_VERB: re.Pattern = re.compile(
        rf"\b(?:{'|'.join(ACTION_VERBS)})\b", re.IGNORECASE
    )

    # 20%, $50, 10+, or an impact word
    QUANTIFIED_IMPACT: re.Pattern = re.compile(
        rf"\d+%|\$\d+|\d+\+|\b(?:{'|'.join(IMPACT_WORDS)})\b", re.IGNORECASE
    )
