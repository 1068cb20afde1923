"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """Compact timestamp for session directory names (e.g., "20261019_164455")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def format_date(year_month: str) -> str:
    """
    Format a "YYYY-MM" month value as a short display date.

    Args:
        year_month: Month string as produced by a month input (e.g., "2023-05")

    Returns:
        Short display date (e.g., "May 2023"), empty string for empty input,
        or the input unchanged if it cannot be parsed

    Examples:
        format_date("2023-05")
        # "May 2023"

        format_date("")
        # ""
    """
    if not year_month:
        return ""

    try:
        dt = datetime.strptime(year_month.strip(), "%Y-%m")
    except ValueError:
        return year_month

    return dt.strftime("%b %Y")
