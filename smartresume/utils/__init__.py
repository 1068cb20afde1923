"""
Shared utilities for smartresume.

Common functionality used across contexts:
- Logger setup
- Timestamps and date formatting
"""

from smartresume.utils.timestamp import format_date, now

__all__ = ["format_date", "now"]
