"""
smartresume - Resume builder with a live preview and rule-based suggestions

Architecture:
- Editing Context: Immutable resume record and copy-on-write form edits
- Analysis Context: Heuristic suggestion rules and their evaluator
- Rendering Context: Printable HTML preview and export
"""

__version__ = "0.1.0"
