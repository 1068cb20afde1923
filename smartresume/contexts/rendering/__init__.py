"""
Rendering Context

Responsibilities:
- Renders a resume record as a printable HTML document (live preview and export)
- Formats dates and fills placeholders for empty values

Owns: Preview template, HTML export
Never: Modifies record content
"""

from smartresume.contexts.rendering.exceptions import PreviewRenderError
from smartresume.contexts.rendering.preview import (
    PreviewRenderer,
    export_preview,
    format_date,
    format_date_range,
    render_preview,
)

__all__ = [
    "PreviewRenderer",
    "render_preview",
    "export_preview",
    "format_date",
    "format_date_range",
    "PreviewRenderError",
]
