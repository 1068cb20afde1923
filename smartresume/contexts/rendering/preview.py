"""
Resume Preview Rendering

Renders a ResumeRecord as a standalone printable HTML document using Jinja2.
The same document serves as the live preview and as the print/export view.
"""

from pathlib import Path
from typing import Any, Dict, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from smartresume.contexts.editing.resume_record import ResumeRecord
from smartresume.contexts.rendering.exceptions import PreviewRenderError
from smartresume.contexts.rendering.logger import _log_debug, _log_error, log_export_result
from smartresume.utils.timestamp import format_date

TEMPLATES_PATH = Path(__file__).parent / "templates"
PREVIEW_TEMPLATE = "resume.html.jinja"

# Shown in place of empty values so the layout stays readable while editing
PLACEHOLDERS = {
    "full_name": "Your Name",
    "position": "Position Title",
    "company": "Company Name",
    "degree": "Degree",
    "institution": "Institution Name",
    "category": "Skill Category",
}

PRESENT_LABEL = "Present"


class PreviewRenderer:
    """
    Loads the preview template once and renders records with it.

    Templates live in smartresume/contexts/rendering/templates/ and are
    autoescaped, so record text is always rendered literally.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the renderer.

        Args:
            templates_path: Directory holding the preview template. Defaults to
                            smartresume/contexts/rendering/templates/
        """
        self.templates_path = templates_path or TEMPLATES_PATH

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["date"] = format_date

    def render(self, record: ResumeRecord) -> str:
        """
        Render a record as an HTML document.

        Raises:
            PreviewRenderError: If the template is missing or fails to render
        """
        try:
            template = self.env.get_template(PREVIEW_TEMPLATE)
            return template.render(**build_context(record))
        except TemplateError as e:
            _log_error(f"Template {PREVIEW_TEMPLATE} failed: {e}")
            raise PreviewRenderError(
                "Failed to render resume preview",
                template_name=PREVIEW_TEMPLATE,
                template_path=self.templates_path / PREVIEW_TEMPLATE,
                original_error=e,
            ) from e


def format_date_range(start_date: str, end_date: str, current: bool) -> str:
    """
    Format an experience date range (e.g., "Jan 2020 - Present").

    The end date is ignored for current positions.
    """
    end = PRESENT_LABEL if current else format_date(end_date)
    return f"{format_date(start_date)} - {end}"


def education_heading(degree: str, field: str) -> str:
    """Format "<degree> in <field>", dropping the field part when empty."""
    heading = degree or PLACEHOLDERS["degree"]
    if field:
        heading = f"{heading} in {field}"
    return heading


def build_context(record: ResumeRecord) -> Dict[str, Any]:
    """
    Build the template context for a record.

    Applies placeholders and date formatting so the template only lays out text.
    """
    info = record.personal_info

    experience = [
        {
            "position": entry.position or PLACEHOLDERS["position"],
            "company": entry.company or PLACEHOLDERS["company"],
            "dates": format_date_range(entry.start_date, entry.end_date, entry.current),
            "lines": entry.description.split("\n") if entry.description else [],
        }
        for entry in record.experience
    ]

    education = [
        {
            "heading": education_heading(entry.degree, entry.field),
            "institution": entry.institution or PLACEHOLDERS["institution"],
            "gpa": entry.gpa,
            "graduation_date": entry.graduation_date,
        }
        for entry in record.education
    ]

    skills = [
        {"category": entry.category or PLACEHOLDERS["category"], "items": list(entry.items)}
        for entry in record.skills
    ]

    return {
        "title": f"Resume - {info.full_name or 'Resume'}",
        "name": info.full_name or PLACEHOLDERS["full_name"],
        "contact": [value for value in (info.email, info.phone, info.location) if value],
        "links": [value for value in (info.linkedin, info.portfolio) if value],
        "summary": record.summary,
        "experience": experience,
        "education": education,
        "skills": skills,
    }


def render_preview(record: ResumeRecord, renderer: PreviewRenderer = None) -> str:
    """Render a record as a printable HTML document."""
    renderer = renderer or PreviewRenderer()
    html = renderer.render(record)
    _log_debug(f"Rendered preview ({len(html)} chars)")
    return html


def export_preview(
    record: ResumeRecord, output_path: Union[str, Path], renderer: PreviewRenderer = None
) -> Path:
    """
    Write the printable HTML document for a record.

    Args:
        record: Record to render
        output_path: Destination .html file (parent directories are created)
        renderer: Optional renderer (defaults to the packaged template)

    Returns:
        Path to the written file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    html = render_preview(record, renderer)
    output_path.write_text(html, encoding="utf-8")

    log_export_result(output_path, len(html))
    return output_path
