"""Unit tests for preview rendering."""

from pathlib import Path

import pytest

from smartresume.contexts.editing import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ResumeRecord,
    SkillCategory,
)
from smartresume.contexts.rendering import (
    PreviewRenderError,
    PreviewRenderer,
    format_date,
    format_date_range,
    render_preview,
)
from smartresume.contexts.rendering.preview import build_context, education_heading


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [
        ("2023-05", "May 2023"),
        ("2020-12", "Dec 2020"),
        ("", ""),
        ("soon", "soon"),
    ],
)
def test_format_date(value, expected):
    assert format_date(value) == expected


@pytest.mark.unit
def test_format_date_range():
    assert format_date_range("2020-01", "2021-06", False) == "Jan 2020 - Jun 2021"
    assert format_date_range("2020-01", "2021-06", True) == "Jan 2020 - Present"
    assert format_date_range("2020-01", "", False) == "Jan 2020 - "


@pytest.mark.unit
def test_education_heading():
    assert education_heading("BSc", "Physics") == "BSc in Physics"
    assert education_heading("BSc", "") == "BSc"
    assert education_heading("", "Physics") == "Degree in Physics"


@pytest.mark.unit
def test_empty_record_uses_placeholders_and_omits_sections():
    html = render_preview(ResumeRecord.empty())

    assert "<title>Resume - Resume</title>" in html
    assert "Your Name" in html
    assert "Professional Summary" not in html
    assert "Professional Experience" not in html
    assert "Education</h2>" not in html
    assert "Skills &amp; Expertise" not in html


@pytest.mark.unit
def test_full_record_renders_all_sections():
    record = ResumeRecord(
        personal_info=PersonalInfo(full_name="Ada Byron", email="ada@example.com", linkedin="in/ada"),
        summary="Mathematician and writer.",
        experience=(
            ExperienceEntry(
                id="1",
                start_date="2020-01",
                end_date="2022-02",
                current=True,
                description="Designed the engine\nWrote the notes",
            ),
        ),
        education=(EducationEntry(id="1", degree="BSc", field="Math", graduation_date="2019-05", gpa="3.9"),),
        skills=(SkillCategory(id="1", category="", items=("Analysis", "Logic")),),
    )

    html = render_preview(record)

    assert "<title>Resume - Ada Byron</title>" in html
    assert "ada@example.com" in html
    assert "in/ada" in html
    assert "Mathematician and writer." in html
    assert "Position Title" in html
    assert "Company Name" in html
    assert "Jan 2020 - Present" in html
    assert "Feb 2022" not in html
    assert "<p>Designed the engine</p>" in html
    assert "<p>Wrote the notes</p>" in html
    assert "BSc in Math" in html
    assert "Institution Name" in html
    assert "GPA: 3.9" in html
    assert "May 2019" in html
    assert "Skill Category" in html
    assert "Analysis" in html and "Logic" in html


@pytest.mark.unit
def test_gpa_line_only_when_present():
    record = ResumeRecord(education=(EducationEntry(id="1", degree="BA"),))

    assert "GPA:" not in render_preview(record)


@pytest.mark.unit
def test_record_text_is_escaped():
    record = ResumeRecord(summary="<script>alert(1)</script>")

    html = render_preview(record)

    assert "<script>" not in html
    assert "&lt;script&gt;" in html


@pytest.mark.unit
def test_contact_only_lists_present_values():
    context = build_context(ResumeRecord(personal_info=PersonalInfo(phone="555")))

    assert context["contact"] == ["555"]
    assert context["links"] == []


@pytest.mark.unit
def test_missing_template_raises(tmp_path):
    renderer = PreviewRenderer(templates_path=tmp_path)

    with pytest.raises(PreviewRenderError) as exc_info:
        renderer.render(ResumeRecord.empty())

    assert exc_info.value.template_path == Path(tmp_path) / "resume.html.jinja"
