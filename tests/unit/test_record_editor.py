"""Unit tests for copy-on-write record edits."""

import pytest

from smartresume.contexts.analysis import RULES_BY_ID, evaluate
from smartresume.contexts.editing import (
    EntryNotFoundError,
    ExperienceEntry,
    InvalidRecordError,
    ResumeRecord,
    SuggestionNotApplicableError,
    UnknownFieldError,
    add_education,
    add_experience,
    add_skill_category,
    apply_suggestion,
    format_skill_items,
    parse_skill_items,
    remove_education,
    remove_experience,
    remove_skill_category,
    update_education,
    update_experience,
    update_personal_info,
    update_skill_category,
    update_summary,
)


@pytest.fixture
def record():
    return ResumeRecord(
        experience=(
            ExperienceEntry(id="a", company="Acme", description="Wrote code"),
            ExperienceEntry(id="b", company="Globex"),
        )
    )


@pytest.mark.unit
def test_update_personal_info_returns_new_record():
    """The original version is left untouched."""
    original = ResumeRecord.empty()
    updated = update_personal_info(original, "email", "me@example.com")

    assert updated.personal_info.email == "me@example.com"
    assert original.personal_info.email == ""
    assert updated is not original


@pytest.mark.unit
def test_update_personal_info_accepts_form_key():
    updated = update_personal_info(ResumeRecord.empty(), "fullName", "Ada")

    assert updated.personal_info.full_name == "Ada"


@pytest.mark.unit
def test_update_personal_info_unknown_field():
    with pytest.raises(UnknownFieldError):
        update_personal_info(ResumeRecord.empty(), "twitter", "@ada")


@pytest.mark.unit
def test_update_summary_shares_untouched_parts():
    """Unchanged sub-entities are reused, not copied."""
    original = update_personal_info(ResumeRecord.empty(), "email", "me@example.com")
    updated = update_summary(original, "New summary")

    assert updated.summary == "New summary"
    assert original.summary == ""
    assert updated.personal_info is original.personal_info


@pytest.mark.unit
def test_add_entries_assign_unique_ids():
    record = ResumeRecord.empty()
    record = add_experience(record)
    record = add_experience(record)
    record = add_education(record)
    record = add_skill_category(record)

    assert len(record.experience) == 2
    assert record.experience[0].id != record.experience[1].id
    assert record.experience[0].current is False
    assert record.education[0].gpa == ""
    assert record.skills[0].items == ()


@pytest.mark.unit
def test_update_experience_changes_only_target(record):
    updated = update_experience(record, "b", "position", "Manager")

    assert updated.experience[1].position == "Manager"
    assert updated.experience[0] is record.experience[0]
    assert record.experience[1].position == ""


@pytest.mark.unit
def test_update_experience_current_flag(record):
    updated = update_experience(record, "a", "current", True)

    assert updated.experience[0].current is True


@pytest.mark.unit
def test_update_experience_accepts_form_key(record):
    updated = update_experience(record, "a", "startDate", "2020-01")

    assert updated.experience[0].start_date == "2020-01"


@pytest.mark.unit
def test_update_experience_unknown_entry(record):
    with pytest.raises(EntryNotFoundError) as exc_info:
        update_experience(record, "zzz", "company", "Initech")

    assert exc_info.value.section == "experience"
    assert exc_info.value.entry_id == "zzz"


@pytest.mark.unit
def test_id_is_not_editable(record):
    with pytest.raises(UnknownFieldError):
        update_experience(record, "a", "id", "c")


@pytest.mark.unit
def test_remove_experience(record):
    updated = remove_experience(record, "a")

    assert [entry.id for entry in updated.experience] == ["b"]
    assert len(record.experience) == 2


@pytest.mark.unit
def test_remove_unknown_entry(record):
    with pytest.raises(EntryNotFoundError):
        remove_experience(record, "zzz")


@pytest.mark.unit
def test_education_edits():
    record = add_education(ResumeRecord.empty())
    entry_id = record.education[0].id

    record = update_education(record, entry_id, "graduationDate", "2019-05")
    assert record.education[0].graduation_date == "2019-05"

    record = remove_education(record, entry_id)
    assert record.education == ()


@pytest.mark.unit
def test_skill_category_edits():
    record = add_skill_category(ResumeRecord.empty())
    entry_id = record.skills[0].id

    record = update_skill_category(record, entry_id, "category", "Languages")
    record = update_skill_category(record, entry_id, "items", ["Python", "Go"])

    assert record.skills[0].category == "Languages"
    assert record.skills[0].items == ("Python", "Go")

    record = remove_skill_category(record, entry_id)
    assert record.skills == ()


@pytest.mark.unit
def test_parse_skill_items():
    """Items are split on ', ' and empty items dropped."""
    assert parse_skill_items("Python, Go, SQL") == ("Python", "Go", "SQL")
    assert parse_skill_items("Python, , SQL") == ("Python", "SQL")
    assert parse_skill_items("") == ()
    assert parse_skill_items("Python,Go") == ("Python,Go",)


@pytest.mark.unit
def test_format_skill_items():
    assert format_skill_items(("Python", "Go")) == "Python, Go"
    assert format_skill_items(()) == ""


@pytest.mark.unit
def test_apply_summary_suggestion():
    record = ResumeRecord.empty()
    suggestion = RULES_BY_ID["summary-length"].build(record)

    updated = apply_suggestion(record, suggestion)

    assert updated.summary == suggestion.suggestion_text
    assert record.summary == ""


@pytest.mark.unit
def test_apply_experience_suggestion_appends_line(record):
    suggestion = RULES_BY_ID["action-verbs"].build(record)

    updated = apply_suggestion(record, suggestion)

    assert updated.experience[0].description == f"Wrote code\n{suggestion.suggestion_text}"
    assert updated.experience[1] is record.experience[1]


@pytest.mark.unit
def test_apply_experience_suggestion_to_named_entry(record):
    suggestion = RULES_BY_ID["quantify-achievements"].build(record)

    updated = apply_suggestion(record, suggestion, entry_id="b")

    assert updated.experience[1].description == suggestion.suggestion_text
    assert updated.experience[0] is record.experience[0]


@pytest.mark.unit
def test_apply_experience_suggestion_without_experience():
    suggestion = RULES_BY_ID["action-verbs"].build(ResumeRecord.empty())

    with pytest.raises(SuggestionNotApplicableError):
        apply_suggestion(ResumeRecord.empty(), suggestion)


@pytest.mark.unit
@pytest.mark.parametrize("suggestion_id", ["contact-info", "skills-section", "keywords-tip"])
def test_advisory_suggestions_are_not_applicable(suggestion_id):
    record = ResumeRecord.empty()
    suggestion = next(s for s in evaluate(record) if s.id == suggestion_id)

    with pytest.raises(SuggestionNotApplicableError):
        apply_suggestion(record, suggestion)


@pytest.mark.unit
def test_update_personal_info_rejects_null():
    original = ResumeRecord.empty()

    with pytest.raises(InvalidRecordError):
        update_personal_info(original, "email", None)

    assert original.personal_info.email == ""


@pytest.mark.unit
def test_update_experience_rejects_null_description(record):
    with pytest.raises(InvalidRecordError):
        update_experience(record, "a", "description", None)

    assert record.experience[0].description == "Wrote code"


@pytest.mark.unit
def test_update_experience_rejects_non_boolean_current(record):
    with pytest.raises(InvalidRecordError):
        update_experience(record, "a", "current", "yes")

    assert record.experience[0].current is False


@pytest.mark.unit
def test_update_summary_rejects_null():
    with pytest.raises(InvalidRecordError):
        update_summary(ResumeRecord.empty(), None)


@pytest.mark.unit
def test_update_skill_items_rejects_non_text():
    record = add_skill_category(ResumeRecord.empty())
    entry_id = record.skills[0].id

    with pytest.raises(InvalidRecordError):
        update_skill_category(record, entry_id, "items", ["Python", None])

    with pytest.raises(InvalidRecordError):
        update_skill_category(record, entry_id, "items", None)


@pytest.mark.unit
def test_edited_record_always_evaluates():
    """A rejected edit never leaves a record the evaluator cannot read."""
    record = add_experience(ResumeRecord.empty())
    entry_id = record.experience[0].id

    with pytest.raises(InvalidRecordError):
        record = update_experience(record, entry_id, "description", None)

    assert [s.id for s in evaluate(record)][-1] == "keywords-tip"
