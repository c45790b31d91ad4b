from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from core.domain.constants import MAX_GROUP_SIZE
from core.domain.models import (
    Application, ApplicationCreate, ApplicationStatus, RegistrationDraft,
    parse_member_names, parse_timestamp,
)


class TestParseTimestamp:
    def test_date_only_is_midnight_utc(self):
        assert parse_timestamp("2024-01-10") == datetime(2024, 1, 10, tzinfo=timezone.utc)

    def test_zulu_suffix(self):
        assert parse_timestamp("2024-01-10T09:30:00Z") == datetime(2024, 1, 10, 9, 30, tzinfo=timezone.utc)

    def test_offset_is_converted_to_utc(self):
        assert parse_timestamp("2024-01-10T09:00:00+02:00") == datetime(2024, 1, 10, 7, tzinfo=timezone.utc)

    def test_empty_is_none(self):
        assert parse_timestamp("") is None
        assert parse_timestamp(None) is None

    def test_garbage_raises(self):
        with pytest.raises(ValueError):
            parse_timestamp("next tuesday")


class TestMemberNames:
    def test_json_string(self):
        assert parse_member_names('["Ada", "Linus"]') == ["Ada", "Linus"]

    def test_native_list(self):
        assert parse_member_names(["Ada"]) == ["Ada"]

    def test_plain_string(self):
        assert parse_member_names("Ada") == ["Ada"]

    def test_missing(self):
        assert parse_member_names(None) == []

    @pytest.mark.parametrize("raw,expected", [
        ("null", []),
        ('"Ada"', ["Ada"]),
        ("42", ["42"]),
        ('["Ada", null]', ["Ada"]),
    ])
    def test_json_that_is_not_an_array(self, raw, expected):
        assert parse_member_names(raw) == expected

    def test_json_object_is_rejected(self):
        with pytest.raises(ValueError):
            parse_member_names('{"name": "Ada"}')


def test_application_row_parsing():
    app = Application(
        id=42,
        event_id=7,
        project_name="Rover",
        group_size=2,
        full_names='["Ada", "Linus"]',
        status="approved",
        created_at="2024-01-02T10:00:00+00:00",
    )
    assert app.id == "42"
    assert app.event_id == "7"
    assert app.team_leader == "Ada"
    assert app.status == ApplicationStatus.APPROVED


def test_application_create_requires_matching_group_size():
    with pytest.raises(ValidationError):
        ApplicationCreate(
            event_id="e1",
            project_name="Rover",
            university="MIT",
            group_size=3,
            full_names=["Ada", "Linus"],
            group_leader_email="ada@mit.edu",
            group_leader_phone="555",
        )


class TestRegistrationDraft:
    def test_starts_with_one_member(self):
        draft = RegistrationDraft()
        assert draft.group_size == 1

    def test_add_and_remove_members(self):
        draft = RegistrationDraft(group_members=["Ada"])
        draft.add_member()
        draft.add_member()
        assert draft.group_size == 3
        draft.remove_member(1)
        assert draft.group_size == 2

    def test_team_leader_slot_is_never_removed(self):
        draft = RegistrationDraft(group_members=["Ada", "Linus"])
        draft.remove_member(0)
        assert draft.group_members == ["Ada", "Linus"]
        draft.remove_member(1)
        draft.remove_member(1)
        assert draft.group_members == ["Ada"]

    def test_member_cap(self):
        draft = RegistrationDraft(group_members=[""] * (MAX_GROUP_SIZE - 1))
        assert draft.add_member() is True
        assert draft.is_full
        assert draft.add_member() is False
        assert draft.group_size == MAX_GROUP_SIZE

    def test_missing_fields(self):
        draft = RegistrationDraft(project_name="Rover", university="  ")
        missing = draft.missing_fields()
        assert "project_name" not in missing
        assert "university" in missing
        assert "selected_event" in missing

    def test_to_application_keeps_member_order(self):
        draft = RegistrationDraft(
            selected_event="e1",
            project_name=" Rover ",
            university="MIT",
            group_members=["Ada", "Linus", "Grace"],
            leader_email="ada@mit.edu",
            leader_phone="555",
            problem_statement="p",
            solution="s",
        )
        app = draft.to_application()
        assert app.project_name == "Rover"
        assert app.full_names == ["Ada", "Linus", "Grace"]
        assert app.group_size == 3
