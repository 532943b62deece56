# devconnector/schemas/test_base.py
from datetime import datetime, timedelta, timezone

import pytest
from marshmallow import ValidationError

from devconnector.api.users.schemas import RegisterSchema
from devconnector.api.profiles.schemas import ExperienceCreateSchema
from devconnector.schemas.base import UtcDateTime, flatten_errors


def test_all_violations_are_reported_in_declaration_order():
    """검증은 중간에 멈추지 않고 모든 필드의 오류를 선언 순서대로 돌려줘야 함"""
    with pytest.raises(ValidationError) as exc_info:
        RegisterSchema().load({"name": "", "email": "not-an-email", "password": "123"})

    assert flatten_errors(exc_info.value.messages) == [
        {"msg": "Name is required", "param": "name"},
        {"msg": "Please include a valid email", "param": "email"},
        {"msg": "Please enter a password with 6 or more characters", "param": "password"},
    ]


def test_missing_fields_use_same_message_as_empty():
    with pytest.raises(ValidationError) as exc_info:
        RegisterSchema().load({})
    params = [e["param"] for e in flatten_errors(exc_info.value.messages)]
    assert params == ["name", "email", "password"]


def test_unknown_fields_are_ignored():
    data = RegisterSchema().load({"name": "Ann", "email": "ann@x.com", "password": "secret1", "password2": "x"})
    assert "password2" not in data


def test_date_fields_use_wire_names():
    data = ExperienceCreateSchema().load({"title": "Dev", "company": "ACME", "from": "2020-01-15", "to": ""})
    assert data["from_date"].year == 2020
    assert data["to_date"] is None
    assert data["current"] is False


def test_unparseable_date_is_reported():
    with pytest.raises(ValidationError) as exc_info:
        ExperienceCreateSchema().load({"title": "Dev", "company": "ACME", "from": "someday"})
    assert flatten_errors(exc_info.value.messages) == [{"msg": "Not a valid date", "param": "from"}]


def test_schema_level_errors_have_no_param():
    assert flatten_errors({"_schema": ["Invalid input type."]}) == [{"msg": "Invalid input type."}]


@pytest.mark.parametrize("value, expected", [
    (datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc), "2024-01-15T10:30:00Z"),
    (datetime(2024, 1, 15, 19, 30, tzinfo=timezone(timedelta(hours=9))), "2024-01-15T10:30:00Z"),
    (datetime(2024, 1, 15, 10, 30), "2024-01-15T10:30:00Z"),
])
def test_utc_datetime_serializes_with_z_suffix(value, expected):
    assert UtcDateTime().serialize('date', {'date': value}) == expected
