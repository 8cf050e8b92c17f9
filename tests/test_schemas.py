"""Tests for the profile projections and their helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from api.schemas import PublicUser, SelfProfile, parse_history, to_timestamp
from database.models import User


def _user(**overrides) -> User:
    values = dict(
        id=3,
        username="budihermawanto",
        nama="Budi Hermawanto",
        email="budihermawanto@gmail.com",
        password="$2b$10$hash",
        history='["a", "b"]',
        created_at=datetime(2024, 1, 31, 8, 0, 0, 123456, tzinfo=timezone.utc),
        updated_at=datetime(2024, 1, 31, 8, 0, 0, 123456),
    )
    values.update(overrides)
    return User(**values)


class TestHelpers:
    def test_timestamp_millisecond_utc(self):
        value = datetime(2024, 1, 31, 15, 0, 0, 999999, tzinfo=timezone(timedelta(hours=7)))
        assert to_timestamp(value) == "2024-01-31T08:00:00.999Z"

    def test_naive_timestamp_treated_as_utc(self):
        assert to_timestamp(datetime(2024, 1, 1)) == "2024-01-01T00:00:00.000Z"

    def test_none_timestamp(self):
        assert to_timestamp(None) is None

    def test_history_parsing(self):
        assert parse_history("[]") == []
        assert parse_history(None) == []
        assert parse_history('[{"q": 1}]') == [{"q": 1}]

    @pytest.mark.parametrize("raw", ["{}", "not json"])
    def test_history_must_be_a_sequence(self, raw):
        with pytest.raises(ValueError):
            parse_history(raw)


class TestProjections:
    def test_public_user_drops_private_fields(self):
        dumped = PublicUser.from_user(_user()).model_dump()
        assert dumped == {
            "username": "budihermawanto",
            "nama": "Budi Hermawanto",
            "email": "budihermawanto@gmail.com",
            "createdAt": "2024-01-31T08:00:00.123Z",
            "updatedAt": "2024-01-31T08:00:00.123Z",
        }

    def test_self_profile_parses_history(self):
        profile = SelfProfile.from_user(_user())
        assert profile.history == ["a", "b"]
        assert profile.password == "$2b$10$hash"
