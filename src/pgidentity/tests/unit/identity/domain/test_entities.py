"""Unit tests for identity entities."""

from dataclasses import FrozenInstanceError

import pytest
from ulid import ULID

from identity.domain.entities import (
    Claim,
    IdentityRole,
    IdentityUser,
    UserLoginInfo,
    generate_id,
)


class TestIdentityUser:
    def test_generates_ulid_id(self):
        user = IdentityUser(user_name="alice")

        assert str(ULID.from_str(user.id)) == user.id

    def test_ids_are_unique(self):
        assert IdentityUser().id != IdentityUser().id

    def test_defaults(self):
        user = IdentityUser(user_name="alice")

        assert user.email is None
        assert user.email_confirmed is False
        assert user.password_hash is None
        assert user.security_stamp is None

    def test_equality_is_by_id(self):
        first = IdentityUser(id="u1", user_name="alice")
        second = IdentityUser(id="u1", user_name="renamed")

        assert first == second
        assert len({first, second}) == 1
        assert first != IdentityUser(id="u2", user_name="alice")

    def test_str_shows_name(self):
        assert str(IdentityUser(user_name="alice")) == "IdentityUser(alice)"


class TestIdentityRole:
    def test_equality_is_by_id(self):
        assert IdentityRole(name="a", id="r1") == IdentityRole(name="b", id="r1")
        assert IdentityRole(name="a", id="r1") != IdentityUser(id="r1")


class TestValueObjects:
    def test_claims_compare_by_value(self):
        assert Claim(type="dept", value="eng") == Claim(type="dept", value="eng")

    def test_login_is_immutable(self):
        login = UserLoginInfo(login_provider="github", provider_key="1")

        with pytest.raises(FrozenInstanceError):
            login.provider_key = "2"


def test_generate_id_is_string():
    assert isinstance(generate_id(), str)
    assert len(generate_id()) == 26
