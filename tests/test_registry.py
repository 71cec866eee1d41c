from __future__ import annotations

import pytest

from dotenv_enum.errors import InvalidIdentifier
from dotenv_enum.registry import EnvGroup, declare_group
from dotenv_enum.variable import EnvVariable


@pytest.fixture
def settings():
    return declare_group("SettingsEnv", ["ResolutionWidth", "ResolutionHeight"])


def test_members_keep_declaration_order():
    group = declare_group("LocationsEnv", ["Folder", "File", "AnotherFile"])
    assert [v.member for v in group.members()] == ["Folder", "File", "AnotherFile"]
    assert group.keys() == ["LOCATIONS_FOLDER", "LOCATIONS_FILE", "LOCATIONS_ANOTHER_FILE"]
    assert list(group) == list(group) == list(group.members())
    assert len(group) == 3


def test_keys_are_distinct(settings):
    assert settings.keys() == ["SETTINGS_RESOLUTION_WIDTH", "SETTINGS_RESOLUTION_HEIGHT"]


def test_find_by_key_round_trip(settings):
    for var in settings.members():
        assert settings.find_by_key(var.key()) is var
        assert settings.key_exists(var.key())


def test_find_by_key_unknown(settings):
    assert settings.find_by_key("SETTINGS_DEPTH") is None
    assert not settings.key_exists("SETTINGS_DEPTH")
    assert not settings.key_exists("resolution_width")


def test_find_by_key_returns_first_match():
    group = EnvGroup("En", [EnvVariable("En", "Pog"), EnvVariable("En", "P_og")])
    assert group.find_by_key("EN_POG").member == "Pog"


def test_member_access(settings):
    assert settings.ResolutionWidth.key() == "SETTINGS_RESOLUTION_WIDTH"
    assert settings["ResolutionHeight"].key() == "SETTINGS_RESOLUTION_HEIGHT"
    assert settings.ResolutionWidth in settings
    with pytest.raises(AttributeError):
        settings.Depth
    with pytest.raises(KeyError):
        settings["Depth"]


def test_group_uses_given_getenv():
    values = {"AN_MDR": "11"}
    group = declare_group("AnEnv", ["Lol", "Mdr"], getenv=values.get)
    assert group.Mdr.require_cast(int) == 11
    assert group.Lol.lookup().is_absent()


def test_declare_group_rejects_empty_member():
    with pytest.raises(InvalidIdentifier):
        declare_group("AnEnv", ["Lol", ""])


def test_empty_group():
    group = declare_group("EmptyEnv", [])
    assert group.members() == ()
    assert group.find_by_key("EMPTY_X") is None


def test_repr(settings):
    assert repr(settings) == "EnvGroup('SettingsEnv', [ResolutionWidth, ResolutionHeight])"
