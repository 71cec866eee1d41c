"""pytest helpers generated from a declared group.

::

    from dotenv_enum.testing import assert_distinct_keys, assert_present, parametrize_members

    def test_locations_keys_are_distinct():
        assert_distinct_keys(LocationsEnv)

    @parametrize_members(LocationsEnv)
    def test_locations_are_in_dotenv(variable):
        assert_present(variable)
"""

from __future__ import annotations

from itertools import combinations

import pytest

from .registry import EnvGroup
from .variable import EnvVariable


def distinct_keys(group: EnvGroup) -> list[tuple[str, str]]:
    """Return member pairs of *group* that share a key."""
    return [
        (a.member, b.member)
        for a, b in combinations(group.members(), 2)
        if a.key() == b.key()
    ]


def assert_distinct_keys(group: EnvGroup) -> None:
    """Fail if two members of *group* share a key."""
    clashes = distinct_keys(group)
    assert not clashes, f"{group.name} has members sharing a key: {clashes}"


def assert_present(variable: EnvVariable) -> None:
    """Fail if *variable* is unset or empty."""
    value = variable.require()
    assert value, f"{variable.key()} is empty"


def parametrize_members(group: EnvGroup):
    """Parametrize a test over every member of *group* as ``variable``."""
    members = group.members()
    return pytest.mark.parametrize(
        "variable", members, ids=[var.member for var in members]
    )


__all__ = ["assert_distinct_keys", "assert_present", "distinct_keys", "parametrize_members"]
