"""Groups of environment variables declared together.

Example::

    LocationsEnv = declare_group("LocationsEnv", ["Folder", "File", "AnotherFile"])
    LocationsEnv.Folder.key()        # "LOCATIONS_FOLDER"
    LocationsEnv.find_by_key("LOCATIONS_FILE")
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

from .variable import EnvVariable, Getenv


class EnvGroup:
    """Ordered, read-only collection of :class:`EnvVariable` members."""

    def __init__(self, name: str, members: Iterable[EnvVariable]) -> None:
        self._name = name
        self._members: tuple[EnvVariable, ...] = tuple(members)
        self._by_member: dict[str, EnvVariable] = {}
        for var in self._members:
            self._by_member.setdefault(var.member, var)

    @property
    def name(self) -> str:
        return self._name

    def members(self) -> tuple[EnvVariable, ...]:
        """Return the members in declaration order."""
        return self._members

    def keys(self) -> list[str]:
        return [var.key() for var in self._members]

    def find_by_key(self, key: str) -> EnvVariable | None:
        """Return the first member whose key equals *key*, or ``None``."""
        for var in self._members:
            if var.key() == key:
                return var
        return None

    def key_exists(self, key: str) -> bool:
        return self.find_by_key(key) is not None

    def __getattr__(self, member: str) -> EnvVariable:
        if member.startswith("_"):
            raise AttributeError(member)
        try:
            return self._by_member[member]
        except KeyError as exc:
            raise AttributeError(f"{self._name} has no member {member!r}") from exc

    def __getitem__(self, member: str) -> EnvVariable:
        return self._by_member[member]

    def __iter__(self) -> Iterator[EnvVariable]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, item: object) -> bool:
        return item in self._members

    def __repr__(self) -> str:
        names = ", ".join(var.member for var in self._members)
        return f"EnvGroup({self._name!r}, [{names}])"


def declare_group(
    name: str,
    members: Iterable[str],
    *,
    getenv: Getenv = os.getenv,
) -> EnvGroup:
    """Declare the group *name* with the ordered member identifiers *members*.

    Keys are derived eagerly, so an unusable identifier raises
    :class:`~dotenv_enum.errors.InvalidIdentifier` here rather than on first
    lookup.  ``getenv`` is used by every member to read its value.
    """
    return EnvGroup(name, (EnvVariable(name, member, getenv) for member in members))


__all__ = ["EnvGroup", "declare_group"]
