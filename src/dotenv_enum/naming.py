"""Derivation of canonical environment variable names.

A grouping identifier such as ``LocationsEnv`` and a member identifier such as
``AnotherFile`` are split into words on capital letters and joined into
``LOCATIONS_ANOTHER_FILE``.  A trailing ``Env`` word on the grouping is treated
as a naming convention and never appears in the key.
"""

from __future__ import annotations

from .errors import InvalidIdentifier

RESERVED_SUFFIX = "Env"
KEY_JOIN_CHAR = "_"


def split_into_words(raw: str) -> list[str]:
    """Split *raw* into words starting at each uppercase character.

    Underscores are discarded before splitting.  Runs of capitals are not
    grouped: ``"ABCdef"`` yields ``["A", "B", "Cdef"]``.
    """
    words: list[str] = []
    for char in raw.strip().replace("_", ""):
        if char.isupper() or not words:
            words.append(char)
        else:
            words[-1] += char
    if not words:
        raise InvalidIdentifier(f"invalid identifier: {raw!r}")
    return words


def build_key(grouping_id: str, member_id: str) -> str:
    """Return the environment variable name for *member_id* of *grouping_id*."""
    member_words = split_into_words(member_id)
    group_words = split_into_words(grouping_id)
    if group_words[-1] == RESERVED_SUFFIX:
        group_words.pop()
    group = KEY_JOIN_CHAR.join(group_words).upper()
    member = KEY_JOIN_CHAR.join(member_words).upper()
    return f"{group}{KEY_JOIN_CHAR}{member}"


__all__ = ["KEY_JOIN_CHAR", "RESERVED_SUFFIX", "build_key", "split_into_words"]
