from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

from .naming import build_key
from .result import LookupResult

logger = logging.getLogger("dotenv_enum")

T = TypeVar("T")

Getenv = Callable[[str], "str | None"]


def parse_bool(value: str) -> bool:
    lower = value.strip().lower()
    if lower in {"true", "1"}:
        return True
    if lower in {"false", "0"}:
        return False
    raise ValueError(f"not a boolean: {value!r}")


# Targets whose constructor does not follow their textual form.
_PARSERS: dict[type, Callable[[str], Any]] = {bool: parse_bool}


def cast_value(value: str, target: Callable[[str], T]) -> T:
    """Parse *value* into *target*, raising ``ValueError`` on failure."""
    parser = _PARSERS.get(target, target)  # type: ignore[call-overload]
    try:
        return parser(value)
    except (TypeError, ArithmeticError) as exc:
        raise ValueError(str(exc)) from exc


@dataclass(frozen=True)
class EnvVariable:
    """One declared member of a group, bound to its environment variable."""

    grouping: str
    member: str
    getenv: Getenv = field(default=os.getenv, compare=False, repr=False)
    _key: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_key", build_key(self.grouping, self.member))

    @property
    def name(self) -> str:
        return self.member

    def key(self) -> str:
        return self._key

    def error_description(self) -> str:
        return f"No {self._key} in .env file"

    def lookup(self) -> LookupResult:
        """Read the variable from the environment."""
        value = self.getenv(self._key)
        if value is None:
            logger.debug("%s is not set", self._key)
            return LookupResult.absent(self.error_description())
        return LookupResult.present(value)

    def require(self) -> str:
        """Return the value or raise :class:`MissingVariableError`."""
        return self.lookup().unwrap()

    def cast(self, target: Callable[[str], T]) -> LookupResult:
        """Read the variable and parse it with *target*.

        ``bool`` accepts ``true``/``false``/``1``/``0``; any other target is
        called with the raw string.
        """
        result = self.lookup()
        if not result.is_present():
            return result
        try:
            return LookupResult.present(cast_value(result.value, target))
        except ValueError:
            type_name = getattr(target, "__name__", repr(target))
            logger.debug("%s=%r is not a valid %s", self._key, result.value, type_name)
            return LookupResult.cast_failure(f"Cannot cast {self._key} into {type_name}")

    def require_cast(self, target: Callable[[str], T]) -> T:
        """Return the parsed value or raise the matching error."""
        return self.cast(target).unwrap()

    def __str__(self) -> str:
        return self._key


__all__ = ["EnvVariable", "cast_value", "parse_bool"]
