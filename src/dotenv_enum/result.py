from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import CastFailureError, MissingVariableError


class Outcome(Enum):
    """State of a :class:`LookupResult`."""

    PRESENT = "present"
    ABSENT = "absent"
    CAST_FAILURE = "cast_failure"


@dataclass(frozen=True)
class LookupResult:
    """Outcome of reading one variable from the environment.

    Exactly one of three states: a present ``value``, an absent key, or a
    value that could not be cast.  The latter two carry a ``message`` naming
    the key.
    """

    outcome: Outcome
    value: Any = None
    message: str | None = None

    @classmethod
    def present(cls, value: Any) -> "LookupResult":
        return cls(Outcome.PRESENT, value=value)

    @classmethod
    def absent(cls, message: str) -> "LookupResult":
        return cls(Outcome.ABSENT, message=message)

    @classmethod
    def cast_failure(cls, message: str) -> "LookupResult":
        return cls(Outcome.CAST_FAILURE, message=message)

    def is_present(self) -> bool:
        return self.outcome is Outcome.PRESENT

    def is_absent(self) -> bool:
        return self.outcome is Outcome.ABSENT

    def is_cast_failure(self) -> bool:
        return self.outcome is Outcome.CAST_FAILURE

    def value_or(self, default: Any) -> Any:
        """Return the value if present, otherwise *default*."""
        return self.value if self.is_present() else default

    def unwrap(self) -> Any:
        """Return the value or raise the error matching the outcome."""
        if self.outcome is Outcome.ABSENT:
            raise MissingVariableError(self.message)
        if self.outcome is Outcome.CAST_FAILURE:
            raise CastFailureError(self.message)
        return self.value


__all__ = ["LookupResult", "Outcome"]
