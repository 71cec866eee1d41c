from .errors import (
    CastFailureError,
    DeclarationError,
    EnvEnumError,
    InvalidIdentifier,
    MissingVariableError,
)
from .loader import load_env, read_env_file
from .naming import build_key, split_into_words
from .registry import EnvGroup, declare_group
from .result import LookupResult, Outcome
from .variable import EnvVariable


__all__ = [
    "CastFailureError",
    "DeclarationError",
    "EnvEnumError",
    "EnvGroup",
    "EnvVariable",
    "InvalidIdentifier",
    "LookupResult",
    "MissingVariableError",
    "Outcome",
    "build_key",
    "declare_group",
    "load_env",
    "read_env_file",
    "split_into_words",
]
