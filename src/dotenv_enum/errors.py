class EnvEnumError(Exception):
    """Base class for dotenv-enum errors."""


class InvalidIdentifier(EnvEnumError, ValueError):
    """Raised when an identifier contains no usable characters."""


class MissingVariableError(EnvEnumError, LookupError):
    """Raised when a required variable is not set."""


class CastFailureError(EnvEnumError, ValueError):
    """Raised when a required variable cannot be parsed as the requested type."""


class DeclarationError(EnvEnumError):
    """Raised when a group declaration file is malformed."""
