"""
Exceptions raised by the unmarshaler.

Callers dispatch on the exception class. Every error carries enough context
(field name, declared type, raw value) to build a useful message, but the
message text itself is not part of the contract.
"""

from typing import Any, Optional


class EnvError(Exception):
    """Base class for every unmarshaling error."""
    pass


class InvalidValueError(EnvError):
    """Raised when the target is not a dataclass instance."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"value must be a dataclass instance, got {type(value).__name__}"
        )


class UnexportedFieldError(EnvError):
    """Raised when a field tagged with "env" cannot be assigned."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"field {field_name!r} must be public and assignable")


class UnsupportedTypeError(EnvError):
    """Raised when a tagged field's type has no coercion rule."""

    def __init__(self, field_name: Optional[str], field_type: Any):
        self.field_name = field_name
        self.field_type = field_type
        super().__init__(
            f"field {field_name!r} is an unsupported type: {field_type!r}"
        )


class CoercionError(EnvError):
    """
    Raised when an environment value does not parse as the field's type.

    The underlying ValueError/OverflowError is chained as __cause__.
    """

    def __init__(self, field_name: Optional[str], field_type: Any, value: str, reason: str):
        self.field_name = field_name
        self.field_type = field_type
        self.value = value
        self.reason = reason
        super().__init__(
            f"field {field_name!r}: cannot parse {value!r} as {getattr(field_type, '__name__', field_type)}: {reason}"
        )
