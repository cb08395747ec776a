"""Error classes with package identification.

A falsified property is never an exception: it is reported through an
``Outcome``. The classes here cover misuse of the engine itself (bad
arguments, invalid settings).
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "generative_check"


class GenerativeCheckError(PydanticCustomError):
    """Pydantic custom error raised for invalid engine arguments.

    Inherits from PydanticCustomError (and therefore ValueError) so callers
    can catch it either way, while the context identifies the package.
    """

    @classmethod
    def invalid_argument(
        cls, name: str, value: Any, reason: str, context: dict | None = None
    ) -> GenerativeCheckError:
        """Build an error for an argument outside its allowed range.

        Args:
            name: Name of the offending argument.
            value: The rejected value.
            reason: Human-readable constraint that was violated.
            context: Additional context merged into the error context.

        Returns:
            GenerativeCheckError with type "invalid_argument".
        """
        ctx = {
            "package": PACKAGE_NAME,
            "name": name,
            "value": repr(value),
            "reason": reason,
            **(context or {}),
        }
        return cls("invalid_argument", "{name}={value}: {reason}", ctx)

    @classmethod
    def from_pydantic_error(cls, error: PydanticCustomError) -> GenerativeCheckError:
        """Wrap a PydanticCustomError with package identification."""
        return cls(
            error.type,
            error.message_template,
            {"package": PACKAGE_NAME, **(error.context or {})},
        )


class GenerativeCheckValidationError(Exception):
    """Exception wrapper for pydantic.ValidationError raised by settings.

    Provides access to the original error while adding package context.
    """

    def __init__(self, validation_error: Exception, context: dict | None = None):
        from pydantic import ValidationError as PydanticValidationError

        self.original_error = validation_error
        self.context = {"package": PACKAGE_NAME, **(context or {})}

        if isinstance(validation_error, PydanticValidationError):
            self.errors_list = validation_error.errors()
            error_messages = "; ".join(
                f"{'.'.join(str(loc) for loc in e.get('loc', ()))}: {e.get('msg', str(e))}"
                for e in self.errors_list
            )
        else:
            self.errors_list = []
            error_messages = str(validation_error)

        super().__init__(error_messages)

    @classmethod
    def from_validation_error(
        cls, error: Exception, context: dict | None = None
    ) -> GenerativeCheckValidationError:
        """Wrap a pydantic.ValidationError with package context."""
        return cls(error, context)

    def errors(self) -> list:
        """Get the list of validation errors."""
        return self.errors_list

    def __repr__(self) -> str:
        return f"GenerativeCheckValidationError({self.original_error!r}, context={self.context})"
