"""Status of a business operation: errors, or a success message.

A service method creates a status, adds errors while validating, and
returns it. The caller checks is_valid and shows either message or the
errors. Statuses of sub-operations merge into their parent with
combine_statuses().

Components:
    ValidationResult - Error message plus the names of the members it concerns
    ErrorGeneric - ValidationResult with a header naming where it came from
    StatusGeneric - Ordered errors plus a settable success message
    StatusGenericResult - StatusGeneric carrying a result while valid

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from localizemessages.constants import (
    DEFAULT_SUCCESS_MESSAGE,
    HEADER_SEPARATOR,
    MANY_ERRORS_FORMAT,
    NO_ERRORS_MESSAGE,
    ONE_ERROR_MESSAGE,
)

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Errors
    "ValidationResult",
    "ErrorGeneric",
    # Statuses
    "StatusGeneric",
    "StatusGenericResult",
]


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """An error message and the members (e.g., form fields) it applies to.

    Attributes:
        error_message: Message shown to the user
        member_names: Names of the members in error; empty for a general error
    """

    error_message: str
    member_names: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "member_names", tuple(self.member_names))

    def __str__(self) -> str:
        return self.error_message


@dataclass(frozen=True, slots=True)
class ErrorGeneric:
    """A ValidationResult tagged with a header.

    The header says which part of a larger operation produced the error,
    e.g. "Order>Address". Headers nest with ">" when statuses are combined.

    Attributes:
        header: Origin of the error; "" when not set
        error_result: The error itself
        debug_data: Optional extra detail for developers, never shown to users
    """

    header: str
    error_result: ValidationResult
    debug_data: str | None = None

    def with_prefix(self, prefix: str) -> ErrorGeneric:
        """Return a copy with prefix prepended to the header.

        Example:
            >>> error = ErrorGeneric("Address", ValidationResult("Missing street"))
            >>> str(error.with_prefix("Order"))
            'Order>Address: Missing street'
        """
        if not prefix:
            return self
        header = f"{prefix}{HEADER_SEPARATOR}{self.header}" if self.header else prefix
        return ErrorGeneric(header, self.error_result, self.debug_data)

    def __str__(self) -> str:
        if self.header:
            return f"{self.header}: {self.error_result}"
        return str(self.error_result)


class StatusGeneric:
    """Errors collected by an operation, and its success message.

    Example:
        >>> status = StatusGeneric()
        >>> status.message = "Order placed."
        >>> status.add_error("The basket is empty.", "basket")
        >>> status.is_valid
        False
        >>> status.message
        'Failed with 1 error'
    """

    __slots__ = ("_errors", "_success_message", "header")

    def __init__(self, header: str = "") -> None:
        """Initialize a valid status.

        Args:
            header: Header given to every error this status adds
        """
        self.header = header
        self._errors: list[ErrorGeneric] = []
        self._success_message = DEFAULT_SUCCESS_MESSAGE

    def __repr__(self) -> str:
        return f"{type(self).__name__}(header={self.header!r}, errors={len(self._errors)})"

    @property
    def errors(self) -> tuple[ErrorGeneric, ...]:
        """Errors in the order they were added."""
        return tuple(self._errors)

    @property
    def is_valid(self) -> bool:
        """True while there are no errors."""
        return not self._errors

    @property
    def has_errors(self) -> bool:
        """True once an error has been added."""
        return bool(self._errors)

    @property
    def message(self) -> str:
        """Success message while valid, otherwise a summary of the error count."""
        if self.is_valid:
            return self._success_message
        count = len(self._errors)
        return ONE_ERROR_MESSAGE if count == 1 else MANY_ERRORS_FORMAT.format(count)

    @message.setter
    def message(self, value: str) -> None:
        self._success_message = value

    def _append_error(self, message: str, member_names: Iterable[str]) -> None:
        result = ValidationResult(message, tuple(member_names))
        self._errors.append(ErrorGeneric(self.header, result))

    def add_error(self, message: str, *member_names: str) -> Self:
        """Add an error message, optionally naming the members in error."""
        self._append_error(message, member_names)
        return self

    def add_validation_result(self, result: ValidationResult) -> Self:
        """Add an existing ValidationResult as an error."""
        self._errors.append(ErrorGeneric(self.header, result))
        return self

    def add_validation_results(self, results: Iterable[ValidationResult]) -> Self:
        """Add several ValidationResults as errors."""
        for result in results:
            self.add_validation_result(result)
        return self

    def combine_statuses(self, other: StatusGeneric) -> Self:
        """Merge the status of a sub-operation into this one.

        An invalid other contributes its errors, with this status' header
        prepended to theirs. If this status is still valid and other has a
        non-default message, that message becomes this status' message.
        """
        if not other.is_valid:
            self._errors.extend(error.with_prefix(self.header) for error in other.errors)

        if self.is_valid and other.message != DEFAULT_SUCCESS_MESSAGE:
            self._success_message = other.message

        return self

    def get_all_errors(self, separator: str | None = None) -> str:
        """Join all errors into one string.

        Args:
            separator: Text between errors; defaults to a newline

        Returns:
            The joined errors, or "No errors" when there are none
        """
        if not self._errors:
            return NO_ERRORS_MESSAGE
        return ("\n" if separator is None else separator).join(str(error) for error in self._errors)


T = TypeVar("T")


class StatusGenericResult(StatusGeneric, Generic[T]):
    """StatusGeneric that also returns a value from the operation.

    The result is hidden (None) while the status has errors, so callers
    cannot use a half-built value by mistake.
    """

    __slots__ = ("_result",)

    def __init__(self, header: str = "") -> None:
        super().__init__(header)
        self._result: T | None = None

    @property
    def result(self) -> T | None:
        """The operation's value while valid, otherwise None."""
        return self._result if self.is_valid else None

    def set_result(self, result: T) -> Self:
        """Store the operation's value."""
        self._result = result
        return self
