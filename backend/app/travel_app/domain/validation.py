"""Validation results and error accumulation for domain values.

A validating factory never raises on bad input. It returns either
``Valid(value)`` or ``Invalid(errors)``, where ``errors`` is a
``ValidationErrors`` sequence holding at least one ``ValidationError``.
Results from several fields can be collected so that every failure is
reported at once instead of stopping at the first one.
"""

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Generic, Self, TypeVar, Union

T = TypeVar("T")
R = TypeVar("R")

DEFAULT_SEPARATOR = "\n"


@dataclass(frozen=True)
class ValidationError:
    """A single human-readable validation failure.

    Attributes:
        message: Description including the offending input and the rule it broke.
    """

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ValidationErrors:
    """Non-empty, ordered sequence of validation errors."""

    errors: tuple[ValidationError, ...]

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("ValidationErrors requires at least one error")

    @classmethod
    def of(cls, error: ValidationError, *more: ValidationError) -> Self:
        """Build a sequence from one or more errors, preserving order."""
        return cls((error, *more))

    def merge(self, other: "ValidationErrors") -> "ValidationErrors":
        """Concatenate two sequences, keeping this one's errors first."""
        return ValidationErrors(self.errors + other.errors)

    def __add__(self, other: "ValidationErrors") -> "ValidationErrors":
        return self.merge(other)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    @property
    def messages(self) -> list[str]:
        return [error.message for error in self.errors]

    def render(self, separator: str = DEFAULT_SEPARATOR) -> str:
        """Fold all messages into a single string."""
        return separator.join(self.messages)


def fold_validation_errors(
    errors: ValidationErrors, separator: str = DEFAULT_SEPARATOR
) -> str:
    """Render an error sequence for callers that only want one message."""
    return errors.render(separator)


@dataclass(frozen=True)
class Valid(Generic[T]):
    """Successful validation carrying the constructed value."""

    value: T

    @property
    def is_valid(self) -> bool:
        return True

    def fold(
        self,
        on_invalid: Callable[[ValidationErrors], R],
        on_valid: Callable[[T], R],
    ) -> R:
        return on_valid(self.value)


@dataclass(frozen=True)
class Invalid:
    """Failed validation carrying every error found."""

    errors: ValidationErrors

    @classmethod
    def single(cls, message: str) -> Self:
        """Shortcut for a failure with exactly one error."""
        return cls(ValidationErrors.of(ValidationError(message)))

    @property
    def is_valid(self) -> bool:
        return False

    def fold(
        self,
        on_invalid: Callable[[ValidationErrors], R],
        on_valid: Callable[[Any], R],
    ) -> R:
        return on_invalid(self.errors)


Validated = Union[Valid[T], Invalid]


def collect(results: Mapping[str, "Validated[Any]"]) -> "Validated[dict[str, Any]]":
    """Combine per-field results, accumulating every failure.

    Args:
        results: Field name to validation result, in reporting order.

    Returns:
        ``Valid`` with a field-name to value dict when every field passed,
        otherwise ``Invalid`` with the errors of all failed fields merged
        in the mapping's order.
    """
    values: dict[str, Any] = {}
    errors: ValidationErrors | None = None

    for field_name, result in results.items():
        if isinstance(result, Valid):
            values[field_name] = result.value
        elif errors is None:
            errors = result.errors
        else:
            errors = errors.merge(result.errors)

    if errors is not None:
        return Invalid(errors)
    return Valid(values)
