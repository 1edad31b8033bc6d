"""Base class for string value objects guarded by a format rule."""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Self

from app.travel_app.domain.validation import Invalid, Valid, Validated


@dataclass(frozen=True)
class ValidatedString(ABC):
    """Immutable string wrapper that only exists in a validated state.

    Abstract base: subclasses must set a compiled ``pattern`` (checked when
    the subclass is defined) and implement ``describe_error``. Instances are
    meant to be obtained through ``try_create``; calling the constructor
    directly with a non-conforming string raises ``ValueError``, so an
    invalid instance can never be observed.

    Attributes:
        value: The canonical string, exactly as it was validated.
    """

    value: str

    pattern: ClassVar[re.Pattern[str]]

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if not isinstance(getattr(cls, "pattern", None), re.Pattern):
            raise TypeError(f"{cls.__name__} must define a compiled regex 'pattern'")

    def __post_init__(self) -> None:
        if not self.matches(self.value):
            raise ValueError(self.describe_error(self.value))

    @classmethod
    def matches(cls, raw: str) -> bool:
        """Check that the whole of ``raw`` conforms to the pattern."""
        return cls.pattern.fullmatch(raw) is not None

    @classmethod
    @abstractmethod
    def describe_error(cls, raw: str) -> str:
        """Message for a rejected ``raw``, quoting it and the broken rule."""

    @classmethod
    def try_create(cls, raw: str) -> Validated[Self]:
        """Validate ``raw`` and wrap it, or report why it was rejected.

        The input is neither trimmed nor normalized.

        Args:
            raw: Untrusted input, possibly empty or malformed.

        Returns:
            ``Valid`` holding the new instance, or ``Invalid`` holding
            exactly one error that quotes ``raw``.
        """
        if cls.matches(raw):
            return Valid(cls(raw))
        return Invalid.single(cls.describe_error(raw))

    def __str__(self) -> str:
        return self.value
