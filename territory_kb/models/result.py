"""Success/failure container returned by fallible territory queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from territory_kb.errors import TerritoryError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a lookup: either a value or the error that prevented it.

    ``unwrap()`` re-raises the stored error, which is how the ``*_or_raise``
    query variants are built.
    """

    value: T | None = None
    error: TerritoryError | None = None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: TerritoryError) -> Result[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]
