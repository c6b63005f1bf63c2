"""Outcome value object — the result of a single calculator operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from geodistance.domain.exceptions import GeoDistanceError


@dataclass(frozen=True)
class Outcome:
    """Either a value or a typed error, never both."""

    value: Any = None
    error: GeoDistanceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value

    @classmethod
    def capture(cls, operation: Callable[[], Any]) -> Outcome:
        """Run *operation* and wrap its return value or domain error."""
        try:
            return cls(value=operation())
        except GeoDistanceError as exc:
            return cls(error=exc)
