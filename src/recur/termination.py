"""Termination policies deciding when a recurrence stream stops."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Until:
    """Stop before the first occurrence at or after ``instant``.

    A naive ``instant`` is read as wall-clock time in the rule's zone.
    """

    instant: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.instant, datetime):
            raise TypeError(
                f"Until expects a datetime, got {type(self.instant).__name__}"
            )


@dataclass(frozen=True)
class Count:
    """Emit at most ``n`` occurrences."""

    n: int

    def __post_init__(self) -> None:
        if isinstance(self.n, bool) or not isinstance(self.n, int):
            raise TypeError(f"Count expects an int, got {type(self.n).__name__}")
        if self.n < 0:
            raise ValueError(f"Count must be >= 0, got {self.n}")

    def skip(self, occurrences: int) -> "Count":
        """Return the budget left after skipping occurrences, floored at zero."""
        return Count(max(0, self.n - occurrences))


@dataclass(frozen=True)
class Never:
    """Never stop."""


End = Until | Count | Never
