"""Mixin classes for window queries shared by rules, RRule and Set."""

from datetime import datetime, tzinfo
from itertools import islice
from typing import TYPE_CHECKING, Any

from recur.logging import get_logger, timed_block

if TYPE_CHECKING:
    from recur.backends import BackendName

_log = get_logger(__name__)


class OccurrenceMixin:
    """Mixin providing window queries on top of ``all()`` and ``after()``.

    Concrete classes supply ``all()``, ``after(min)`` and ``_normalize(value)``,
    the latter turning an aware or naive datetime into a UTC instant.
    """

    def take(self, n: int) -> list[datetime]:
        """Return the first ``n`` occurrences of ``all()``."""
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        return list(islice(self.all(), n))

    def between(
        self, start: datetime, end: datetime, inc: bool = False
    ) -> list[datetime]:
        """Return occurrences between ``start`` and ``end``.

        Args:
            start: Lower bound of the window.
            end: Upper bound of the window.
            inc: If True, occurrences equal to a bound are included.

        Returns:
            Occurrences in ascending order. Stops pulling at ``end``, so this
            is safe on unbounded rules.
        """
        lower = self._normalize(start)
        upper = self._normalize(end)
        result = []
        for occurrence in self.after(lower):
            if occurrence > upper or (not inc and occurrence == upper):
                break
            if not inc and occurrence == lower:
                continue
            result.append(occurrence)
        return result

    def to_frame(
        self,
        start: datetime,
        end: datetime,
        backend: "BackendName" = "pandas",
        zone: str | tzinfo | None = None,
        column: str = "occurrence",
    ) -> Any:
        """Materialize occurrences in ``[start, end]`` as a DataFrame.

        Args:
            start: Start of the window (inclusive).
            end: End of the window (inclusive).
            backend: DataFrame backend to use ("pandas" or "polars").
            zone: Zone to convert the column to. Defaults to UTC.
            column: Name of the occurrence column.

        Returns:
            DataFrame with a single tz-aware ``column``.
        """
        from recur.backends import get_backend

        impl = get_backend(backend)
        with timed_block(_log, "frame_exported", backend=backend):
            df = impl.from_instants(self.between(start, end, inc=True), column)
            if zone is not None:
                df = impl.convert_zone(df, column, zone)
        return df
