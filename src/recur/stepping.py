"""Timezone-aware stepping iterator shared by every recurrence frequency."""

from datetime import datetime, timedelta

from recur.logging import get_logger
from recur.termination import Count, End, Never, Until
from recur.zones import UTC, to_instant

_log = get_logger(__name__)


class CalendarOverflowError(OverflowError):
    """Raised when stepping leaves the range representable by datetime."""
    pass


class SteppingIterator:
    """Produce occurrences by stepping a zone-bound cursor by a fixed increment.

    The increment is added in civil time: the cursor keeps its wall-clock
    fields and only its date moves, and each value resolves its own UTC
    offset from the zone rules. Where the offsets before and after a step
    differ, the real-time gap differs from nominal by exactly that delta, so
    crossing into daylight saving is one transition shorter than nominal and
    crossing out of it one transition longer.

    A wall-clock time skipped by a spring-forward transition resolves with
    the offset in force before the transition (PEP 495, ``fold=0``); the
    following steps return to the same wall-clock time.

    The iterator is forward-only and cannot be restarted; build a new one
    from the rule to start over.
    """

    def __init__(
        self,
        cursor: datetime,
        increment: timedelta,
        end: End | None = None,
    ) -> None:
        """Initialize the iterator.

        Args:
            cursor: First occurrence, bound to the rule's zone.
            increment: Calendar step (``timedelta(days=N)`` or
                ``timedelta(weeks=N)``).
            end: Termination policy. Defaults to Never.
        """
        if cursor.tzinfo is None:
            raise ValueError("cursor must be bound to a time zone")

        self._cursor: datetime | None = cursor
        self._increment = increment
        self._until: datetime | None = None
        self._remaining: int | None = None
        self._overflow: OverflowError | None = None
        self._emitted = 0

        match end:
            case None | Never():
                pass
            case Count(n=n):
                self._remaining = n
            case Until(instant=instant):
                self._until = to_instant(instant, cursor.tzinfo)
            case _:
                raise TypeError(f"Unknown termination policy: {end!r}")

    @property
    def cursor(self) -> datetime | None:
        """Next pending occurrence as a UTC instant, or None once exhausted."""
        if self._cursor is None:
            return None
        return self._cursor.astimezone(UTC)

    def __iter__(self) -> "SteppingIterator":
        return self

    def __next__(self) -> datetime:
        if self._overflow is not None:
            # The pending occurrence lies past datetime.max, so any Until
            # bound has been reached already
            if self._until is not None:
                self._finish()
                raise StopIteration
            raise CalendarOverflowError(
                f"Stepping {self._increment} leaves the supported date range"
            ) from self._overflow

        cursor = self._cursor
        if cursor is None:
            raise StopIteration

        if self._remaining == 0 or (self._until is not None and cursor >= self._until):
            self._finish()
            raise StopIteration

        try:
            current = cursor.astimezone(UTC)
        except OverflowError as exc:
            raise CalendarOverflowError(
                f"{cursor.isoformat()} has no representable UTC instant"
            ) from exc

        self._emitted += 1
        if self._remaining is not None:
            self._remaining -= 1
        if self._remaining == 0:
            self._finish()
        else:
            self._advance(cursor)
        return current

    def _advance(self, cursor: datetime) -> None:
        """Move the cursor one increment forward in civil time.

        An overflow is held back until the next pull, so the last
        representable occurrence is still produced.
        """
        try:
            self._cursor = cursor + self._increment
        except OverflowError as exc:
            self._cursor = None
            self._overflow = exc

    def _finish(self) -> None:
        self._cursor = None
        self._overflow = None
        _log.debug("stream_exhausted", emitted=self._emitted)
