"""Merge several recurrence rules into one ordered, duplicate-free stream."""

import heapq
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Iterator

from recur.logging import get_logger
from recur.mixins import OccurrenceMixin
from recur.rrule import RRule
from recur.rules import Daily, Weekly
from recur.zones import UTC, local_zone, to_instant

_log = get_logger(__name__)


@dataclass(order=True)
class IterHolder:
    """A live stream paired with the last occurrence it produced.

    Ordered by (cursor, index); ``index`` is the stream's insertion position
    and only breaks ties.
    """

    cursor: datetime
    index: int
    stream: Iterator[datetime] = field(compare=False)


def merge(streams: Iterable[Iterator[datetime]]) -> Iterator[datetime]:
    """Lazily merge ascending streams, dropping simultaneous duplicates.

    Each stream is pulled only when its pending value has been emitted.
    Duplicates are detected by exact instant equality.
    """
    heap: list[IterHolder] = []
    for index, stream in enumerate(streams):
        first = next(stream, None)
        if first is not None:
            heap.append(IterHolder(first, index, stream))
    heapq.heapify(heap)
    _log.debug("merge_started", streams=len(heap))

    while heap:
        holder = heapq.heappop(heap)
        value = holder.cursor

        following = next(holder.stream, None)
        if following is not None:
            holder.cursor = following
            heapq.heappush(heap, holder)

        # Another stream is pending on the same instant; emit that copy instead
        if heap and heap[0].cursor == value:
            continue

        yield value


class Set(OccurrenceMixin):
    """A collection of RRules iterated as a single merged stream.

    Insertion order does not affect the output order.

    Example:
        mornings = Set(
            Daily(start=monday_9am, zone="America/New_York"),
            Weekly(start=saturday_9am, zone="America/New_York"),
        )
        upcoming = mornings.after(datetime.now(timezone.utc))
    """

    def __init__(self, *rules: RRule | Daily | Weekly) -> None:
        self._rules: list[RRule] = []
        for rule in rules:
            self.rrule(rule)

    def rrule(self, rule: RRule | Daily | Weekly) -> "Set":
        """Add a rule and return the set, for chaining."""
        if isinstance(rule, (Daily, Weekly)):
            rule = RRule(rule)
        elif not isinstance(rule, RRule):
            raise TypeError(f"Set holds RRule, Daily or Weekly, got {type(rule).__name__}")
        self._rules.append(rule)
        return self

    @property
    def rules(self) -> tuple[RRule, ...]:
        return tuple(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def all(self) -> Iterator[datetime]:
        """Iterate the merged occurrences of every rule from its start."""
        return merge(rule.all() for rule in self._rules)

    def after(self, dt: datetime) -> Iterator[datetime]:
        """Iterate the merged occurrences at or after ``dt``.

        A naive ``dt`` is read in the default zone (see ``local_zone``).
        """
        floor = self._normalize(dt)
        return merge(rule.after(floor) for rule in self._rules)

    def _normalize(self, value: datetime) -> datetime:
        if isinstance(value, datetime) and value.utcoffset() is not None:
            return value.astimezone(UTC)
        return to_instant(value, local_zone())

    def __repr__(self) -> str:
        return f"Set({', '.join(repr(rule.rule) for rule in self._rules)})"
