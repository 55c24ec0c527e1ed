"""Fixed-interval recurrence rules: Daily and Weekly."""

from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta, tzinfo

from recur.logging import get_logger
from recur.mixins import OccurrenceMixin
from recur.stepping import CalendarOverflowError, SteppingIterator
from recur.termination import Count, End, Never, Until
from recur.zones import UTC, bind, local_zone, now, resolve_zone, to_civil, to_instant

DAYS_IN_WEEK = 7


class Rule(OccurrenceMixin, ABC):
    """Base class for fixed-interval rules.

    A rule holds only immutable configuration. Every call to ``all()`` or
    ``after()`` returns a fresh SteppingIterator that owns its own cursor.
    """

    _unit: timedelta  # One interval, before multiplying by ``interval``

    def __init__(
        self,
        interval: int = 1,
        start: datetime | None = None,
        zone: str | tzinfo | None = None,
        end: End | None = None,
    ) -> None:
        """Initialize a rule.

        Args:
            interval: Number of units between occurrences. Must be >= 1.
            start: First occurrence. Defaults to now. A naive datetime is
                read as wall-clock time in ``zone``.
            zone: IANA identifier or tzinfo whose wall clock the rule
                follows. Defaults to the configured default zone, then the
                host zone.
            end: Termination policy (Until, Count or Never). Defaults to
                Never.

        Raises:
            ValueError: If ``interval`` is less than 1.
            UnknownZoneError: If ``zone`` cannot be resolved.
            LocalZoneError: If no zone is given and the host zone is unknown.
        """
        if isinstance(interval, bool) or not isinstance(interval, int):
            raise TypeError(f"interval must be an int, got {type(interval).__name__}")
        if interval < 1:
            raise ValueError(f"interval must be >= 1, got {interval}")
        if end is None:
            end = Never()
        if not isinstance(end, (Until, Count, Never)):
            raise TypeError(f"Unknown termination policy: {end!r}")

        self._interval = interval
        self._zone = resolve_zone(zone) if zone is not None else local_zone()
        self._start = to_civil(start if start is not None else now(), self._zone)
        self._end = end
        self._log = get_logger(__name__).bind(
            rule=type(self).__name__, interval=interval, zone=str(self._zone)
        )
        self._log.debug("rule_created", start=self.start, end=repr(end))

    @property
    def interval(self) -> int:
        return self._interval

    @property
    def zone(self) -> tzinfo:
        return self._zone

    @property
    def start(self) -> datetime:
        """First occurrence as a UTC instant."""
        return self._start.replace(tzinfo=UTC)

    @property
    def end(self) -> End:
        return self._end

    @property
    def increment(self) -> timedelta:
        """Calendar distance between consecutive occurrences."""
        return self._unit * self._interval

    def all(self) -> SteppingIterator:
        """Iterate occurrences from ``start``."""
        return SteppingIterator(bind(self._start, self._zone), self.increment, self._end)

    def after(self, dt: datetime) -> SteppingIterator:
        """Iterate occurrences at or after ``dt``.

        Equivalent to dropping every value of ``all()`` earlier than ``dt``,
        without producing the dropped values. A Count policy is reduced by
        the number of skipped intervals.
        """
        dtstart = bind(self._start, self._zone)
        floor = to_instant(dt, self._zone)
        if floor <= dtstart:
            return SteppingIterator(dtstart, self.increment, self._end)

        local = floor.astimezone(self._zone)
        try:
            candidate = self._first_date_on_or_after(local, dtstart)
            units = (candidate - dtstart.date()).days // self._unit.days
            steps = max(0, -(-units // self._interval))
            # Wall-clock comparison misplaces times skipped by a DST gap,
            # which resolve an hour later; settle on instants
            if steps > 0 and self._cursor_at(dtstart, steps - 1) >= floor:
                steps -= 1
            elif self._cursor_at(dtstart, steps) < floor:
                steps += 1
            cursor = self._cursor_at(dtstart, steps)
        except OverflowError as exc:
            raise CalendarOverflowError(
                f"Seeking to {floor.isoformat()} leaves the supported date range"
            ) from exc

        end = self._end
        if isinstance(end, Count):
            end = end.skip(steps)

        self._log.debug(
            "rule_seek",
            after=floor,
            cursor=cursor,
            skipped=steps,
        )
        return SteppingIterator(cursor, self.increment, end)

    def _cursor_at(self, dtstart: datetime, steps: int) -> datetime:
        """Cursor ``all()`` holds after ``steps`` civil steps from ``dtstart``."""
        if steps == 0:
            return dtstart
        return datetime.combine(
            dtstart.date() + self.increment * steps,
            dtstart.time().replace(fold=0),
            tzinfo=self._zone,
        )

    @abstractmethod
    def _first_date_on_or_after(self, local: datetime, dtstart: datetime) -> date:
        """First date on the rule's grid whose occurrence is not before ``local``.

        ``local`` and ``dtstart`` are both bound to the rule's zone. The grid
        here ignores ``interval``; the caller rounds up to a whole interval.
        """
        pass

    def _normalize(self, value: datetime) -> datetime:
        return to_instant(value, self._zone)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(interval={self._interval}, "
            f"start={self.start.isoformat()}, zone={self._zone}, end={self._end!r})"
        )


class Daily(Rule):
    """Occurrence every ``interval`` days at the start's wall-clock time."""

    _unit = timedelta(days=1)

    def _first_date_on_or_after(self, local: datetime, dtstart: datetime) -> date:
        candidate = local.date()
        if local.time() > dtstart.time():
            candidate += timedelta(days=1)
        return candidate


class Weekly(Rule):
    """Occurrence every ``interval`` weeks on the start's weekday and time."""

    _unit = timedelta(weeks=1)

    def _first_date_on_or_after(self, local: datetime, dtstart: datetime) -> date:
        candidate = local.date()
        difference = (
            dtstart.isoweekday() + DAYS_IN_WEEK - candidate.isoweekday()
        ) % DAYS_IN_WEEK
        # Same weekday but already past the start's time of day
        if difference == 0 and dtstart.time() < local.time():
            difference = DAYS_IN_WEEK
        return candidate + timedelta(days=difference)
