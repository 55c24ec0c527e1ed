"""RRule: a closed union over the supported recurrence frequencies."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterator, assert_never

from recur.mixins import OccurrenceMixin
from recur.rules import Daily, Weekly


@dataclass(frozen=True)
class RRule(OccurrenceMixin):
    """Wrap one Daily or Weekly rule behind a uniform ``all()``/``after()``.

    Lets rules of different frequencies be stored together, e.g. in a Set.

    Example:
        rules = [
            RRule(Daily(start=start, end=Count(5))),
            RRule.weekly(start=start, interval=2),
        ]
        firsts = [next(rule.all()) for rule in rules]
    """

    rule: Daily | Weekly

    def __post_init__(self) -> None:
        if not isinstance(self.rule, (Daily, Weekly)):
            raise TypeError(
                f"RRule wraps Daily or Weekly, got {type(self.rule).__name__}"
            )

    @classmethod
    def daily(cls, **options: Any) -> "RRule":
        """Build an RRule around ``Daily(**options)``."""
        return cls(Daily(**options))

    @classmethod
    def weekly(cls, **options: Any) -> "RRule":
        """Build an RRule around ``Weekly(**options)``."""
        return cls(Weekly(**options))

    @property
    def frequency(self) -> str:
        match self.rule:
            case Daily():
                return "daily"
            case Weekly():
                return "weekly"
            case _:
                assert_never(self.rule)

    def all(self) -> Iterator[datetime]:
        """Iterate occurrences from the wrapped rule's start."""
        match self.rule:
            case Daily():
                return self.rule.all()
            case Weekly():
                return self.rule.all()
            case _:
                assert_never(self.rule)

    def after(self, dt: datetime) -> Iterator[datetime]:
        """Iterate occurrences at or after ``dt``."""
        match self.rule:
            case Daily():
                return self.rule.after(dt)
            case Weekly():
                return self.rule.after(dt)
            case _:
                assert_never(self.rule)

    def _normalize(self, value: datetime) -> datetime:
        return self.rule._normalize(value)
