"""Abstract backend protocol for exporting occurrences to DataFrames."""

from datetime import datetime, tzinfo
from typing import Protocol, TypeVar

DF = TypeVar("DF", covariant=True)


class Backend(Protocol[DF]):
    """Protocol defining the DataFrame operations needed for exports."""

    def from_instants(self, instants: list[datetime], column: str) -> DF:
        """Build a single-column DataFrame of UTC-aware occurrences."""
        ...

    def convert_zone(self, df: DF, column: str, zone: str | tzinfo) -> DF:
        """Return a DataFrame with ``column`` converted to ``zone``."""
        ...
