"""Polars backend implementation."""

from datetime import datetime, tzinfo

import polars as pl


class PolarsBackend:
    """Backend implementation for polars DataFrames."""

    def from_instants(self, instants: list[datetime], column: str) -> pl.DataFrame:
        """Build a DataFrame with one ``Datetime("us", "UTC")`` column."""
        return pl.DataFrame(
            {column: instants},
            schema={column: pl.Datetime("us", "UTC")},
        )

    def convert_zone(
        self, df: pl.DataFrame, column: str, zone: str | tzinfo
    ) -> pl.DataFrame:
        """Convert ``column`` to ``zone``; instants are unchanged.

        Polars only accepts zone names, so tzinfo objects are converted with
        ``str()`` (which yields the IANA key for ``ZoneInfo``).
        """
        return df.with_columns(pl.col(column).dt.convert_time_zone(str(zone)))
