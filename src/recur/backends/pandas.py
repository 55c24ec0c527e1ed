"""Pandas backend implementation."""

from datetime import datetime, tzinfo

import pandas as pd


class PandasBackend:
    """Backend implementation for pandas DataFrames."""

    def from_instants(self, instants: list[datetime], column: str) -> pd.DataFrame:
        """Build a DataFrame with one ``datetime64[ns, UTC]`` column."""
        return pd.DataFrame({column: pd.DatetimeIndex(instants, tz="UTC")})

    def convert_zone(
        self, df: pd.DataFrame, column: str, zone: str | tzinfo
    ) -> pd.DataFrame:
        """Convert ``column`` to ``zone``; instants are unchanged."""
        return df.assign(**{column: df[column].dt.tz_convert(zone)})
