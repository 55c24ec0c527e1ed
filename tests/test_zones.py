"""Tests for the zone adapter."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest
import tzlocal

from recur import Daily, LocalZoneError, UnknownZoneError
from recur.zones import bind, local_zone, resolve_zone, to_civil, to_instant


class TestResolveZone:
    """Test resolve_zone."""

    def test_identifier(self):
        """An IANA identifier resolves to a ZoneInfo."""
        assert resolve_zone("America/New_York") == ZoneInfo("America/New_York")

    def test_tzinfo_passes_through(self):
        """A tzinfo is returned unchanged."""
        assert resolve_zone(timezone.utc) is timezone.utc

    def test_unknown_identifier(self):
        """An unknown identifier raises UnknownZoneError."""
        with pytest.raises(UnknownZoneError, match="Nowhere/Special"):
            resolve_zone("Nowhere/Special")

    def test_wrong_type(self):
        """A non-string, non-tzinfo zone raises TypeError."""
        with pytest.raises(TypeError):
            resolve_zone(5)


class TestLocalZone:
    """Test host zone discovery."""

    def test_uses_host_zone(self, monkeypatch):
        """Without configuration the host zone is used."""
        monkeypatch.setattr(tzlocal, "get_localzone_name", lambda: "Europe/Paris")
        assert local_zone() == ZoneInfo("Europe/Paris")

    def test_discovery_failure(self, monkeypatch):
        """A discovery error surfaces as LocalZoneError."""
        def fail():
            raise ZoneInfoNotFoundError("no zone configured")

        monkeypatch.setattr(tzlocal, "get_localzone_name", fail)
        with pytest.raises(LocalZoneError):
            local_zone()

    def test_no_name(self, monkeypatch):
        """A host without a zone name raises LocalZoneError."""
        monkeypatch.setattr(tzlocal, "get_localzone_name", lambda: None)
        with pytest.raises(LocalZoneError):
            local_zone()

    def test_unresolvable_name(self, monkeypatch):
        """A host zone name that does not resolve raises LocalZoneError."""
        monkeypatch.setattr(tzlocal, "get_localzone_name", lambda: "Local/Nonsense")
        with pytest.raises(LocalZoneError, match="Local/Nonsense"):
            local_zone()

    def test_rule_construction_surfaces_failure(self, monkeypatch, july_first):
        """Building a rule without a zone propagates LocalZoneError."""
        monkeypatch.setattr(tzlocal, "get_localzone_name", lambda: None)
        with pytest.raises(LocalZoneError):
            Daily(start=july_first)

    def test_explicit_zone_skips_discovery(self, monkeypatch, july_first):
        """An explicit zone never consults the host."""
        monkeypatch.setattr(tzlocal, "get_localzone_name", lambda: None)
        assert Daily(start=july_first, zone="UTC").start == july_first


class TestCivilConversions:
    """Test conversions between instants and civil timestamps."""

    def test_to_civil_aware(self):
        """An aware value is converted to the zone's wall clock."""
        value = datetime(2019, 7, 1, 8, 0, tzinfo=ZoneInfo("America/New_York"))
        assert to_civil(value, timezone.utc) == datetime(2019, 7, 1, 12, 0)

    def test_to_civil_naive_uses_zone(self):
        """A naive value is read as wall-clock time in the zone."""
        assert to_civil(datetime(2019, 1, 1, 9, 0), ZoneInfo("Europe/Paris")) == (
            datetime(2019, 1, 1, 8, 0)
        )

    def test_to_civil_rejects_non_datetime(self):
        """A string is not a datetime."""
        with pytest.raises(TypeError):
            to_civil("2019-01-01", timezone.utc)

    def test_bind_resolves_offset(self):
        """Binding a civil UTC value yields the zone's local time."""
        bound = bind(datetime(2019, 7, 1, 12, 0), ZoneInfo("America/New_York"))
        assert bound.hour == 8
        assert bound.utcoffset().total_seconds() == -4 * 3600

    def test_to_instant(self):
        """to_instant returns a UTC datetime."""
        value = datetime(2019, 7, 1, 8, 0, tzinfo=ZoneInfo("America/New_York"))
        assert to_instant(value, timezone.utc) == datetime(
            2019, 7, 1, 12, 0, tzinfo=timezone.utc
        )
