"""Tests for module-level configuration."""

from zoneinfo import ZoneInfo

import tzlocal

from recur import Daily, configure_recur, get_default_zone, reset_recur_config


class TestConfig:
    """Test configure_recur / reset_recur_config."""

    def test_default_is_unset(self):
        """No default zone is configured initially."""
        assert get_default_zone() is None

    def test_configure_default_zone(self):
        """configure_recur sets the default zone."""
        configure_recur(default_zone="Asia/Tokyo")
        assert get_default_zone() == "Asia/Tokyo"

    def test_none_keeps_setting(self):
        """Passing None leaves the current setting."""
        configure_recur(default_zone="Asia/Tokyo")
        configure_recur(default_zone=None)
        assert get_default_zone() == "Asia/Tokyo"

    def test_reset(self):
        """reset_recur_config clears the default zone."""
        configure_recur(default_zone="Asia/Tokyo")
        reset_recur_config()
        assert get_default_zone() is None

    def test_rules_use_configured_zone(self, monkeypatch, july_first):
        """Rules without a zone use the configured default."""
        monkeypatch.setattr(tzlocal, "get_localzone_name", lambda: None)
        configure_recur(default_zone="Asia/Tokyo")
        assert Daily(start=july_first).zone == ZoneInfo("Asia/Tokyo")
