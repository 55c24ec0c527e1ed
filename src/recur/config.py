"""Module-level configuration for recurrence defaults."""

import threading
from dataclasses import dataclass
from datetime import tzinfo


@dataclass
class RecurConfig:
    """Configuration for recurrence rule defaults."""

    default_zone: str | tzinfo | None = None  # None = discover the host zone


# Module-level singleton
_recur_config: RecurConfig | None = None
_config_lock = threading.Lock()


def get_recur_config() -> RecurConfig:
    """Get the global recur configuration singleton."""
    global _recur_config
    if _recur_config is None:
        with _config_lock:
            if _recur_config is None:
                _recur_config = RecurConfig()
    return _recur_config


def configure_recur(default_zone: str | tzinfo | None = None) -> None:
    """Configure default recurrence settings.

    Args:
        default_zone: Zone used by rules constructed without an explicit
            ``zone``. Either an IANA identifier or a tzinfo. Pass None to
            keep the current setting; use reset_recur_config() to go back
            to host zone discovery.

    Example:
        from recur import Daily, configure_recur

        configure_recur(default_zone="Europe/Berlin")

        # Rules built without a zone now step in Berlin wall-clock time
        rule = Daily(start=start)
    """
    config = get_recur_config()
    with _config_lock:
        if default_zone is not None:
            config.default_zone = default_zone


def get_default_zone() -> str | tzinfo | None:
    """Get the configured default zone, or None when unset."""
    return get_recur_config().default_zone


def reset_recur_config() -> None:
    """Reset configuration to defaults. Useful for testing."""
    global _recur_config
    with _config_lock:
        _recur_config = RecurConfig()
