"""recur - Timezone-aware daily/weekly recurrence rules with merged sets."""

from recur.backends import PandasBackend, PolarsBackend
from recur.config import configure_recur, get_default_zone, reset_recur_config
from recur.logging import configure_logging, get_logger
from recur.rrule import RRule
from recur.rules import Daily, Rule, Weekly
from recur.ruleset import Set, merge
from recur.stepping import CalendarOverflowError, SteppingIterator
from recur.termination import Count, End, Never, Until
from recur.zones import ConfigurationError, LocalZoneError, UnknownZoneError

__all__ = [
    # Rules
    "Daily",
    "Weekly",
    "Rule",
    "RRule",
    "Set",
    # Termination
    "Count",
    "End",
    "Never",
    "Until",
    # Iteration
    "SteppingIterator",
    "merge",
    # Errors
    "CalendarOverflowError",
    "ConfigurationError",
    "LocalZoneError",
    "UnknownZoneError",
    # Backends
    "PandasBackend",
    "PolarsBackend",
    # Logging
    "configure_logging",
    "get_logger",
    # Config
    "configure_recur",
    "get_default_zone",
    "reset_recur_config",
]
__version__ = "0.1.0"
