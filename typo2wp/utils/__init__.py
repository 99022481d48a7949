"""
Utility helpers used by the migration tool.

This subpackage exposes structured reporting, the exception hierarchy,
GMT conversion, the overwrite prompt and the destination pre-flight check.
"""

from .dates import to_gmt
from .errors import (
    EVENTS,
    AmbiguousMatchError,
    ConfigurationError,
    MigrationError,
    report_error,
    report_ok,
)
from .pre_flight_checks import PreFlightCheckError, run_pre_flight_checks
from .prompts import yesno

__all__ = [
    "EVENTS",
    "AmbiguousMatchError",
    "ConfigurationError",
    "MigrationError",
    "PreFlightCheckError",
    "report_error",
    "report_ok",
    "run_pre_flight_checks",
    "to_gmt",
    "yesno",
]
