"""Minimal unit-test execution engine."""

from minunit.assertions import assert_print, check, first_failure, mu_assert
from minunit.case import Case, case
from minunit.counters import SuiteCounters
from minunit.diagnostic import Diagnostic, SourceLocation, format_diagnostic
from minunit.driver import run_main
from minunit.errors import AssertionFailure, ConfigError, MinunitError
from minunit.runner import run_test
from minunit.sink import (
    LoggingSink,
    NullSink,
    PrintSink,
    get_default_sink,
    set_default_sink,
)
from minunit.suite import Suite, SuiteResult, SuiteState

__all__ = [
    "AssertionFailure",
    "Case",
    "ConfigError",
    "Diagnostic",
    "LoggingSink",
    "MinunitError",
    "NullSink",
    "PrintSink",
    "SourceLocation",
    "Suite",
    "SuiteCounters",
    "SuiteResult",
    "SuiteState",
    "assert_print",
    "case",
    "check",
    "first_failure",
    "format_diagnostic",
    "get_default_sink",
    "mu_assert",
    "run_main",
    "run_test",
    "set_default_sink",
]
