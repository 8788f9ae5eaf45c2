"""Runs a single test case and records it."""

from __future__ import annotations

from minunit.case import Case, case_name
from minunit.counters import SuiteCounters
from minunit.diagnostic import Diagnostic
from minunit.errors import AssertionFailure
from minunit.sink import PrintSink, get_default_sink


def run_test(
    test: Case,
    counters: SuiteCounters,
    sink: PrintSink | None = None,
) -> Diagnostic | None:
    """Invoke *test* and return its Diagnostic, or None if it passed.

    A passing case increments ``counters.run`` and is reported on the sink's
    info channel. A failing case leaves the counters alone. An
    AssertionFailure escaping an undecorated case counts as that case's
    result.
    """
    try:
        diagnostic = test()
    except AssertionFailure as failure:
        diagnostic = failure.diagnostic
    if diagnostic is not None:
        return diagnostic

    counters.record_pass()
    (sink if sink is not None else get_default_sink()).info(
        f'Test ok: "{case_name(test)}"'
    )
    return None
