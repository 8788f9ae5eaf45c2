"""Ordered composition of test cases."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from minunit.case import Case, case_name
from minunit.counters import SuiteCounters
from minunit.diagnostic import Diagnostic
from minunit.runner import run_test
from minunit.sink import PrintSink, get_default_sink

logger = logging.getLogger(__name__)


class SuiteState(str, Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"


@dataclass
class SuiteResult:
    """Outcome of one suite invocation.

    Attributes:
        name: Suite name.
        diagnostic: The first failure, or None if every case passed.
        counters: Run/total counts at the moment the suite stopped.
        failed_case: Name of the case that produced ``diagnostic``.
    """

    name: str
    diagnostic: Diagnostic | None
    counters: SuiteCounters
    failed_case: str | None = None

    @property
    def passed(self) -> bool:
        return self.diagnostic is None

    @property
    def run(self) -> int:
        return self.counters.run

    @property
    def total(self) -> int:
        return self.counters.total


class Suite:
    """A fixed list of cases run in order until the first failure.

    Setup and teardown are ordinary cases placed first and last. When a case
    fails, nothing after it runs, teardown included.

    A Suite is itself a case: calling it runs it and returns the first
    Diagnostic, so suites can be listed inside other suites. The inner suite
    keeps its own counters and counts as one case in the outer one.
    """

    def __init__(
        self,
        name: str,
        cases: Sequence[Case],
        *,
        setup: Case | None = None,
        teardown: Case | None = None,
        total: int | None = None,
        sink: PrintSink | None = None,
    ):
        self.name = name
        self.__name__ = name
        self.cases = list(cases)
        self.setup = setup
        self.teardown = teardown
        self.sink = sink
        self.declared_total = total
        self.state = SuiteState.NOT_STARTED
        self.counters = SuiteCounters()

    @property
    def ordered_cases(self) -> list[Case]:
        ordered = list(self.cases)
        if self.setup is not None:
            ordered.insert(0, self.setup)
        if self.teardown is not None:
            ordered.append(self.teardown)
        return ordered

    def execute(self) -> SuiteResult:
        """Run every case in order, stopping at the first failure."""
        cases = self.ordered_cases
        sink = self.sink if self.sink is not None else get_default_sink()

        self.counters = SuiteCounters()
        self.counters.reset(
            self.declared_total if self.declared_total is not None else len(cases)
        )
        self.state = SuiteState.RUNNING
        logger.debug(f"Suite '{self.name}' started with {self.counters.total} case(s)")

        for test in cases:
            diagnostic = run_test(test, self.counters, sink)
            if diagnostic is not None:
                self.state = SuiteState.FAILED
                logger.debug(
                    f"Suite '{self.name}' stopped at '{case_name(test)}': "
                    f"{self.counters.run}/{self.counters.total} passed"
                )
                return SuiteResult(
                    name=self.name,
                    diagnostic=diagnostic,
                    counters=self.counters,
                    failed_case=case_name(test),
                )

        self.state = SuiteState.PASSED
        logger.debug(
            f"Suite '{self.name}' passed: {self.counters.run}/{self.counters.total}"
        )
        return SuiteResult(name=self.name, diagnostic=None, counters=self.counters)

    def __call__(self) -> Diagnostic | None:
        return self.execute().diagnostic

    def __repr__(self) -> str:
        return f"Suite({self.name!r}, {len(self.ordered_cases)} case(s))"
