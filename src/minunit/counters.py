from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SuiteCounters:
    """Run/total counts for one suite invocation.

    Attributes:
        run: Number of cases that passed so far.
        total: Number of cases the suite declared it would run.
    """

    run: int = 0
    total: int = 0

    def reset(self, total: int) -> None:
        self.run = 0
        self.total = total

    def record_pass(self) -> None:
        self.run += 1

    @property
    def not_run(self) -> int:
        """Declared cases that did not pass; the driver's exit status."""
        return self.total - self.run
