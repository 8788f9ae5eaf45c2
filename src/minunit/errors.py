"""Exception types raised by minunit."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minunit.diagnostic import Diagnostic


class MinunitError(Exception):
    """Base class for minunit errors."""


class AssertionFailure(MinunitError):
    """A failed abort-variant assertion.

    Raised by ``mu_assert`` and turned back into a returned Diagnostic at the
    ``@case`` boundary, or by ``run_test`` for an undecorated case.
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(str(diagnostic))
        self.diagnostic = diagnostic


class ConfigError(MinunitError):
    """Invalid configuration or suite reference."""
