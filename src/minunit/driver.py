"""Process entry convention: run a top-level suite and report it."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path
from typing import Callable

from minunit.errors import ConfigError
from minunit.suite import Suite, SuiteResult

MAX_EXIT_STATUS = 255


def report(result: SuiteResult, echo: Callable[[str], None] = print) -> int:
    """Print the outcome of a suite run and return its exit status.

    The status is ``total - run``: zero only when every declared case passed.
    """
    if result.passed:
        echo("ALL TESTS PASSED")
    else:
        echo(str(result.diagnostic).rstrip("\n"))
    echo(f"Tests run: {result.run} of {result.total}")
    return result.total - result.run


def suite_status(result: SuiteResult) -> int:
    """Exit status of one suite when several are run together.

    Never negative, and at least 1 for a failed suite even when its declared
    total is smaller than the cases it holds.
    """
    status = max(result.total - result.run, 0)
    if not result.passed:
        status = max(status, 1)
    return status


def run_main(suite: Suite, echo: Callable[[str], None] = print) -> int:
    """Run *suite* and report it. Typical use::

        if __name__ == "__main__":
            sys.exit(run_main(my_suite))
    """
    return report(suite.execute(), echo=echo)


def as_suite(obj: object, name: str) -> Suite:
    """Accept a Suite, or wrap a zero-argument suite function as a one-case Suite."""
    if isinstance(obj, Suite):
        return obj
    if callable(obj):
        return Suite(name, [obj])
    raise ConfigError(f"'{name}' is neither a Suite nor callable")


def resolve_suite(ref: str, search_path: Path | None = None) -> Suite:
    """Import the suite named by a ``module:attribute`` reference."""
    module_name, sep, attr = ref.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigError(f"Suite reference '{ref}' must look like 'module:attribute'")

    if search_path is not None:
        entry = str(search_path.resolve())
        if entry not in sys.path:
            sys.path.insert(0, entry)
    importlib.invalidate_caches()

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(f"cannot import '{module_name}': {e}") from e

    try:
        obj = getattr(module, attr)
    except AttributeError as e:
        raise ConfigError(f"module '{module_name}' has no attribute '{attr}'") from e

    return as_suite(obj, ref)
