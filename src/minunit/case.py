"""Test case conventions."""

from __future__ import annotations

import functools
from typing import Callable

from minunit.diagnostic import Diagnostic
from minunit.errors import AssertionFailure

Case = Callable[[], "Diagnostic | None"]


def case(func: Callable[[], Diagnostic | None]) -> Case:
    """Let *func* use ``mu_assert``.

    The first AssertionFailure raised inside *func* ends it and becomes its
    return value. Any other exception propagates.
    """

    @functools.wraps(func)
    def wrapper() -> Diagnostic | None:
        try:
            return func()
        except AssertionFailure as failure:
            return failure.diagnostic

    return wrapper


def case_name(test: Case) -> str:
    return getattr(test, "__name__", None) or repr(test)
