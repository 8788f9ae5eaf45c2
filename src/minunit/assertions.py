"""Boolean assertions for minunit test cases.

Three spellings share one evaluation rule:

* ``check`` returns the Diagnostic so the case can ``return`` it,
* ``mu_assert`` raises AssertionFailure, which ``@case`` turns back into the
  returned Diagnostic,
* ``assert_print`` sends the Diagnostic to the sink and carries on. Use it on
  background threads, where no case is waiting for a result.

The predicate text in a Diagnostic is the caller's source expression, e.g.
``check("sum", add(1, 2) == 3)`` reports ``add(1, 2) == 3``.
"""

from __future__ import annotations

import ast
import inspect
import linecache
from types import FrameType
from typing import Any, Callable

from minunit.diagnostic import Diagnostic, SourceLocation, format_ok
from minunit.errors import AssertionFailure
from minunit.sink import NullSink, PrintSink, get_default_sink

_PREDICATE_INDEX = 1
_PREDICATE_KEYWORD = "predicate"


def _call_source(frame: FrameType) -> str | None:
    """Source of the call expression currently executing in *frame*."""
    positions = inspect.getframeinfo(frame, context=0).positions
    if positions is None or None in positions:
        return None

    lines = linecache.getlines(frame.f_code.co_filename, frame.f_globals)
    chunk = lines[positions.lineno - 1 : positions.end_lineno]
    if not chunk:
        return None

    # Column offsets count UTF-8 bytes
    encoded = [line.encode("utf-8") for line in chunk]
    encoded[-1] = encoded[-1][: positions.end_col_offset]
    encoded[0] = encoded[0][positions.col_offset :]
    return b"".join(encoded).decode("utf-8", errors="replace")


def _predicate_source(frame: FrameType) -> str | None:
    source = _call_source(frame)
    if source is None:
        return None
    try:
        tree = ast.parse(source, mode="eval")
    except SyntaxError:
        return None

    call = tree.body
    if not isinstance(call, ast.Call):
        return None

    node: ast.expr | None = None
    if len(call.args) > _PREDICATE_INDEX:
        node = call.args[_PREDICATE_INDEX]
    else:
        for keyword in call.keywords:
            if keyword.arg == _PREDICATE_KEYWORD:
                node = keyword.value
                break
    if node is None:
        return None

    segment = ast.get_source_segment(source, node)
    if segment is None:
        return None
    return " ".join(part.strip() for part in segment.splitlines())


def _predicate_text(predicate: Any, expr: str | None, frame: FrameType) -> str:
    if expr is not None:
        return expr
    return _predicate_source(frame) or repr(predicate)


def _evaluate(
    message: str,
    predicate: Any,
    expr: str | None,
    sink: PrintSink | None,
    frame: FrameType,
) -> Diagnostic | None:
    sink = sink if sink is not None else get_default_sink()
    if predicate:
        if not isinstance(sink, NullSink):
            sink.verbose(format_ok(message, _predicate_text(predicate, expr, frame)))
        return None

    return Diagnostic(
        message=message,
        predicate_text=_predicate_text(predicate, expr, frame),
        location=SourceLocation(frame.f_code.co_filename, frame.f_lineno),
    )


def check(
    message: str,
    predicate: Any,
    *,
    expr: str | None = None,
    sink: PrintSink | None = None,
) -> Diagnostic | None:
    """Return a Diagnostic if *predicate* is false, otherwise None.

    Meant to be propagated straight away by the calling case::

        if failure := check("parsed", result is not None):
            return failure

    Args:
        message: Human description of what is being checked.
        predicate: Already-evaluated condition; only its truth value is used.
        expr: Text to report instead of the caller's source expression.
        sink: Where the "Assertion ok" trace goes. Defaults to the process sink.
    """
    frame = inspect.currentframe().f_back
    try:
        return _evaluate(message, predicate, expr, sink, frame)
    finally:
        del frame


def mu_assert(
    message: str,
    predicate: Any,
    *,
    expr: str | None = None,
    sink: PrintSink | None = None,
) -> None:
    """Abort the enclosing ``@case`` if *predicate* is false.

    Raises:
        AssertionFailure: carrying the Diagnostic. Only valid inside a case
            decorated with ``@case``, which converts it to the case result.
    """
    frame = inspect.currentframe().f_back
    try:
        diagnostic = _evaluate(message, predicate, expr, sink, frame)
    finally:
        del frame
    if diagnostic is not None:
        raise AssertionFailure(diagnostic)


def assert_print(
    message: str,
    predicate: Any,
    *,
    expr: str | None = None,
    sink: PrintSink | None = None,
) -> None:
    """Report a false *predicate* on the sink's error channel and continue.

    Does not produce a case result and does not touch suite counters.
    """
    frame = inspect.currentframe().f_back
    try:
        diagnostic = _evaluate(message, predicate, expr, sink, frame)
    finally:
        del frame
    if diagnostic is not None:
        (sink if sink is not None else get_default_sink()).error(diagnostic.text)


def first_failure(*steps: Callable[[], Diagnostic | None]) -> Diagnostic | None:
    """Run *steps* in order and return the first Diagnostic.

    Steps after a failing one are not called::

        return first_failure(
            lambda: check("x", 1 == 1),
            lambda: check("y", 1 == 2),
        )
    """
    for step in steps:
        diagnostic = step()
        if diagnostic is not None:
            return diagnostic
    return None
