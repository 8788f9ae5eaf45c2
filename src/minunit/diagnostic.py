"""Failure diagnostics and their text layout."""

from __future__ import annotations

from dataclasses import dataclass

_INDENT = " " * 12


@dataclass(frozen=True)
class SourceLocation:
    """Call site of an assertion."""

    file: str
    line: int  # 1-indexed

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


def format_diagnostic(message: str, predicate_text: str, location: str) -> str:
    """Render a failed assertion as three lines.

    The last line always ends with ``in <file>:<line>`` so the location can be
    grepped out of the output.
    """
    return (
        f'Assertion failed: "{message}"\n'
        f"{_INDENT}({predicate_text})\n"
        f"{_INDENT}in {location}\n"
    )


def format_ok(message: str, predicate_text: str) -> str:
    return f'Assertion ok: "{message}" ({predicate_text})'


@dataclass(frozen=True)
class Diagnostic:
    """Result of a failed assertion.

    Attributes:
        message: Human message given to the assertion.
        predicate_text: Source text of the predicate expression.
        location: Where the assertion was written.
    """

    message: str
    predicate_text: str
    location: SourceLocation

    @property
    def text(self) -> str:
        return format_diagnostic(self.message, self.predicate_text, str(self.location))

    def __str__(self) -> str:
        return self.text
