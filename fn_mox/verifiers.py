"""Verification helpers for :class:`~fn_mox.controller.FnMox`."""

from __future__ import annotations

import typing as t
from textwrap import indent

from .errors import UnexpectedCallError, UnfulfilledExpectationError
from .mock_function import describe_expectation

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .expectations import CallExpectation
    from .mock_function import MockFunction


def _numbered(entries: t.Sequence[str], *, start: int = 1) -> str:
    if not entries:
        return "(none)"
    lines: list[str] = []
    for index, entry in enumerate(entries, start=start):
        entry_lines = entry.splitlines() or [""]
        lines.append(f"{index}. {entry_lines[0]}")
        lines.extend(f"   {extra}" for extra in entry_lines[1:])
    return "\n".join(lines)


def _format_sections(title: str, sections: list[tuple[str, str]]) -> str:
    parts = [title]
    for label, body in sections:
        if not body:
            continue
        parts.append("")
        parts.append(f"{label}:")
        parts.append(indent(body, "  "))
    return "\n".join(parts)


def _describe_matchers(expectation: CallExpectation) -> str:
    lines = [line.strip() for line in describe_expectation(expectation)]
    return "\n".join(lines) or "(no arguments)"


def _mock_label(mock: MockFunction) -> str:
    return mock.name or "<anonymous mock>"


class FailureVerifier:
    """Raise for calls that matched no expectation."""

    def verify(self, failures: t.Sequence[str]) -> None:
        """Raise :class:`UnexpectedCallError` if *failures* is not empty."""
        if not failures:
            return
        title = (
            "Unexpected call."
            if len(failures) == 1
            else f"{len(failures)} unexpected calls."
        )
        msg = _format_sections(title, [("Calls", _numbered(list(failures)))])
        raise UnexpectedCallError(msg)


class CountVerifier:
    """Check that each expectation was matched an allowed number of times."""

    def verify(self, mocks: t.Iterable[MockFunction]) -> None:
        """Validate ``num_matches`` of every expectation of *mocks*."""
        for mock in mocks:
            for exp in mock.registry:
                if exp.is_satisfied:
                    continue
                cardinality = exp.cardinality
                sections = [
                    ("Mock", _mock_label(mock)),
                    ("Declared at", str(exp.declaration_site)),
                    ("Arguments", _describe_matchers(exp)),
                    (
                        "Observed calls",
                        f"{exp.num_matches} (expected {cardinality})",
                    ),
                ]
                if exp.num_matches < cardinality.minimum:
                    msg = _format_sections("Unfulfilled expectation.", sections)
                    raise UnfulfilledExpectationError(msg)
                msg = _format_sections("Unexpected additional invocation.", sections)
                raise UnexpectedCallError(msg)
