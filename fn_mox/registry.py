"""Per-mock storage of call expectations."""

from __future__ import annotations

import typing as t

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .expectations import CallExpectation


class ExpectationRegistry:
    """Insertion-ordered call expectations belonging to one mock function.

    Expectations are never removed; the registry lives exactly as long as
    the mock that owns it.
    """

    def __init__(self) -> None:
        self._expectations: list[CallExpectation] = []

    def add(self, expectation: CallExpectation) -> CallExpectation:
        """Append *expectation* and return it."""
        self._expectations.append(expectation)
        return expectation

    def most_recent_first(self) -> t.Iterator[CallExpectation]:
        """Yield expectations in the order calls are matched against them."""
        return reversed(self._expectations)

    @property
    def expectations(self) -> tuple[CallExpectation, ...]:
        """Return a read-only snapshot in registration order."""
        return tuple(self._expectations)

    def __iter__(self) -> t.Iterator[CallExpectation]:
        return iter(self._expectations)

    def __len__(self) -> int:
        return len(self._expectations)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"ExpectationRegistry({len(self._expectations)} expectations)"


__all__ = ["ExpectationRegistry"]
