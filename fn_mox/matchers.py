"""Matcher data shapes consumed by the argument checker.

A :class:`Matcher` pairs a predicate over a single argument value with a
positive and a negative verb phrase, e.g. ``"is greater than 7"`` and
``"is less than or equal to 7"``. The phrases are only used to build
diagnostics when a call matches no expectation.

Predicates return a :data:`MatchResult`: :data:`MATCHED`, or an
:class:`Unmatched` optionally carrying a relative clause explaining the
mismatch (``"which has length 3"``).
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as t


class _MissingArg(enum.Enum):
    """Marker type for the missing-argument sentinel."""

    MISSING = enum.auto()

    def __repr__(self) -> str:
        """Render the sentinel the way diagnostics show it."""
        return "(missing)"

    __str__ = __repr__


MISSING: t.Final = _MissingArg.MISSING
"""Value handed to matchers that understand missing arguments."""


def is_missing(value: object) -> bool:
    """Return ``True`` if *value* is the missing-argument sentinel."""
    return value is MISSING


@dc.dataclass(frozen=True, slots=True)
class Matched:
    """Result of a predicate accepting its value."""

    def __bool__(self) -> bool:
        return True


@dc.dataclass(frozen=True, slots=True)
class Unmatched:
    """Result of a predicate rejecting its value."""

    reason: str | None = None

    def __bool__(self) -> bool:
        return False


MATCHED: t.Final = Matched()

MatchResult: t.TypeAlias = Matched | Unmatched
PredicateFunc: t.TypeAlias = t.Callable[[t.Any], "MatchResult | bool"]


def to_match_result(raw: object) -> MatchResult:
    """Normalise a predicate's return value to a :data:`MatchResult`."""
    if isinstance(raw, Matched | Unmatched):
        return raw
    if isinstance(raw, bool):
        return MATCHED if raw else Unmatched()
    msg = (
        "matcher predicates must return Matched, Unmatched or bool, "
        f"got {type(raw).__name__}"
    )
    raise TypeError(msg)


@dc.dataclass(frozen=True, slots=True)
class Matcher:
    """A named predicate over one argument value."""

    description: str
    negative_description: str
    predicate: PredicateFunc = dc.field(repr=False)
    understands_missing_args: bool = False

    def evaluate(self, value: object) -> MatchResult:
        """Run the predicate against *value*."""
        return to_match_result(self.predicate(value))


@dc.dataclass(frozen=True, slots=True)
class ArgSlot:
    """One positional or keyword argument as seen by the checker.

    ``present`` is ``False`` when the caller supplied nothing at this
    position.
    """

    value: object = None
    present: bool = True

    @classmethod
    def of(cls, value: object) -> ArgSlot:
        """Wrap a supplied argument."""
        return cls(value, present=True)

    @classmethod
    def absent(cls) -> ArgSlot:
        """Return the slot for an argument the caller did not supply."""
        return _ABSENT

    @property
    def is_missing(self) -> bool:
        return not self.present


_ABSENT = ArgSlot(None, present=False)


def slots_for(args: t.Sequence[object], width: int) -> list[ArgSlot]:
    """Return *width* slots for *args*, padding with absent slots."""
    slots = [ArgSlot.of(arg) for arg in args]
    slots.extend(ArgSlot.absent() for _ in range(width - len(args)))
    return slots


__all__ = [
    "MATCHED",
    "MISSING",
    "ArgSlot",
    "MatchResult",
    "Matched",
    "Matcher",
    "PredicateFunc",
    "Unmatched",
    "is_missing",
    "slots_for",
    "to_match_result",
]
