"""Compare one call's arguments against one call expectation."""

from __future__ import annotations

import typing as t

from .matchers import MISSING, ArgSlot, Matcher, Unmatched, slots_for

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .expectations import CallExpectation


class ArgumentChecker(t.Protocol):
    """Return ``None`` when a call matches, otherwise the reason it does not."""

    def __call__(
        self,
        args: t.Sequence[object],
        kwargs: t.Mapping[str, object],
        expectation: CallExpectation,
    ) -> str | None:
        """Check *args* and *kwargs* against *expectation*."""
        ...


def _evaluate(slot: ArgSlot, matcher: Matcher) -> Unmatched | None:
    """Return the mismatch for *slot*, or ``None`` when *matcher* accepts it."""
    value = MISSING if slot.is_missing else slot.value
    result = matcher.evaluate(value)
    return result if isinstance(result, Unmatched) else None


def _describe_unmatched(subject: str, matcher: Matcher, result: Unmatched) -> str:
    if result.reason:
        return f"{subject} {result.reason}"
    return f"{subject} {matcher.negative_description}"


def _arity_reason(expected: int, actual: int) -> str:
    return f"wrong number of arguments (expected {expected}, got {actual})"


def _check_positional(
    args: t.Sequence[object], matchers: t.Sequence[Matcher]
) -> str | None:
    for index, slot in enumerate(slots_for(args, len(matchers))):
        if index >= len(matchers):
            return _arity_reason(len(matchers), len(args))
        matcher = matchers[index]
        if slot.is_missing and not matcher.understands_missing_args:
            return _arity_reason(len(matchers), len(args))
        unmatched = _evaluate(slot, matcher)
        if unmatched is not None:
            return _describe_unmatched(f"arg {index}", matcher, unmatched)
    return None


def _check_keywords(
    kwargs: t.Mapping[str, object], matchers: t.Mapping[str, Matcher]
) -> str | None:
    for key, matcher in matchers.items():
        slot = ArgSlot.of(kwargs[key]) if key in kwargs else ArgSlot.absent()
        if slot.is_missing and not matcher.understands_missing_args:
            return f"missing keyword argument {key!r}"
        unmatched = _evaluate(slot, matcher)
        if unmatched is not None:
            return _describe_unmatched(f"keyword argument {key!r}", matcher, unmatched)
    for key in kwargs:
        if key not in matchers:
            return f"unexpected keyword argument {key!r}"
    return None


def check_args(
    args: t.Sequence[object],
    kwargs: t.Mapping[str, object],
    expectation: CallExpectation,
) -> str | None:
    """Return ``None`` if the call matches *expectation*, else the reason.

    Positions are checked in order and the first failing one decides the
    reason. A matcher whose argument is absent is only consulted when it
    declares ``understands_missing_args``; it then receives
    :data:`~fn_mox.matchers.MISSING`. Keyword arguments are checked after
    all positional ones.
    """
    reason = _check_positional(args, expectation.arg_matchers)
    if reason is not None:
        return reason
    return _check_keywords(kwargs, expectation.kwarg_matchers)


__all__ = ["ArgumentChecker", "check_args"]
