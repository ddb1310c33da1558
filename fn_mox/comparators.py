"""Built-in matchers used for argument matching."""

from __future__ import annotations

import re
import typing as t

from .matchers import MATCHED, Matcher, MatchResult, Unmatched, is_missing


def anything() -> Matcher:
    """Match any supplied value."""
    return Matcher("is anything", "is nothing", lambda _value: True)


def equals(expected: object) -> Matcher:
    """Match values equal to *expected*."""

    def predicate(value: object) -> bool:
        return bool(value == expected)

    return Matcher(
        f"equals {expected!r}",
        f"does not equal {expected!r}",
        predicate,
    )


def is_a(typ: type) -> Matcher:
    """Match instances of *typ*."""

    def predicate(value: object) -> MatchResult:
        if isinstance(value, typ):
            return MATCHED
        return Unmatched(f"which is a {type(value).__name__}")

    return Matcher(
        f"is an instance of {typ.__name__}",
        f"is not an instance of {typ.__name__}",
        predicate,
    )


def contains(item: object) -> Matcher:
    """Match containers (or strings) holding *item*."""

    def predicate(value: object) -> MatchResult:
        try:
            found = item in value  # type: ignore[operator]
        except TypeError:
            return Unmatched(f"which is a {type(value).__name__}, not a container")
        return MATCHED if found else Unmatched()

    return Matcher(f"contains {item!r}", f"does not contain {item!r}", predicate)


def starts_with(prefix: str) -> Matcher:
    """Match strings beginning with *prefix*."""

    def predicate(value: object) -> MatchResult:
        if not isinstance(value, str):
            return Unmatched(f"which is a {type(value).__name__}")
        return MATCHED if value.startswith(prefix) else Unmatched()

    return Matcher(
        f"starts with {prefix!r}",
        f"does not start with {prefix!r}",
        predicate,
    )


def matches_regex(pattern: str) -> Matcher:
    """Match strings where *pattern* is found via :func:`re.search`."""
    compiled = re.compile(pattern)

    def predicate(value: object) -> MatchResult:
        if not isinstance(value, str):
            return Unmatched(f"which is a {type(value).__name__}")
        return MATCHED if compiled.search(value) else Unmatched()

    return Matcher(
        f"matches regex {compiled.pattern!r}",
        f"does not match regex {compiled.pattern!r}",
        predicate,
    )


def satisfies(
    func: t.Callable[[t.Any], object], description: str | None = None
) -> Matcher:
    """Use a custom ``func`` to determine a match."""
    name = getattr(func, "__name__", repr(func))
    positive = description or f"satisfies {name}"
    negative = f"does not satisfy {description or name}"

    def predicate(value: object) -> bool:
        return bool(func(value))

    return Matcher(positive, negative, predicate)


def not_present() -> Matcher:
    """Match only an argument the caller did not supply."""

    def predicate(value: object) -> MatchResult:
        return MATCHED if is_missing(value) else Unmatched("which is present")

    return Matcher(
        "is not present",
        "is present",
        predicate,
        understands_missing_args=True,
    )


def maybe(matcher: Matcher) -> Matcher:
    """Match a missing argument, or a supplied one that satisfies *matcher*."""

    def predicate(value: object) -> MatchResult:
        if is_missing(value):
            return MATCHED
        return matcher.evaluate(value)

    return Matcher(
        f"is not present or {matcher.description}",
        f"is present and {matcher.negative_description}",
        predicate,
        understands_missing_args=True,
    )


def as_matcher(value: object) -> Matcher:
    """Return *value* when it is a matcher, otherwise an :func:`equals` matcher."""
    if isinstance(value, Matcher):
        return value
    return equals(value)


__all__ = [
    "anything",
    "as_matcher",
    "contains",
    "equals",
    "is_a",
    "matches_regex",
    "maybe",
    "not_present",
    "satisfies",
    "starts_with",
]
