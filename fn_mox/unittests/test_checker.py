"""Unit tests for :func:`fn_mox.checker.check_args`."""

from __future__ import annotations

import pytest

from fn_mox.checker import check_args
from fn_mox.comparators import anything, equals, maybe, not_present
from fn_mox.expectations import CallExpectation
from fn_mox.matchers import MATCHED, MISSING, Matched, Matcher, Unmatched


def _expect(*matchers: Matcher, **kw_matchers: Matcher) -> CallExpectation:
    return CallExpectation(arg_matchers=matchers, kwarg_matchers=kw_matchers)


def test_matching_call_returns_none() -> None:
    """All positions matching yields no reason."""
    exp = _expect(equals(1), equals("two"))
    assert check_args((1, "two"), {}, exp) is None


def test_zero_arity_matches_empty_call() -> None:
    """An expectation without matchers matches a call without arguments."""
    assert check_args((), {}, _expect()) is None


def test_mismatch_uses_negative_description() -> None:
    """Without a specific reason the matcher's negative phrasing is used."""
    exp = _expect(equals(1), equals(2))
    assert check_args((1, 3), {}, exp) == "arg 1 does not equal 2"


def test_mismatch_prefers_predicate_reason() -> None:
    """A reason returned by the predicate is reported for that position."""

    def has_length_two(value: list[int]) -> Matched | Unmatched:
        if len(value) == 2:
            return MATCHED
        return Unmatched(f"which has length {len(value)}")

    exp = _expect(Matcher("has length 2", "does not have length 2", has_length_two))
    assert check_args(([1, 2, 3],), {}, exp) == "arg 0 which has length 3"


def test_first_failing_position_short_circuits() -> None:
    """Later matchers are not evaluated after a failure."""
    calls: list[object] = []

    def spy(value: object) -> bool:
        calls.append(value)
        return True

    exp = _expect(equals(1), Matcher("spied", "not spied", spy))
    assert check_args((2, 3), {}, exp) == "arg 0 does not equal 1"
    assert calls == []


def test_missing_argument_without_opt_in_is_arity_mismatch() -> None:
    """A matcher that does not understand missing args is never consulted."""
    consulted: list[object] = []

    def predicate(value: object) -> bool:
        consulted.append(value)
        return True

    exp = _expect(equals(1), Matcher("anything", "nothing", predicate))
    reason = check_args((1,), {}, exp)
    assert reason == "wrong number of arguments (expected 2, got 1)"
    assert consulted == []


def test_missing_argument_with_opt_in_receives_sentinel() -> None:
    """Matchers understanding missing args see the sentinel and decide."""
    seen: list[object] = []

    def predicate(value: object) -> bool:
        seen.append(value)
        return True

    matcher = Matcher("anything", "nothing", predicate, understands_missing_args=True)
    assert check_args((1,), {}, _expect(equals(1), matcher)) is None
    assert seen == [MISSING]


def test_missing_argument_with_opt_in_can_reject() -> None:
    """The opted-in predicate's verdict is reported like any other."""
    exp = _expect(equals(1), maybe(equals(2)), not_present())
    assert check_args((1, 2), {}, exp) is None
    assert check_args((1,), {}, exp) is None
    assert check_args((1, 2, 3), {}, exp) == "arg 2 which is present"


def test_too_many_arguments() -> None:
    """Surplus arguments fail once the declared positions have matched."""
    exp = _expect(anything())
    reason = check_args(("a", "b"), {}, exp)
    assert reason == "wrong number of arguments (expected 1, got 2)"


def test_earlier_mismatch_reported_before_surplus_arguments() -> None:
    """The first failing position decides the reason."""
    exp = _expect(equals("a"))
    assert check_args(("b", "c"), {}, exp) == "arg 0 does not equal 'a'"


@pytest.mark.parametrize(
    ("kwargs", "expected"),
    [
        ({"mode": "r"}, None),
        ({"mode": "w"}, "keyword argument 'mode' does not equal 'r'"),
        ({}, "missing keyword argument 'mode'"),
        ({"mode": "r", "extra": 1}, "unexpected keyword argument 'extra'"),
    ],
)
def test_keyword_arguments(kwargs: dict[str, object], expected: str | None) -> None:
    """Keyword arguments are matched by name after positional ones."""
    exp = _expect(equals("path"), mode=equals("r"))
    assert check_args(("path",), kwargs, exp) == expected


def test_absent_keyword_with_opt_in_matcher() -> None:
    """An optional keyword matcher accepts the keyword being left out."""
    exp = _expect(timeout=maybe(equals(5)))
    assert check_args((), {}, exp) is None
    assert check_args((), {"timeout": 5}, exp) is None


def test_positional_mismatch_reported_before_keywords() -> None:
    """Positional arguments are checked first."""
    exp = _expect(equals(1), flag=equals(True))
    assert check_args((2,), {"other": 1}, exp) == "arg 0 does not equal 1"
