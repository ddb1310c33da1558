"""Mock functions that dispatch calls to registered expectations.

A :class:`MockFunction` keeps an :class:`~fn_mox.registry.ExpectationRegistry`.
Each call is checked against the registered expectations, most recently
registered first. The first match has its ``num_matches`` incremented and its
next action run. When nothing matches, a single message describing the call
and every expectation that was tried is handed to the failure reporter and
the call returns ``None``.

Mock functions are not thread-safe: calling the same mock concurrently, or
re-entering it from one of its own actions, is not supported.
"""

from __future__ import annotations

import logging
import types
import typing as t

from .actions import select_action
from .registry import ExpectationRegistry

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .checker import ArgumentChecker
    from .expectations import CallExpectation
    from .stringify import Stringify

logger = logging.getLogger(__name__)

ReportFailure: t.TypeAlias = t.Callable[[str], None]

_NO_ARGUMENTS = "    (No arguments.)"


def describe_args(
    args: t.Sequence[object],
    kwargs: t.Mapping[str, object],
    stringify: Stringify,
) -> list[str]:
    """Describe the arguments of a call as diagnostic lines."""
    if not args and not kwargs:
        return [_NO_ARGUMENTS]
    lines = [f"    Arg {index}: {stringify(arg)}" for index, arg in enumerate(args)]
    lines.extend(f"    Kwarg {key}: {stringify(value)}" for key, value in kwargs.items())
    return lines


def describe_expectation(expectation: CallExpectation) -> list[str]:
    """Describe the matchers of *expectation* as diagnostic lines."""
    lines = [
        f"    Arg {index}: {matcher.description}"
        for index, matcher in enumerate(expectation.arg_matchers)
    ]
    lines.extend(
        f"    Kwarg {key}: {matcher.description}"
        for key, matcher in expectation.kwarg_matchers.items()
    )
    return lines


class MockFunction:
    """A callable that verifies its calls against registered expectations."""

    def __init__(
        self,
        stringify: Stringify,
        check_args: ArgumentChecker,
        report_failure: ReportFailure,
        name: str | None = None,
    ) -> None:
        self._stringify = stringify
        self._check_args = check_args
        self._report_failure = report_failure
        self.name = name
        self._registry = ExpectationRegistry()

    @property
    def registry(self) -> ExpectationRegistry:
        """Return the registry backing this mock."""
        return self._registry

    def _header(self) -> str:
        if self.name:
            return f"Call to {self.name} matches no expectation."
        return "Call matches no expectation."

    def _find_expectation(
        self, args: tuple[object, ...], kwargs: dict[str, object]
    ) -> tuple[CallExpectation | None, list[str]]:
        """Return the matching expectation, or ``None`` and the failure lines."""
        failure_lines = [self._header()]
        failure_lines.extend(describe_args(args, kwargs, self._stringify))

        for expectation in self._registry.most_recent_first():
            reason = self._check_args(args, kwargs, expectation)
            if reason is None:
                expectation.num_matches += 1
                return expectation, []
            failure_lines.append("")
            failure_lines.append(
                f"Tried expectation at {expectation.declaration_site}, "
                f"but {reason}:"
            )
            failure_lines.extend(describe_expectation(expectation))

        return None, failure_lines

    def dispatch(
        self,
        receiver: object | None,
        args: tuple[object, ...],
        kwargs: dict[str, object],
    ) -> t.Any:  # noqa: ANN401 - returns whatever the action returns
        """Handle a call of this mock, optionally bound to *receiver*."""
        expectation, failure_lines = self._find_expectation(args, kwargs)
        if expectation is None:
            logger.debug("Call to %s matched no expectation", self._display_name)
            self._report_failure("\n".join(failure_lines))
            return None

        logger.debug(
            "Call to %s matched expectation at %s (match %d)",
            self._display_name,
            expectation.declaration_site,
            expectation.num_matches,
        )
        action = select_action(expectation)
        if receiver is None:
            return action(*args, **kwargs)
        return action(receiver, *args, **kwargs)

    @property
    def _display_name(self) -> str:
        return self.name or "<anonymous mock>"

    def __call__(self, *args: object, **kwargs: object) -> t.Any:  # noqa: ANN401
        """Match the call and run the selected action."""
        return self.dispatch(None, args, kwargs)

    def __get__(
        self, instance: object | None, owner: type | None = None
    ) -> MockFunction | types.MethodType:
        """Bind to *instance* so actions receive it as their first argument.

        The bound form still exposes ``registry`` and ``name``, so
        expectations may be registered through an instance.
        """
        if instance is None:
            return self
        return types.MethodType(_BoundCall(self), instance)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"MockFunction(name={self.name!r}, expectations={len(self._registry)})"


class _BoundCall:
    """Adapter letting :class:`types.MethodType` pass the receiver through."""

    __slots__ = ("mock",)

    def __init__(self, mock: MockFunction) -> None:
        self.mock = mock

    @property
    def registry(self) -> ExpectationRegistry:
        return self.mock.registry

    @property
    def name(self) -> str | None:
        return self.mock.name

    def __call__(self, receiver: object, *args: object, **kwargs: object) -> t.Any:  # noqa: ANN401
        return self.mock.dispatch(receiver, args, kwargs)


def create_mock_function(
    stringify: Stringify,
    check_args: ArgumentChecker,
    report_failure: ReportFailure,
    name: str | None = None,
) -> MockFunction:
    """Create a mock function wired to the given collaborators.

    Parameters
    ----------
    stringify:
        Turns argument values into diagnostic text. Must not raise.
    check_args:
        Returns ``None`` when a call matches an expectation and a reason
        string otherwise.
    report_failure:
        Receives the message describing a call that matched no expectation.
    name:
        Optional name used in the unmatched-call header.
    """
    return MockFunction(stringify, check_args, report_failure, name)


__all__ = [
    "MockFunction",
    "ReportFailure",
    "create_mock_function",
    "describe_args",
    "describe_expectation",
]
