"""Actions attached to call expectations and the policy that selects them."""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as t

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .expectations import CallExpectation

logger = logging.getLogger(__name__)

ActionFunction: t.TypeAlias = t.Callable[..., t.Any]


@dc.dataclass(frozen=True, slots=True)
class OneTimeAction:
    """An action used for at most one matching call."""

    action_function: ActionFunction


@dc.dataclass(frozen=True, slots=True)
class FallbackAction:
    """The repeatable action used once one-time actions are exhausted."""

    action_function: ActionFunction


Action: t.TypeAlias = OneTimeAction | FallbackAction


def _no_op(*_args: object, **_kwargs: object) -> None:
    """Do nothing; used when an expectation has no action left."""


def select_action(expectation: CallExpectation) -> ActionFunction:
    """Return the function to run for a call matching *expectation*.

    The first unconsumed one-time action wins and is consumed. After that
    the fallback action is used, and when there is none a no-op.
    """
    for index, action in enumerate(expectation.one_time_actions):
        if not expectation.is_consumed(index):
            expectation.consume(index)
            logger.debug(
                "Using one-time action %d of expectation at %s",
                index,
                expectation.declaration_site,
            )
            return action.action_function
    if expectation.fallback_action is not None:
        return expectation.fallback_action.action_function
    return _no_op


def returns(value: object) -> ActionFunction:
    """Build an action that returns *value*."""

    def action(*_args: object, **_kwargs: object) -> object:
        return value

    return action


def raises(exc: BaseException | type[BaseException]) -> ActionFunction:
    """Build an action that raises *exc*."""

    def action(*_args: object, **_kwargs: object) -> t.NoReturn:
        raise exc

    return action


def invokes(func: t.Callable[..., t.Any]) -> ActionFunction:
    """Build an action that forwards the call's arguments to *func*."""

    def action(*args: object, **kwargs: object) -> object:
        return func(*args, **kwargs)

    return action


__all__ = [
    "Action",
    "ActionFunction",
    "FallbackAction",
    "OneTimeAction",
    "invokes",
    "raises",
    "returns",
    "select_action",
]
