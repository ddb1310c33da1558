"""Call expectations registered against mock functions."""

from __future__ import annotations

import dataclasses as dc
import inspect
import typing as t

from .actions import ActionFunction, FallbackAction, OneTimeAction
from .errors import ExpectationSetupError

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .matchers import Matcher

_PACKAGE = __name__.partition(".")[0]


def _is_library_frame(module_name: str) -> bool:
    """Return ``True`` for frames inside fn-mox itself."""
    return module_name == _PACKAGE or module_name.startswith(f"{_PACKAGE}.")


@dc.dataclass(frozen=True, slots=True)
class DeclarationSite:
    """File and line where an expectation was declared."""

    file: str
    line: int

    @classmethod
    def capture(cls) -> DeclarationSite:
        """Return the site of the innermost caller outside fn-mox."""
        frame = inspect.currentframe()
        try:
            while frame is not None:
                if not _is_library_frame(frame.f_globals.get("__name__", "")):
                    return cls(frame.f_code.co_filename, frame.f_lineno)
                frame = frame.f_back
        finally:
            del frame
        return cls("<unknown>", 0)

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


@dc.dataclass(frozen=True, slots=True)
class Cardinality:
    """Allowed number of matching calls for an expectation."""

    minimum: int
    maximum: int | None = None

    @classmethod
    def exactly(cls, count: int) -> Cardinality:
        return cls(count, count)

    @classmethod
    def at_least(cls, count: int) -> Cardinality:
        return cls(count, None)

    def allows(self, count: int) -> bool:
        """Return ``True`` if *count* calls satisfy this cardinality."""
        if count < self.minimum:
            return False
        return self.maximum is None or count <= self.maximum

    def __str__(self) -> str:
        if self.maximum is None:
            return f"at least {self.minimum}"
        if self.maximum == self.minimum:
            return f"exactly {self.minimum}"
        return f"between {self.minimum} and {self.maximum}"


@dc.dataclass(slots=True, eq=False)
class CallExpectation:
    """Matchers for one call pattern plus the actions to take on a match.

    ``num_matches`` is incremented by the mock function each time a call
    matches this expectation. One-time actions are consumed in declaration
    order; the consumption state lives here rather than on the actions.
    """

    arg_matchers: tuple[Matcher, ...] = ()
    kwarg_matchers: dict[str, Matcher] = dc.field(default_factory=dict)
    one_time_actions: tuple[OneTimeAction, ...] = ()
    fallback_action: FallbackAction | None = None
    num_matches: int = 0
    declaration_site: DeclarationSite = dc.field(
        default_factory=DeclarationSite.capture
    )
    explicit_cardinality: Cardinality | None = None
    _consumed: list[bool] = dc.field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.arg_matchers = tuple(self.arg_matchers)
        self.one_time_actions = tuple(self.one_time_actions)
        self._consumed = [False] * len(self.one_time_actions)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def will_once(self, func: ActionFunction) -> CallExpectation:
        """Run *func* for the next matching call that has no action yet."""
        if self.fallback_action is not None:
            msg = (
                f"will_once() called after will_repeatedly() on expectation "
                f"at {self.declaration_site}"
            )
            raise ExpectationSetupError(msg)
        self.one_time_actions = (*self.one_time_actions, OneTimeAction(func))
        self._consumed.append(False)
        return self

    def will_repeatedly(self, func: ActionFunction) -> CallExpectation:
        """Run *func* for every call once the one-time actions are used up."""
        if self.fallback_action is not None:
            msg = (
                f"will_repeatedly() called twice on expectation "
                f"at {self.declaration_site}"
            )
            raise ExpectationSetupError(msg)
        self.fallback_action = FallbackAction(func)
        return self

    def times(self, count: int) -> CallExpectation:
        """Require exactly *count* matching calls."""
        if count < 0:
            msg = f"times() requires a non-negative count, got {count}"
            raise ExpectationSetupError(msg)
        if self.explicit_cardinality is not None:
            msg = f"times() called twice on expectation at {self.declaration_site}"
            raise ExpectationSetupError(msg)
        self.explicit_cardinality = Cardinality.exactly(count)
        return self

    # ------------------------------------------------------------------
    # Action consumption
    # ------------------------------------------------------------------
    def is_consumed(self, index: int) -> bool:
        """Return ``True`` if one-time action *index* has been used."""
        return self._consumed[index]

    def consume(self, index: int) -> None:
        """Mark one-time action *index* as used."""
        if self._consumed[index]:
            msg = f"one-time action {index} has already been consumed"
            raise ValueError(msg)
        self._consumed[index] = True

    @property
    def remaining_one_time_actions(self) -> int:
        """Number of one-time actions not yet consumed."""
        return self._consumed.count(False)

    # ------------------------------------------------------------------
    # Cardinality
    # ------------------------------------------------------------------
    @property
    def cardinality(self) -> Cardinality:
        """Return the explicit cardinality, or the one implied by the actions."""
        if self.explicit_cardinality is not None:
            return self.explicit_cardinality
        one_time = len(self.one_time_actions)
        if self.fallback_action is not None:
            return Cardinality.at_least(one_time)
        if one_time:
            return Cardinality.exactly(one_time)
        return Cardinality.exactly(1)

    @property
    def is_satisfied(self) -> bool:
        """Return ``True`` when ``num_matches`` fits the cardinality."""
        return self.cardinality.allows(self.num_matches)


__all__ = ["CallExpectation", "Cardinality", "DeclarationSite"]
