"""FnMox controller tying mock functions to verification."""

from __future__ import annotations

import logging
import types  # noqa: TC003
import typing as t

from .checker import check_args
from .comparators import as_matcher
from .expectations import CallExpectation, DeclarationSite
from .mock_function import MockFunction, create_mock_function
from .stringify import stringify as default_stringify
from .verifiers import CountVerifier, FailureVerifier

if t.TYPE_CHECKING:
    from .stringify import Stringify

logger = logging.getLogger(__name__)


class FnMox:
    """Create mock functions, register expectations and verify them."""

    def __init__(
        self,
        *,
        verify_on_exit: bool = True,
        stringify: Stringify | None = None,
    ) -> None:
        """Create a new controller.

        Parameters
        ----------
        verify_on_exit:
            When ``True`` (the default), :meth:`__exit__` calls :meth:`verify`
            unless the block is already propagating an exception.
        stringify:
            Function rendering argument values in diagnostics. Defaults to
            :func:`fn_mox.stringify.stringify`.
        """
        self._verify_on_exit = verify_on_exit
        self._stringify = stringify if stringify is not None else default_stringify
        self._mocks: list[MockFunction] = []
        self.failures: list[str] = []
        self._verified = False

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def mocks(self) -> tuple[MockFunction, ...]:
        """Return every mock function created by this controller."""
        return tuple(self._mocks)

    @property
    def verified(self) -> bool:
        """Return ``True`` once :meth:`verify` has completed successfully."""
        return self._verified

    # ------------------------------------------------------------------
    # Context manager protocol
    # ------------------------------------------------------------------
    def __enter__(self) -> FnMox:
        """Enter the context."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        """Verify on exit when enabled and the block completed normally."""
        if self._verify_on_exit and exc_type is None and not self._verified:
            self.verify()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def report_failure(self, message: str) -> None:
        """Record a call that matched no expectation."""
        logger.debug("Recording unmatched call:\n%s", message)
        self.failures.append(message)

    def mock_function(self, name: str | None = None) -> MockFunction:
        """Create a mock function owned by this controller."""
        mock = create_mock_function(
            self._stringify, check_args, self.report_failure, name
        )
        self._mocks.append(mock)
        return mock

    def expect_call(
        self,
        mock: MockFunction | types.MethodType,
        *matchers: object,
        **kw_matchers: object,
    ) -> CallExpectation:
        """Register an expectation on *mock* and return it for configuration.

        Plain values among *matchers* and *kw_matchers* are compared by
        equality.
        """
        expectation = CallExpectation(
            arg_matchers=tuple(as_matcher(m) for m in matchers),
            kwarg_matchers={key: as_matcher(m) for key, m in kw_matchers.items()},
            declaration_site=DeclarationSite.capture(),
        )
        mock.registry.add(expectation)
        logger.debug(
            "Registered expectation on %s at %s",
            mock.name or "<anonymous mock>",
            expectation.declaration_site,
        )
        return expectation

    def verify(self) -> None:
        """Raise if any call went unmatched or any count is unmet."""
        FailureVerifier().verify(self.failures)
        CountVerifier().verify(self._mocks)
        self._verified = True


__all__ = ["FnMox"]
