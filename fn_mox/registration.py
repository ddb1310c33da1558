"""Registration and discovery of class-based test suites.

Usage::

    class MyTest:
        def __init__(self):
            # Called for each test. Do per-test setup here.
            self.subject = Subject()

        def returns_false(self):
            assert not self.subject.bar()

        def tearDown(self):
            self.subject.close()

    register_test_suite(MyTest)

Every function defined directly on the class whose name does not end with an
underscore is a test, except ``tearDown``. Each test runs on a fresh
instance and ``tearDown`` runs afterwards even when the test fails.
"""

from __future__ import annotations

import logging
import typing as t

from .errors import DuplicateSuiteError

logger = logging.getLogger(__name__)

TEARDOWN_NAME: t.Final = "tearDown"

TestFunction: t.TypeAlias = t.Callable[[], None]


class TestSuiteRegistry:
    """Ordered collection of registered test suite classes."""

    __test__ = False  # keep pytest from collecting this class

    def __init__(self) -> None:
        self._suites: list[type] = []

    def register(self, suite: object) -> None:
        """Add *suite*, rejecting non-callables and duplicates."""
        if not callable(suite):
            msg = "register_test_suite() requires a callable"
            raise TypeError(msg)
        if suite in self._suites:
            name = getattr(suite, "__name__", repr(suite))
            msg = f"Test suite already registered: {name}"
            raise DuplicateSuiteError(msg)
        self._suites.append(t.cast("type", suite))
        logger.debug("Registered test suite %s", getattr(suite, "__name__", suite))

    @property
    def suites(self) -> tuple[type, ...]:
        return tuple(self._suites)

    def __contains__(self, suite: object) -> bool:
        return suite in self._suites

    def __len__(self) -> int:
        return len(self._suites)

    def clear(self) -> None:
        """Forget every registered suite."""
        self._suites.clear()


TEST_SUITES = TestSuiteRegistry()


def register_test_suite(suite: object) -> None:
    """Register a test suite class with the process-wide registry."""
    TEST_SUITES.register(suite)


def _is_test_name(name: str) -> bool:
    return not name.endswith("_") and name != TEARDOWN_NAME


def make_test_function(suite: type, method_name: str) -> TestFunction:
    """Return a function running *method_name* on a fresh *suite* instance.

    ``tearDown`` runs whether or not the test raised. An exception from
    ``tearDown`` propagates and replaces any exception from the test.
    """

    def run() -> None:
        instance = None
        try:
            instance = suite()
            getattr(instance, method_name)()
        finally:
            tear_down = getattr(instance, TEARDOWN_NAME, None)
            if callable(tear_down):
                tear_down()

    run.__name__ = method_name
    run.__qualname__ = f"{suite.__name__}.{method_name}"
    return run


def get_test_functions(suite: type) -> dict[str, TestFunction]:
    """Map ``<SuiteName>.<method>`` to a runner for each test in *suite*.

    Only attributes defined on *suite* itself are considered, in definition
    order; inherited methods are ignored.
    """
    result: dict[str, TestFunction] = {}
    for name, member in vars(suite).items():
        if not _is_test_name(name) or not callable(member):
            continue
        result[f"{suite.__name__}.{name}"] = make_test_function(suite, name)
    return result


def iter_registered_tests(
    registry: TestSuiteRegistry | None = None,
) -> t.Iterator[tuple[str, TestFunction]]:
    """Yield ``(name, runner)`` for every test of every registered suite."""
    suites = (registry if registry is not None else TEST_SUITES).suites
    for suite in suites:
        yield from get_test_functions(suite).items()


__all__ = [
    "TEARDOWN_NAME",
    "TEST_SUITES",
    "TestSuiteRegistry",
    "get_test_functions",
    "iter_registered_tests",
    "make_test_function",
    "register_test_suite",
]
