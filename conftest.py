"""Global test configuration and shared fixtures."""

from __future__ import annotations

import typing as t

import pytest

from fn_mox.checker import check_args
from fn_mox.mock_function import MockFunction, create_mock_function
from fn_mox.registration import TEST_SUITES
from fn_mox.stringify import stringify

pytest_plugins = ("pytester",)


class FailureSink:
    """Collect messages reported by mock functions."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)

    @property
    def last(self) -> str:
        assert self.messages, "no failure was reported"
        return self.messages[-1]


@pytest.fixture
def failures() -> FailureSink:
    """Return a sink recording unmatched-call reports."""
    return FailureSink()


@pytest.fixture
def make_mock(failures: FailureSink) -> t.Callable[..., MockFunction]:
    """Return a factory for mocks reporting into ``failures``."""

    def factory(name: str | None = None) -> MockFunction:
        return create_mock_function(stringify, check_args, failures, name)

    return factory


@pytest.fixture(autouse=True)
def reset_test_suite_registry() -> t.Generator[None, None, None]:
    """Ensure suites registered by one test do not leak into the next."""
    saved = TEST_SUITES.suites
    TEST_SUITES.clear()
    yield
    TEST_SUITES.clear()
    for suite in saved:
        TEST_SUITES.register(suite)
