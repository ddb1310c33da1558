"""Behavioural tests for test suite registration using pytest-bdd."""

from __future__ import annotations

from pathlib import Path

from pytest_bdd import scenario

from tests.steps import *  # noqa: F403

FEATURES_DIR = Path(__file__).resolve().parent.parent / "features"


@scenario(
    str(FEATURES_DIR / "registration.feature"),
    "discovery skips private methods and tearDown",
)
def test_discovery_rules() -> None:
    """Only public, own methods other than tearDown become tests."""
    pass


@scenario(str(FEATURES_DIR / "registration.feature"), "registering a suite twice fails")
def test_duplicate_registration() -> None:
    """A second registration of the same suite is rejected."""
    pass


@scenario(
    str(FEATURES_DIR / "registration.feature"),
    "registering something that is not callable fails",
)
def test_non_callable_registration() -> None:
    """Registration requires a callable."""
    pass


@scenario(
    str(FEATURES_DIR / "registration.feature"), "tearDown runs after a failing test"
)
def test_teardown_after_failure() -> None:
    """tearDown is guaranteed to run and the test error propagates."""
    pass
