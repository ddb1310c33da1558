"""Pytest plugin providing the ``fn_mox`` fixture."""

from __future__ import annotations

import logging
import typing as t

import pytest

from .controller import FnMox

logger = logging.getLogger(__name__)


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command-line and ini options for the plugin."""
    group = parser.getgroup("fn_mox")
    group.addoption(
        "--fn-mox-verify",
        action="store_true",
        dest="fn_mox_verify_on_teardown",
        default=None,
        help=(
            "Verify every mock created through the fn_mox fixture during "
            "teardown. Overrides the pytest.ini setting."
        ),
    )
    group.addoption(
        "--no-fn-mox-verify",
        action="store_false",
        dest="fn_mox_verify_on_teardown",
        default=None,
        help="Skip automatic verify() of the fn_mox fixture during teardown.",
    )
    parser.addini(
        "fn_mox_verify_on_teardown",
        "Automatically call verify() on the fn_mox fixture during teardown.",
        type="bool",
        default=True,
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register plugin-specific markers."""
    config.addinivalue_line(
        "markers",
        (
            "fn_mox(verify_on_teardown: bool = True): override automatic "
            "verify() behaviour for a single test."
        ),
    )


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(
    item: pytest.Item, call: pytest.CallInfo[t.Any]
) -> t.Generator[None, None, None]:
    """Attach the report of each phase to the test item.

    The fixture teardown consults ``rep_call`` so a failing test is not
    reported a second time for the mock failures it caused.
    """
    del call
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)


def _verify_on_teardown(request: pytest.FixtureRequest) -> bool:
    """Return whether the fixture should verify during teardown."""
    # Priority order: marker > CLI option > INI setting
    marker = request.node.get_closest_marker("fn_mox")
    if marker is not None and "verify_on_teardown" in marker.kwargs:
        return bool(marker.kwargs["verify_on_teardown"])

    config = request.config
    cli_value = config.getoption("fn_mox_verify_on_teardown")
    if cli_value is not None:
        return bool(cli_value)

    return bool(config.getini("fn_mox_verify_on_teardown"))


def _call_stage_failed(item: pytest.Item) -> bool:
    """Return ``True`` when the test body has already failed."""
    rep_call = getattr(item, "rep_call", None)
    return bool(rep_call and rep_call.failed)


@pytest.fixture
def fn_mox(request: pytest.FixtureRequest) -> t.Generator[FnMox, None, None]:
    """Provide an :class:`FnMox` controller verified at teardown."""
    mox = FnMox(verify_on_exit=False)
    yield mox
    if not _verify_on_teardown(request) or _call_stage_failed(request.node):
        return
    try:
        mox.verify()
    except Exception as err:
        logger.exception("Error during fn_mox verification")
        pytest.fail(f"{type(err).__name__}: {err}", pytrace=False)


__all__ = ["fn_mox"]
