"""Example tests demonstrating mock functions."""

from __future__ import annotations

import typing as t

import pytest

from fn_mox import equals, is_a, maybe, raises, returns, starts_with

if t.TYPE_CHECKING:  # pragma: no cover - typing only
    from fn_mox import FnMox


class Downloader:
    """Code under test: fetches a URL with retries."""

    def __init__(self, fetch: t.Callable[..., str | None]) -> None:
        self._fetch = fetch

    def download(self, url: str, attempts: int = 3) -> str | None:
        for _ in range(attempts):
            try:
                return self._fetch(url, timeout=10)
            except TimeoutError:
                continue
        return None


def test_scripted_results_then_fallback(fn_mox: FnMox) -> None:
    """One-time actions run first, then the repeated action takes over."""
    fetch = fn_mox.mock_function("fetch")
    (
        fn_mox.expect_call(fetch, starts_with("https://"), timeout=is_a(int))
        .will_once(raises(TimeoutError))
        .will_once(raises(TimeoutError))
        .will_repeatedly(returns("payload"))
    )

    assert Downloader(fetch).download("https://example.com") == "payload"
    assert Downloader(fetch).download("https://example.com") == "payload"


def test_newest_expectation_takes_precedence(fn_mox: FnMox) -> None:
    """A specific expectation registered later overrides a general one."""
    lookup = fn_mox.mock_function("lookup")
    fn_mox.expect_call(lookup, is_a(str)).will_repeatedly(returns("default"))
    fn_mox.expect_call(lookup, "admin").will_once(returns("root"))

    assert lookup("admin") == "root"
    assert lookup("guest") == "default"


def test_optional_argument(fn_mox: FnMox) -> None:
    """``maybe`` accepts a call that leaves an argument out."""
    open_file = fn_mox.mock_function("open_file")
    fn_mox.expect_call(open_file, "log.txt", maybe(equals("a"))).will_repeatedly(
        returns("handle")
    )

    assert open_file("log.txt") == "handle"
    assert open_file("log.txt", "a") == "handle"


@pytest.mark.fn_mox(verify_on_teardown=False)
def test_unmatched_call_report(fn_mox: FnMox) -> None:
    """Unmatched calls return ``None`` and are described in one report."""
    lookup = fn_mox.mock_function("lookup")
    fn_mox.expect_call(lookup, "admin").will_once(returns("root"))

    assert lookup("guest") is None
    [report] = fn_mox.failures
    assert report.startswith("Call to lookup matches no expectation.\n    Arg 0: 'guest'")
    assert "but arg 0 does not equal 'admin':" in report
