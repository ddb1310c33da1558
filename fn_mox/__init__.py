"""Mock functions with ordered expectations, scripted actions and diagnostics.

Expectations registered on a mock function are matched most recent first;
the matching expectation's next one-time action runs, then its fallback.
Calls that match nothing produce one message describing every expectation
that was tried.
"""

from __future__ import annotations

from .actions import (
    FallbackAction,
    OneTimeAction,
    invokes,
    raises,
    returns,
    select_action,
)
from .checker import ArgumentChecker, check_args
from .comparators import (
    anything,
    as_matcher,
    contains,
    equals,
    is_a,
    matches_regex,
    maybe,
    not_present,
    satisfies,
    starts_with,
)
from .controller import FnMox
from .errors import (
    DuplicateSuiteError,
    ExpectationSetupError,
    FnMoxError,
    RegistrationError,
    UnexpectedCallError,
    UnfulfilledExpectationError,
    VerificationError,
)
from .expectations import CallExpectation, Cardinality, DeclarationSite
from .matchers import MATCHED, MISSING, Matched, Matcher, Unmatched, is_missing
from .mock_function import MockFunction, create_mock_function
from .registration import (
    TEST_SUITES,
    get_test_functions,
    iter_registered_tests,
    register_test_suite,
)
from .registry import ExpectationRegistry
from .stringify import stringify

__all__ = [
    "MATCHED",
    "MISSING",
    "TEST_SUITES",
    "ArgumentChecker",
    "CallExpectation",
    "Cardinality",
    "DeclarationSite",
    "DuplicateSuiteError",
    "ExpectationRegistry",
    "ExpectationSetupError",
    "FallbackAction",
    "FnMox",
    "FnMoxError",
    "Matched",
    "Matcher",
    "MockFunction",
    "OneTimeAction",
    "RegistrationError",
    "UnexpectedCallError",
    "UnfulfilledExpectationError",
    "Unmatched",
    "VerificationError",
    "anything",
    "as_matcher",
    "check_args",
    "contains",
    "create_mock_function",
    "equals",
    "get_test_functions",
    "invokes",
    "is_a",
    "is_missing",
    "iter_registered_tests",
    "matches_regex",
    "maybe",
    "not_present",
    "raises",
    "register_test_suite",
    "returns",
    "satisfies",
    "select_action",
    "starts_with",
    "stringify",
]
