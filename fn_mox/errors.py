"""Exception hierarchy for fn-mox."""

from __future__ import annotations


class FnMoxError(Exception):
    """Base class for all fn-mox errors."""


class RegistrationError(FnMoxError):
    """Raised when a test suite cannot be registered."""


class DuplicateSuiteError(RegistrationError):
    """Raised when the same test suite is registered twice."""


class ExpectationSetupError(FnMoxError):
    """Raised when a call expectation is configured inconsistently."""


class VerificationError(FnMoxError):
    """Base class for failures detected while verifying mocks."""


class UnexpectedCallError(VerificationError):
    """Raised when a mock received calls it did not expect."""


class UnfulfilledExpectationError(VerificationError):
    """Raised when an expectation was matched fewer times than required."""


__all__ = [
    "DuplicateSuiteError",
    "ExpectationSetupError",
    "FnMoxError",
    "RegistrationError",
    "UnexpectedCallError",
    "UnfulfilledExpectationError",
    "VerificationError",
]
