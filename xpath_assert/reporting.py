"""Failure reporters that connect checks to a test framework.

A reporter turns a failed ``CheckResult`` into the host framework's
failure. The checks themselves never import a test framework.

All reporters must implement:
- fail(): Raise the framework's failure for a failed result
"""

from abc import ABC, abstractmethod

from xpath_assert.core.checks import CheckResult
from xpath_assert.exceptions import error_for_result


class BaseReporter(ABC):
    """Abstract base class for failure reporters."""

    # Subclasses should override this with their framework name
    FRAMEWORK_NAME: str = "base"

    @abstractmethod
    def fail(self, result: CheckResult) -> None:
        """
        Report a failed check. Must not return normally.

        Args:
            result: The failed check result carrying the message
        """
        pass

    def report(self, result: CheckResult) -> CheckResult:
        """
        Pass successful results through and fail on the others.

        If fail() returns instead of raising, the typed
        ``XPathAssertionError`` for the result is raised.
        """
        if not result.success:
            self.fail(result)
            raise error_for_result(result)
        return result


class ExceptionReporter(BaseReporter):
    """Raise a typed ``XPathAssertionError`` (works with any runner)."""

    FRAMEWORK_NAME = "exception"

    def fail(self, result: CheckResult) -> None:
        raise error_for_result(result)


class UnittestReporter(BaseReporter):
    """Report through ``unittest.TestCase.fail``."""

    FRAMEWORK_NAME = "unittest"

    def __init__(self, testcase):
        self.testcase = testcase

    def fail(self, result: CheckResult) -> None:
        self.testcase.fail(result.message)


class PytestReporter(BaseReporter):
    """Report through ``pytest.fail`` without the internal traceback (requires pytest)."""

    FRAMEWORK_NAME = "pytest"

    def fail(self, result: CheckResult) -> None:
        # Deferred so pytest is only needed when this reporter is used
        import pytest

        pytest.fail(result.message, pytrace=False)


default_reporter = ExceptionReporter()
