"""Exception classes raised by failed XPath assertions.

All assertion failures derive from ``AssertionError`` so test runners
report them as failures rather than errors. Errors raised by lxml while
evaluating a malformed expression are not wrapped.
"""

from typing import Any, Dict, Optional


class XPathAssertionError(AssertionError):
    """Base class for XPath assertion failures.

    Carries the human-readable failure message plus a machine-readable
    code and details for tooling that inspects failures.
    """

    def __init__(
        self,
        message: str,
        code: str = "XPATH_ASSERTION_FAILED",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class XPathMatchError(XPathAssertionError):
    """Expression matched nothing."""

    def __init__(self, message: str, expression: str):
        super().__init__(
            message=message,
            code="XPATH_NO_MATCH",
            details={"expression": expression},
        )


class XPathCountError(XPathAssertionError):
    """Expression matched an unexpected number of nodes."""

    def __init__(self, message: str, expression: str, expected: int, actual: int):
        super().__init__(
            message=message,
            code="XPATH_COUNT_MISMATCH",
            details={"expression": expression, "expected": expected, "actual": actual},
        )


class XPathEqualityError(XPathAssertionError):
    """Matched nodes differ from the expected nodes."""

    def __init__(
        self,
        message: str,
        expression: str,
        expected_count: int,
        actual_count: int,
    ):
        super().__init__(
            message=message,
            code="XPATH_NOT_EQUAL",
            details={
                "expression": expression,
                "expected_count": expected_count,
                "actual_count": actual_count,
            },
        )


def error_for_result(result) -> XPathAssertionError:
    """Build the exception matching a failed check result."""
    if result.kind == "match":
        return XPathMatchError(result.message, result.expression)
    if result.kind == "count":
        return XPathCountError(
            result.message, result.expression, result.expected_count, result.actual_count
        )
    if result.kind == "equals":
        return XPathEqualityError(
            result.message, result.expression, result.expected_count, result.actual_count
        )
    return XPathAssertionError(result.message, details={"expression": result.expression})
