"""Match, count and equality checks shared by every assertion surface.

Each check evaluates one expression against one document and returns a
``CheckResult``. Checks never raise for a failed condition; turning a
failed result into a test failure is the job of a reporter (see
``xpath_assert.reporting``). Errors from lxml for malformed expressions
propagate unchanged.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from xpath_assert.core.comparator import DomComparator, normalize_expected
from xpath_assert.core.evaluator import XPathEvaluator, describe_document
from xpath_assert.utils.logger import log_check_failure

MATCH_FAILURE = "Failed asserting that {document} matches expression: {expression}."
COUNT_FAILURE = (
    "Failed asserting that actual node count {actual} matches expected count {expected}."
)
EQUALS_FAILURE = "Failed asserting that two DOM structures are equal."


@dataclass
class CheckResult:
    """
    Outcome of a single check.

    ``message`` is empty on success and holds the failure text otherwise.
    """

    success: bool
    kind: str
    expression: str
    message: str = ""
    actual_count: int = 0
    expected_count: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary for serialization."""
        return {
            "success": self.success,
            "kind": self.kind,
            "expression": self.expression,
            "message": self.message,
            "actual_count": self.actual_count,
            "expected_count": self.expected_count,
        }


def _failed(result: CheckResult) -> CheckResult:
    log_check_failure(result.kind, result.expression, result.message)
    return result


def check_match(
    expression: str,
    document,
    namespaces: Optional[Mapping[str, str]] = None,
    evaluator: Optional[XPathEvaluator] = None,
) -> CheckResult:
    """
    Check that an expression selects at least one node.

    Scalar results (``boolean(...)``, ``count(...)``) match when truthy,
    the same rule ``check_count`` sees through ``XPathEvaluator.evaluate``.
    """
    evaluator = evaluator or XPathEvaluator()
    actual_count = len(evaluator.evaluate(document, expression, namespaces))

    result = CheckResult(
        success=actual_count > 0,
        kind="match",
        expression=expression,
        actual_count=actual_count,
    )
    if result.success:
        return result

    result.message = MATCH_FAILURE.format(
        document=describe_document(document), expression=expression
    )
    return _failed(result)


def check_count(
    expected_count: int,
    expression: str,
    document,
    namespaces: Optional[Mapping[str, str]] = None,
    evaluator: Optional[XPathEvaluator] = None,
) -> CheckResult:
    """
    Check that an expression selects exactly ``expected_count`` nodes.

    Raises:
        ValueError: If expected_count is not a non-negative integer
    """
    if isinstance(expected_count, bool) or not isinstance(expected_count, int):
        raise ValueError(f"expected_count must be an integer, got {expected_count!r}")
    if expected_count < 0:
        raise ValueError(f"expected_count must be non-negative, got {expected_count}")

    evaluator = evaluator or XPathEvaluator()
    actual_count = len(evaluator.evaluate(document, expression, namespaces))

    result = CheckResult(
        success=actual_count == expected_count,
        kind="count",
        expression=expression,
        actual_count=actual_count,
        expected_count=expected_count,
    )
    if result.success:
        return result

    result.message = COUNT_FAILURE.format(actual=actual_count, expected=expected_count)
    return _failed(result)


def check_equals(
    expected: Any,
    expression: str,
    document,
    namespaces: Optional[Mapping[str, str]] = None,
    evaluator: Optional[XPathEvaluator] = None,
    comparator: Optional[DomComparator] = None,
) -> CheckResult:
    """
    Check that the selected nodes are structurally equal to ``expected``.

    ``expected`` is a single node or a collection of nodes; node order
    is significant. A scalar result is compared by value, falsy ones
    included, so ``count(//missing)`` equals ``0``.
    """
    expected_nodes = normalize_expected(expected)
    evaluator = evaluator or XPathEvaluator()
    comparator = comparator or DomComparator()
    raw = evaluator.evaluate_raw(document, expression, namespaces)
    actual_nodes = raw if isinstance(raw, list) else [raw]

    result = CheckResult(
        success=comparator.sequences_equal(expected_nodes, actual_nodes),
        kind="equals",
        expression=expression,
        actual_count=len(actual_nodes),
        expected_count=len(expected_nodes),
    )
    if result.success:
        return result

    result.message = EQUALS_FAILURE
    return _failed(result)
