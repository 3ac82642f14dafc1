"""Evaluation and comparison core shared by the assertion surfaces."""

from xpath_assert.core.checks import (
    CheckResult,
    check_count,
    check_equals,
    check_match,
)
from xpath_assert.core.comparator import DomComparator, normalize_expected
from xpath_assert.core.evaluator import XPathEvaluator, describe_document, evaluate

__all__ = [
    "CheckResult",
    "check_count",
    "check_equals",
    "check_match",
    "DomComparator",
    "normalize_expected",
    "XPathEvaluator",
    "describe_document",
    "evaluate",
]
