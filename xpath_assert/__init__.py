"""XPath assertions and PyHamcrest matchers for lxml documents."""

from xpath_assert.assertions import (
    assert_xpath_count,
    assert_xpath_equals,
    assert_xpath_match,
)
from xpath_assert.constraints import (
    EqualToXpathResult,
    MatchesXpathExpression,
    MatchesXpathResultCount,
    assert_that,
    equal_to_xpath_result,
    matches_xpath_expression,
    matches_xpath_result_count,
)
from xpath_assert.core.evaluator import XPathEvaluator, evaluate
from xpath_assert.exceptions import (
    XPathAssertionError,
    XPathCountError,
    XPathEqualityError,
    XPathMatchError,
)
from xpath_assert.reporting import (
    BaseReporter,
    ExceptionReporter,
    PytestReporter,
    UnittestReporter,
)
from xpath_assert.testcase import XPathAssertionsMixin

__version__ = "0.1.0"

__all__ = [
    # Direct assertions
    "assert_xpath_match",
    "assert_xpath_count",
    "assert_xpath_equals",
    # Matchers
    "assert_that",
    "matches_xpath_expression",
    "matches_xpath_result_count",
    "equal_to_xpath_result",
    "MatchesXpathExpression",
    "MatchesXpathResultCount",
    "EqualToXpathResult",
    # Evaluation
    "XPathEvaluator",
    "evaluate",
    # Errors
    "XPathAssertionError",
    "XPathMatchError",
    "XPathCountError",
    "XPathEqualityError",
    # Framework integration
    "BaseReporter",
    "ExceptionReporter",
    "UnittestReporter",
    "PytestReporter",
    "XPathAssertionsMixin",
]
