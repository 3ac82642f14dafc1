"""PyHamcrest matchers for XPath checks.

The matchers run the same checks as the direct assertions, so they can
be combined with hamcrest's own combinators:

    from hamcrest import all_of, not_
    from xpath_assert import assert_that, matches_xpath_expression

    assert_that(document, all_of(
        matches_xpath_expression("//child"),
        not_(matches_xpath_expression("//missing")),
    ))
"""

from typing import Any, Mapping, Optional

from hamcrest import assert_that
from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description
from hamcrest.core.string_description import StringDescription
from lxml import etree

from xpath_assert.core.checks import CheckResult, check_count, check_equals, check_match
from xpath_assert.core.comparator import normalize_expected
from xpath_assert.reporting import BaseReporter, default_reporter


class XPathMatcher(BaseMatcher):
    """
    Base class for matchers that evaluate an XPath expression.

    Subclasses implement check() to run their check against a document.
    """

    def __init__(self, expression: str, namespaces: Optional[Mapping[str, str]] = None):
        self.expression = expression
        self.namespaces = dict(namespaces or {})

    def check(self, document) -> CheckResult:
        raise NotImplementedError

    def _matches(self, item) -> bool:
        if not isinstance(item, (etree._ElementTree, etree._Element)):
            return False
        return self.check(item).success

    def describe_mismatch(self, item, mismatch_description: Description) -> None:
        if not isinstance(item, (etree._ElementTree, etree._Element)):
            mismatch_description.append_text("was not a parsed lxml document: ")
            mismatch_description.append_description_of(item)
            return
        mismatch_description.append_text(self.check(item).message)

    def evaluate(self, document, reporter: Optional[BaseReporter] = None) -> None:
        """Fail the same way the matching direct assertion does."""
        (reporter or default_reporter).report(self.check(document))

    def to_description(self) -> str:
        """Human-readable description of the predicate."""
        description = StringDescription()
        self.describe_to(description)
        return str(description)

    def _describe_expression(self, description: Description) -> None:
        description.append_text(f'matches xpath expression "{self.expression}"')
        if self.namespaces:
            bindings = ", ".join(f"{p}={uri}" for p, uri in sorted(self.namespaces.items()))
            description.append_text(f" with namespaces {{{bindings}}}")


class MatchesXpathExpression(XPathMatcher):
    """Matches documents in which the expression selects at least one node."""

    def check(self, document) -> CheckResult:
        return check_match(self.expression, document, self.namespaces)

    def describe_to(self, description: Description) -> None:
        self._describe_expression(description)


class MatchesXpathResultCount(XPathMatcher):
    """Matches documents in which the expression selects exactly ``count`` nodes."""

    def __init__(
        self,
        count: int,
        expression: str,
        namespaces: Optional[Mapping[str, str]] = None,
    ):
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ValueError(f"count must be a non-negative integer, got {count!r}")
        super().__init__(expression, namespaces)
        self.count = count

    def check(self, document) -> CheckResult:
        return check_count(self.count, self.expression, document, self.namespaces)

    def describe_to(self, description: Description) -> None:
        self._describe_expression(description)
        description.append_text(f" with {self.count} node(s)")


class EqualToXpathResult(XPathMatcher):
    """Matches documents in which the selected nodes equal the expected nodes."""

    def __init__(
        self,
        expected: Any,
        expression: str,
        namespaces: Optional[Mapping[str, str]] = None,
    ):
        super().__init__(expression, namespaces)
        # Materialized once so generators can be matched repeatedly
        self.expected = normalize_expected(expected)

    def check(self, document) -> CheckResult:
        return check_equals(self.expected, self.expression, document, self.namespaces)

    def describe_to(self, description: Description) -> None:
        description.append_text(
            f'is equal to the result of xpath expression "{self.expression}"'
        )


def matches_xpath_expression(
    expression: str, namespaces: Optional[Mapping[str, str]] = None
) -> MatchesXpathExpression:
    """Matcher for documents where ``expression`` selects something."""
    return MatchesXpathExpression(expression, namespaces)


def matches_xpath_result_count(
    count: int, expression: str, namespaces: Optional[Mapping[str, str]] = None
) -> MatchesXpathResultCount:
    """Matcher for documents where ``expression`` selects ``count`` nodes."""
    return MatchesXpathResultCount(count, expression, namespaces)


def equal_to_xpath_result(
    expected: Any, expression: str, namespaces: Optional[Mapping[str, str]] = None
) -> EqualToXpathResult:
    """Matcher for documents where ``expression`` selects nodes equal to ``expected``."""
    return EqualToXpathResult(expected, expression, namespaces)


__all__ = [
    "assert_that",
    "XPathMatcher",
    "MatchesXpathExpression",
    "MatchesXpathResultCount",
    "EqualToXpathResult",
    "matches_xpath_expression",
    "matches_xpath_result_count",
    "equal_to_xpath_result",
]
