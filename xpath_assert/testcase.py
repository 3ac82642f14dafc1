"""unittest integration.

    class PageTest(XPathAssertionsMixin, unittest.TestCase):
        def test_has_title(self):
            self.assertXpathMatch("//title", self.document)
"""

from typing import Any, Mapping, Optional

from hamcrest.core.matcher import Matcher
from hamcrest.core.string_description import StringDescription

from xpath_assert.constraints import (
    EqualToXpathResult,
    MatchesXpathExpression,
    MatchesXpathResultCount,
)
from xpath_assert.core.checks import check_count, check_equals, check_match
from xpath_assert.reporting import UnittestReporter


class XPathAssertionsMixin:
    """Adds XPath assertions and matchers to a ``unittest.TestCase``.

    Failures go through ``self.fail`` and therefore raise
    ``self.failureException``.
    """

    def _xpath_reporter(self) -> UnittestReporter:
        return UnittestReporter(self)

    def assertXpathMatch(
        self,
        expression: str,
        document,
        namespaces: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._xpath_reporter().report(check_match(expression, document, namespaces))

    def assertXpathCount(
        self,
        expected_count: int,
        expression: str,
        document,
        namespaces: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._xpath_reporter().report(
            check_count(expected_count, expression, document, namespaces)
        )

    def assertXpathEquals(
        self,
        expected: Any,
        expression: str,
        document,
        namespaces: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._xpath_reporter().report(
            check_equals(expected, expression, document, namespaces)
        )

    def assertThat(self, actual: Any, matcher: Matcher, msg: str = "") -> None:
        """Evaluate a hamcrest matcher and fail with its description."""
        if matcher.matches(actual):
            return

        description = StringDescription()
        if msg:
            description.append_text(msg).append_text("\n")
        description.append_text("Expected: ").append_description_of(matcher)
        description.append_text("\n     but: ")
        matcher.describe_mismatch(actual, description)
        self.fail(str(description))

    @staticmethod
    def matchesXpathExpression(
        expression: str, namespaces: Optional[Mapping[str, str]] = None
    ) -> MatchesXpathExpression:
        return MatchesXpathExpression(expression, namespaces)

    @staticmethod
    def matchesXpathResultCount(
        count: int, expression: str, namespaces: Optional[Mapping[str, str]] = None
    ) -> MatchesXpathResultCount:
        return MatchesXpathResultCount(count, expression, namespaces)

    @staticmethod
    def equalToXpathResult(
        expected: Any, expression: str, namespaces: Optional[Mapping[str, str]] = None
    ) -> EqualToXpathResult:
        return EqualToXpathResult(expected, expression, namespaces)
