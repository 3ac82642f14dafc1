"""Direct assertion functions.

Usage:
    from lxml import etree
    from xpath_assert import assert_xpath_match, assert_xpath_count

    document = etree.fromstring("<root><child/></root>")
    assert_xpath_match("//child", document)
    assert_xpath_count(1, "//child", document)
"""

from typing import Any, Mapping, Optional

from xpath_assert.core.checks import check_count, check_equals, check_match
from xpath_assert.reporting import BaseReporter, default_reporter


def assert_xpath_match(
    expression: str,
    document,
    namespaces: Optional[Mapping[str, str]] = None,
    reporter: Optional[BaseReporter] = None,
) -> None:
    """
    Assert that an XPath expression matches at least one node.

    Args:
        expression: XPath 1.0 expression
        document: Parsed lxml tree or element
        namespaces: Prefix to URI bindings used by the expression
        reporter: How to report a failure (raises XPathMatchError by default)

    Raises:
        XPathMatchError: If nothing matches
    """
    result = check_match(expression, document, namespaces)
    (reporter or default_reporter).report(result)


def assert_xpath_count(
    expected_count: int,
    expression: str,
    document,
    namespaces: Optional[Mapping[str, str]] = None,
    reporter: Optional[BaseReporter] = None,
) -> None:
    """
    Assert that an XPath expression matches exactly ``expected_count`` nodes.

    Raises:
        XPathCountError: If the number of matched nodes differs
        ValueError: If expected_count is negative or not an integer
    """
    result = check_count(expected_count, expression, document, namespaces)
    (reporter or default_reporter).report(result)


def assert_xpath_equals(
    expected: Any,
    expression: str,
    document,
    namespaces: Optional[Mapping[str, str]] = None,
    reporter: Optional[BaseReporter] = None,
) -> None:
    """
    Assert that the nodes matched by an expression equal ``expected``.

    ``expected`` may be a single node or a collection of nodes. Nodes are
    compared structurally and in order.

    Raises:
        XPathEqualityError: If the structures differ
    """
    result = check_equals(expected, expression, document, namespaces)
    (reporter or default_reporter).report(result)
