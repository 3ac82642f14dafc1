"""Structural equality for lxml nodes and XPath results."""

from typing import Any, Iterable, List, Optional
from lxml import etree

from xpath_assert.config import get_config

# Scalar XPath results that may be used as expected values
_SCALARS = (str, bool, int, float)


def normalize_expected(expected: Any) -> List[Any]:
    """
    Turn an expected value into a list of nodes.

    A single node (element, comment, processing instruction, string or
    scalar) becomes a one element list. Any other iterable is taken as a
    node collection and keeps its order. Elements are always single nodes
    even though lxml makes them iterable over their children.

    Raises:
        TypeError: If expected is None or not iterable
    """
    if isinstance(expected, etree._ElementTree):
        return [expected.getroot()]
    if isinstance(expected, (etree._Element,) + _SCALARS):
        return [expected]
    if isinstance(expected, bytes):
        return [expected.decode("utf-8")]
    if expected is None:
        raise TypeError("Expected value must be a node or a collection of nodes, got None")

    try:
        return list(expected)
    except TypeError:
        raise TypeError(
            f"Expected value must be a node or a collection of nodes, "
            f"got {type(expected).__name__}"
        ) from None


class DomComparator:
    """
    Compare nodes structurally.

    Elements are equal when their qualified tags, attributes (in any
    order), text, and children match recursively. A child's tail text is
    part of its parent's content and is compared; the tail of a top-level
    node is not.
    """

    def __init__(self, normalize_whitespace: Optional[bool] = None):
        if normalize_whitespace is None:
            normalize_whitespace = get_config().normalize_whitespace
        self.normalize_whitespace = normalize_whitespace

    def sequences_equal(self, expected: Iterable[Any], actual: Iterable[Any]) -> bool:
        """Positional comparison of two node sequences; order matters."""
        expected = list(expected)
        actual = list(actual)
        if len(expected) != len(actual):
            return False
        return all(self.nodes_equal(e, a) for e, a in zip(expected, actual))

    def nodes_equal(self, expected: Any, actual: Any) -> bool:
        """Compare two nodes or XPath scalar results."""
        expected_is_node = isinstance(expected, etree._Element)
        actual_is_node = isinstance(actual, etree._Element)

        if expected_is_node != actual_is_node:
            return False
        if not expected_is_node:
            return self._scalars_equal(expected, actual)

        return self._elements_equal(expected, actual, compare_tail=False)

    def _scalars_equal(self, expected: Any, actual: Any) -> bool:
        if isinstance(expected, str) and isinstance(actual, str):
            return self._text(expected) == self._text(actual)
        if isinstance(expected, str) or isinstance(actual, str):
            return False
        return expected == actual

    def _elements_equal(self, expected, actual, compare_tail: bool) -> bool:
        if expected.tag != actual.tag:
            return False

        if compare_tail and self._text(expected.tail) != self._text(actual.tail):
            return False

        # Comments, processing instructions and entities carry only text
        if isinstance(expected, etree._ProcessingInstruction):
            return (
                expected.target == actual.target
                and self._text(expected.text) == self._text(actual.text)
            )
        if isinstance(expected, (etree._Comment, etree._Entity)):
            return self._text(expected.text) == self._text(actual.text)

        if dict(expected.attrib) != dict(actual.attrib):
            return False
        if self._text(expected.text) != self._text(actual.text):
            return False
        if len(expected) != len(actual):
            return False

        return all(
            self._elements_equal(e, a, compare_tail=True)
            for e, a in zip(expected, actual)
        )

    def _text(self, value: Optional[str]) -> str:
        # lxml reports empty text as None
        if value is None:
            return ""
        if self.normalize_whitespace:
            return " ".join(value.split())
        return str(value)
