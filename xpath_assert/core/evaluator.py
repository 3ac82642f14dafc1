"""XPath evaluation against parsed lxml documents."""

from typing import Any, Dict, List, Mapping, Optional
from lxml import etree

from xpath_assert.config import get_config
from xpath_assert.utils.logger import log_evaluation


def _check_document(document) -> None:
    """Reject anything that is not an already parsed lxml tree or element."""
    if isinstance(document, (etree._ElementTree, etree._Element)):
        return
    if isinstance(document, (str, bytes)):
        raise TypeError(
            "Expected a parsed lxml document or element, got raw markup; "
            "parse it with lxml.etree.fromstring() or lxml.html.fromstring() first"
        )
    raise TypeError(
        f"Expected a parsed lxml document or element, got {type(document).__name__}"
    )


class XPathEvaluator:
    """Evaluate XPath expressions with optional namespace bindings."""

    def evaluate_raw(
        self,
        document,
        expression: str,
        namespaces: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """
        Evaluate an expression and return lxml's result unchanged.

        Args:
            document: Parsed lxml tree or element
            expression: XPath 1.0 expression
            namespaces: Prefix to URI bindings used by the expression

        Returns:
            A list for node-set results, otherwise a bool, float or str

        Raises:
            TypeError: If document is not a parsed lxml object
            lxml.etree.XPathError: If the expression cannot be evaluated
        """
        _check_document(document)
        bindings: Dict[str, str] = dict(namespaces or {})
        evaluator = etree.XPathEvaluator(document, namespaces=bindings)
        result = evaluator(expression)

        log_evaluation(expression, len(result) if isinstance(result, list) else 1)
        return result

    def evaluate(
        self,
        document,
        expression: str,
        namespaces: Optional[Mapping[str, str]] = None,
    ) -> List[Any]:
        """
        Evaluate an expression and return the matched nodes in document order.

        A truthy scalar result (e.g. from ``count()`` or ``boolean()``) is
        wrapped in a one element list; a falsy one (``0``, ``false()``,
        ``""``) gives an empty list. An empty list means nothing matched.
        """
        result = self.evaluate_raw(document, expression, namespaces)
        if isinstance(result, list):
            return result
        return [result] if result else []


def describe_document(document, max_length: Optional[int] = None) -> str:
    """
    Build the string representation of a document used in failure messages.

    Args:
        document: Parsed lxml tree or element
        max_length: Maximum length of the markup part (defaults to config)

    Returns:
        Class name followed by the serialized markup
    """
    if max_length is None:
        max_length = get_config().repr_max_length

    markup = " ".join(etree.tostring(document, encoding="unicode", with_tail=False).split())
    if len(markup) > max_length:
        markup = markup[:max_length] + "..."

    return f"{type(document).__name__} {markup}"


_default_evaluator = XPathEvaluator()


def evaluate(
    document,
    expression: str,
    namespaces: Optional[Mapping[str, str]] = None,
) -> List[Any]:
    """Evaluate with the shared default evaluator."""
    return _default_evaluator.evaluate(document, expression, namespaces)
