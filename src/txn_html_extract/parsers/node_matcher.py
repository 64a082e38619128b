"""
Node Matching Strategies

Identity predicates over lxml tree nodes. Each predicate is available both as
a plain function and as an interchangeable matcher object.

Design:
- Strategy Pattern: Matchers are interchangeable
- Each matcher implements the same interface
- Tree search is agnostic to the matching rule
- Comments, processing instructions and missing attributes never match
"""

from abc import ABC, abstractmethod
from collections import Counter
from typing import Iterable, Tuple

from lxml import etree


def is_element(node: etree._Element) -> bool:
    """
    Check whether a node is a regular element.

    lxml represents comments and processing instructions as elements whose
    ``tag`` is a factory function rather than a string.
    """
    return isinstance(node.tag, str)


def matches_id(node: etree._Element, literal: str) -> bool:
    """True iff node is an element whose ``id`` attribute equals literal exactly."""
    if not is_element(node):
        return False
    return node.get('id') == literal


def matches_class_literal(node: etree._Element, literal: str) -> bool:
    """
    True iff node's ``class`` attribute, stripped, equals literal exactly.

    No tokenization: ``"a-row"`` matches ``" a-row "`` but not ``"a-row a-spacing"``.
    """
    if not is_element(node):
        return False
    value = node.get('class')
    if value is None:
        return False
    return value.strip() == literal


def matches_exact_class_set(node: etree._Element, tokens: Iterable[str]) -> bool:
    """
    True iff node's class tokens equal ``tokens`` as a multiset.

    Order is insignificant, but token counts must agree: a superset or subset
    never matches, and ``"a a b"`` does not match ``("a", "b")``.

    Args:
        node: lxml node to test
        tokens: Target class tokens

    Returns:
        True on exact match, False otherwise (including missing ``class``)
    """
    if not is_element(node):
        return False
    value = node.get('class')
    if value is None:
        return False
    classes = value.split()
    targets = list(tokens)
    if len(classes) != len(targets):
        return False
    return Counter(classes) == Counter(targets)


class NodeMatcher(ABC):
    """
    Abstract base class for node matching strategies.

    Matchers are callable so they can be handed to ``find_all`` directly.
    """

    @abstractmethod
    def matches(self, node: etree._Element) -> bool:
        """
        Decide whether a node satisfies this matcher.

        Args:
            node: lxml node (any type)

        Returns:
            True if matched, False otherwise
        """
        pass

    def __call__(self, node: etree._Element) -> bool:
        return self.matches(node)


class IdMatcher(NodeMatcher):
    """Match elements by exact ``id`` attribute value."""

    def __init__(self, literal: str):
        self.literal = literal

    def matches(self, node: etree._Element) -> bool:
        return matches_id(node, self.literal)

    def __repr__(self) -> str:
        return f"IdMatcher({self.literal!r})"


class ClassLiteralMatcher(NodeMatcher):
    """Match elements whose stripped ``class`` attribute equals a literal."""

    def __init__(self, literal: str):
        self.literal = literal

    def matches(self, node: etree._Element) -> bool:
        return matches_class_literal(node, self.literal)

    def __repr__(self) -> str:
        return f"ClassLiteralMatcher({self.literal!r})"


class ExactClassSetMatcher(NodeMatcher):
    """
    Match elements whose class tokens are exactly the target tokens.

    Args:
        class_literal: Space-separated class tokens, order-insignificant

    Example:
        >>> matcher = ExactClassSetMatcher('a-size-base a-color-tertiary')
        >>> matcher.tokens
        ('a-size-base', 'a-color-tertiary')
    """

    def __init__(self, class_literal: str):
        tokens = class_literal.split()
        if not tokens:
            raise ValueError("Class literal must contain at least one token")

        self.tokens: Tuple[str, ...] = tuple(tokens)

    def matches(self, node: etree._Element) -> bool:
        return matches_exact_class_set(node, self.tokens)

    def __repr__(self) -> str:
        return f"ExactClassSetMatcher({' '.join(self.tokens)!r})"
