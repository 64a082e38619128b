"""
Depth-first tree search over lxml trees.

lxml's ``iter()`` already walks a subtree in pre-order (node before children,
children in document order), so search is a filtered walk over it.
"""

from typing import Callable, Iterator, List

from lxml import etree

from .node_matcher import is_element


NodePredicate = Callable[[etree._Element], bool]


def iter_elements(root: etree._Element) -> Iterator[etree._Element]:
    """
    Yield every element in the subtree rooted at ``root``, root included.

    Comments and processing instructions are skipped.
    """
    for node in root.iter():
        if is_element(node):
            yield node


def find_all(root: etree._Element, predicate: NodePredicate) -> List[etree._Element]:
    """
    Collect every element in the subtree that satisfies ``predicate``.

    Args:
        root: Subtree root (itself a candidate)
        predicate: Callable taking an element and returning bool,
            e.g. an ``IdMatcher`` or ``ClassLiteralMatcher``

    Returns:
        Matching elements in document order
    """
    return [node for node in iter_elements(root) if predicate(node)]
