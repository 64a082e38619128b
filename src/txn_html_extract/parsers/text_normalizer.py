"""
Text content extraction with whitespace normalization.
"""

import re
from typing import Pattern

from lxml import etree


# ASCII whitespace only; non-breaking spaces inside text are kept
WHITESPACE_PATTERN: Pattern[str] = re.compile(r'[ \t\n\f\r]+')


def normalize_whitespace(text: str, pattern: Pattern[str] = WHITESPACE_PATTERN) -> str:
    """
    Collapse whitespace runs to a single space and trim.

    Idempotent: normalizing normalized text returns it unchanged.

    Example:
        >>> normalize_whitespace('  Visa\\n   ****1234 ')
        'Visa ****1234'
    """
    return pattern.sub(' ', text).strip()


def extract_text(node: etree._Element, pattern: Pattern[str] = WHITESPACE_PATTERN) -> str:
    """
    Extract the normalized text content of a node's subtree.

    Pieces are concatenated with no separator, so ``<b>12</b><i>34</i>``
    yields ``'1234'``. ``itertext()`` skips comment bodies but keeps the
    text that follows them, and leaves out the node's own tail.

    Args:
        node: lxml element
        pattern: Compiled whitespace pattern

    Returns:
        Single-spaced, trimmed text ('' when the subtree has no text)
    """
    return normalize_whitespace(''.join(node.itertext()), pattern)
