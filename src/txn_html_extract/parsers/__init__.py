"""
HTML parsing and matching modules for saved transaction pages.

- Node matching is exact: ids and class literals compare byte-for-byte,
  class sets compare as token multisets
- Tree search is depth-first pre-order over elements only
- Text is concatenated in document order, then whitespace-normalized
"""

from .node_matcher import (
    NodeMatcher,
    IdMatcher,
    ClassLiteralMatcher,
    ExactClassSetMatcher,
    is_element,
    matches_id,
    matches_class_literal,
    matches_exact_class_set,
)
from .tree_search import find_all, iter_elements
from .text_normalizer import WHITESPACE_PATTERN, extract_text, normalize_whitespace
from .amount_cleaner import NON_AMOUNT_PATTERN, clean_amount
from .html_loader import HtmlLoadError, load_html, parse_html

__all__ = [
    # Matching Strategies
    'NodeMatcher',
    'IdMatcher',
    'ClassLiteralMatcher',
    'ExactClassSetMatcher',
    'is_element',
    'matches_id',
    'matches_class_literal',
    'matches_exact_class_set',
    # Tree Search
    'find_all',
    'iter_elements',
    # Text
    'WHITESPACE_PATTERN',
    'extract_text',
    'normalize_whitespace',
    'NON_AMOUNT_PATTERN',
    'clean_amount',
    # Loading
    'HtmlLoadError',
    'load_html',
    'parse_html',
]
