"""
HTML loading for saved transaction pages.

Pages are parsed with lxml's recovering HTML parser, so malformed markup
still yields a tree. An empty page is a document with no content, not an
error; only missing files and unparseable input raise.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from lxml import etree
import lxml.html

logger = logging.getLogger(__name__)

# Blank input parses to the same skeleton an HTML5 parser would build
EMPTY_DOCUMENT = '<html><head></head><body></body></html>'


class HtmlLoadError(ValueError):
    """Raised when a saved page cannot be turned into an HTML tree."""


def _build_parser(encoding: Optional[str] = None) -> lxml.html.HTMLParser:
    """
    Create a recovering HTML parser, optionally forcing an input encoding.

    huge_tree lifts libxml2's nesting limit (about 255 levels), past which
    deeper elements are silently dropped.
    """
    return lxml.html.HTMLParser(recover=True, huge_tree=True, encoding=encoding)


def parse_html(
    data: Union[bytes, str],
    encoding: Optional[str] = None,
    source: str = '<string>'
) -> lxml.html.HtmlElement:
    """
    Parse an HTML document into an lxml tree.

    Args:
        data: Raw page bytes or already-decoded text
        encoding: Force an input encoding for bytes; None lets libxml2
            detect it from the BOM or ``<meta charset>``
        source: Name used in error messages

    Returns:
        Document root element (``<html>``); an empty ``<html>`` with
        ``<head>`` and ``<body>`` when the input is blank

    Raises:
        HtmlLoadError: If the document cannot be parsed
    """
    if not data or not data.strip():
        logger.warning(f"Document is empty: {source}")
        return lxml.html.document_fromstring(EMPTY_DOCUMENT)

    # Encoding only applies to byte input; text is already decoded
    parser = _build_parser(encoding if isinstance(data, bytes) else None)

    try:
        root = lxml.html.document_fromstring(data, parser=parser)
    except etree.LxmlError as e:
        raise HtmlLoadError(f"Failed to parse HTML: {source}. Error: {e}") from e

    logger.debug(f"Parsed {source} (root <{root.tag}>)")
    return root


def load_html(
    path: Union[str, Path],
    encoding: Optional[str] = None
) -> lxml.html.HtmlElement:
    """
    Read and parse a saved HTML page.

    Args:
        path: Path to the saved page
        encoding: Optional forced input encoding

    Returns:
        Document root element

    Raises:
        FileNotFoundError: If path does not exist
        HtmlLoadError: If the page cannot be parsed

    Example:
        >>> root = load_html('transactions.html')
        >>> root.tag
        'html'
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"HTML file not found: {path}")

    data = path.read_bytes()
    logger.debug(f"Read {len(data)} bytes from {path}")

    return parse_html(data, encoding=encoding, source=str(path))
