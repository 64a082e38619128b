"""
Transaction record extraction from a parsed transactions page.

Page structure:
1. Each transaction lives in a container with id ``itemDetailExpandedView``
   (ids may repeat on saved pages; every container is processed)
2. Inside the container, data sits in elements whose class is exactly ``a-row``;
   only the FIRST such row is inspected
3. Each of the four fields is the text of an element whose class tokens are
   exactly the field's target class set
"""

import logging
from pathlib import Path
from typing import Dict, Iterator, Optional, Union

from lxml import etree

from txn_html_extract.models import TransactionRecord
from txn_html_extract.parsers import (
    ClassLiteralMatcher,
    ExactClassSetMatcher,
    IdMatcher,
    NodeMatcher,
    clean_amount,
    extract_text,
    find_all,
    iter_elements,
    load_html,
)
from txn_html_extract.types import CLASS_TARGETS, CONTAINER_ID, FIELD_ORDER, ROW_CLASS

logger = logging.getLogger(__name__)


CONTAINER_MATCHER = IdMatcher(CONTAINER_ID)
ROW_MATCHER = ClassLiteralMatcher(ROW_CLASS)
FIELD_MATCHERS: Dict[str, NodeMatcher] = {
    name: ExactClassSetMatcher(CLASS_TARGETS[name]) for name in FIELD_ORDER
}


def collect_row_fields(
    row: etree._Element,
    field_matchers: Optional[Dict[str, NodeMatcher]] = None
) -> Dict[str, str]:
    """
    Collect the text of every target field within a row in one traversal.

    Every element of the row's subtree (row included) is checked against all
    field matchers. When several elements match the same field, the last one
    in document order wins.

    Args:
        row: Row element
        field_matchers: Field name → matcher (defaults to the four page targets)

    Returns:
        New dictionary with an entry per field ('' when not found)
    """
    matchers = FIELD_MATCHERS if field_matchers is None else field_matchers
    fields = {name: '' for name in matchers}

    for node in iter_elements(row):
        for name, matcher in matchers.items():
            if matcher(node):
                fields[name] = extract_text(node)

    return fields


def is_complete(fields: Dict[str, str]) -> bool:
    """True if every one of the four target fields has non-empty text."""
    return all(fields.get(name) for name in FIELD_ORDER)


def extract_records(tree: Union[etree._Element, etree._ElementTree]) -> Iterator[TransactionRecord]:
    """
    Lazily extract transaction records from a parsed page.

    Containers with no row, and rows missing any field, are skipped silently.
    The generator is single-pass; call again for a fresh pass.

    Args:
        tree: Parsed document (root element or ElementTree)

    Yields:
        TransactionRecord per complete container, in document order
    """
    root = tree.getroot() if isinstance(tree, etree._ElementTree) else tree

    containers = find_all(root, CONTAINER_MATCHER)
    logger.debug(f"Found {len(containers)} containers with id={CONTAINER_ID!r}")

    for index, container in enumerate(containers):
        rows = find_all(container, ROW_MATCHER)
        if not rows:
            logger.debug(f"Container {index}: no {ROW_CLASS!r} row, skipping")
            continue

        fields = collect_row_fields(rows[0])

        if not is_complete(fields):
            missing = [name for name in FIELD_ORDER if not fields[name]]
            logger.debug(f"Container {index}: missing fields {missing}, skipping")
            continue

        fields['amount'] = clean_amount(fields['amount'])
        yield TransactionRecord.from_fields(fields)


def extract_records_from_file(
    path: Union[str, Path],
    encoding: Optional[str] = None
) -> Iterator[TransactionRecord]:
    """
    Load a saved page and lazily extract its records.

    The file is read and parsed eagerly, so loading errors surface
    before iteration starts.

    Raises:
        FileNotFoundError: If path does not exist
        HtmlLoadError: If the page cannot be parsed

    Example:
        >>> for record in extract_records_from_file('transactions.html'):
        ...     print(record.party, record.amount)
    """
    root = load_html(path, encoding=encoding)
    return extract_records(root)
