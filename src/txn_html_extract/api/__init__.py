"""
User-facing extraction interfaces for txn-html-extract.
"""

from txn_html_extract.api.extractor import (
    collect_row_fields,
    extract_records,
    extract_records_from_file,
)

__all__ = [
    'collect_row_fields',
    'extract_records',
    'extract_records_from_file',
]
