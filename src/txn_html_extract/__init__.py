"""
txn-html-extract: transaction record extraction from saved HTML pages.

Main package exports for user-facing API.
"""

from txn_html_extract.api import extract_records, extract_records_from_file
from txn_html_extract.models import TransactionRecord
from txn_html_extract.parsers import load_html, parse_html
from txn_html_extract.services import format_csv, write_csv

__all__ = [
    'TransactionRecord',
    'extract_records',
    'extract_records_from_file',
    'load_html',
    'parse_html',
    'format_csv',
    'write_csv',
]
