"""
Pydantic models for extracted data.
"""

from txn_html_extract.models.record import TransactionRecord

__all__ = [
    'TransactionRecord',
]
