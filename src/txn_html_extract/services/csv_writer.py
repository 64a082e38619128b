"""
CSV Output Service

Renders transaction records as CSV lines:
- Exactly four fields: party, medium, date, amount
- Every field double-quoted, embedded quotes doubled
- '\\n' line terminator, no header row
"""

import csv
import logging
from pathlib import Path
from typing import IO, Iterable, Union

import pandas as pd

from txn_html_extract.models import TransactionRecord
from txn_html_extract.types import FIELD_ORDER

logger = logging.getLogger(__name__)


def records_to_dataframe(records: Iterable[TransactionRecord]) -> pd.DataFrame:
    """
    Collect records into a DataFrame with one string column per field.

    Args:
        records: Records in output order (consumed once)

    Returns:
        DataFrame with columns party, medium, date, amount
    """
    rows = [record.to_row() for record in records]
    return pd.DataFrame(rows, columns=list(FIELD_ORDER), dtype=str)


def _to_csv(df: pd.DataFrame, target=None, **kwargs):
    return df.to_csv(
        target,
        header=False,
        index=False,
        quoting=csv.QUOTE_ALL,
        lineterminator='\n',
        **kwargs
    )


def format_csv(records: Iterable[TransactionRecord]) -> str:
    """
    Render records as CSV text.

    Example:
        >>> format_csv([TransactionRecord(party='Acme', medium='Visa',
        ...                               date='Jan 1, 2024', amount='5.00')])
        '"Acme","Visa","Jan 1, 2024","5.00"\\n'
    """
    df = records_to_dataframe(records)
    if df.empty:
        return ''
    return _to_csv(df)


def write_csv(
    records: Iterable[TransactionRecord],
    target: Union[str, Path, IO[str]],
    encoding: str = 'utf-8'
) -> int:
    """
    Write records as CSV to a path or an open text stream.

    Args:
        records: Records to write
        target: Output file path or text stream (e.g. sys.stdout)
        encoding: File encoding when target is a path

    Returns:
        Number of records written
    """
    df = records_to_dataframe(records)

    if isinstance(target, (str, Path)):
        _to_csv(df, target, encoding=encoding)
        logger.info(f"Wrote {len(df)} records to {target}")
    elif not df.empty:
        target.write(_to_csv(df))

    return len(df)
