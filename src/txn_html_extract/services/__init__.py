"""
Output services for txn-html-extract.

- records_to_dataframe / format_csv / write_csv: CSV rendering via pandas
"""

from txn_html_extract.services.csv_writer import (
    format_csv,
    records_to_dataframe,
    write_csv,
)

__all__ = [
    'format_csv',
    'records_to_dataframe',
    'write_csv',
]
