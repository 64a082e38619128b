"""
Pydantic model for one extracted transaction.
"""

from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

from txn_html_extract.types import FIELD_ORDER


class TransactionRecord(BaseModel):
    """
    One transaction row pulled from a saved transactions page.

    A record only exists once all four fields were found with non-empty
    text; ``amount`` has already been through ``clean_amount``.

    Example:
        >>> record = TransactionRecord(
        ...     party="Acme Corp",
        ...     medium="Visa ****1234",
        ...     date="Jan 1, 2024",
        ...     amount="1234.56"
        ... )
        >>> record.to_row()
        ('Acme Corp', 'Visa ****1234', 'Jan 1, 2024', '1234.56')
    """

    party: str = Field(
        ...,
        min_length=1,
        description="Merchant or counterparty name",
        examples=["Acme Corp"]
    )

    medium: str = Field(
        ...,
        min_length=1,
        description="Payment medium as shown on the page",
        examples=["Visa ****1234"]
    )

    date: str = Field(
        ...,
        min_length=1,
        description="Transaction date text as shown on the page",
        examples=["Jan 1, 2024"]
    )

    amount: str = Field(
        ...,
        description="Amount reduced to digits, '.' and '-'",
        examples=["1234.56", "-45.00"]
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_fields(cls, fields: Dict[str, str]) -> 'TransactionRecord':
        """Build a record from a complete field map."""
        return cls(**{name: fields[name] for name in FIELD_ORDER})

    def to_row(self) -> Tuple[str, str, str, str]:
        """Fields in CSV column order: party, medium, date, amount."""
        return (self.party, self.medium, self.date, self.amount)
