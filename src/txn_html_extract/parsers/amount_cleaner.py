"""
Amount text cleanup.
"""

import re
from typing import Pattern


NON_AMOUNT_PATTERN: Pattern[str] = re.compile(r'[^0-9.\-]')


def clean_amount(text: str, pattern: Pattern[str] = NON_AMOUNT_PATTERN) -> str:
    """
    Keep only ASCII digits, '.' and '-' from an amount string.

    The result is not validated as a number: ``'1.2.3'`` and ``'--5'`` pass
    through unchanged.

    Example:
        >>> clean_amount('-$1,234.56')
        '-1234.56'
    """
    return pattern.sub('', text)
