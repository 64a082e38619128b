"""
Fixed page literals and discovery helpers for the transaction extractor.

The saved transactions page wraps each transaction in a container with a
known id, holds the transaction data in a row element with a known class,
and renders each of the four fields in an element with a known class set.
These literals are part of the extraction strategy, not runtime options.
"""

from typing import Dict, Tuple


CONTAINER_ID = 'itemDetailExpandedView'
ROW_CLASS = 'a-row'

# Field name -> class literal (space-separated, order-insignificant)
CLASS_TARGETS: Dict[str, str] = {
    'party': 'a-section pad-header-text',
    'medium': 'a-section payment-details-desktop',
    'date': 'a-size-base a-color-tertiary',
    'amount': 'a-column a-span3 a-text-right pad-header-text a-span-last',
}

FIELD_ORDER: Tuple[str, ...] = ('party', 'medium', 'date', 'amount')


class ClassTargets:
    """
    Helper class for discovering the field → class literal targets.

    All methods return copies so callers cannot mutate the module constants.

    Example:
        >>> ClassTargets.list_available()['date']
        'a-size-base a-color-tertiary'
        >>> ClassTargets.get_tokens('party')
        ('a-section', 'pad-header-text')
    """

    @staticmethod
    def list_available() -> Dict[str, str]:
        """
        List all target fields with their class literals.

        Returns:
            Dictionary mapping field name to class literal, in output order
        """
        return {name: CLASS_TARGETS[name] for name in FIELD_ORDER}

    @staticmethod
    def get_class_literal(field: str) -> str:
        """
        Get the class literal for a field.

        Raises:
            ValueError: If field is not one of the four target fields
        """
        if field not in CLASS_TARGETS:
            raise ValueError(
                f"Unknown field: {field}. Expected one of {list(FIELD_ORDER)}"
            )
        return CLASS_TARGETS[field]

    @staticmethod
    def get_tokens(field: str) -> Tuple[str, ...]:
        """Get the whitespace-split class tokens for a field."""
        return tuple(ClassTargets.get_class_literal(field).split())

    @staticmethod
    def is_valid(field: str) -> bool:
        """
        Check if a field name is one of the target fields.

        Example:
            >>> ClassTargets.is_valid('amount')
            True
            >>> ClassTargets.is_valid('total')
            False
        """
        return field in CLASS_TARGETS
