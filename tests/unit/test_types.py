"""
Unit tests for page literals and the ClassTargets discovery helper.
"""

import pytest


class TestClassTargets:
    """Test suite for ClassTargets."""

    def test_list_available_returns_four_fields_in_output_order(self):
        from txn_html_extract.types import ClassTargets

        targets = ClassTargets.list_available()

        assert list(targets) == ['party', 'medium', 'date', 'amount']
        assert targets['party'] == 'a-section pad-header-text'
        assert targets['amount'] == 'a-column a-span3 a-text-right pad-header-text a-span-last'

    def test_list_available_returns_copy_not_reference(self):
        from txn_html_extract.types import ClassTargets, CLASS_TARGETS

        targets = ClassTargets.list_available()
        targets['party'] = 'modified'

        assert CLASS_TARGETS['party'] == 'a-section pad-header-text'

    def test_get_tokens_splits_literal(self):
        from txn_html_extract.types import ClassTargets

        assert ClassTargets.get_tokens('date') == ('a-size-base', 'a-color-tertiary')

    def test_unknown_field_raises(self):
        from txn_html_extract.types import ClassTargets

        with pytest.raises(ValueError, match="Unknown field"):
            ClassTargets.get_class_literal('total')

    def test_is_valid(self):
        from txn_html_extract.types import ClassTargets

        assert ClassTargets.is_valid('medium') is True
        assert ClassTargets.is_valid('Medium') is False


class TestPageLiterals:
    """Test fixed container and row literals."""

    def test_container_and_row_literals(self):
        from txn_html_extract.types import CONTAINER_ID, ROW_CLASS

        assert CONTAINER_ID == 'itemDetailExpandedView'
        assert ROW_CLASS == 'a-row'
