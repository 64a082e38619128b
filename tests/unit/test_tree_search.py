"""
Unit tests for depth-first tree search.
"""

import lxml.html

from html_builders import fragment


class TestFindAll:
    """Test find_all traversal order and coverage."""

    def test_returns_matches_in_document_order(self):
        """Pre-order: parent before its children, children left to right."""
        from txn_html_extract.parsers import find_all

        root = fragment(
            '<div class="m" data-n="1">'
            '<p class="m" data-n="2"><b class="m" data-n="3"></b></p>'
            '<p class="m" data-n="4"></p>'
            '</div>'
        )

        found = find_all(root, lambda node: node.get('class') == 'm')

        assert [node.get('data-n') for node in found] == ['1', '2', '3', '4']

    def test_root_is_a_candidate(self):
        from txn_html_extract.parsers import find_all, IdMatcher

        root = fragment('<div id="target"><span id="target"></span></div>')

        found = find_all(root, IdMatcher('target'))

        assert len(found) == 2
        assert found[0] is root

    def test_visits_deeply_nested_descendants(self):
        from txn_html_extract.parsers import find_all, ClassLiteralMatcher

        html = '<div>' * 50 + '<span class="deep">x</span>' + '</div>' * 50
        root = lxml.html.fragment_fromstring(html)

        found = find_all(root, ClassLiteralMatcher('deep'))

        assert len(found) == 1
        assert found[0].tag == 'span'

    def test_predicate_never_sees_comments(self):
        from txn_html_extract.parsers import find_all

        root = fragment('<div><!-- note --><span></span></div>')
        seen = []

        find_all(root, lambda node: seen.append(node.tag) or False)

        assert seen == ['div', 'span']

    def test_no_match_returns_empty_list(self):
        from txn_html_extract.parsers import find_all, IdMatcher

        assert find_all(fragment('<div><p></p></div>'), IdMatcher('missing')) == []
