# tests/test_tag_extractor.py
"""
Tests for locating the @return tag and its type expression.
"""

import pytest

from typesfinder.tag_extractor import extract_return_type_expression


class TestAbsentTag:

    @pytest.mark.parametrize("comment", [None, "", "   ", "\n\t\n"])
    def test_blank_comments(self, comment):
        assert extract_return_type_expression(comment) is None

    def test_no_tag(self):
        assert extract_return_type_expression("/**\n * @param int $a\n */") is None

    def test_returns_is_not_return(self):
        assert extract_return_type_expression("/** @returns int */") is None

    def test_tag_inside_word_ignored(self):
        assert extract_return_type_expression("/** mail me at foo@return.com */") is None

    def test_tag_mentioned_in_prose_ignored(self):
        comment = "/**\n * Summary that mentions @return value.\n */"
        assert extract_return_type_expression(comment) is None

    def test_prose_mention_does_not_shadow_real_tag(self):
        comment = "/**\n * Summary that mentions @return value.\n * @return int\n */"
        assert extract_return_type_expression(comment) == "int"

    def test_tag_without_expression(self):
        assert extract_return_type_expression("/**\n * @return\n */") is None


class TestExpressionCapture:

    def test_single_line_docblock(self):
        assert extract_return_type_expression("/** @return int|string */") == "int|string"

    def test_multi_line_docblock(self):
        comment = "/**\n * Summary.\n *\n * @return \\Foo\\Bar|null\n */"
        assert extract_return_type_expression(comment) == "\\Foo\\Bar|null"

    def test_description_discarded(self):
        comment = "/**\n * @return int A comment about the return type\n */"
        assert extract_return_type_expression(comment) == "int"

    def test_closer_glued_to_expression(self):
        assert extract_return_type_expression("/** @return int[]*/") == "int[]"

    def test_first_tag_wins(self):
        comment = "/**\n * @return int\n * @return string\n */"
        assert extract_return_type_expression(comment) == "int"

    def test_bare_tag_line(self):
        assert extract_return_type_expression("@return Foo description") == "Foo"

    def test_tab_separated(self):
        assert extract_return_type_expression("/**\n *\t@return\tbool\tyes\n */") == "bool"

    def test_windows_line_endings(self):
        comment = "/**\r\n * @return float\r\n */"
        assert extract_return_type_expression(comment) == "float"
