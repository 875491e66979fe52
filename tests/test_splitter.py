# tests/test_splitter.py
"""
Tests for the type expression grammar and the token splitter.
"""

import time

import pytest
from unittest.mock import patch

from parsimonious.exceptions import ParseError

from typesfinder.errors import ErrorCodes, TypeExpressionError
from typesfinder.splitter import (
    TYPE_EXPRESSION_GRAMMAR,
    TypeToken,
    TypeTokenBuilder,
    split_type_expression,
    strip_array_suffixes,
)


class TestGrammarWellFormed:

    def test_grammar_compiles(self):
        assert TYPE_EXPRESSION_GRAMMAR is not None
        assert "expression" in TYPE_EXPRESSION_GRAMMAR

    def test_rules_present(self):
        for rule in ("expression", "more_members", "separator", "member"):
            assert rule in TYPE_EXPRESSION_GRAMMAR, f"Rule {rule!r} missing"

    @pytest.mark.parametrize("text", [
        "int", "int[]", "a|b", "", "|", "[]]", "Foo[]Bar", "int\n", "a\n|b\n",
    ])
    def test_accepts_any_member_text(self, text):
        tree = TYPE_EXPRESSION_GRAMMAR.parse(text)
        assert tree.text == text

    def test_member_is_greedy_up_to_separator(self):
        tree = TYPE_EXPRESSION_GRAMMAR["member"].match("int[][]|string")
        assert tree.text == "int[][]"


class TestStripArraySuffixes:

    @pytest.mark.parametrize("text, base, depth", [
        ("int", "int", 0),
        ("int[]", "int", 1),
        ("int[][]", "int", 2),
        ("Foo[]Bar[]", "Foo[]Bar", 1),
        ("[]", "", 1),
        ("[]]", "[]]", 0),
        ("", "", 0),
    ])
    def test_strip(self, text, base, depth):
        assert strip_array_suffixes(text) == (base, depth)


class TestSplit:

    def test_single(self):
        assert split_type_expression("int") == [TypeToken("int", 0)]

    def test_union(self):
        assert split_type_expression("int|string|\\Foo") == [
            TypeToken("int"),
            TypeToken("string"),
            TypeToken("\\Foo"),
        ]

    def test_array_depths(self):
        tokens = split_type_expression("int|int[]|int[][]")
        assert [t.array_depth for t in tokens] == [0, 1, 2]
        assert [t.is_array for t in tokens] == [False, True, True]
        assert {t.base_name for t in tokens} == {"int"}

    def test_only_trailing_suffixes_count(self):
        assert split_type_expression("Foo[]Bar[]") == [TypeToken("Foo[]Bar", 1)]

    def test_order_and_duplicates_kept(self):
        tokens = split_type_expression("b|a|b")
        assert [t.base_name for t in tokens] == ["b", "a", "b"]

    def test_empty_members_dropped(self):
        assert split_type_expression("int||string|") == [
            TypeToken("int"),
            TypeToken("string"),
        ]

    def test_bare_suffix_dropped(self):
        assert split_type_expression("[]|[][]") == []

    def test_flat_split_ignores_generics(self):
        tokens = split_type_expression("array<int|string>")
        assert [t.base_name for t in tokens] == ["array<int", "string>"]

    def test_trailing_newline_kept_in_base_name(self):
        assert split_type_expression("int\n") == [TypeToken("int\n")]

    def test_long_suffix_run_is_linear(self):
        expression = "[]" * 20000 + "x|" + "int" + "[]" * 20000
        start = time.perf_counter()
        tokens = split_type_expression(expression)
        elapsed = time.perf_counter() - start
        assert tokens == [
            TypeToken("[]" * 20000 + "x", 0),
            TypeToken("int", 20000),
        ]
        assert elapsed < 2.0


class TestSplitErrors:

    def test_grammar_failure_is_wrapped(self):
        err = ParseError("x", 0, TYPE_EXPRESSION_GRAMMAR["expression"])
        with patch.object(TypeTokenBuilder, "parse", side_effect=err):
            with pytest.raises(TypeExpressionError) as info:
                split_type_expression("int")
        assert info.value.code is ErrorCodes.UNPARSABLE_EXPRESSION
        assert info.value.expression == "int"
        assert str(info.value).startswith("TF-1000")
