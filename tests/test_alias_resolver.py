# tests/test_alias_resolver.py
"""
Tests for keyword recognition and class-name resolution precedence.
"""

import pytest

from typesfinder.alias_resolver import is_keyword, resolve_class_name, scalar_kind
from typesfinder.context import NamespaceContext
from typesfinder.types import ScalarKind


class TestKeywords:

    @pytest.mark.parametrize("name", [
        "int", "integer", "string", "float", "double", "bool", "boolean",
        "array", "callable", "mixed", "void", "object", "iterable",
        "self", "static", "parent", "null", "never", "true", "false",
        "resource", "scalar", "$this",
    ])
    def test_recognised(self, name):
        assert is_keyword(name)
        assert is_keyword(name.upper())

    def test_class_names_are_not_keywords(self):
        for name in ("Foo", "\\int", "Integer\\Sub", "arrays"):
            assert not is_keyword(name)

    def test_synonyms_share_kind(self):
        assert scalar_kind("int") is scalar_kind("INTEGER") is ScalarKind.INTEGER
        assert scalar_kind("double") is ScalarKind.FLOAT
        assert scalar_kind("Boolean") is ScalarKind.BOOLEAN

    def test_array_has_no_scalar_kind(self):
        assert scalar_kind("array") is None


class TestResolveClassName:

    def test_absolute_name_untouched(self, foo_aliased):
        assert resolve_class_name("\\Baz", foo_aliased) == "\\Baz"

    def test_alias_hit(self, foo_aliased):
        assert resolve_class_name("Baz", foo_aliased) == "\\Taw\\Taz"

    def test_alias_hit_is_case_insensitive(self, foo_aliased):
        assert resolve_class_name("bAZ", foo_aliased) == "\\Taw\\Taz"

    def test_alias_target_already_absolute(self):
        ctx = NamespaceContext(aliases={"Baz": "\\Taw\\Taz"})
        assert resolve_class_name("Baz", ctx) == "\\Taw\\Taz"

    def test_miss_in_namespace(self, foo_aliased):
        assert resolve_class_name("Tab", foo_aliased) == "\\Foo\\Tab"

    def test_miss_in_global_namespace(self, global_aliased):
        assert resolve_class_name("Tab", global_aliased) == "\\Tab"

    def test_no_context(self):
        assert resolve_class_name("Tab") == "\\Tab"
        assert resolve_class_name("Tab", None) == "\\Tab"

    def test_nested_namespace(self):
        ctx = NamespaceContext(namespace="App\\Model")
        assert resolve_class_name("User", ctx) == "\\App\\Model\\User"

    def test_whole_name_alias_only(self, foo_aliased):
        # ``Baz`` is an alias, ``Baz\Sub`` is not
        assert resolve_class_name("Baz\\Sub", foo_aliased) == "\\Foo\\Baz\\Sub"
        assert resolve_class_name("Baz\\Sub", NamespaceContext(aliases={"Baz": "X"})) \
            == "\\Baz\\Sub"
