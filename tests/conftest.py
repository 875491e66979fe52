# tests/conftest.py
"""
Shared fixtures: doc comment sources, namespace contexts and the resolver.
"""

from unittest.mock import MagicMock

import pytest

from typesfinder.context import NamespaceContext
from typesfinder.resolver import DocCommentSource, FindReturnType


def docblock(line: str) -> str:
    """Wrap a single tag line in a multi-line docblock."""
    return "/**\n * %s\n */" % line


@pytest.fixture
def finder():
    return FindReturnType()


@pytest.fixture
def make_source():
    """Factory for mock reflected functions returning a fixed doc comment."""
    def _make(comment):
        source = MagicMock(spec=DocCommentSource)
        source.get_doc_comment.return_value = comment
        return source
    return _make


@pytest.fixture
def aliases():
    return {"Bar": "Bar", "Baz": "Taw\\Taz"}


@pytest.fixture
def global_aliased(aliases):
    return NamespaceContext(namespace=None, aliases=aliases)


@pytest.fixture
def foo_aliased(aliases):
    return NamespaceContext(namespace="Foo", aliases=aliases)
