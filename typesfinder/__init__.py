"""typesfinder — docblock return-type resolution.

Given the doc comment of a function or method and the namespace it was
declared in, produce the list of types its ``@return`` tag declares.

Submodules
----------
types
    The resolved type model: ``Scalar``, ``ArrayType``, ``ObjectType``.

context
    ``NamespaceContext`` and ``AliasTable`` value objects, plus
    ``ImportDeclaration`` for building them from ``use`` clauses.

tag_extractor
    Finds the ``@return`` tag and its type expression.

splitter
    PEG grammar (parsimonious) splitting a union expression into tokens.

alias_resolver
    Keyword table and class-name resolution against the namespace context.

type_builder
    Token → resolved type mapping.

resolver
    ``FindReturnType`` façade and the ``DocCommentSource`` protocol.

main
    CLI entry-point: ``resolve`` and ``keywords`` subcommands.

Usage
-----
Command-line::

    echo '/** @return int|Foo[] */' | python -m typesfinder resolve
    python -m typesfinder resolve method.txt -n App\\Model -u 'Taw\\Taz as Baz'

Programmatic::

    from typesfinder import FindReturnType, NamespaceContext

    ctx = NamespaceContext(namespace="Foo", aliases={"Bar": "Bar"})
    types = FindReturnType()("/** @return Bar|Tab */", ctx)
"""

from __future__ import annotations

from typesfinder.context import AliasTable, ImportDeclaration, NamespaceContext
from typesfinder.errors import (
    ContextError,
    InvalidAliasError,
    TypeExpressionError,
    TypesFinderError,
)
from typesfinder.resolver import DocCommentSource, FindReturnType, find_return_type
from typesfinder.types import ArrayType, ObjectType, ResolvedType, Scalar, ScalarKind

__version__: str = "0.1.0"
__all__: list[str] = [
    "__version__",
    "AliasTable",
    "ArrayType",
    "ContextError",
    "DocCommentSource",
    "FindReturnType",
    "ImportDeclaration",
    "InvalidAliasError",
    "NamespaceContext",
    "ObjectType",
    "ResolvedType",
    "Scalar",
    "ScalarKind",
    "TypeExpressionError",
    "TypesFinderError",
    "find_return_type",
]
