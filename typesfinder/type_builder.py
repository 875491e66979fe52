# typesfinder/type_builder.py
"""Map a type token onto the resolved type model."""

from __future__ import annotations

from typing import Optional

from typesfinder.alias_resolver import ARRAY_KEYWORD, resolve_class_name, scalar_kind
from typesfinder.context import NamespaceContext
from typesfinder.splitter import TypeToken
from typesfinder.types import ArrayType, ObjectType, ResolvedType, Scalar


def build_type(token: TypeToken, context: Optional[NamespaceContext] = None) -> ResolvedType:
    """Build the resolved type for *token*.

    Any ``[]`` suffix makes the result an :class:`ArrayType`, whatever the
    element type and however deep the nesting. Keywords never go through
    alias resolution.
    """
    if token.is_array:
        return ArrayType()

    kind = scalar_kind(token.base_name)
    if kind is not None:
        return Scalar(kind)
    if token.base_name.lower() == ARRAY_KEYWORD:
        return ArrayType()

    return ObjectType(resolve_class_name(token.base_name, context))
