# typesfinder/alias_resolver.py
"""
Keyword recognition and class-name resolution.

Precedence, first match wins:

  1. keyword (``int``, ``array``, ``self`` ...)  → not a class name at all
  2. leading ``\\``                              → already absolute
  3. whole-name alias hit (case-insensitive)    → alias target
  4. otherwise                                  → relative to the namespace

Alias lookup is on the whole base name. ``Baz\\Sub`` does not expand a
``Baz`` alias; it is treated like any other relative name.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from typesfinder.context import NamespaceContext
from typesfinder.types import ROOT_SEPARATOR, ScalarKind

logger = logging.getLogger(__name__)

ARRAY_KEYWORD = "array"

# lower-cased spelling -> scalar kind; ``array`` is handled separately
SCALAR_KEYWORDS: Dict[str, ScalarKind] = {
    "int": ScalarKind.INTEGER,
    "integer": ScalarKind.INTEGER,
    "string": ScalarKind.STRING,
    "float": ScalarKind.FLOAT,
    "double": ScalarKind.FLOAT,
    "bool": ScalarKind.BOOLEAN,
    "boolean": ScalarKind.BOOLEAN,
    "callable": ScalarKind.CALLABLE,
    "mixed": ScalarKind.MIXED,
    "void": ScalarKind.VOID,
    "object": ScalarKind.OBJECT,
    "iterable": ScalarKind.ITERABLE,
    "self": ScalarKind.SELF,
    "static": ScalarKind.STATIC,
    "parent": ScalarKind.PARENT,
    "null": ScalarKind.NULL,
    "never": ScalarKind.NEVER,
    "true": ScalarKind.TRUE,
    "false": ScalarKind.FALSE,
    "resource": ScalarKind.RESOURCE,
    "scalar": ScalarKind.SCALAR,
    "$this": ScalarKind.THIS,
}


def scalar_kind(name: str) -> Optional[ScalarKind]:
    return SCALAR_KEYWORDS.get(name.lower())


def is_keyword(name: str) -> bool:
    """True for any built-in type keyword, ``array`` included."""
    lowered = name.lower()
    return lowered == ARRAY_KEYWORD or lowered in SCALAR_KEYWORDS


def resolve_class_name(name: str, context: Optional[NamespaceContext] = None) -> str:
    """Resolve a class-like *name* to an absolute name starting with ``\\``."""
    if name.startswith(ROOT_SEPARATOR):
        return name

    context = context or NamespaceContext.global_()

    if name in context.aliases:
        target = context.aliases[name]
        logger.debug("alias %r -> %r", name, target)
        return ROOT_SEPARATOR + target.lstrip(ROOT_SEPARATOR)

    if context.namespace:
        return f"{ROOT_SEPARATOR}{context.namespace}{ROOT_SEPARATOR}{name}"
    return ROOT_SEPARATOR + name
