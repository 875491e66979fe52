# typesfinder/splitter.py
"""
Split a docblock type expression into type tokens.

A type expression is a flat union of members separated by ``|``; each member
is a base name followed by zero or more ``[]`` suffixes::

    int|string[]|\\Foo\\Bar[][]
    └┬┘ └──┬───┘ └────┬─────┘
    int  string   \\Foo\\Bar
    (0)   (1)        (2)        ← array depth

The separator is never nested, so generics such as ``array<int|string>``
are split at every ``|`` as well. Trailing ``[]`` pairs are stripped from
each member one at a time, so ``Foo[]Bar[]`` has base ``Foo[]Bar`` and
depth 1.

The grammar accepts every string; members whose base name is empty (for
example ``[]`` or the gap in ``int||string``) are dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from parsimonious.exceptions import ParseError, VisitationError
from parsimonious.grammar import Grammar
from parsimonious.nodes import Node, NodeVisitor

from typesfinder.errors import TypeExpressionError

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  TYPE EXPRESSION GRAMMAR (Parsimonious PEG)
# ═══════════════════════════════════════════════════════════════════

TYPE_EXPRESSION_GRAMMAR = Grammar(r'''
    expression      = member more_members
    more_members    = (separator member)*
    separator       = "|"
    member          = ~r"[^|]*"
''')

ARRAY_SUFFIX = "[]"


def strip_array_suffixes(text: str) -> Tuple[str, int]:
    """Strip trailing ``[]`` pairs from *text*; return the rest and the count."""
    end = len(text)
    depth = 0
    while text.endswith(ARRAY_SUFFIX, 0, end):
        end -= len(ARRAY_SUFFIX)
        depth += 1
    return text[:end], depth


@dataclass(frozen=True)
class TypeToken:
    """One member of a union type expression."""
    base_name: str
    array_depth: int = 0

    @property
    def is_array(self) -> bool:
        return self.array_depth >= 1


# ═══════════════════════════════════════════════════════════════════
#  PARSE TREE → TOKENS
# ═══════════════════════════════════════════════════════════════════

class TypeTokenBuilder(NodeVisitor):
    """Turns the parse tree of a type expression into ``TypeToken`` values."""

    grammar = TYPE_EXPRESSION_GRAMMAR

    def generic_visit(self, node, visited_children):
        return visited_children or node

    def visit_expression(self, node, visited_children):
        first, rest = visited_children
        return [first] + rest

    def visit_more_members(self, node, visited_children):
        return [member for _, member in visited_children]

    def visit_member(self, node: Node, visited_children) -> TypeToken:
        base_name, depth = strip_array_suffixes(node.text)
        return TypeToken(base_name=base_name, array_depth=depth)


def split_type_expression(expression: str) -> List[TypeToken]:
    """Split *expression* on ``|`` into tokens, counting ``[]`` suffixes.

    Raises :class:`TypeExpressionError` if the grammar rejects the input,
    which does not happen for any string the grammar was written for but is
    kept as a hard boundary for callers.
    """
    try:
        tokens = TypeTokenBuilder().parse(expression)
    except (ParseError, VisitationError) as exc:
        raise TypeExpressionError(expression, cause=exc) from exc

    kept = [token for token in tokens if token.base_name]
    if len(kept) != len(tokens):
        logger.debug(
            "dropped %d empty member(s) from %r", len(tokens) - len(kept), expression
        )
    return kept
