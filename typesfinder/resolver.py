# typesfinder/resolver.py
"""
Return-type resolution façade.

    comment ──► extract @return ──► split on | ──► resolve + build per token
                                                         │
                                                         ▼
                                               List[ResolvedType]

Usage::

    from typesfinder import FindReturnType, NamespaceContext

    ctx = NamespaceContext(namespace="Foo", aliases={"Baz": "Taw\\\\Taz"})
    FindReturnType()("/** @return Baz|null */", ctx)
    # [ObjectType(fqsen='\\\\Taw\\\\Taz'), Scalar(kind=<ScalarKind.NULL: 'null'>)]

The façade is total: every input yields a list, possibly empty, and no
exception escapes it.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Union, runtime_checkable

from typesfinder.context import NamespaceContext
from typesfinder.errors import TypeExpressionError
from typesfinder.splitter import split_type_expression
from typesfinder.tag_extractor import extract_return_type_expression
from typesfinder.type_builder import build_type
from typesfinder.types import ResolvedType

logger = logging.getLogger(__name__)

__all__ = [
    "DocCommentSource",
    "FindReturnType",
    "find_return_type",
]


@runtime_checkable
class DocCommentSource(Protocol):
    """Anything that can hand over the raw doc comment of a function or method."""

    def get_doc_comment(self) -> Optional[str]:
        ...


CommentInput = Union[DocCommentSource, str, None]


class FindReturnType:
    """Resolve the ``@return`` types declared in a doc comment.

    Instances hold no state; one instance may serve any number of threads.
    """

    def __call__(
        self,
        source: CommentInput,
        context: Optional[NamespaceContext] = None,
    ) -> List[ResolvedType]:
        comment = self._read_comment(source)

        expression = extract_return_type_expression(comment)
        if expression is None:
            return []

        try:
            tokens = split_type_expression(expression)
        except TypeExpressionError as exc:
            logger.debug("%s", exc)
            return []

        context = context or NamespaceContext.global_()
        return [build_type(token, context) for token in tokens]

    @staticmethod
    def _read_comment(source: CommentInput) -> Optional[str]:
        if source is None or isinstance(source, str):
            return source
        comment = source.get_doc_comment()
        if comment is not None and not isinstance(comment, str):
            logger.debug("ignoring non-string doc comment %r", type(comment))
            return None
        return comment


_default_finder = FindReturnType()


def find_return_type(
    source: CommentInput,
    context: Optional[NamespaceContext] = None,
) -> List[ResolvedType]:
    """Shortcut for ``FindReturnType()(source, context)``."""
    return _default_finder(source, context)
