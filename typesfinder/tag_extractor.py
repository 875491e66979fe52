# typesfinder/tag_extractor.py
"""Locate the ``@return`` tag in a docblock and pull out its type expression."""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

RETURN_TAG = "@return"

_OPENER_RE = re.compile(r"^\s*/\*+")
_CLOSER_RE = re.compile(r"\*+/\s*$")
_LEADING_STAR_RE = re.compile(r"^\s*\*(?!/)")
_RETURN_TAG_RE = re.compile(r"^\s*@return(?=\s|$)(?P<rest>.*)$")


def _docblock_lines(comment: str) -> Iterator[str]:
    """Yield the comment lines with ``/**``, leading ``*`` and ``*/`` removed."""
    for line in comment.splitlines():
        line = _OPENER_RE.sub("", line, count=1)
        line = _CLOSER_RE.sub("", line, count=1)
        line = _LEADING_STAR_RE.sub("", line, count=1)
        yield line


def extract_return_type_expression(comment: Optional[str]) -> Optional[str]:
    """Return the type expression of the first ``@return`` tag, or ``None``.

    The expression is the first whitespace-separated word after the tag;
    anything following it on the line is description text.
    """
    if not comment or not comment.strip():
        return None

    for line in _docblock_lines(comment):
        match = _RETURN_TAG_RE.match(line)
        if match is None:
            continue
        words = match.group("rest").split()
        if not words:
            logger.debug("@return tag without a type expression")
            return None
        return words[0]

    logger.debug("no @return tag in comment")
    return None
