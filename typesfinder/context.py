# typesfinder/context.py
"""
Lexical context for class-name resolution.

A :class:`NamespaceContext` is the enclosing namespace name plus an
:class:`AliasTable` built from the ``use`` declarations in scope. Both are
immutable value objects; whoever walks the source syntax tree builds them
and hands them to the resolver.

Each ``use`` declaration contributes one entry: its declared alias, or the
last segment of the imported name when no alias is given::

    use Taw\\Taz as Baz;   ->  baz -> Taw\\Taz
    use Bar;              ->  bar -> Bar

Alias keys compare case-insensitively, the way PHP treats class names.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, Optional, Tuple

from typesfinder.errors import ContextError, ErrorCodes, InvalidAliasError
from typesfinder.types import ROOT_SEPARATOR

logger = logging.getLogger(__name__)

_USE_CLAUSE_RE = re.compile(
    r"^\s*(?:use\s+)?(?P<name>[^\s;]+)(?:\s+as\s+(?P<alias>[^\s;]+))?\s*;?\s*$",
    re.IGNORECASE,
)


class AliasTable(Mapping):
    """Immutable alias -> fully qualified name mapping, case-insensitive on keys."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional[Mapping[str, str]] = None) -> None:
        # folded alias -> (declared alias, target)
        store: Dict[str, Tuple[str, str]] = {}
        for alias, target in (entries or {}).items():
            if not alias or not alias.strip():
                raise InvalidAliasError(alias, target)
            if not target or not target.strip(ROOT_SEPARATOR).strip():
                raise InvalidAliasError(
                    alias, target, code=ErrorCodes.EMPTY_ALIAS_TARGET
                )
            alias = alias.strip()
            store[alias.lower()] = (alias, target.strip())
        self._entries = store

    def __getitem__(self, alias: str) -> str:
        return self._entries[alias.lower()][1]

    def __contains__(self, alias: object) -> bool:
        return isinstance(alias, str) and alias.lower() in self._entries

    def __iter__(self) -> Iterator[str]:
        return (declared for declared, _ in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AliasTable):
            return self._folded() == other._folded()
        if isinstance(other, Mapping):
            return self._folded() == {
                str(alias).strip().lower(): str(target).strip()
                for alias, target in other.items()
            }
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._folded().items()))

    def __repr__(self) -> str:
        return f"AliasTable({dict(self.items())!r})"

    def _folded(self) -> Dict[str, str]:
        return {key: target for key, (_, target) in self._entries.items()}


@dataclass(frozen=True)
class ImportDeclaration:
    """A single ``use`` declaration: imported name and optional alias."""
    name: str
    alias: Optional[str] = None

    @property
    def effective_alias(self) -> str:
        if self.alias:
            return self.alias
        return self.name.strip(ROOT_SEPARATOR).rsplit(ROOT_SEPARATOR, 1)[-1]

    @classmethod
    def parse(cls, clause: str) -> "ImportDeclaration":
        """Parse ``"Fq\\Name"`` or ``"Fq\\Name as Alias"``."""
        match = _USE_CLAUSE_RE.match(clause or "")
        if match is None or not match.group("name").strip(ROOT_SEPARATOR):
            raise ContextError(
                f"invalid use clause {clause!r}",
                code=ErrorCodes.INVALID_USE_CLAUSE,
                hint="expected 'Vendor\\Name' or 'Vendor\\Name as Alias'",
            )
        return cls(name=match.group("name"), alias=match.group("alias"))


@dataclass(frozen=True)
class NamespaceContext:
    """Current namespace (``None`` for global) and the aliases in scope."""
    namespace: Optional[str] = None
    aliases: AliasTable = field(default_factory=AliasTable)

    def __post_init__(self) -> None:
        namespace = self.namespace
        if namespace is not None:
            namespace = namespace.strip().strip(ROOT_SEPARATOR) or None
        object.__setattr__(self, "namespace", namespace)
        if not isinstance(self.aliases, AliasTable):
            object.__setattr__(self, "aliases", AliasTable(self.aliases))

    @classmethod
    def global_(cls) -> "NamespaceContext":
        return cls()

    @classmethod
    def from_imports(
        cls,
        namespace: Optional[str],
        imports: Iterable[ImportDeclaration],
    ) -> "NamespaceContext":
        """Build a context from ``use`` declarations; later ones win."""
        entries: Dict[str, Tuple[str, str]] = {}
        for decl in imports:
            alias = decl.effective_alias
            if alias.lower() in entries:
                logger.debug("alias %r redeclared, now -> %r", alias, decl.name)
            entries[alias.lower()] = (alias, decl.name)
        table = AliasTable(dict(entries.values()))
        return cls(namespace=namespace, aliases=table)
