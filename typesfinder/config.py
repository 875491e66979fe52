# typesfinder/config.py
"""Command-line configuration for the ``typesfinder`` CLI."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from typesfinder.context import ImportDeclaration, NamespaceContext
from typesfinder.errors import ContextError


class OutputFormat(Enum):
    TEXT = "text"
    JSON = "json"


@dataclass(frozen=True)
class CliConfig:
    """Settings for one ``resolve`` run, built from parsed arguments."""
    verbosity: int = 0
    output_format: OutputFormat = OutputFormat.TEXT
    namespace: Optional[str] = None
    uses: Tuple[str, ...] = ()
    output: Optional[str] = None

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "CliConfig":
        return cls(
            verbosity=getattr(args, "verbose", 0) or 0,
            output_format=OutputFormat(getattr(args, "format", None) or "text"),
            namespace=getattr(args, "namespace", None),
            uses=tuple(getattr(args, "use", None) or ()),
            output=getattr(args, "output", None),
        )

    def validate(self) -> List[str]:
        """Return a list of validation warnings (empty if valid)."""
        warnings: List[str] = []
        if self.namespace is not None and not self.namespace.strip("\\ "):
            warnings.append("empty namespace given, using the global namespace")
        seen = set()
        for clause in self.uses:
            try:
                alias = ImportDeclaration.parse(clause).effective_alias.lower()
            except ContextError:
                continue
            if alias in seen:
                warnings.append(f"alias {alias!r} declared more than once, last one wins")
            seen.add(alias)
        return warnings

    def context(self) -> NamespaceContext:
        """Build the namespace context; raises ``ContextError`` on bad clauses."""
        imports = [ImportDeclaration.parse(clause) for clause in self.uses]
        return NamespaceContext.from_imports(self.namespace, imports)
