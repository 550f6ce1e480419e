"""
Symbol Table
============

Passive name -> type store filled by the driver after a successful parse.
There are no scopes and no duplicate checks: declaring a name again
replaces its type.
"""

import logging
from typing import Iterator

from declfront.ast import DeclarationNode

logger = logging.getLogger(__name__)


class SymbolTable:
    """
    Maps declared names to their type names.

    Example:
        table = SymbolTable()
        table.declare("x", "int")
        table.exists("x")     # True
        table.type_of("y")    # ""
    """

    def __init__(self) -> None:
        self._symbols: dict[str, str] = {}

    def declare(self, name: str, type_name: str) -> None:
        """Insert or overwrite the type for name (last write wins)."""
        previous = self._symbols.get(name)
        if previous is not None:
            logger.debug(f"redeclaring '{name}': {previous} -> {type_name}")
        self._symbols[name] = type_name

    def declare_from(self, declaration: DeclarationNode) -> None:
        """Register the name and type introduced by a declaration node."""
        self.declare(declaration.name, declaration.type_name)

    def exists(self, name: str) -> bool:
        return name in self._symbols

    def type_of(self, name: str) -> str:
        """Return the declared type of name, or "" if it was never declared."""
        return self._symbols.get(name, "")

    def items(self) -> list[tuple[str, str]]:
        """Return (name, type) pairs sorted by name."""
        return sorted(self._symbols.items())

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._symbols))

    def __repr__(self) -> str:
        return f"SymbolTable({len(self._symbols)} symbols)"
