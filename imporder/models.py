"""Records shared by the scanner and the checker.

Positions, import declarations as scanned from Go source, and the
diagnostics produced when a declaration is found to be out of order.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
from typing import Tuple

# Import categories, in the order their groups must appear.
STANDARD = 'standard'
EXTERNAL = 'external'
INTERNAL = 'internal'
CATEGORY_ORDER = (STANDARD, EXTERNAL, INTERNAL)

# Diagnostic kinds.
MALFORMED_BLOCK = 'malformed-block'
MULTIPLE_IMPORTS = 'multiple-imports'
WRONG_SHAPE = 'wrong-shape'
WRONG_ORDER = 'wrong-order'

DIAGNOSTIC_CATEGORY = 'import'


@dataclass(frozen=True)
class Position:
    """A location in a source file.

    Line and column are 1-based; offset and column count UTF-8 bytes.
    """

    filename: str
    offset: int
    line: int
    column: int

    def __str__(self) -> str:
        if self.filename:
            return f"{self.filename}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class ImportSpec:
    """One entry of an import declaration.

    ``pos`` is the first token of the entry: the alias when one is given,
    otherwise the path literal.
    """

    path: str
    pos: Position
    name: Optional[str] = None


@dataclass(frozen=True)
class ImportDecl:
    """An ``import`` declaration, parenthesized or not."""

    pos: Position
    end: Position
    specs: Tuple[ImportSpec, ...]
    lparen: Optional[Position] = None
    rparen: Optional[Position] = None

    @property
    def parenthesized(self) -> bool:
        return self.lparen is not None and self.rparen is not None


@dataclass(frozen=True)
class Diagnostic:
    """A problem found in an import declaration, anchored at its full range."""

    pos: Position
    end: Position
    message: str
    kind: str
    category: str = DIAGNOSTIC_CATEGORY

    def __str__(self) -> str:
        return f"{self.pos}: {self.message}"
