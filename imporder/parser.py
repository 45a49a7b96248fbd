"""Parser module for imporder.

This module scans Go source text and extracts its import declarations,
with the positions of the ``import`` keyword, the parentheses and every
entry. It understands just enough of Go's lexical grammar (comments,
string and rune literals, bracket nesting) to find the declarations
reliably; it does not build a full syntax tree.
"""
from __future__ import annotations
import logging
from typing import List
from typing import NamedTuple
from typing import Optional
from typing import Tuple

from imporder.exceptions import FileReadError
from imporder.exceptions import GoSyntaxError
from imporder.models import ImportDecl
from imporder.models import ImportSpec
from imporder.models import Position

LOG = logging.getLogger(__name__)

EOF = 'eof'
IDENT = 'ident'
STRING = 'string'
CHAR = 'char'
PUNCT = 'punct'

_WHITESPACE = ' \t\r\n\ufeff'
_OPENERS = '([{'
_CLOSERS = ')]}'


class Token(NamedTuple):
    kind: str
    value: str
    pos: Position
    end: Position


class Scanner:
    """Tokenizer over Go source.

    Positions follow Go conventions: offset and column count UTF-8 bytes,
    lines are 1-based. ``index`` is the character cursor into ``source``.
    """

    def __init__(self, source: str, filename: str = '') -> None:
        self.source = source
        self.filename = filename
        self.index = 0
        self.offset = 0
        self.line = 1
        self.column = 1

    def position(self) -> Position:
        return Position(self.filename, self.offset, self.line, self.column)

    def error(self, message: str, pos: Optional[Position] = None) -> GoSyntaxError:
        pos = pos or self.position()
        return GoSyntaxError(message, self.filename, pos.line, pos.column)

    def _peek(self, ahead: int = 0) -> str:
        idx = self.index + ahead
        return self.source[idx] if idx < len(self.source) else ''

    def _advance(self, count: int = 1) -> None:
        for _ in range(count):
            ch = self.source[self.index]
            width = len(ch.encode('utf-8', 'surrogatepass'))
            if ch == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += width
            self.offset += width
            self.index += 1

    def _skip_space_and_comments(self) -> None:
        while self.index < len(self.source):
            ch = self._peek()
            if ch in _WHITESPACE:
                self._advance()
            elif ch == '/' and self._peek(1) == '/':
                while self.index < len(self.source) and self._peek() != '\n':
                    self._advance()
            elif ch == '/' and self._peek(1) == '*':
                start = self.position()
                close = self.source.find('*/', self.index + 2)
                if close == -1:
                    raise self.error('comment not terminated', start)
                self._advance(close + 2 - self.index)
            else:
                return

    def _scan_quoted(self, quote: str, what: str) -> str:
        start = self.position()
        self._advance()
        value_start = self.index
        while True:
            ch = self._peek()
            if ch in ('', '\n'):
                raise self.error(f'{what} literal not terminated', start)
            if ch == '\\':
                if self._peek(1) in ('', '\n'):
                    raise self.error(f'{what} literal not terminated', start)
                self._advance(2)
                continue
            if ch == quote:
                break
            self._advance()
        value = self.source[value_start:self.index]
        self._advance()
        return value

    def _scan_raw(self) -> str:
        start = self.position()
        close = self.source.find('`', self.index + 1)
        if close == -1:
            raise self.error('raw string literal not terminated', start)
        value = self.source[self.index + 1:close]
        self._advance(close + 1 - self.index)
        return value

    def next_token(self) -> Token:
        self._skip_space_and_comments()
        start = self.position()
        start_index = self.index
        ch = self._peek()
        if ch == '':
            return Token(EOF, '', start, start)
        if ch == '"':
            kind, value = STRING, self._scan_quoted('"', 'string')
        elif ch == '`':
            kind, value = STRING, self._scan_raw()
        elif ch == "'":
            kind, value = CHAR, self._scan_quoted("'", 'rune')
        elif ch.isalnum() or ch == '_':
            while self._peek() and (self._peek().isalnum() or self._peek() == '_'):
                self._advance()
            kind, value = IDENT, self.source[start_index:self.index]
        else:
            self._advance()
            kind, value = PUNCT, ch
        return Token(kind, value, start, self.position())


def _parse_import_spec(scanner: Scanner, tok: Token) -> Tuple[ImportSpec, Position]:
    """Parse ``[name] "path"`` starting at ``tok``; return the spec and its end."""
    first = tok
    name: Optional[str] = None
    if tok.kind == IDENT or (tok.kind == PUNCT and tok.value == '.'):
        name = tok.value
        tok = scanner.next_token()
    if tok.kind != STRING:
        raise scanner.error('missing import path', tok.pos)
    return ImportSpec(path=tok.value, pos=first.pos, name=name), tok.end


def _parse_import_decl(scanner: Scanner, keyword: Token) -> ImportDecl:
    tok = scanner.next_token()
    if not (tok.kind == PUNCT and tok.value == '('):
        spec, end = _parse_import_spec(scanner, tok)
        return ImportDecl(pos=keyword.pos, end=end, specs=(spec,))

    lparen = tok.pos
    specs: List[ImportSpec] = []
    while True:
        tok = scanner.next_token()
        if tok.kind == PUNCT and tok.value == ';':
            continue
        if tok.kind == PUNCT and tok.value == ')':
            return ImportDecl(
                pos=keyword.pos,
                end=tok.end,
                specs=tuple(specs),
                lparen=lparen,
                rparen=tok.pos,
            )
        if tok.kind == EOF:
            raise scanner.error("missing ')' in import declaration", lparen)
        spec, _ = _parse_import_spec(scanner, tok)
        specs.append(spec)


def parse_imports(source: str, filename: str = '') -> List[ImportDecl]:
    """Return every top-level import declaration in ``source``, in source order.

    Raises:
        GoSyntaxError: If a literal or comment is unterminated, an import
            declaration has no closing parenthesis, or an entry has no path.
    """
    scanner = Scanner(source, filename)
    decls: List[ImportDecl] = []
    depth = 0
    while True:
        tok = scanner.next_token()
        if tok.kind == EOF:
            break
        if tok.kind == PUNCT and tok.value in _OPENERS:
            depth += 1
        elif tok.kind == PUNCT and tok.value in _CLOSERS:
            depth = max(depth - 1, 0)
        elif tok.kind == IDENT and tok.value == 'import' and depth == 0:
            decls.append(_parse_import_decl(scanner, tok))
    LOG.debug("%s: found %d import declaration(s)", filename or '<source>', len(decls))
    return decls


def read_source(file_path: str) -> str:
    """Read a Go source file as UTF-8.

    Raises:
        FileReadError: If the file cannot be opened or decoded.
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(file_path, str(exc)) from exc


def extract_imports_from_file(file_path: str) -> List[ImportDecl]:
    """Parse a Go file and return its import declarations.

    Args:
        file_path: Path to the Go source file.

    Returns:
        A list of ImportDecl records in source order.

    Raises:
        FileReadError: If the file cannot be read.
        GoSyntaxError: If the file cannot be scanned.
    """
    return parse_imports(read_source(file_path), filename=file_path)
