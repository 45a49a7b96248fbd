#!/usr/bin/env python3
"""Core utilities for imporder. This module classifies Go import paths,
builds the canonical grouped and sorted order of an import block, and
compares it with the order found in the source, returning diagnostics for
blocks that are malformed, duplicated or out of order. It also exposes
functions to walk a tree for Go files and check a single file.
"""
from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable
from typing import Iterator
from typing import List
from typing import Optional
from typing import Sequence
from typing import Tuple

from imporder import config
from imporder.models import CATEGORY_ORDER
from imporder.models import Diagnostic
from imporder.models import EXTERNAL
from imporder.models import ImportDecl
from imporder.models import INTERNAL
from imporder.models import MALFORMED_BLOCK
from imporder.models import MULTIPLE_IMPORTS
from imporder.models import STANDARD
from imporder.models import WRONG_ORDER
from imporder.models import WRONG_SHAPE
from imporder.parser import parse_imports
from imporder.parser import read_source

LOG = logging.getLogger(__name__)

# Directories the go tool never builds from.
SKIP_DIRS = {'vendor', 'testdata'}


def classify_import(path: str, base_import: str) -> str:
    """Classify an import path into 'standard', 'external' or 'internal'.

    The base import is matched as a plain string prefix, so an empty base
    import classifies every path as internal.
    """
    if path.startswith(base_import):
        return INTERNAL
    root = path.split('/', 1)[0]
    if '.' in root:
        return EXTERNAL
    return STANDARD


def sort_imports(paths: Iterable[str], base_import: str) -> List[str]:
    """Return the canonical order for paths.

    Standard, external and internal groups, each sorted, separated by a
    single '' placeholder. Empty groups are left out entirely.
    """
    groups = {category: [] for category in CATEGORY_ORDER}
    for path in paths:
        if not path:
            continue
        groups[classify_import(path, base_import)].append(path)

    result: List[str] = []
    for category in CATEGORY_ORDER:
        if not groups[category]:
            continue
        if result:
            result.append('')
        result.extend(sorted(groups[category]))
    return result


def _malformed(decl: ImportDecl) -> Diagnostic:
    return Diagnostic(
        pos=decl.pos,
        end=decl.end,
        message='incorrect paren position',
        kind=MALFORMED_BLOCK,
    )


def extract_block(decl: ImportDecl) -> Tuple[Optional[List[str]], Optional[Diagnostic]]:
    """Rebuild the as-written sequence of a parenthesized import block.

    One slot per line strictly between the parentheses: the path of the
    entry on that line, or '' for a blank line. Entries are expected one
    per line; two entries on one line overwrite each other.

    Returns:
        (sequence, None) for a well-formed block, (None, diagnostic) for a
        malformed one and (None, None) for an unparenthesized import.
    """
    if not decl.parenthesized:
        return None, None

    size = decl.rparen.line - decl.lparen.line
    if size - len(decl.specs) < 1:
        return None, _malformed(decl)

    imports = [''] * (size - 1)
    for spec in decl.specs:
        idx = spec.pos.line - decl.lparen.line - 1
        if not 0 <= idx < len(imports):
            # Entry shares a line with a parenthesis.
            return None, _malformed(decl)
        imports[idx] = spec.path
    return imports, None


def check_import_order(decl: ImportDecl, base_import: str) -> List[Diagnostic]:
    """Compare one import block with its canonical order."""
    imports, malformed = extract_block(decl)
    if malformed is not None:
        return [malformed]
    if imports is None:
        return []

    expected = sort_imports(imports, base_import)
    kind = None
    if len(expected) != len(imports):
        kind = WRONG_SHAPE
    else:
        for want, got in zip(expected, imports):
            if want != got:
                kind = WRONG_ORDER
                break

    if kind is None:
        return []
    return [Diagnostic(
        pos=decl.pos,
        end=decl.end,
        message='should be \n%s' % '\n'.join(expected),
        kind=kind,
    )]


def check_imports(decls: Sequence[ImportDecl], base_import: str) -> List[Diagnostic]:
    """Check all import declarations of one file.

    A file may hold a single import declaration. Every declaration after
    the first is reported and no ordering check runs.
    """
    if not decls:
        return []
    if len(decls) > 1:
        return [
            Diagnostic(pos=decl.pos, end=decl.end, message='multiple import', kind=MULTIPLE_IMPORTS)
            for decl in decls[1:]
        ]
    return check_import_order(decls[0], base_import)


def check_source(source: str, base_import: str, filename: str = '') -> List[Diagnostic]:
    """Scan Go source text and check its imports."""
    return check_imports(parse_imports(source, filename), base_import)


def process_file(file_path: str, base_import: str, include_generated: bool = False) -> List[Diagnostic]:
    """Check a single Go file and return its diagnostics.

    Generated files are skipped unless include_generated is set.

    Raises:
        FileReadError: If the file cannot be read.
        GoSyntaxError: If the file cannot be scanned.
    """
    source = read_source(file_path)
    if not include_generated and config.is_generated(source):
        LOG.debug("Skipping generated file %s", file_path)
        return []
    return check_source(source, base_import, filename=file_path)


def _skip_dir(name: str, ignore: Iterable[str]) -> bool:
    return name in SKIP_DIRS or name.startswith(('.', '_')) or name in ignore


def iter_go_files(root: str, ignore: Optional[Iterable[str]] = None) -> Iterator[Path]:
    """Yield Go files under root in sorted order, or root itself if it is a .go file.

    vendor and testdata directories, directories starting with '.' or '_',
    and any directory named in ignore are not descended into.
    """
    ignore_set = set(ignore or [])
    root_path = Path(root)
    if root_path.is_file():
        if root_path.suffix == '.go':
            yield root_path
        return

    for dirpath, dirnames, filenames in os.walk(root_path):
        dirnames[:] = sorted(d for d in dirnames if not _skip_dir(d, ignore_set))
        for name in sorted(filenames):
            if name.endswith('.go'):
                yield Path(dirpath) / name
