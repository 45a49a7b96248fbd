"""Top-level package for imporder.

This package exposes the core API for checking the grouping and ordering
of Go import declarations.
"""

from imporder.core import check_import_order
from imporder.core import check_imports
from imporder.core import check_source
from imporder.core import classify_import
from imporder.core import extract_block
from imporder.core import iter_go_files
from imporder.core import process_file
from imporder.core import sort_imports
from imporder.models import Diagnostic
from imporder.models import ImportDecl
from imporder.models import ImportSpec
from imporder.models import Position
from imporder.parser import extract_imports_from_file
from imporder.parser import parse_imports


__all__ = [
    "classify_import",
    "sort_imports",
    "extract_block",
    "check_import_order",
    "check_imports",
    "check_source",
    "process_file",
    "iter_go_files",
    "parse_imports",
    "extract_imports_from_file",
    "Diagnostic",
    "ImportDecl",
    "ImportSpec",
    "Position",
]
