#!/usr/bin/env python3
"""Command-line interface for imporder using Click."""

from importlib import metadata
import logging
from pathlib import Path
import sys
from typing import Tuple

import click

from imporder import config
from imporder import core
from imporder.exceptions import ImportOrderError


try:
    VERSION = f"imporder {metadata.version('imporder')}"
except metadata.PackageNotFoundError:
    VERSION = "imporder"


def _resolve_base_import(path: Path, base_import: str) -> str:
    """Return base_import, or the module path of the go.mod governing path.

    Raises:
        FileReadError: If the go.mod cannot be read.
    """
    if base_import:
        return base_import
    module = config.read_base_import(str(path))
    if module:
        logging.debug("[%s] base import detected from go.mod: %s", path, module)
        return module
    logging.warning("[%s] no --base-import given and no go.mod found; every import will be treated as internal.", path)
    return ""


def _handle_files(paths: Tuple[Path, ...], base_import: str, include_generated: bool, exclude: Tuple[str, ...]) -> int:
    """Check Go files and report import issues.

    Args:
        paths: Files or directories to check.
        base_import: Prefix of the project's own import paths; when empty it
            is read from the go.mod governing each path.
        include_generated: If True, also check generated files.
        exclude: Directory names not to descend into.
    Returns:
        0 if no issues, 1 if issues were reported, 2 if an error occurred.
    """
    exit_code = 0
    total = 0
    checked = 0

    for path in paths:
        try:
            path_base_import = _resolve_base_import(path, base_import)
        except ImportOrderError as exc:
            logging.error("[%s] ERROR: %s", path, exc)
            exit_code = max(exit_code, 2)
            continue

        for file_path in core.iter_go_files(str(path), ignore=exclude):
            checked += 1
            try:
                diagnostics = core.process_file(str(file_path), path_base_import, include_generated=include_generated)
            except ImportOrderError as exc:
                logging.error("[%s] ERROR: %s", file_path, exc)
                exit_code = max(exit_code, 2)
                continue

            for diag in diagnostics:
                logging.warning("%s", diag)
                total += 1
            if diagnostics:
                exit_code = max(exit_code, 1)

    logging.info("Checked %d file(s), %d issue(s) found.", checked, total)
    return exit_code


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Increase verbosity.")
@click.option("-q", "--quiet", is_flag=True, help="Suppress non-error output.")
@click.version_option(version=VERSION, prog_name="imporder")
def cli(verbose: bool, quiet: bool) -> None:
    """Check grouping and ordering of Go imports."""
    # Configure logging only once
    if not logging.getLogger().handlers:
        if quiet:
            logging.basicConfig(level=logging.ERROR, format="%(message)s")
        else:
            logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(message)s")


@cli.command(help="Report import grouping and ordering issues.")
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True, file_okay=True, dir_okay=True, path_type=Path))
@click.option("--base-import", default="", help="Import path prefix of the project's own packages (default: module path from the go.mod governing each PATH).")
@click.option("--include-generated", is_flag=True, help="Also check files marked 'Code generated ... DO NOT EDIT.'.")
@click.option("--exclude", multiple=True, help="Directory name to skip; may be repeated.")
def check(paths: Tuple[Path, ...], base_import: str, include_generated: bool, exclude: Tuple[str, ...]) -> None:
    exit_code = _handle_files(paths, base_import, include_generated, exclude)
    sys.exit(exit_code)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
