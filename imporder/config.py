import logging
import re
from pathlib import Path
from typing import Optional

from imporder.exceptions import FileReadError

LOG = logging.getLogger(__name__)

GO_MOD = "go.mod"

_MODULE_RE = re.compile(r"^\s*module\s+(\S+)")
_GENERATED_RE = re.compile(r"^// Code generated .* DO NOT EDIT\.$")


def read_base_import(start: str) -> str:
    """Return the module path of the nearest go.mod at or above start, or ''.

    Raises:
        FileReadError: If that go.mod cannot be read as UTF-8.
    """
    path = Path(start).resolve()
    if path.is_file():
        path = path.parent

    for directory in (path, *path.parents):
        go_mod = directory / GO_MOD
        if not go_mod.is_file():
            continue
        try:
            text = go_mod.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise FileReadError(str(go_mod), str(exc)) from exc
        module = parse_module_path(text)
        if module:
            LOG.debug("Using base import %r from %s", module, go_mod)
            return module

    return ""


def parse_module_path(go_mod_source: str) -> Optional[str]:
    """Extract the path from a go.mod 'module' directive."""
    for line in go_mod_source.splitlines():
        line = line.split("//", 1)[0]
        m = _MODULE_RE.match(line)
        if m:
            return m.group(1).strip('"`')
    return None


def is_generated(source: str) -> bool:
    """Report whether the file carries the Go 'Code generated ... DO NOT EDIT.' marker."""
    for line in source.splitlines():
        if line.startswith("package "):
            break
        if _GENERATED_RE.match(line.rstrip("\r")):
            return True
    return False
