"""Inventory builder: source files to SourceUnits.

Only two kinds of line matter here. The first line starting with the
namespace keyword names the unit's namespace, and every line starting with
the import keyword contributes one raw import. Everything else is left for
the implicit-dependency scan, which reads the whole text later.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from class_graph.errors import MissingNamespaceDeclaration
from class_graph.models import SourceUnit

logger = logging.getLogger(__name__)

# Kotlin import alias: "import a.b.C as D"
_ALIAS_RE = re.compile(r"\s+as\s+\w+$")
# Java static import: "import static a.b.C.m"
_STATIC_RE = re.compile(r"^static\s+")
# trailing line comment: "import a.B // note"
_LINE_COMMENT_RE = re.compile(r"\s*//.*$")


def _statement_re(keyword: str) -> re.Pattern[str]:
    return re.compile(rf"^{re.escape(keyword)}\s+(.*?)\s*;?\s*$")


def parse_namespace(lines: Iterable[str], keyword: str = "package") -> str | None:
    """Return the namespace from the first declaration line, or None."""
    pattern = _statement_re(keyword)
    for line in lines:
        m = pattern.match(_LINE_COMMENT_RE.sub("", line))
        if m:
            return m.group(1)
    return None


def parse_imports(lines: Iterable[str], keyword: str = "import") -> list[str]:
    """Return the declared imports in file order, without duplicates."""
    pattern = _statement_re(keyword)
    imports: list[str] = []
    for line in lines:
        m = pattern.match(_LINE_COMMENT_RE.sub("", line))
        if not m:
            continue
        name = _ALIAS_RE.sub("", _STATIC_RE.sub("", m.group(1)))
        if name:
            imports.append(name)
    return list(dict.fromkeys(imports))


def parse_source_file(
    path: Path,
    namespace_keyword: str = "package",
    import_keyword: str = "import",
) -> SourceUnit:
    """Read one file into a SourceUnit.

    Raises MissingNamespaceDeclaration when the file has no namespace line.
    """
    lines = path.read_text(encoding="utf-8", errors="replace").splitlines()
    namespace = parse_namespace(lines, namespace_keyword)
    if namespace is None:
        raise MissingNamespaceDeclaration(path, namespace_keyword)

    return SourceUnit(
        path=path,
        simple_name=path.stem,
        namespace=namespace,
        raw_imports=tuple(parse_imports(lines, import_keyword)),
    )


def build_inventory(
    files: Iterable[Path],
    namespace_keyword: str = "package",
    import_keyword: str = "import",
) -> list[SourceUnit]:
    units = [parse_source_file(f, namespace_keyword, import_keyword) for f in files]
    logger.info("Inventory built: %d source unit(s)", len(units))
    return units
