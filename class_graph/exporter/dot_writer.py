"""Graphviz DOT rendering of dependency records."""

from __future__ import annotations

import logging
from pathlib import Path

from class_graph.models import DependencyRecord, GraphMode

logger = logging.getLogger(__name__)

# mode -> (opening keyword, edge connector)
_SYNTAX: dict[GraphMode, tuple[str, str]] = {
    GraphMode.DIRECTED: ("digraph", "->"),
    GraphMode.UNDIRECTED: ("graph", "--"),
}

_INDENT = "     "


def quote(label: str) -> str:
    escaped = label.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def render_statement(record: DependencyRecord, connector: str = "->") -> str:
    """One node with its whole adjacency list, e.g. ``"a.B" -> { "a.C" }``."""
    targets = "".join(f"{quote(dep.label)} " for dep in record.dependencies)
    return f"{quote(record.unit.qualified_name)} {connector} {{ {targets}}}"


def render_graph(
    records: list[DependencyRecord],
    mode: GraphMode = GraphMode.DIRECTED,
) -> str:
    keyword, connector = _SYNTAX[mode]
    lines = [f"{keyword} {{"]
    lines.extend(f"{_INDENT}{render_statement(r, connector)}" for r in records)
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_graph(text: str, output_path: Path) -> Path:
    """Write rendered DOT text as UTF-8, creating the parent directory."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    logger.info("Graph written to %s", output_path)
    return output_path
