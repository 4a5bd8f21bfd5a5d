"""Namespace grouping: a pure index derived from the current unit set."""

from __future__ import annotations

from typing import Iterable

from class_graph.models import NamespaceGroup, SourceUnit


def group_by_namespace(units: Iterable[SourceUnit]) -> dict[str, NamespaceGroup]:
    """Partition units by declared namespace, keeping first-seen order."""
    members: dict[str, list[SourceUnit]] = {}
    for unit in units:
        members.setdefault(unit.namespace, []).append(unit)
    return {name: NamespaceGroup(name=name, units=tuple(group)) for name, group in members.items()}
