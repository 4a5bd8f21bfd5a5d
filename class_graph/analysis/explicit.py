"""Explicit dependency resolution: import names to dependency edges."""

from __future__ import annotations

from class_graph.models import (
    Dependency,
    DependencyRecord,
    ExternalDependency,
    InternalDependency,
    NamespaceGroup,
    SourceUnit,
)


def resolve_import(import_name: str, groups: dict[str, NamespaceGroup]) -> Dependency:
    """Bind an import to a known unit, or classify it as external."""
    namespace, _, simple_name = import_name.rpartition(".")
    group = groups.get(namespace) if namespace else None
    unit = group.find(simple_name) if group else None
    if unit is None:
        return ExternalDependency(import_name)
    return InternalDependency(unit)


def resolve_explicit_dependencies(
    units: list[SourceUnit],
    groups: dict[str, NamespaceGroup],
) -> list[DependencyRecord]:
    records: list[DependencyRecord] = []
    for unit in units:
        deps = [resolve_import(name, groups) for name in unit.raw_imports]
        # own-namespace wildcards and static self-imports bind back to the unit
        deps = [d for d in deps if d.is_external or d.unit != unit]
        records.append(DependencyRecord(unit=unit, dependencies=tuple(dict.fromkeys(deps))))
    return records
