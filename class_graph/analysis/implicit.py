"""Implicit dependency resolution.

Classes sharing a namespace can use each other without an import. A sibling
counts as a dependency when its simple name appears as a whole token
anywhere in the unit's text, comments and string literals included. Only
the exact namespace is searched, never sub-namespaces.
"""

from __future__ import annotations

import logging
import re

from class_graph.models import (
    DependencyRecord,
    InternalDependency,
    NamespaceGroup,
    SourceUnit,
)

logger = logging.getLogger(__name__)

_IDENT_CHARS = r"\w$"


def token_pattern(name: str) -> re.Pattern[str]:
    return re.compile(rf"(?<![{_IDENT_CHARS}]){re.escape(name)}(?![{_IDENT_CHARS}])")


def find_referenced_siblings(
    unit: SourceUnit,
    text: str,
    groups: dict[str, NamespaceGroup],
) -> list[SourceUnit]:
    group = groups.get(unit.namespace)
    if group is None:
        return []
    return [
        candidate for candidate in group.units
        if candidate != unit and token_pattern(candidate.simple_name).search(text)
    ]


def resolve_implicit_dependencies(
    records: list[DependencyRecord],
    groups: dict[str, NamespaceGroup],
) -> list[DependencyRecord]:
    """Return records augmented with same-namespace references."""
    resolved: list[DependencyRecord] = []
    for record in records:
        siblings = find_referenced_siblings(record.unit, record.unit.read_text(), groups)
        if siblings:
            logger.debug(
                "%s uses %d sibling(s) without import",
                record.unit.qualified_name, len(siblings),
            )
        resolved.append(record.merged([InternalDependency(s) for s in siblings]))
    return resolved
