"""Wildcard import expansion."""

from __future__ import annotations

import dataclasses
import logging

from class_graph.models import NamespaceGroup, SourceUnit

logger = logging.getLogger(__name__)

WILDCARD_SUFFIX = ".*"


def expand_import(import_name: str, groups: dict[str, NamespaceGroup]) -> list[str]:
    """Expand one import into concrete, wildcard-free import names.

    ``a.b.*`` becomes one name per member when ``a.b`` is a known namespace.
    Otherwise the prefix is kept as a single name: a wildcard over the
    members of one class (``import static a.b.C.*``) looks exactly like a
    namespace wildcard without real parsing, so it is treated as a reference
    to ``a.b.C``.
    """
    if not import_name.endswith(WILDCARD_SUFFIX):
        return [import_name]

    prefix = import_name[: -len(WILDCARD_SUFFIX)]
    group = groups.get(prefix)
    if group is None:
        logger.debug("Wildcard %s matches no known namespace, keeping %s", import_name, prefix)
        return [prefix]
    return [unit.qualified_name for unit in group.units]


def resolve_wildcard_imports(
    units: list[SourceUnit],
    groups: dict[str, NamespaceGroup],
) -> list[SourceUnit]:
    """Return copies of ``units`` whose imports contain no wildcards."""
    resolved: list[SourceUnit] = []
    for unit in units:
        names: list[str] = []
        for import_name in unit.raw_imports:
            names.extend(expand_import(import_name, groups))
        resolved.append(dataclasses.replace(unit, raw_imports=tuple(dict.fromkeys(names))))
    return resolved
