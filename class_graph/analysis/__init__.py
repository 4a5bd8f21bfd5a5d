"""Dependency resolution stages."""

from class_graph.analysis.explicit import resolve_explicit_dependencies, resolve_import
from class_graph.analysis.implicit import resolve_implicit_dependencies
from class_graph.analysis.namespaces import group_by_namespace
from class_graph.analysis.wildcard import expand_import, resolve_wildcard_imports

__all__ = [
    "expand_import",
    "group_by_namespace",
    "resolve_explicit_dependencies",
    "resolve_implicit_dependencies",
    "resolve_import",
    "resolve_wildcard_imports",
]
