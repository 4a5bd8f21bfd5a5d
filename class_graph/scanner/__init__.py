"""File enumeration and inventory building."""

from class_graph.scanner.files import collect_source_files
from class_graph.scanner.inventory import (
    build_inventory,
    parse_imports,
    parse_namespace,
    parse_source_file,
)

__all__ = [
    "build_inventory",
    "collect_source_files",
    "parse_imports",
    "parse_namespace",
    "parse_source_file",
]
