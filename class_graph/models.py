"""Data models for the class-graph pipeline."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union


class GraphMode(enum.Enum):
    DIRECTED = "directed"
    UNDIRECTED = "undirected"


@dataclass(frozen=True)
class SourceUnit:
    """One analyzed source file.

    Identity is the ``(namespace, simple_name)`` pair; the path and imports
    do not take part in equality.
    """
    path: Path = field(compare=False)
    simple_name: str
    namespace: str
    raw_imports: tuple[str, ...] = field(default=(), compare=False)

    @property
    def qualified_name(self) -> str:
        return f"{self.namespace}.{self.simple_name}"

    def read_text(self) -> str:
        return self.path.read_text(encoding="utf-8", errors="replace")


@dataclass(frozen=True)
class NamespaceGroup:
    """All source units declaring the same namespace."""
    name: str
    units: tuple[SourceUnit, ...] = ()

    def find(self, simple_name: str) -> SourceUnit | None:
        for unit in self.units:
            if unit.simple_name == simple_name:
                return unit
        return None


@dataclass(frozen=True)
class InternalDependency:
    """Edge bound to a unit of the analyzed tree."""
    unit: SourceUnit
    is_external = False

    @property
    def label(self) -> str:
        return self.unit.qualified_name


@dataclass(frozen=True)
class ExternalDependency:
    """Edge to a name outside the analyzed tree, kept verbatim."""
    name: str
    is_external = True

    @property
    def label(self) -> str:
        return self.name


Dependency = Union[InternalDependency, ExternalDependency]


@dataclass(frozen=True)
class DependencyRecord:
    """A source unit with its ordered, duplicate-free dependencies."""
    unit: SourceUnit
    dependencies: tuple[Dependency, ...] = ()

    def merged(self, extra: list[Dependency]) -> DependencyRecord:
        combined = tuple(dict.fromkeys(self.dependencies + tuple(extra)))
        return DependencyRecord(unit=self.unit, dependencies=combined)
