"""Exceptions raised by class-graph."""

from __future__ import annotations

from pathlib import Path


class ClassGraphError(Exception):
    """Base class for all class-graph errors."""


class InvalidArguments(ClassGraphError):
    """Required options are missing or blank, or help was requested."""


class MissingNamespaceDeclaration(ClassGraphError):
    """A candidate source file declares no namespace."""

    def __init__(self, path: Path, keyword: str = "package"):
        self.path = path
        self.keyword = keyword
        super().__init__(f"No '{keyword}' declaration found in {path}")
