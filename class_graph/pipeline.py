"""Pipeline orchestrator: inventory -> group -> wildcards -> explicit -> implicit -> DOT."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from class_graph.analysis import (
    group_by_namespace,
    resolve_explicit_dependencies,
    resolve_implicit_dependencies,
    resolve_wildcard_imports,
)
from class_graph.config import AnalysisConfig
from class_graph.exporter import render_graph, write_graph
from class_graph.models import DependencyRecord
from class_graph.scanner import build_inventory, collect_source_files

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]


def run_analysis(
    config: AnalysisConfig,
    progress: ProgressCallback | None = None,
) -> list[DependencyRecord]:
    """Build the dependency records for every source unit under source_dir."""
    def report(stage: str, done: int) -> None:
        if progress:
            progress(stage, done, 1)

    report("Scanning", 0)
    files = collect_source_files(Path(config.source_dir), config.extensions, config.skip_dirs)
    units = build_inventory(files, config.namespace_keyword, config.import_keyword)
    report("Scanning", 1)

    report("Resolving imports", 0)
    groups = group_by_namespace(units)
    units = resolve_wildcard_imports(units, groups)
    groups = group_by_namespace(units)
    records = resolve_explicit_dependencies(units, groups)
    report("Resolving imports", 1)

    report("Resolving same-namespace usage", 0)
    records = resolve_implicit_dependencies(records, groups)
    report("Resolving same-namespace usage", 1)

    edges = sum(len(r.dependencies) for r in records)
    logger.info(
        "Resolved %d edge(s) across %d unit(s) in %d namespace(s)",
        edges, len(records), len(groups),
    )
    return records


def run_pipeline(
    config: AnalysisConfig,
    progress: ProgressCallback | None = None,
) -> Path:
    """Run the analysis and write the graph; returns the output path.

    Nothing is written when any stage fails.
    """
    config.validate()
    records = run_analysis(config, progress=progress)
    text = render_graph(records, config.mode)

    if progress:
        progress("Writing", 0, 1)
    output_path = write_graph(text, config.output_path)
    if progress:
        progress("Writing", 1, 1)
    return output_path
