"""Click CLI: analyze a source tree and write its class dependency graph."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from class_graph import __version__
from class_graph.config import AnalysisConfig, load_config, normalize_extension
from class_graph.errors import ClassGraphError, InvalidArguments
from class_graph.models import GraphMode
from class_graph.pipeline import run_pipeline

USAGE_EXIT_CODE = 2


def _usage(ctx: click.Context, message: str | None = None) -> None:
    if message:
        click.echo(f"Error: {message}\n")
    click.echo(ctx.get_help())
    ctx.exit(USAGE_EXIT_CODE)


def _option_path(value: str | None) -> Path | None:
    if value is None or not value.strip():
        return None
    return Path(value)


def _build_config(
    source: str | None,
    destination: str | None,
    extensions: tuple[str, ...],
    undirected: bool,
    config_file: Path | None,
) -> AnalysisConfig:
    config = load_config(config_file) if config_file else AnalysisConfig()
    if source is not None:
        config.source_dir = _option_path(source)
    if destination is not None:
        config.destination_dir = _option_path(destination)
    if extensions:
        config.extensions = [normalize_extension(e) for e in extensions]
    if undirected:
        config.mode = GraphMode.UNDIRECTED
    config.validate()
    return config


@click.command(context_settings={"help_option_names": []})
@click.option("--source", help="Root directory of the source tree to analyze.")
@click.option("--destination", help="Directory the .gv file is written to.")
@click.option(
    "--extension", "-e", "extensions", multiple=True,
    help="Source file extension to analyze (repeatable, default: .java .kt).",
)
@click.option("--undirected", is_flag=True, help="Write an undirected graph instead of a digraph.")
@click.option(
    "--config", "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file with analysis settings; options given here take precedence.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log resolution details.")
@click.option("--help", "show_help", is_flag=True, help="Show this message and exit.")
@click.version_option(version=__version__)
@click.pass_context
def cli(
    ctx: click.Context,
    source: str | None,
    destination: str | None,
    extensions: tuple[str, ...],
    undirected: bool,
    config_file: Path | None,
    verbose: bool,
    show_help: bool,
):
    """class-graph: Write a Graphviz dependency graph of a Java/Kotlin source tree."""
    if show_help:
        _usage(ctx)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _build_config(source, destination, extensions, undirected, config_file)
    except InvalidArguments as e:
        _usage(ctx, str(e))

    if not Path(config.source_dir).is_dir():
        raise click.ClickException(f"Source directory not found: {config.source_dir}")

    try:
        output_path = run_pipeline(config)
    except (ClassGraphError, OSError) as e:
        raise click.ClickException(str(e))

    click.echo(f"Wrote {output_path}")


if __name__ == "__main__":
    cli()
