from class_graph.cli import cli

cli()
