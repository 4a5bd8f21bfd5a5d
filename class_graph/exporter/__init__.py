"""Exporter layer."""

from class_graph.exporter.dot_writer import render_graph, render_statement, write_graph

__all__ = ["render_graph", "render_statement", "write_graph"]
