"""class-graph: dependency graphs for package/class-per-file source trees."""

__version__ = "0.1.0"
