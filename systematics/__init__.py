"""
Systematics
===========

Typed property graph for Elementary Systematics: twelve orders of systems,
their terms, geometry and connectives.

Subpackages:
- systematics.core: entry/link model and the Graph query engine
- systematics.data: reference dataset for orders 1-12
"""

from systematics.core.graph import Graph
from systematics.data import build_graph

__all__ = ["Graph", "build_graph"]
