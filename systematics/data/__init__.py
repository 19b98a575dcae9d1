"""
Systematics Data: Reference Dataset
===================================

Public API:
- build_graph: Populate a Graph with orders 1-12
"""

from systematics.data.builder import build_graph, connective_links, line_links

__all__ = [
    "build_graph",
    "connective_links",
    "line_links",
]
