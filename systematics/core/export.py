"""
Geometry Export
===============

Turns one order of the property graph into structures a rendering client
can draw directly:
- a networkx MultiDiGraph whose nodes are the order's Coordinates and whose
  edges are its Line and Connective links
- shapely LineStrings for individual links
"""

from __future__ import annotations

from typing import Any, Optional

import networkx as nx
from shapely.geometry import LineString, mapping

from systematics.core.graph import Graph
from systematics.core.language import Language
from systematics.core.links import Link


def link_geometry(graph: Graph, link: Link) -> Optional[LineString]:
    """
    Segment between the Coordinates at a link's two ends.

    Returns None when either end has no Coordinate.
    """
    base = graph.link_base_coordinate(link)
    target = graph.link_target_coordinate(link)
    if base is None or target is None:
        return None
    return LineString([base.value.as_tuple(), target.value.as_tuple()])


def order_network(graph: Graph, order: int) -> nx.MultiDiGraph:
    """
    Build a drawable network for one order.

    Nodes are keyed by Coordinate ID and carry x/y/z, position, the Term's
    Character value and the hex colour at that Location. Edges are keyed
    by link ID; Line edges come from ``graph.lines(order)`` and Connective
    edges from ``graph.connectives(order)``, mapped onto the Coordinates at
    their ends. Links whose ends have no Coordinate are left out.

    Parameters
    ----------
    graph : Graph
        Source graph
    order : int
        Order value to export

    Returns
    -------
    nx.MultiDiGraph
        Empty when the order has no coordinates
    """
    G = nx.MultiDiGraph(order=order)

    for coordinate in graph.coordinates(order):
        position = coordinate.position_value()
        term = graph.term(order, position) if position is not None else None
        character = graph.get_character(term.character) if term else None
        colour = graph.colour(order, position, Language.HEX) if position is not None else None
        G.add_node(
            coordinate.id,
            x=coordinate.value.x,
            y=coordinate.value.y,
            z=coordinate.value.z,
            position=position,
            location=coordinate.location,
            label=character.value if character else None,
            colour=colour.value if colour else None,
        )

    for link in graph.lines(order) + graph.connectives(order):
        base = graph.link_base_coordinate(link)
        target = graph.link_target_coordinate(link)
        if base is None or target is None or base.id not in G or target.id not in G:
            continue
        character = graph.link_character(link)
        G.add_edge(
            base.id,
            target.id,
            key=link.id,
            link_type=link.link_type.value,
            label=character.value if character else None,
        )

    return G


def network_to_dict(G: nx.MultiDiGraph) -> dict[str, Any]:
    """JSON-serializable node/edge listing of an ``order_network`` graph."""
    return {
        "order": G.graph.get("order"),
        "nodes": [{"id": node, **data} for node, data in G.nodes(data=True)],
        "edges": [
            {"id": key, "source": u, "target": v, **data}
            for u, v, key, data in G.edges(keys=True, data=True)
        ],
    }


def link_geojson(graph: Graph, link: Link) -> Optional[dict[str, Any]]:
    """GeoJSON-like mapping of ``link_geometry``."""
    geometry = link_geometry(graph, link)
    return mapping(geometry) if geometry is not None else None
