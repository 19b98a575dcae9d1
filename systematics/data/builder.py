"""
Graph Builder
=============

Populates a Graph with the reference dataset for orders 1-12.

Load order follows the anchor structure:
1. Anchors (Order, Position, Location)
2. Geometry (Coordinates, Colours) referencing Locations
3. Order-level metadata referencing Orders
4. Canonical Characters and the Terms placing them on Locations
5. Links: Connectives between Locations, Lines between Coordinates
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from systematics.core.entries import (
    Character,
    CoherenceAttribute,
    Colour,
    ConnectiveDesignation,
    Coordinate,
    Location,
    Order,
    Point3d,
    Position,
    SystemName,
    Term,
    TermDesignation,
    STANDARD_NAMES,
)
from systematics.core import identifiers as ids
from systematics.core.graph import Graph
from systematics.core.language import Language
from systematics.core.links import Link
from systematics.data import catalog


logger = logging.getLogger(__name__)


def canonical_id(value: str) -> str:
    return ids.character_id(Language.CANONICAL.value, value)


# =============================================================================
# Anchors
# =============================================================================

def add_anchors(graph: Graph) -> None:
    graph.extend_entries(Order.new(order) for order in catalog.ORDERS)
    graph.extend_entries(Position.new(position) for position in catalog.ORDERS)
    graph.extend_entries(
        Location.new(order, position)
        for order in catalog.ORDERS
        for position in range(1, order + 1)
    )


# =============================================================================
# Geometry
# =============================================================================

def add_geometry(graph: Graph, order: int) -> None:
    """Coordinates plus hex and named colours for every position of an order."""
    for position, (x, y, z) in enumerate(catalog.COORDINATES[order], start=1):
        graph.add_entry(Coordinate.at(order, position, Point3d(x=x, y=y, z=z)))

    for position, (hex_value, name) in enumerate(catalog.colours_for(order), start=1):
        graph.add_entry(Colour.at(order, position, Language.HEX, hex_value))
        graph.add_entry(Colour.at(order, position, Language.NAME, name))


# =============================================================================
# Order-Level Metadata
# =============================================================================

def add_system_metadata(graph: Graph) -> None:
    for order in catalog.ORDERS:
        graph.add_entry(SystemName.for_order(order, STANDARD_NAMES[order]))
        graph.add_entry(CoherenceAttribute.for_order(order, catalog.COHERENCES[order]))
        graph.add_entry(TermDesignation.for_order(order, catalog.TERM_DESIGNATIONS[order]))
        graph.add_entry(
            ConnectiveDesignation.for_order(order, catalog.CONNECTIVE_DESIGNATIONS[order])
        )


# =============================================================================
# Vocabulary
# =============================================================================

def canonical_values() -> Iterator[str]:
    """
    Every canonical Character value, each once.

    Term values of the named orders come first, then connective labels,
    then the numbered placeholders. A value shared by a Term and a
    Connective (e.g. "Function") yields a single Character.
    """
    values: list[str] = []
    for order in range(1, 9):
        values.extend(catalog.TERM_CHARACTERS[order])
    values.extend(catalog.ACTS)
    values.extend(catalog.INTERPLAYS)
    values.extend(catalog.MUTUALITIES)
    for order in catalog.PLACEHOLDER_PREFIXES:
        values.extend(
            catalog.placeholder_value(order, index)
            for index in range(1, catalog.pair_count(order) + 1)
        )
    values.extend(f"Term {i}" for i in catalog.ORDERS)
    values.extend(f"Index {i}" for i in catalog.ORDERS)
    return iter(dict.fromkeys(values))


def add_characters(graph: Graph) -> None:
    graph.extend_entries(
        Character.auto(Language.CANONICAL, value) for value in canonical_values()
    )


def add_terms(graph: Graph, order: int) -> None:
    for position, value in enumerate(catalog.TERM_CHARACTERS[order], start=1):
        graph.add_entry(Term.at(order, position, canonical_id(value)))


# =============================================================================
# Links
# =============================================================================

def connective_links(order: int) -> list[Link]:
    """
    Connectives of one order, anchored on Locations.

    Orders 3-5 carry their named acts, interplays and mutualities. Orders
    6-12 get one placeholder connective per position pair i < j, numbered
    in pair order. Orders 1 and 2 have none.
    """
    if order in catalog.NAMED_CONNECTIVES:
        return [
            Link.connective(
                ids.location_id(order, base), ids.location_id(order, target)
            ).with_tag(canonical_id(value))
            for base, target, value in catalog.NAMED_CONNECTIVES[order]
        ]

    if order not in catalog.PLACEHOLDER_PREFIXES:
        return []

    links = []
    index = 1
    for i in range(1, order + 1):
        for j in range(i + 1, order + 1):
            tag = canonical_id(catalog.placeholder_value(order, index))
            links.append(
                Link.connective(ids.location_id(order, i), ids.location_id(order, j)).with_tag(tag)
            )
            index += 1
    return links


def line_links(order: int) -> list[Link]:
    """Complete graph on an order's Coordinates: one Line per pair i < j."""
    coordinate_id = "coord_{}_{}".format
    return [
        Link.line(coordinate_id(order, i), coordinate_id(order, j))
        for i in range(1, order + 1)
        for j in range(i + 1, order + 1)
    ]


# =============================================================================
# Entry Point
# =============================================================================

def build_graph(graph: Optional[Graph] = None) -> Graph:
    """
    Build the full reference graph for orders 1-12.

    Parameters
    ----------
    graph : Graph, optional
        Graph to populate. A new one is created when omitted.

    Returns
    -------
    Graph
        The populated graph
    """
    graph = graph if graph is not None else Graph()

    add_anchors(graph)
    for order in catalog.ORDERS:
        add_geometry(graph, order)
    add_system_metadata(graph)
    add_characters(graph)
    for order in catalog.ORDERS:
        add_terms(graph, order)
    for order in catalog.ORDERS:
        graph.extend_links(connective_links(order))
        graph.extend_links(line_links(order))

    logger.info("Built reference graph: %d entries, %d links", graph.entry_count, graph.link_count)
    return graph
