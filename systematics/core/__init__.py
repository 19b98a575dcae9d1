"""
Systematics Core: Typed Property Graph
======================================

Entries anchored to Order × Position, explicit links between them, and a
linear-scan query engine over both.

Public API:
- Graph: The append-only container and query engine
- Entry and its variants: Order, Position, Location, Character, the
  order-level and location-level entries
- Link / LinkType: Line and Connective relationships
- Language: Semantic vocabularies and colour representation kinds
- SystemView / SliceView / LinkView: Bundled read-only views
- order_network: networkx export of one order
"""

from systematics.core.language import Language, VOCABULARIES, REPRESENTATIONS
from systematics.core.entries import (
    Entry,
    ENTRY_ADAPTER,
    Point3d,
    Order,
    Position,
    Location,
    Character,
    SystemName,
    CoherenceAttribute,
    TermDesignation,
    ConnectiveDesignation,
    Term,
    Coordinate,
    Colour,
    STANDARD_NAMES,
    standard_name,
    order_for_name,
    entry_type,
    entry_order,
    entry_position,
    is_anchor,
    is_order_level,
    is_location_level,
    is_semantic,
)
from systematics.core.links import Link, LinkType
from systematics.core.graph import Graph
from systematics.core.views import LinkView, SliceView, SystemView, entry_to_dict, term_to_dict
from systematics.core.export import link_geometry, link_geojson, order_network, network_to_dict

__all__ = [
    "Graph",
    "Entry",
    "ENTRY_ADAPTER",
    "Point3d",
    "Order",
    "Position",
    "Location",
    "Character",
    "SystemName",
    "CoherenceAttribute",
    "TermDesignation",
    "ConnectiveDesignation",
    "Term",
    "Coordinate",
    "Colour",
    "STANDARD_NAMES",
    "standard_name",
    "order_for_name",
    "entry_type",
    "entry_order",
    "entry_position",
    "is_anchor",
    "is_order_level",
    "is_location_level",
    "is_semantic",
    "Link",
    "LinkType",
    "Language",
    "VOCABULARIES",
    "REPRESENTATIONS",
    "LinkView",
    "SliceView",
    "SystemView",
    "entry_to_dict",
    "term_to_dict",
    "link_geometry",
    "link_geojson",
    "order_network",
    "network_to_dict",
]
