"""
Query Views
===========

Read-only views that bundle Graph queries for consumers such as the HTTP
transport or a rendering client. Views never mutate the graph; each one
resolves what it needs on ``to_dict()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from systematics.core.entries import (
    Entry,
    Order,
    Term,
    entry_order,
    entry_position,
    entry_type,
    is_anchor,
    is_location_level,
    is_order_level,
    is_semantic,
)
from systematics.core.graph import Graph
from systematics.core.language import REPRESENTATIONS
from systematics.core.links import Link


def entry_to_dict(entry: Entry) -> dict[str, Any]:
    """Entry fields plus its derived order/position and classification."""
    data = entry.model_dump(mode="json")
    data.update({
        "entry_type": entry_type(entry),
        "derived_order": entry_order(entry),
        "derived_position": entry_position(entry),
        "is_anchor": is_anchor(entry),
        "is_order_level": is_order_level(entry),
        "is_location_level": is_location_level(entry),
        "is_semantic": is_semantic(entry),
    })
    if isinstance(entry, Order):
        data["standard_name"] = entry.standard_name()
    return data


def term_to_dict(term: Term, graph: Graph) -> dict[str, Any]:
    """A Term with its Character resolved (None when dangling)."""
    data = entry_to_dict(term)
    character = graph.get_character(term.character)
    data["character_entry"] = character.model_dump(mode="json") if character else None
    return data


def _dump(entry: Optional[Entry]) -> Optional[dict[str, Any]]:
    return entry_to_dict(entry) if entry is not None else None


@dataclass
class LinkView:
    """A link with its endpoints resolved against a graph."""

    link: Link
    graph: Graph

    def to_dict(self) -> dict[str, Any]:
        graph, link = self.graph, self.link
        character = graph.link_character(link)
        return {
            "id": link.id,
            "link_type": link.link_type.value,
            "base_id": link.base_single(),
            "target_id": link.target_single(),
            "bases": link.bases(),
            "targets": link.targets(),
            "tag": link.tag,
            "character_id": link.character_id(),
            "character": character.model_dump(mode="json") if character else None,
            "order": graph.link_order(link),
            "base_position": graph.link_base_position(link),
            "target_position": graph.link_target_position(link),
            "base_coordinate": _dump(graph.link_base_coordinate(link)),
            "target_coordinate": _dump(graph.link_target_coordinate(link)),
            "base_slice": self._endpoint_slice(graph.link_base(link)),
            "target_slice": self._endpoint_slice(graph.link_target(link)),
        }

    def _endpoint_slice(self, entry: Optional[Entry]) -> Optional[dict[str, Any]]:
        """Slice at an endpoint's order and position, or None when it has neither."""
        if entry is None:
            return None
        order, position = entry_order(entry), entry_position(entry)
        if order is None or position is None:
            return None
        return SliceView(order, position, self.graph).to_dict()


@dataclass
class SliceView:
    """Everything at one order + position."""

    order: int
    position: int
    graph: Graph

    def to_dict(self) -> dict[str, Any]:
        graph = self.graph
        term = graph.term(self.order, self.position)
        colours = [
            graph.colour(self.order, self.position, language)
            for language in REPRESENTATIONS
        ]
        return {
            "order": self.order,
            "position": self.position,
            "entries": [entry_to_dict(e) for e in graph.slice(self.order, self.position)],
            "location": _dump(graph.location(self.order, self.position)),
            "term": term_to_dict(term, graph) if term else None,
            "coordinate": _dump(graph.coordinate(self.order, self.position)),
            "colours": [entry_to_dict(c) for c in colours if c is not None],
            "isomorphic_terms": [
                {"term": entry_to_dict(t), "character": c.model_dump(mode="json")}
                for t, c in graph.isomorphic_terms(self.order, self.position)
            ],
        }


@dataclass
class SystemView:
    """
    A whole system (one order) as a consumer sees it.

    Bundles the order-level metadata with the location-level content and
    both kinds of links.
    """

    order: int
    graph: Graph

    def slices(self) -> list[SliceView]:
        return [SliceView(self.order, p, self.graph) for p in range(1, self.order + 1)]

    def links(self) -> list[Link]:
        """Connectives followed by lines."""
        return self.graph.connectives(self.order) + self.graph.lines(self.order)

    def summary(self) -> dict[str, Any]:
        """Order-level metadata only."""
        graph, order = self.graph, self.order

        def value_of(entry):
            return entry.value if entry is not None else None

        return {
            "order": order,
            "name": value_of(graph.system_name(order)),
            "coherence": value_of(graph.coherence(order)),
            "term_designation": value_of(graph.term_designation(order)),
            "connective_designation": value_of(graph.connective_designation(order)),
        }

    def to_dict(self, include_slices: bool = False) -> dict[str, Any]:
        graph, order = self.graph, self.order
        data = self.summary()
        data.update({
            "locations": [entry_to_dict(loc) for loc in graph.locations_for_order(order)],
            "terms": [term_to_dict(t, graph) for t in graph.terms(order)],
            "coordinates": [entry_to_dict(c) for c in graph.coordinates(order)],
            "colours": [entry_to_dict(c) for c in graph.colours(order)],
            "connectives": [LinkView(link, graph).to_dict() for link in graph.connectives(order)],
            "lines": [LinkView(link, graph).to_dict() for link in graph.lines(order)],
        })
        if include_slices:
            data["slices"] = [s.to_dict() for s in self.slices()]
        return data
