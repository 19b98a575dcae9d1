"""
Graph Engine
============

The flat container for the property graph and its full query surface.

Key Design Principles:
1. Append-only - entries and links are added, never updated or removed
2. No indices - every query is a linear scan over insertion-ordered lists
3. Permissive - a miss, a malformed identifier or a dangling reference
   yields None or an empty list, never an exception
4. Snapshots - consumers that need isolation take a ``snapshot()``; entry
   and link models are frozen so snapshots share them safely

Queries fall into three groups:
- Anchor queries: Order, Position, Location
- Systematic queries: content mapped to anchors (order-level metadata,
  terms, coordinates, colours, slices)
- Link queries: connectives, lines, and resolution of link endpoints
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from systematics.core.identifiers import LocationKey, OrderKey, PositionKey
from systematics.core.entries import (
    ENTRY_ADAPTER,
    Character,
    CoherenceAttribute,
    Colour,
    ConnectiveDesignation,
    Coordinate,
    Entry,
    Location,
    Order,
    Position,
    SystemName,
    Term,
    TermDesignation,
    entry_order,
    entry_position,
)
from systematics.core.language import Language
from systematics.core.links import Link, LinkType


logger = logging.getLogger(__name__)


class Graph:
    """
    Property graph of entries and links.

    Example
    -------
    >>> graph = Graph()
    >>> graph.add_entry(Order.new(3))
    >>> graph.add_entry(Location.new(3, 1))
    >>> graph.add_entry(Character.auto(Language.CANONICAL, "Will"))
    >>> graph.add_entry(Term.at(3, 1, "char_canonical_will"))
    >>> graph.term(3, 1).character
    'char_canonical_will'
    >>> [e.id for e in graph.slice(3, 1)]
    ['loc_3_1', 'term_3_1']
    """

    def __init__(
        self,
        entries: Optional[Iterable[Entry]] = None,
        links: Optional[Iterable[Link]] = None,
    ):
        self._entries: list[Entry] = list(entries or [])
        self._links: list[Link] = list(links or [])

    @property
    def entries(self) -> tuple[Entry, ...]:
        """All entries in insertion order (read-only)."""
        return tuple(self._entries)

    @property
    def links(self) -> tuple[Link, ...]:
        """All links in insertion order (read-only)."""
        return tuple(self._links)

    @property
    def entry_count(self) -> int:
        return len(self._entries)

    @property
    def link_count(self) -> int:
        return len(self._links)

    def __repr__(self) -> str:
        return f"Graph(entries={self.entry_count}, links={self.link_count})"

    # ==========================================================================
    # Mutation
    # ==========================================================================

    def add_entry(self, entry: Entry) -> None:
        """Append an entry. No duplicate or reference checking."""
        self._entries.append(entry)

    def add_link(self, link: Link) -> None:
        """Append a link. No duplicate or reference checking."""
        self._links.append(link)

    def extend_entries(self, entries: Iterable[Entry]) -> None:
        self._entries.extend(entries)

    def extend_links(self, links: Iterable[Link]) -> None:
        self._links.extend(links)

    def snapshot(self) -> "Graph":
        """
        Independent copy for one consumer.

        Appending to the snapshot never affects this graph and vice versa.
        The frozen entry and link objects themselves are shared.
        """
        logger.debug("Snapshot of %r", self)
        return Graph(self._entries, self._links)

    # ==========================================================================
    # Serialization
    # ==========================================================================

    def to_dict(self) -> dict[str, Any]:
        """Convert the graph to a JSON-serializable dictionary."""
        return {
            "entries": [entry.model_dump(mode="json") for entry in self._entries],
            "links": [link.model_dump(mode="json") for link in self._links],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Graph":
        """
        Rebuild a graph from ``to_dict`` output.

        Raises
        ------
        pydantic.ValidationError
            If an entry or link payload does not match any model
        """
        entries = [ENTRY_ADAPTER.validate_python(item) for item in data.get("entries", [])]
        links = [Link.model_validate(item) for item in data.get("links", [])]
        return cls(entries, links)

    # ==========================================================================
    # Identity Lookup
    # ==========================================================================

    def get_entry(self, entry_id: str) -> Optional[Entry]:
        """Find an entry by ID."""
        return next((e for e in self._entries if e.id == entry_id), None)

    def get_link(self, link_id: str) -> Optional[Link]:
        """Find a link by ID."""
        return next((link for link in self._links if link.id == link_id), None)

    def get_character(self, character_id: str) -> Optional[Character]:
        """Find a Character by ID."""
        return next(
            (e for e in self._entries if isinstance(e, Character) and e.id == character_id),
            None,
        )

    def _of_type(self, cls: type) -> list:
        return [e for e in self._entries if isinstance(e, cls)]

    # ==========================================================================
    # Anchor Queries
    # ==========================================================================

    def order(self, value: int) -> Optional[Order]:
        return next((o for o in self._of_type(Order) if o.value == value), None)

    def orders(self) -> list[Order]:
        return self._of_type(Order)

    def position(self, value: int) -> Optional[Position]:
        return next((p for p in self._of_type(Position) if p.value == value), None)

    def positions(self) -> list[Position]:
        return self._of_type(Position)

    def location(self, order: int, position: int) -> Optional[Location]:
        """
        Resolve the pullback: the Location whose Order and Position
        references equal the re-encoded values.
        """
        order_ref = OrderKey(order).encode()
        position_ref = PositionKey(position).encode()
        return next(
            (
                loc for loc in self._of_type(Location)
                if loc.order == order_ref and loc.position == position_ref
            ),
            None,
        )

    def locations(self) -> list[Location]:
        return self._of_type(Location)

    def locations_for_order(self, order: int) -> list[Location]:
        order_ref = OrderKey(order).encode()
        return [loc for loc in self._of_type(Location) if loc.order == order_ref]

    def locations_for_position(self, position: int) -> list[Location]:
        """All Locations at a position, across every order."""
        position_ref = PositionKey(position).encode()
        return [loc for loc in self._of_type(Location) if loc.position == position_ref]

    # ==========================================================================
    # Order-Level Systematic Queries
    # ==========================================================================

    def system(self, order: int) -> list[Entry]:
        """Every entry, of any kind, whose derived order equals ``order``."""
        return [e for e in self._entries if entry_order(e) == order]

    def _order_level(self, cls: type, order: int):
        order_ref = OrderKey(order).encode()
        return next((e for e in self._of_type(cls) if e.order == order_ref), None)

    def system_name(self, order: int) -> Optional[SystemName]:
        return self._order_level(SystemName, order)

    def coherence(self, order: int) -> Optional[CoherenceAttribute]:
        return self._order_level(CoherenceAttribute, order)

    def term_designation(self, order: int) -> Optional[TermDesignation]:
        return self._order_level(TermDesignation, order)

    def connective_designation(self, order: int) -> Optional[ConnectiveDesignation]:
        return self._order_level(ConnectiveDesignation, order)

    # ==========================================================================
    # Location-Level Systematic Queries
    # ==========================================================================

    def terms(self, order: int, language: Optional[Language] = None) -> list[Term]:
        """
        All Terms of an order.

        Parameters
        ----------
        order : int
            Order value
        language : Language, optional
            Keep only Terms whose Character belongs to this vocabulary.
            Terms with a dangling Character reference are dropped.
        """
        terms = [t for t in self._of_type(Term) if t.order_value() == order]
        if language is None:
            return terms

        filtered = []
        for term in terms:
            character = self.get_character(term.character)
            if character is not None and character.language == language:
                filtered.append(term)
        return filtered

    def term(self, order: int, position: int) -> Optional[Term]:
        location_ref = LocationKey(order, position).encode()
        return next((t for t in self._of_type(Term) if t.location == location_ref), None)

    def terms_at_location(self, location_id: str) -> list[Term]:
        """Terms referencing a raw Location ID."""
        return [t for t in self._of_type(Term) if t.location == location_id]

    def coordinates(self, order: int) -> list[Coordinate]:
        return [c for c in self._of_type(Coordinate) if c.order_value() == order]

    def coordinate(self, order: int, position: int) -> Optional[Coordinate]:
        location_ref = LocationKey(order, position).encode()
        return next((c for c in self._of_type(Coordinate) if c.location == location_ref), None)

    def colours(self, order: int) -> list[Colour]:
        return [c for c in self._of_type(Colour) if c.order_value() == order]

    def colour(self, order: int, position: int, language: Language) -> Optional[Colour]:
        location_ref = LocationKey(order, position).encode()
        return next(
            (
                c for c in self._of_type(Colour)
                if c.location == location_ref and c.language == language
            ),
            None,
        )

    def characters(self, language: Language) -> list[Character]:
        return [c for c in self._of_type(Character) if c.language == language]

    # ==========================================================================
    # Cross-Cutting Queries
    # ==========================================================================

    def slice(self, order: int, position: int) -> list[Entry]:
        """
        The fiber over one cell: every entry whose derived order AND derived
        position both match. Typically Location, Term, Coordinate and Colour(s).
        """
        return [
            e for e in self._entries
            if entry_order(e) == order and entry_position(e) == position
        ]

    def isomorphic_terms(self, order: int, position: int) -> list[tuple[Term, Character]]:
        """
        Terms at one Location paired with their Characters.

        Terms whose Character cannot be found are skipped.
        """
        pairs = []
        for term in self.terms_at_location(LocationKey(order, position).encode()):
            character = self.get_character(term.character)
            if character is not None:
                pairs.append((term, character))
        return pairs

    # ==========================================================================
    # Link Queries
    # ==========================================================================

    def _resolve_term(self, entry_id: Optional[str]) -> Optional[Term]:
        """
        Term standing at a link endpoint.

        The endpoint is either a Term ID or a Location ID; a Location
        resolves to the first Term placed on it.
        """
        if entry_id is None:
            return None
        entry = self.get_entry(entry_id)
        if isinstance(entry, Term):
            return entry
        if isinstance(entry, Location):
            placed = self.terms_at_location(entry.id)
            return placed[0] if placed else None
        return None

    def connectives(
        self,
        order: int,
        base_position: Optional[int] = None,
        target_position: Optional[int] = None,
    ) -> list[Link]:
        """
        Connective links within an order.

        Three stages: kind match, endpoint resolution to Terms, then
        order and optional position match on both Terms. A connective
        whose endpoint doesn't resolve to a Term is excluded.

        Parameters
        ----------
        order : int
            Both endpoint Terms must belong to this order
        base_position : int, optional
            Required position of the base Term
        target_position : int, optional
            Required position of the target Term
        """
        result = []
        for link in self._links:
            if not link.is_connective():
                continue

            base_term = self._resolve_term(link.base_single())
            target_term = self._resolve_term(link.target_single())
            if base_term is None or target_term is None:
                continue

            if base_term.order_value() != order or target_term.order_value() != order:
                continue
            if base_position is not None and base_term.position_value() != base_position:
                continue
            if target_position is not None and target_term.position_value() != target_position:
                continue

            result.append(link)
        return result

    def connectives_for_term(self, term_id: str) -> list[Link]:
        """Connectives with the Term (or the Location it stands on) at either end."""
        endpoints = {term_id}
        term = self.get_entry(term_id)
        if isinstance(term, Term):
            endpoints.add(term.location)

        return [
            link for link in self._links
            if link.is_connective()
            and (link.base_single() in endpoints or link.target_single() in endpoints)
        ]

    def lines(self, order: int) -> list[Link]:
        """
        Line links whose base Coordinate belongs to ``order``.

        Only the base endpoint is checked; a line from a coordinate of this
        order to a coordinate of another order is still returned.
        """
        result = []
        for link in self._links:
            if link.link_type != LinkType.LINE:
                continue
            base = self.get_entry(link.base_single()) if link.base_single() else None
            if isinstance(base, Coordinate) and base.order_value() == order:
                result.append(link)
        return result

    # -------------------- Link Resolution --------------------

    def link_base(self, link: Link) -> Optional[Entry]:
        base_id = link.base_single()
        return self.get_entry(base_id) if base_id is not None else None

    def link_target(self, link: Link) -> Optional[Entry]:
        target_id = link.target_single()
        return self.get_entry(target_id) if target_id is not None else None

    def link_order(self, link: Link) -> Optional[int]:
        """Order of a link, derived from its base entry."""
        base = self.link_base(link)
        return entry_order(base) if base is not None else None

    def link_base_position(self, link: Link) -> Optional[int]:
        base = self.link_base(link)
        return entry_position(base) if base is not None else None

    def link_target_position(self, link: Link) -> Optional[int]:
        target = self.link_target(link)
        return entry_position(target) if target is not None else None

    def _endpoint_coordinate(self, entry: Optional[Entry]) -> Optional[Coordinate]:
        if entry is None:
            return None
        if isinstance(entry, Coordinate):
            return entry
        order, position = entry_order(entry), entry_position(entry)
        if order is None or position is None:
            return None
        return self.coordinate(order, position)

    def link_base_coordinate(self, link: Link) -> Optional[Coordinate]:
        """
        Coordinate at the base of a link.

        Line bases are Coordinates already; for any other endpoint the
        Coordinate at the same order and position is looked up.
        """
        return self._endpoint_coordinate(self.link_base(link))

    def link_target_coordinate(self, link: Link) -> Optional[Coordinate]:
        return self._endpoint_coordinate(self.link_target(link))

    def link_character(self, link: Link) -> Optional[Character]:
        character_id = link.character_id()
        return self.get_character(character_id) if character_id is not None else None

    def corresponding_links(self, link: Link) -> list[Link]:
        """
        Links spanning the same cell pair as ``link``, in either direction.

        Matches a Connective to the Line drawn between the same two
        positions and vice versa. The link itself is excluded. Returns an
        empty list when the link's endpoints can't be resolved.
        """
        order = self.link_order(link)
        base_position = self.link_base_position(link)
        target_position = self.link_target_position(link)
        if order is None or base_position is None or target_position is None:
            return []

        wanted = {(base_position, target_position), (target_position, base_position)}
        result = []
        for other in self._links:
            if other.id == link.id:
                continue
            other_base = self.link_base(other)
            other_target = self.link_target(other)
            if other_base is None or other_target is None:
                continue
            if entry_order(other_base) != order or entry_order(other_target) != order:
                continue
            if (entry_position(other_base), entry_position(other_target)) in wanted:
                result.append(other)
        return result
