"""
Entry Model
===========

Entry types for the property graph.

Anchor types are the fundamental objects everything else maps TO:
- Order: the system level (1-12)
- Position: abstract "n-th place" (1-12)
- Location: the pullback of Order × Position

Dependent entries reference an anchor by identifier:
- Order-level entries (SystemName, CoherenceAttribute, TermDesignation,
  ConnectiveDesignation) reference an Order
- Location-level entries (Term, Coordinate, Colour) reference a Location

Character is reusable semantic content referenced by Terms and by the tag
of Connective links.

``Entry`` is the closed union of all eleven variants. Classification and
order/position extraction are plain functions matching over that closed
set; nothing is inferred from content.
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from shapely.geometry import Point

from systematics.core import identifiers as ids
from systematics.core.language import Language


STANDARD_NAMES: dict[int, str] = {
    1: "Monad",
    2: "Dyad",
    3: "Triad",
    4: "Tetrad",
    5: "Pentad",
    6: "Hexad",
    7: "Heptad",
    8: "Octad",
    9: "Ennead",
    10: "Decad",
    11: "Undecad",
    12: "Dodecad",
}
"""Standard system name per order value."""


def standard_name(order: int) -> Optional[str]:
    """Standard name for an order value, e.g. 3 -> "Triad"."""
    return STANDARD_NAMES.get(order)


def order_for_name(name: str) -> Optional[int]:
    """Reverse of ``standard_name``, case-insensitive."""
    wanted = name.strip().lower()
    for order, candidate in STANDARD_NAMES.items():
        if candidate.lower() == wanted:
            return order
    return None


def _require_order(value: int) -> None:
    if not ids.in_range(value):
        raise ValueError(f"order must be in [{ids.MIN_VALUE}, {ids.MAX_VALUE}], got {value}")


def _require_location(order: int, position: int) -> None:
    if not ids.is_valid_location(order, position):
        raise ValueError(
            f"location ({order}, {position}) requires 1 <= position <= order <= {ids.MAX_VALUE}"
        )


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# =============================================================================
# Geometry
# =============================================================================

class Point3d(_Frozen):
    """3D point used for coordinate layout."""

    x: float
    y: float
    z: float = 0.0

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_shapely(self) -> Point:
        return Point(self.x, self.y, self.z)

    def __repr__(self) -> str:
        return f"Point3d({self.x}, {self.y}, {self.z})"


# =============================================================================
# Anchor Types
# =============================================================================

class Order(_Frozen):
    """The system level. Order-level entries reference this by ``order_<value>``."""

    kind: Literal["order"] = "order"
    id: str
    value: int

    @classmethod
    def new(cls, value: int) -> "Order":
        _require_order(value)
        return cls(id=ids.order_id(value), value=value)

    def standard_name(self) -> Optional[str]:
        return standard_name(self.value)


class Position(_Frozen):
    """
    Abstract "n-th place", independent of any order.

    Enables queries such as "all first positions across every order".
    """

    kind: Literal["position"] = "position"
    id: str
    value: int

    @classmethod
    def new(cls, value: int) -> "Position":
        if not ids.in_range(value):
            raise ValueError(
                f"position must be in [{ids.MIN_VALUE}, {ids.MAX_VALUE}], got {value}"
            )
        return cls(id=ids.position_id(value), value=value)


class Location(_Frozen):
    """
    The pullback of Order × Position.

    Holds the Order and Position reference identifiers, not their values.
    A Location only exists where 1 <= position <= order.
    """

    kind: Literal["location"] = "location"
    id: str
    order: str
    """References an Order entry ID."""
    position: str
    """References a Position entry ID."""

    @classmethod
    def new(cls, order: int, position: int) -> "Location":
        _require_location(order, position)
        return cls(
            id=ids.location_id(order, position),
            order=ids.order_id(order),
            position=ids.position_id(position),
        )

    def order_value(self) -> Optional[int]:
        return ids.parse_order_ref(self.order)

    def position_value(self) -> Optional[int]:
        return ids.parse_position_ref(self.position)


# =============================================================================
# Semantic Content
# =============================================================================

class Character(_Frozen):
    """
    Semantic content, independent of structural position.

    The same Character can be referenced by several Terms or Connective tags.
    """

    kind: Literal["character"] = "character"
    id: str
    language: Language
    """The vocabulary this value belongs to."""
    value: str
    """The semantic value, e.g. "Will" or "Act1"."""

    @classmethod
    def auto(cls, language: Language, value: str) -> "Character":
        """Create a Character with id ``char_<language>_<slug>``."""
        return cls(id=ids.character_id(language.value, value), language=language, value=value)


# =============================================================================
# Order-Level Entries
# =============================================================================

class _OrderReferenced(_Frozen):
    id: str
    order: str
    """References an Order entry ID."""
    value: str

    def order_value(self) -> Optional[int]:
        return ids.parse_order_ref(self.order)


class SystemName(_OrderReferenced):
    """Human-readable name of a system order, e.g. Order 3 is "Triad"."""

    kind: Literal["system_name"] = "system_name"

    @classmethod
    def for_order(cls, order: int, value: str) -> "SystemName":
        return cls(id=f"system_{order}", order=ids.order_id(order), value=value)


class CoherenceAttribute(_OrderReferenced):
    """Coherence quality of an order, e.g. Order 3 has "Dynamism"."""

    kind: Literal["coherence_attribute"] = "coherence_attribute"

    @classmethod
    def for_order(cls, order: int, value: str) -> "CoherenceAttribute":
        return cls(id=f"coherence_{order}", order=ids.order_id(order), value=value)


class TermDesignation(_OrderReferenced):
    """What the terms of an order are called, e.g. Order 3 terms are "Impulses"."""

    kind: Literal["term_designation"] = "term_designation"

    @classmethod
    def for_order(cls, order: int, value: str) -> "TermDesignation":
        return cls(id=f"term_des_{order}", order=ids.order_id(order), value=value)


class ConnectiveDesignation(_OrderReferenced):
    """What the connectives of an order are called, e.g. Order 3 connectives are "Acts"."""

    kind: Literal["connective_designation"] = "connective_designation"

    @classmethod
    def for_order(cls, order: int, value: str) -> "ConnectiveDesignation":
        return cls(id=f"conn_des_{order}", order=ids.order_id(order), value=value)


# =============================================================================
# Location-Level Entries
# =============================================================================

class _LocationReferenced(_Frozen):
    id: str
    location: str
    """References a Location entry ID."""

    def order_value(self) -> Optional[int]:
        return ids.parse_location_ref(self.location)[0]

    def position_value(self) -> Optional[int]:
        return ids.parse_location_ref(self.location)[1]


class Term(_LocationReferenced):
    """A Character placed at a Location."""

    kind: Literal["term"] = "term"
    character: str
    """ID of the referenced Character."""

    @classmethod
    def at(cls, order: int, position: int, character: str) -> "Term":
        _require_location(order, position)
        return cls(
            id=f"term_{order}_{position}",
            location=ids.location_id(order, position),
            character=character,
        )


class Coordinate(_LocationReferenced):
    """A 3D point at a Location."""

    kind: Literal["coordinate"] = "coordinate"
    value: Point3d

    @classmethod
    def at(cls, order: int, position: int, value: Point3d) -> "Coordinate":
        _require_location(order, position)
        return cls(
            id=f"coord_{order}_{position}",
            location=ids.location_id(order, position),
            value=value,
        )


class Colour(_LocationReferenced):
    """A colour at a Location, one per representation kind."""

    kind: Literal["colour"] = "colour"
    language: Language
    """Representation kind (Hex or Name)."""
    value: str

    @classmethod
    def at(cls, order: int, position: int, language: Language, value: str) -> "Colour":
        _require_location(order, position)
        return cls(
            id=f"colour_{order}_{position}_{language.value}",
            location=ids.location_id(order, position),
            language=language,
            value=value,
        )


# =============================================================================
# Entry Sum Type
# =============================================================================

Entry = Annotated[
    Union[
        Order,
        Position,
        Location,
        SystemName,
        CoherenceAttribute,
        TermDesignation,
        ConnectiveDesignation,
        Term,
        Colour,
        Coordinate,
        Character,
    ],
    Field(discriminator="kind"),
]
"""Any graph entry. Parse raw dicts with ``ENTRY_ADAPTER``."""

ENTRY_ADAPTER: TypeAdapter = TypeAdapter(Entry)

ANCHOR_TYPES = (Order, Position, Location)
ORDER_LEVEL_TYPES = (SystemName, CoherenceAttribute, TermDesignation, ConnectiveDesignation)
LOCATION_LEVEL_TYPES = (Term, Colour, Coordinate)
SEMANTIC_TYPES = (Character,)
ENTRY_TYPES = ANCHOR_TYPES + ORDER_LEVEL_TYPES + LOCATION_LEVEL_TYPES + SEMANTIC_TYPES


def entry_type(entry: Entry) -> str:
    """Variant name, e.g. "Term"."""
    return type(entry).__name__


def entry_order(entry: Entry) -> Optional[int]:
    """
    Order value of an entry, if it has one.

    Orders return their own value. Locations and every dependent entry
    derive it from their reference identifier. Positions and Characters
    have no order.
    """
    if isinstance(entry, Order):
        return entry.value
    if isinstance(entry, (Location,) + ORDER_LEVEL_TYPES + LOCATION_LEVEL_TYPES):
        return entry.order_value()
    return None


def entry_position(entry: Entry) -> Optional[int]:
    """
    Position value of an entry, if it has one.

    Only Position, Location and location-level entries have a position.
    """
    if isinstance(entry, Position):
        return entry.value
    if isinstance(entry, (Location,) + LOCATION_LEVEL_TYPES):
        return entry.position_value()
    return None


def is_anchor(entry: Entry) -> bool:
    return isinstance(entry, ANCHOR_TYPES)


def is_order_level(entry: Entry) -> bool:
    return isinstance(entry, ORDER_LEVEL_TYPES)


def is_location_level(entry: Entry) -> bool:
    return isinstance(entry, LOCATION_LEVEL_TYPES)


def is_semantic(entry: Entry) -> bool:
    return isinstance(entry, SEMANTIC_TYPES)
