"""
Identifier Convention
=====================

String-encoded references between entries.

Entries never hold each other directly. A Term points at its Location by
the string ``loc_3_1``, a SystemName points at its Order by ``order_3``.
Every derived order/position query in the graph depends on this encoding,
so encoding and decoding live in one place.

Decoding is permissive: a reference with the wrong prefix or a non-numeric
suffix decodes to ``None`` rather than raising.

Formats:
- Order:      order_<value>
- Position:   position_<value>
- Location:   loc_<order>_<position>
- Line:       line_<baseId>_<targetId>
- Connective: conn_<baseId>_<targetId>
"""

from __future__ import annotations

import re
from typing import NamedTuple, Optional


ORDER_PREFIX = "order_"
POSITION_PREFIX = "position_"
LOCATION_PREFIX = "loc_"
LINE_PREFIX = "line_"
CONNECTIVE_PREFIX = "conn_"

MIN_VALUE = 1
MAX_VALUE = 12
"""Orders and positions both live in [1, 12]."""

_NUMERIC = re.compile(r"[0-9]+")


def _parse_number(text: Optional[str]) -> Optional[int]:
    """Parse an unsigned decimal suffix, or None when it isn't one."""
    if text is None or not _NUMERIC.fullmatch(text):
        return None
    return int(text)


def _strip_prefix(ref: str, prefix: str) -> Optional[str]:
    if not isinstance(ref, str) or not ref.startswith(prefix):
        return None
    return ref[len(prefix):]


def in_range(value: Optional[int]) -> bool:
    """True when value is a valid order or position value."""
    return value is not None and MIN_VALUE <= value <= MAX_VALUE


def is_valid_location(order: int, position: int) -> bool:
    """True when (order, position) names a cell that exists: 1 <= position <= order <= 12."""
    return in_range(order) and in_range(position) and position <= order


# =============================================================================
# Encoding
# =============================================================================

def order_id(order: int) -> str:
    return f"{ORDER_PREFIX}{order}"


def position_id(position: int) -> str:
    return f"{POSITION_PREFIX}{position}"


def location_id(order: int, position: int) -> str:
    return f"{LOCATION_PREFIX}{order}_{position}"


def line_id(base: str, target: str) -> str:
    return f"{LINE_PREFIX}{base}_{target}"


def connective_id(base: str, target: str) -> str:
    return f"{CONNECTIVE_PREFIX}{base}_{target}"


def slugify(value: str) -> str:
    """Lower-case a value and replace spaces with underscores."""
    return value.lower().replace(" ", "_")


def character_id(language: str, value: str) -> str:
    """Auto identifier for a Character: ``char_<language>_<slug>``."""
    return f"char_{language.lower()}_{slugify(value)}"


# =============================================================================
# Decoding
# =============================================================================

def parse_order_ref(ref: str) -> Optional[int]:
    """Decode ``order_<value>``."""
    return _parse_number(_strip_prefix(ref, ORDER_PREFIX))


def parse_position_ref(ref: str) -> Optional[int]:
    """Decode ``position_<value>``."""
    return _parse_number(_strip_prefix(ref, POSITION_PREFIX))


def parse_location_ref(ref: str) -> tuple[Optional[int], Optional[int]]:
    """
    Decode ``loc_<order>_<position>`` into its two values.

    The suffix is split on underscores; the first part is the order and the
    second the position. Each side decodes independently, so ``loc_3_x``
    yields ``(3, None)``.
    """
    suffix = _strip_prefix(ref, LOCATION_PREFIX)
    if suffix is None:
        return None, None
    parts = suffix.split("_")
    order = _parse_number(parts[0])
    position = _parse_number(parts[1]) if len(parts) > 1 else None
    return order, position


# =============================================================================
# Typed Keys
# =============================================================================

class OrderKey(NamedTuple):
    """Typed form of an Order reference."""

    value: int

    def encode(self) -> str:
        return order_id(self.value)

    @classmethod
    def decode(cls, ref: str) -> Optional["OrderKey"]:
        value = parse_order_ref(ref)
        return cls(value) if value is not None else None


class PositionKey(NamedTuple):
    """Typed form of a Position reference."""

    value: int

    def encode(self) -> str:
        return position_id(self.value)

    @classmethod
    def decode(cls, ref: str) -> Optional["PositionKey"]:
        value = parse_position_ref(ref)
        return cls(value) if value is not None else None


class LocationKey(NamedTuple):
    """Typed form of a Location reference."""

    order: int
    position: int

    def encode(self) -> str:
        return location_id(self.order, self.position)

    def is_valid(self) -> bool:
        return is_valid_location(self.order, self.position)

    @classmethod
    def decode(cls, ref: str) -> Optional["LocationKey"]:
        """Decode a full location reference; None unless both parts parse."""
        order, position = parse_location_ref(ref)
        if order is None or position is None:
            return None
        return cls(order, position)
