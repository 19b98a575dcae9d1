"""
Link Model
==========

Explicit directed relationships between entries.

A link connects base entry ID(s) to target entry ID(s). Both sides are
lists so that future morphism types can fan in or out; every query uses
only the first element of each side.

Link Types:
- LINE: Coordinate -> Coordinate (geometric edge)
- CONNECTIVE: Location -> Location (semantic edge), tag holds a Character ID
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from systematics.core import identifiers as ids


class LinkType(str, Enum):
    """Kind of relationship a link expresses."""

    LINE = "line"
    """Geometric edge between two Coordinates."""

    CONNECTIVE = "connective"
    """Semantic edge between two Locations, labelled by a Character."""


class Link(BaseModel):
    """
    A directed relationship between entry identifiers.

    Links carry no order or position of their own; those are always derived
    by resolving the endpoint entries in a Graph.

    Examples
    --------
    Geometric edge:
        Link.line("coord_3_1", "coord_3_2")

    Semantic edge labelled by a Character:
        Link.connective("loc_3_1", "loc_3_2").with_tag("char_canonical_act1")
    """

    model_config = ConfigDict(frozen=True)

    id: str
    base: Optional[tuple[str, ...]] = None
    """Entry ID(s) of the source(s)."""
    target: Optional[tuple[str, ...]] = None
    """Entry ID(s) of the target(s)."""
    link_type: LinkType
    tag: Optional[str] = None
    """Free-form payload. For connectives, a Character ID."""

    @classmethod
    def line(cls, base: str, target: str) -> "Link":
        """Line between two coordinates, id ``line_<base>_<target>``."""
        return cls(
            id=ids.line_id(base, target),
            base=(base,),
            target=(target,),
            link_type=LinkType.LINE,
        )

    @classmethod
    def connective(cls, base: str, target: str) -> "Link":
        """Connective between two locations, id ``conn_<base>_<target>``."""
        return cls(
            id=ids.connective_id(base, target),
            base=(base,),
            target=(target,),
            link_type=LinkType.CONNECTIVE,
        )

    def with_tag(self, tag: str) -> "Link":
        """Copy of this link carrying ``tag``."""
        return self.model_copy(update={"tag": tag})

    def base_single(self) -> Optional[str]:
        """First base ID, or None."""
        return self.base[0] if self.base else None

    def target_single(self) -> Optional[str]:
        """First target ID, or None."""
        return self.target[0] if self.target else None

    def bases(self) -> list[str]:
        return list(self.base or [])

    def targets(self) -> list[str]:
        return list(self.target or [])

    def is_connective(self) -> bool:
        return self.link_type == LinkType.CONNECTIVE

    def is_line(self) -> bool:
        return self.link_type == LinkType.LINE

    def character_id(self) -> Optional[str]:
        """The tag as a Character ID. Always None for Line links."""
        return self.tag if self.is_connective() else None

    def __repr__(self) -> str:
        return (
            f"Link(id={self.id}, type={self.link_type.value}, "
            f"base={self.base_single()}, target={self.target_single()})"
        )
