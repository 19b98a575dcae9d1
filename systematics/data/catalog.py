"""
Reference Catalog
=================

Static tables for orders 1-12: layout coordinates, colour palette,
order-level metadata, canonical vocabulary and connective tags.

Everything here is plain data; ``systematics.data.builder`` turns it into
graph entries and links.
"""

import math

ORDERS = range(1, 13)

# =============================================================================
# Colour Palette
# =============================================================================

PALETTE: list[tuple[str, str]] = [
    ("#FF0000", "Red"),
    ("#0000FF", "Blue"),
    ("#FFFF00", "Yellow"),
    ("#099902", "Green"),
    ("#9900FF", "Purple"),
    ("#FFA500", "Orange"),
    ("#00FFFF", "Light Blue"),
    ("#8B4513", "Brown"),
    ("#FF00FF", "Magenta"),
    ("#FFFFFF", "White"),
    ("#C0C0C0", "Silver"),
    ("#FFD700", "Gold"),
]
"""(hex, name) per position. An order uses the first ``order`` entries."""


def colours_for(order: int) -> list[tuple[str, str]]:
    return PALETTE[:order]


# =============================================================================
# Coordinates
# =============================================================================

_R = math.sqrt(0.5)

COORDINATES: dict[int, list[tuple[float, float, float]]] = {
    1: [(0.0, 0.0, 0.0)],
    2: [
        (-1.0, 0.0, 0.0),  # Essence
        (1.0, 0.0, 0.0),   # Existence
    ],
    3: [
        (0.0, 1.0, 0.0),   # Will
        (0.0, -1.0, 0.0),  # Function
        (1.0, 0.0, 0.0),   # Being
    ],
    4: [
        (0.0, 1.0, 0.0),   # Ideal
        (0.0, -1.0, 0.0),  # Ground
        (1.0, 0.0, 0.0),   # Directive
        (-1.0, 0.0, 0.0),  # Instrumental
    ],
    5: [
        (-0.75, 0.0, 0.0),  # Quintessence
        (1.0, -0.75, 0.0),  # Source
        (0.0, 0.5, 0.0),    # Higher Potential
        (0.0, -0.5, 0.0),   # Lower Potential
        (1.0, 0.75, 0.0),   # Purpose
    ],
    6: [
        (-0.866, -0.5, 0.0),
        (0.866, -0.5, 0.0),
        (0.0, 1.0, 0.0),
        (-0.866, 0.5, 0.0),
        (0.866, 0.5, 0.0),
        (0.0, -1.0, 0.0),
    ],
    7: [
        (0.0, 1.0, 0.0),
        (-0.433884, -0.900969, 0.0),
        (0.974370, -0.222521, 0.0),
        (0.781831, 0.623489, 0.0),
        (0.433884, -0.900969, 0.0),
        (-0.974370, -0.222521, 0.0),
        (-0.781831, 0.623489, 0.0),
    ],
    8: [
        (-_R, _R, 0.0),
        (_R, -_R, 0.0),
        (_R, _R, 0.0),
        (-_R, -_R, 0.0),
        (0.0, 1.0, 0.0),
        (1.0, 0.0, 0.0),
        (-1.0, 0.0, 0.0),
        (0.0, -1.0, 0.0),
    ],
    9: [
        (-0.64278760968, 0.76604444311, 0.0),
        (0.86602540378, -0.5, 0.0),
        (0.64278760968, 0.76604444311, 0.0),
        (-0.34202014333, -0.93969262079, 0.0),
        (0.0, 1.0, 0.0),
        (0.98480775301, 0.17364817767, 0.0),
        (-0.98480775301, 0.17364817767, 0.0),
        (0.34202014333, -0.93969262079, 0.0),
        (-0.86602540378, -0.5, 0.0),
    ],
    10: [
        (-0.80901699437, 0.58778525229, 0.0),
        (0.80901699437, -0.58778525229, 0.0),
        (0.30901699437, 0.95105651630, 0.0),
        (-0.30901699437, -0.95105651630, 0.0),
        (-0.30901699437, 0.95105651630, 0.0),
        (0.80901699437, 0.58778525229, 0.0),
        (-1.0, 0.0, 0.0),
        (0.30901699437, -0.95105651630, 0.0),
        (1.0, 0.0, 0.0),
        (-0.80901699437, -0.58778525229, 0.0),
    ],
    11: [
        (-0.909632, 0.415415, 0.0),
        (0.755750, -0.654861, 0.0),
        (0.54064081745, 0.84125353283, 0.0),
        (-0.281733, -0.959493, 0.0),
        (-0.54064081745, 0.84125353283, 0.0),
        (0.909632, 0.415415, 0.0),
        (-0.989821, -0.142315, 0.0),
        (0.281733, -0.959493, 0.0),
        (0.989821, -0.142315, 0.0),
        (-0.755750, -0.654861, 0.0),
        (0.0, 1.0, 0.0),
    ],
    12: [
        (-0.5, 0.86602540378, 0.0),
        (0.86602540378, -0.5, 0.0),
        (0.86602540378, 0.5, 0.0),
        (-0.86602540378, -0.5, 0.0),
        (1.0, 0.0, 0.0),
        (0.5, 0.86602540378, 0.0),
        (0.0, -1.0, 0.0),
        (-0.5, -0.86602540378, 0.0),
        (0.0, 1.0, 0.0),
        (0.5, -0.86602540378, 0.0),
        (-1.0, 0.0, 0.0),
        (-0.86602540378, 0.5, 0.0),
    ],
}
"""Layout point per position, indexed position - 1."""


# =============================================================================
# Order-Level Metadata
# =============================================================================

NEEDS_RESEARCH = "Needs Research"

COHERENCES: dict[int, str] = {
    1: "Universality",
    2: "Complementarity",
    3: "Dynamism",
    4: "Activity Field",
    5: "Significance and Potential",
    6: "Coalescence",
    7: "Generation",
    8: "Self-Sufficiency",
    9: "Transformation",
    10: "Intrinsic Harmony",
    11: "Articulate Symmetry",
    12: "Perfection",
}

TERM_DESIGNATIONS: dict[int, str] = {
    1: "Totality",
    2: "Poles",
    3: "Impulses",
    4: "Sources",
    5: "Limits",
    6: "Laws",
    7: "States",
    8: "Elements",
    **{order: NEEDS_RESEARCH for order in range(9, 13)},
}

CONNECTIVE_DESIGNATIONS: dict[int, str] = {
    1: "Unity",
    2: "Force",
    3: "Acts",
    4: "Interplays",
    5: "Mutualities",
    6: "Steps",
    7: "Intervals",
    8: "Components",
    **{order: NEEDS_RESEARCH for order in range(9, 13)},
}


# =============================================================================
# Canonical Vocabulary
# =============================================================================

TERM_CHARACTERS: dict[int, list[str]] = {
    1: ["Unity"],
    2: ["Essence", "Existence"],
    3: ["Will", "Function", "Being"],
    4: ["Ideal", "Ground", "Directive", "Instrumental"],
    5: ["Quintessence", "Source", "Higher Potential", "Lower Potential", "Purpose"],
    6: ["Priorities", "Criteria", "Values", "Resources", "Options", "Facts"],
    7: ["Insight", "Application", "Design", "Research", "Synthesis", "Delivery", "Value"],
    8: [
        "Inherent Values",
        "Critical Functions",
        "Organisational Modes",
        "Necessary Resourcing",
        "Intrinsic Nature",
        "Smallest Significant Holon",
        "Integrative Totality",
        "Supportive Platform",
    ],
    **{order: [f"Term {i}" for i in range(1, order + 1)] for order in range(9, 13)},
}
"""Term Character value per position, indexed position - 1."""

ACTS = ["Act1", "Act2", "Act3"]

INTERPLAYS = [
    "Receptive Regard",
    "Effectual Compatibility",
    "Motivational Imperative",
    "Demonstrable Activity",
    "Material Mastery",
    "Technical Power",
]

MUTUALITIES = [
    "Range of Potential",
    "Range of Significance",
    "Aspiration",
    "Operation",
    "Output",
    "Input",
    "Qualitative Match",
    "Quantitative Match",
    "Form",
    "Function",
]

PLACEHOLDER_PREFIXES: dict[int, str] = {
    6: "Step",
    7: "Interval",
    8: "Component",
    9: "Transmutation",
    10: "Progression",
    11: "Correlation",
    12: "Harmony",
}
"""Connective placeholder noun for the orders whose connectives are unnamed."""


def pair_count(order: int) -> int:
    """Number of unordered position pairs in an order."""
    return order * (order - 1) // 2


def placeholder_value(order: int, index: int) -> str:
    """e.g. (6, 1) -> "Step 1 Needs Research"."""
    return f"{PLACEHOLDER_PREFIXES[order]} {index} {NEEDS_RESEARCH}"


# =============================================================================
# Connective Tags
# =============================================================================

TRIAD_ACTS: list[tuple[int, int, str]] = [
    (1, 2, "Act1"),
    (2, 3, "Act2"),
    (3, 1, "Act3"),
]

TETRAD_INTERPLAYS: list[tuple[int, int, str]] = [
    (1, 2, "Motivational Imperative"),
    (3, 4, "Demonstrable Activity"),
    (4, 1, "Effectual Compatibility"),
    (3, 1, "Receptive Regard"),
    (3, 2, "Material Mastery"),
    (4, 2, "Technical Power"),
]

PENTAD_MUTUALITIES: list[tuple[int, int, str]] = [
    (3, 4, "Range of Potential"),
    (5, 2, "Range of Significance"),
    (1, 3, "Aspiration"),
    (1, 4, "Operation"),
    (3, 5, "Output"),
    (4, 2, "Input"),
    (1, 5, "Qualitative Match"),
    (1, 2, "Quantitative Match"),
    (4, 5, "Form"),
    (3, 2, "Function"),
]

NAMED_CONNECTIVES: dict[int, list[tuple[int, int, str]]] = {
    3: TRIAD_ACTS,
    4: TETRAD_INTERPLAYS,
    5: PENTAD_MUTUALITIES,
}
"""(base position, target position, Character value) per named order."""
