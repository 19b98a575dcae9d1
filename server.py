"""
Systematics Graph Server
========================
Read-only FastAPI transport over the reference property graph.

The template graph is built once at startup; every request works on its
own snapshot of it.

Endpoints:
- GET /api/graph - Entry and link counts
- GET /api/entries, /api/links - Raw entries and links
- GET /api/orders, /api/positions, /api/locations - Anchors
- GET /api/systems/... - Per-order views, terms, connectives, lines, network
- GET /api/terms/..., /api/slices/... - Location-level content
- GET /api/characters, /api/languages - Vocabularies
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from systematics.config import settings
from systematics.core import identifiers as ids
from systematics.core.entries import Character, entry_type, order_for_name
from systematics.core.export import link_geojson, network_to_dict, order_network
from systematics.core.graph import Graph
from systematics.core.language import Language
from systematics.core.links import LinkType
from systematics.core.views import LinkView, SliceView, SystemView, entry_to_dict, term_to_dict
from systematics.data import build_graph


logger = logging.getLogger("systematics.server")


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


# ============================================================================
# App Lifecycle
# ============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the template graph on startup."""
    logger.info("Systematics server starting")
    app.state.template = build_graph()
    yield
    logger.info("Systematics server shutting down")


app = FastAPI(title="Systematics Graph", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_graph(request: Request) -> Graph:
    """Per-request snapshot of the template graph."""
    return request.app.state.template.snapshot()


# ============================================================================
# Helpers
# ============================================================================

def _not_found(detail: str) -> HTTPException:
    return HTTPException(status_code=404, detail=detail)


def _require_order(order: int) -> None:
    if not ids.in_range(order):
        raise _not_found(f"Order out of range: {order}")


def _require_position(position: int) -> None:
    if not ids.in_range(position):
        raise _not_found(f"Position out of range: {position}")


def _require_location(order: int, position: int) -> None:
    if not ids.is_valid_location(order, position):
        raise _not_found(f"No location at order {order}, position {position}")


def _language(name: Optional[str]) -> Optional[Language]:
    """Parse an optional language query parameter; unknown names are a 404."""
    if name is None:
        return None
    language = Language.parse(name)
    if language is None:
        raise _not_found(f"Unknown language: {name}")
    return language


def _link_dict(link, graph: Graph) -> Dict[str, Any]:
    data = LinkView(link, graph).to_dict()
    data["geometry"] = link_geojson(graph, link)
    return data


# ============================================================================
# Graph
# ============================================================================

@app.get("/api/graph")
async def get_graph_summary(graph: Graph = Depends(get_graph)):
    """Entry and link counts."""
    return {"entry_count": graph.entry_count, "link_count": graph.link_count}


@app.get("/api/entries")
async def list_entries(kind: Optional[str] = None, graph: Graph = Depends(get_graph)):
    """All entries, optionally filtered by variant name (e.g. ``Term``)."""
    entries = graph.entries
    if kind is not None:
        entries = [e for e in entries if entry_type(e).lower() == kind.lower()]
    return {"entries": [entry_to_dict(e) for e in entries]}


@app.get("/api/entries/{entry_id}")
async def get_entry(entry_id: str, graph: Graph = Depends(get_graph)):
    entry = graph.get_entry(entry_id)
    if entry is None:
        raise _not_found(f"Entry not found: {entry_id}")
    return entry_to_dict(entry)


@app.get("/api/links")
async def list_links(link_type: Optional[LinkType] = None, graph: Graph = Depends(get_graph)):
    links = graph.links
    if link_type is not None:
        links = [link for link in links if link.link_type == link_type]
    return {"links": [LinkView(link, graph).to_dict() for link in links]}


@app.get("/api/links/{link_id}")
async def get_link(link_id: str, graph: Graph = Depends(get_graph)):
    link = graph.get_link(link_id)
    if link is None:
        raise _not_found(f"Link not found: {link_id}")
    return _link_dict(link, graph)


@app.get("/api/links/{link_id}/corresponding")
async def get_corresponding_links(link_id: str, graph: Graph = Depends(get_graph)):
    """Links spanning the same position pair as the given link."""
    link = graph.get_link(link_id)
    if link is None:
        raise _not_found(f"Link not found: {link_id}")
    return {
        "link_id": link_id,
        "links": [LinkView(other, graph).to_dict() for other in graph.corresponding_links(link)],
    }


# ============================================================================
# Anchors
# ============================================================================

@app.get("/api/orders")
async def list_orders(graph: Graph = Depends(get_graph)):
    return {"orders": [entry_to_dict(o) for o in graph.orders()]}


@app.get("/api/orders/{order}")
async def get_order(order: int, graph: Graph = Depends(get_graph)):
    _require_order(order)
    entry = graph.order(order)
    if entry is None:
        raise _not_found(f"Order not found: {order}")
    return entry_to_dict(entry)


@app.get("/api/orders/{order}/locations")
async def get_order_locations(order: int, graph: Graph = Depends(get_graph)):
    _require_order(order)
    return {"order": order, "locations": [entry_to_dict(loc) for loc in graph.locations_for_order(order)]}


@app.get("/api/positions")
async def list_positions(graph: Graph = Depends(get_graph)):
    return {"positions": [entry_to_dict(p) for p in graph.positions()]}


@app.get("/api/positions/{position}")
async def get_position(position: int, graph: Graph = Depends(get_graph)):
    _require_position(position)
    entry = graph.position(position)
    if entry is None:
        raise _not_found(f"Position not found: {position}")
    return entry_to_dict(entry)


@app.get("/api/positions/{position}/locations")
async def get_position_locations(position: int, graph: Graph = Depends(get_graph)):
    """Locations at one position across every order."""
    _require_position(position)
    return {
        "position": position,
        "locations": [entry_to_dict(loc) for loc in graph.locations_for_position(position)],
    }


@app.get("/api/locations")
async def list_locations(graph: Graph = Depends(get_graph)):
    return {"locations": [entry_to_dict(loc) for loc in graph.locations()]}


@app.get("/api/locations/{order}/{position}")
async def get_location(order: int, position: int, graph: Graph = Depends(get_graph)):
    _require_location(order, position)
    location = graph.location(order, position)
    if location is None:
        raise _not_found(f"Location not found: {order}/{position}")
    return entry_to_dict(location)


# ============================================================================
# Systems
# ============================================================================

@app.get("/api/systems")
async def list_systems(graph: Graph = Depends(get_graph)):
    """Order-level metadata for every order present."""
    return {"systems": [SystemView(o.value, graph).summary() for o in graph.orders()]}


@app.get("/api/systems/by-name/{name}")
async def get_system_by_name(name: str, include_slices: bool = False, graph: Graph = Depends(get_graph)):
    order = order_for_name(name)
    if order is None:
        raise _not_found(f"Unknown system name: {name}")
    return SystemView(order, graph).to_dict(include_slices=include_slices)


@app.get("/api/systems/{order}")
async def get_system(order: int, include_slices: bool = False, graph: Graph = Depends(get_graph)):
    _require_order(order)
    return SystemView(order, graph).to_dict(include_slices=include_slices)


@app.get("/api/systems/{order}/terms")
async def get_system_terms(
    order: int,
    language: Optional[str] = None,
    graph: Graph = Depends(get_graph),
):
    _require_order(order)
    terms = graph.terms(order, _language(language))
    return {"order": order, "terms": [term_to_dict(t, graph) for t in terms]}


@app.get("/api/systems/{order}/connectives")
async def get_system_connectives(
    order: int,
    base_position: Optional[int] = None,
    target_position: Optional[int] = None,
    graph: Graph = Depends(get_graph),
):
    _require_order(order)
    links = graph.connectives(order, base_position, target_position)
    return {"order": order, "connectives": [LinkView(link, graph).to_dict() for link in links]}


@app.get("/api/systems/{order}/lines")
async def get_system_lines(order: int, graph: Graph = Depends(get_graph)):
    _require_order(order)
    return {"order": order, "lines": [_link_dict(link, graph) for link in graph.lines(order)]}


@app.get("/api/systems/{order}/network")
async def get_system_network(order: int, graph: Graph = Depends(get_graph)):
    """Node/edge export of one order for drawing."""
    _require_order(order)
    return network_to_dict(order_network(graph, order))


# ============================================================================
# Terms & Slices
# ============================================================================

@app.get("/api/terms/{term_id}/connectives")
async def get_term_connectives(term_id: str, graph: Graph = Depends(get_graph)):
    links = graph.connectives_for_term(term_id)
    return {"term_id": term_id, "connectives": [LinkView(link, graph).to_dict() for link in links]}


@app.get("/api/terms/{order}/{position}")
async def get_term(order: int, position: int, graph: Graph = Depends(get_graph)):
    _require_location(order, position)
    term = graph.term(order, position)
    if term is None:
        raise _not_found(f"No term at order {order}, position {position}")
    return term_to_dict(term, graph)


@app.get("/api/slices/{order}/{position}")
async def get_slice(order: int, position: int, graph: Graph = Depends(get_graph)):
    """Everything stored at one order + position."""
    _require_location(order, position)
    return SliceView(order, position, graph).to_dict()


# ============================================================================
# Vocabularies
# ============================================================================

@app.get("/api/characters")
async def list_characters(language: Optional[str] = None, graph: Graph = Depends(get_graph)):
    parsed = _language(language)
    if parsed is None:
        characters = [e for e in graph.entries if isinstance(e, Character)]
    else:
        characters = graph.characters(parsed)
    return {"characters": [c.model_dump(mode="json") for c in characters]}


def _language_dict(language: Language) -> Dict[str, Any]:
    return {
        "value": language.value,
        "label": language.label,
        "is_vocabulary": language.is_vocabulary(),
        "is_representation": language.is_representation(),
    }


@app.get("/api/languages")
async def list_languages() -> Dict[str, List[Dict[str, Any]]]:
    return {"languages": [_language_dict(language) for language in Language]}


@app.get("/api/languages/vocabularies")
async def list_vocabularies() -> Dict[str, List[Dict[str, Any]]]:
    """Languages usable for Character entries."""
    return {"languages": [_language_dict(language) for language in Language.vocabularies()]}


# ============================================================================
# Main
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    _configure_logging(settings.log_level)
    uvicorn.run(app, host=settings.host, port=settings.port)
