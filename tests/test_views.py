"""
Tests for Query Views and Geometry Export
========================================

Tests SystemView, SliceView, LinkView and the networkx/shapely exports
against the reference dataset.
"""

import json

import networkx as nx
import pytest
from shapely.geometry import LineString

from systematics.core.entries import Order, Term
from systematics.core.export import link_geojson, link_geometry, network_to_dict, order_network
from systematics.core.graph import Graph
from systematics.core.links import Link
from systematics.core.views import LinkView, SliceView, SystemView, entry_to_dict, term_to_dict
from systematics.data import build_graph


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(scope="module")
def graph() -> Graph:
    return build_graph()


# =============================================================================
# Entry Serialization
# =============================================================================

class TestEntryToDict:
    """Tests for entry_to_dict and term_to_dict."""

    def test_order(self):
        data = entry_to_dict(Order.new(4))
        assert data["id"] == "order_4"
        assert data["entry_type"] == "Order"
        assert data["standard_name"] == "Tetrad"
        assert data["is_anchor"] is True

    def test_term_derivations(self, graph):
        data = term_to_dict(graph.term(3, 2), graph)
        assert data["derived_order"] == 3
        assert data["derived_position"] == 2
        assert data["character_entry"]["value"] == "Function"

    def test_dangling_term_character(self):
        term = Term.at(3, 1, "char_missing")
        assert term_to_dict(term, Graph([term]))["character_entry"] is None


# =============================================================================
# Views
# =============================================================================

class TestSystemView:
    """Tests for SystemView."""

    def test_triad(self, graph):
        data = SystemView(3, graph).to_dict()
        assert data["name"] == "Triad"
        assert data["coherence"] == "Dynamism"
        assert len(data["terms"]) == 3
        assert len(data["connectives"]) == 3
        assert len(data["lines"]) == 3
        assert "slices" not in data

    def test_include_slices(self, graph):
        data = SystemView(3, graph).to_dict(include_slices=True)
        assert [s["position"] for s in data["slices"]] == [1, 2, 3]

    def test_links_are_connectives_then_lines(self, graph):
        links = SystemView(4, graph).links()
        assert len(links) == 12
        assert links[0].is_connective()
        assert links[-1].is_line()

    def test_missing_order_is_empty(self):
        data = SystemView(3, Graph()).to_dict()
        assert data["name"] is None
        assert data["terms"] == []

    def test_json_serializable(self, graph):
        json.dumps(SystemView(5, graph).to_dict(include_slices=True))


class TestSliceView:
    """Tests for SliceView."""

    def test_triad_first_position(self, graph):
        data = SliceView(3, 1, graph).to_dict()
        assert data["location"]["id"] == "loc_3_1"
        assert data["term"]["character_entry"]["value"] == "Will"
        assert data["coordinate"]["id"] == "coord_3_1"
        assert {c["language"] for c in data["colours"]} == {"hex", "name"}
        assert len(data["isomorphic_terms"]) == 1

    def test_missing_cell(self, graph):
        data = SliceView(3, 4, graph).to_dict()
        assert data["location"] is None
        assert data["term"] is None
        assert data["entries"] == []


class TestLinkView:
    """Tests for LinkView."""

    def test_connective(self, graph):
        data = LinkView(graph.get_link("conn_loc_3_1_loc_3_2"), graph).to_dict()
        assert data["link_type"] == "connective"
        assert data["character"]["value"] == "Act1"
        assert data["order"] == 3
        assert (data["base_position"], data["target_position"]) == (1, 2)
        assert data["base_coordinate"]["id"] == "coord_3_1"

    def test_line(self, graph):
        data = LinkView(graph.get_link("line_coord_3_1_coord_3_2"), graph).to_dict()
        assert data["character_id"] is None
        assert data["character"] is None
        assert data["target_coordinate"]["id"] == "coord_3_2"

    def test_endpoint_slices(self, graph):
        data = LinkView(graph.get_link("conn_loc_3_1_loc_3_2"), graph).to_dict()
        assert data["base_slice"]["term"]["character_entry"]["value"] == "Will"
        assert data["target_slice"]["term"]["character_entry"]["value"] == "Function"
        assert (data["target_slice"]["order"], data["target_slice"]["position"]) == (3, 2)

    def test_line_endpoint_slices(self, graph):
        data = LinkView(graph.get_link("line_coord_3_1_coord_3_2"), graph).to_dict()
        assert data["base_slice"]["coordinate"]["id"] == "coord_3_1"
        assert data["target_slice"]["location"]["id"] == "loc_3_2"

    def test_dangling_endpoint_slices(self, graph):
        data = LinkView(Link.connective("loc_13_1", "term_3_1"), graph).to_dict()
        assert data["base_slice"] is None
        assert data["target_slice"]["position"] == 1


# =============================================================================
# Export
# =============================================================================

class TestOrderNetwork:
    """Tests for the networkx export."""

    def test_triad_network(self, graph):
        G = order_network(graph, 3)
        assert isinstance(G, nx.MultiDiGraph)
        assert G.number_of_nodes() == 3
        assert G.number_of_edges() == 6
        assert G.nodes["coord_3_1"]["label"] == "Will"
        assert G.nodes["coord_3_1"]["colour"] == "#FF0000"

    def test_edges_keyed_by_link(self, graph):
        G = order_network(graph, 3)
        assert G.has_edge("coord_3_1", "coord_3_2", key="conn_loc_3_1_loc_3_2")
        assert G.edges["coord_3_1", "coord_3_2", "conn_loc_3_1_loc_3_2"]["label"] == "Act1"
        assert G.edges["coord_3_1", "coord_3_2", "line_coord_3_1_coord_3_2"]["link_type"] == "line"

    def test_monad(self, graph):
        G = order_network(graph, 1)
        assert G.number_of_nodes() == 1
        assert G.number_of_edges() == 0

    def test_empty_graph(self):
        assert order_network(Graph(), 3).number_of_nodes() == 0

    def test_to_dict(self, graph):
        data = network_to_dict(order_network(graph, 3))
        assert data["order"] == 3
        assert len(data["nodes"]) == 3
        assert len(data["edges"]) == 6
        json.dumps(data)


class TestLinkGeometry:
    """Tests for the shapely export."""

    def test_line_geometry(self, graph):
        geometry = link_geometry(graph, graph.get_link("line_coord_3_1_coord_3_2"))
        assert isinstance(geometry, LineString)
        assert geometry.length == pytest.approx(2.0)

    def test_connective_geometry(self, graph):
        geometry = link_geometry(graph, graph.get_link("conn_loc_3_3_loc_3_1"))
        assert list(geometry.coords)[0][:2] == (1.0, 0.0)

    def test_dangling_link(self, graph):
        assert link_geometry(graph, Link.line("coord_13_1", "coord_3_1")) is None
        assert link_geojson(graph, Link.line("coord_13_1", "coord_3_1")) is None

    def test_geojson(self, graph):
        data = link_geojson(graph, graph.get_link("line_coord_3_1_coord_3_2"))
        assert data["type"] == "LineString"
