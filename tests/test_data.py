"""
Tests for the Reference Dataset
===============================

Properties of the full graph for orders 1-12.
"""

import pytest

from systematics.core.entries import Character, Location, Term, entry_type
from systematics.core.graph import Graph
from systematics.core.language import Language
from systematics.data import build_graph, connective_links, line_links
from systematics.data.builder import canonical_values
from systematics.data import catalog


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(scope="module")
def graph() -> Graph:
    return build_graph()


# =============================================================================
# Anchors
# =============================================================================

class TestAnchors:
    """Tests for Orders, Positions and Locations."""

    def test_orders_and_positions(self, graph):
        assert [o.value for o in graph.orders()] == list(range(1, 13))
        assert [p.value for p in graph.positions()] == list(range(1, 13))

    def test_location_count(self, graph):
        assert len(graph.locations()) == 78

    @pytest.mark.parametrize("order", range(1, 13))
    def test_locations_for_order(self, graph, order):
        locations = graph.locations_for_order(order)
        assert [loc.position_value() for loc in locations] == list(range(1, order + 1))

    @pytest.mark.parametrize("position", range(1, 13))
    def test_locations_for_position(self, graph, position):
        assert len(graph.locations_for_position(position)) == 13 - position

    def test_missing_cells(self, graph):
        assert graph.location(3, 4) is None
        assert graph.location(13, 1) is None


# =============================================================================
# Content
# =============================================================================

class TestContent:
    """Tests for metadata, terms, geometry and characters."""

    def test_triad_metadata(self, graph):
        assert graph.system_name(3).value == "Triad"
        assert graph.coherence(3).value == "Dynamism"
        assert graph.term_designation(3).value == "Impulses"
        assert graph.connective_designation(3).value == "Acts"

    def test_higher_orders_need_research(self, graph):
        assert graph.term_designation(10).value == "Needs Research"
        assert graph.connective_designation(12).value == "Needs Research"

    def test_triad_terms(self, graph):
        values = [graph.get_character(t.character).value for t in graph.terms(3)]
        assert values == ["Will", "Function", "Being"]
        assert graph.term(3, 1).location == "loc_3_1"

    def test_pentad_term_order(self, graph):
        assert graph.get_character(graph.term(5, 1).character).value == "Quintessence"
        assert graph.get_character(graph.term(5, 5).character).value == "Purpose"

    def test_every_term_resolves(self, graph):
        for order in range(1, 13):
            terms = graph.terms(order)
            assert len(terms) == order
            for term in terms:
                assert graph.get_character(term.character) is not None, term.id

    def test_character_ids_unique(self, graph):
        ids = [e.id for e in graph.entries if isinstance(e, Character)]
        assert len(ids) == len(set(ids))

    def test_shared_character_added_once(self):
        assert list(canonical_values()).count("Function") == 1

    def test_coordinates(self, graph):
        assert graph.coordinate(3, 1).location == "loc_3_1"
        assert graph.coordinate(3, 1).value.as_tuple() == (0.0, 1.0, 0.0)
        assert len(graph.coordinates(12)) == 12

    def test_colours(self, graph):
        assert graph.colour(3, 1, Language.HEX).value == "#FF0000"
        assert graph.colour(3, 1, Language.NAME).value == "Red"
        assert graph.colour(12, 12, Language.HEX).value == "#FFD700"
        assert len(graph.colours(4)) == 8

    def test_slice_contains_core_kinds(self, graph):
        kinds = {entry_type(e) for e in graph.slice(3, 1)}
        assert {"Location", "Term", "Coordinate", "Colour"} <= kinds
        assert any(isinstance(e, Location) for e in graph.slice(3, 1))

    def test_isomorphic_terms(self, graph):
        pairs = graph.isomorphic_terms(3, 1)
        assert [(t.id, c.value) for t, c in pairs] == [("term_3_1", "Will")]


# =============================================================================
# Links
# =============================================================================

class TestLinks:
    """Tests for connectives and lines."""

    @pytest.mark.parametrize("order,expected", [(1, 0), (2, 1), (3, 3), (5, 10), (12, 66)])
    def test_lines_form_complete_graph(self, graph, order, expected):
        assert len(graph.lines(order)) == expected

    @pytest.mark.parametrize(
        "order,expected",
        [(1, 0), (2, 0), (3, 3), (4, 6), (5, 10), (6, 15), (9, 36), (12, 66)],
    )
    def test_connective_counts(self, graph, order, expected):
        assert len(graph.connectives(order)) == expected

    def test_triad_acts(self, graph):
        links = graph.connectives(3, base_position=1, target_position=2)
        assert [link.tag for link in links] == ["char_canonical_act1"]

    def test_tetrad_interplay(self, graph):
        links = graph.connectives(4, base_position=3, target_position=4)
        assert graph.link_character(links[0]).value == "Demonstrable Activity"

    def test_every_connective_tag_resolves(self, graph):
        for order in range(1, 13):
            for link in graph.connectives(order):
                assert graph.link_character(link) is not None, link.id

    def test_placeholder_numbering(self):
        links = connective_links(6)
        assert links[0].tag == "char_canonical_step_1_needs_research"
        assert links[-1].tag == "char_canonical_step_15_needs_research"
        assert links[-1].id == "conn_loc_6_5_loc_6_6"

    def test_line_links(self):
        assert [link.id for link in line_links(3)] == [
            "line_coord_3_1_coord_3_2",
            "line_coord_3_1_coord_3_3",
            "line_coord_3_2_coord_3_3",
        ]

    def test_connectives_for_term(self, graph):
        tags = {link.tag for link in graph.connectives_for_term("term_3_2")}
        assert tags == {"char_canonical_act1", "char_canonical_act2"}

    def test_corresponding_line(self, graph):
        act1 = graph.get_link("conn_loc_3_1_loc_3_2")
        assert [link.id for link in graph.corresponding_links(act1)] == ["line_coord_3_1_coord_3_2"]


class TestBuilder:
    """Tests for build_graph itself."""

    def test_populates_given_graph(self):
        graph = Graph()
        assert build_graph(graph) is graph
        assert graph.entry_count > 0

    def test_builds_are_independent(self):
        first, second = build_graph(), build_graph()
        first.add_entry(Term(id="extra", location="loc_3_1", character="char_canonical_will"))
        assert first.entry_count == second.entry_count + 1

    def test_round_trip(self, graph):
        rebuilt = Graph.from_dict(graph.to_dict())
        assert rebuilt.entry_count == graph.entry_count
        assert rebuilt.link_count == graph.link_count
        assert rebuilt.term(8, 6) == graph.term(8, 6)

    def test_pair_count(self):
        assert catalog.pair_count(12) == 66
