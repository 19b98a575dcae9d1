"""
Tests for the Link Model
========================
"""

import pytest
from pydantic import ValidationError

from systematics.core.links import Link, LinkType


class TestLink:
    """Tests for Link factories and accessors."""

    def test_line_factory(self):
        link = Link.line("coord_3_1", "coord_3_2")
        assert link.id == "line_coord_3_1_coord_3_2"
        assert link.link_type == LinkType.LINE
        assert link.base == ("coord_3_1",)
        assert link.target == ("coord_3_2",)
        assert link.tag is None

    def test_connective_factory_with_tag(self):
        link = Link.connective("loc_3_1", "loc_3_2").with_tag("char_canonical_act1")
        assert link.id == "conn_loc_3_1_loc_3_2"
        assert link.is_connective()
        assert link.character_id() == "char_canonical_act1"

    def test_with_tag_returns_copy(self):
        link = Link.connective("loc_3_1", "loc_3_2")
        tagged = link.with_tag("char_canonical_act1")
        assert link.tag is None
        assert tagged.tag == "char_canonical_act1"

    def test_line_has_no_character(self):
        link = Link.line("coord_3_1", "coord_3_2").with_tag("char_canonical_act1")
        assert link.character_id() is None

    def test_single_endpoints_use_first_element(self):
        link = Link(id="x", base=["a", "b"], target=["c"], link_type=LinkType.CONNECTIVE)
        assert link.base_single() == "a"
        assert link.target_single() == "c"
        assert link.bases() == ["a", "b"]

    def test_missing_endpoints(self):
        link = Link(id="x", link_type=LinkType.LINE)
        assert link.base_single() is None
        assert link.target_single() is None
        assert link.bases() == []

    def test_empty_endpoint_lists(self):
        link = Link(id="x", base=[], target=[], link_type=LinkType.LINE)
        assert link.base_single() is None
        assert link.targets() == []

    def test_link_is_frozen(self):
        link = Link.line("coord_3_1", "coord_3_2")
        with pytest.raises(ValidationError):
            link.tag = "x"

    def test_link_is_hashable(self):
        first = Link.connective("loc_3_1", "loc_3_2").with_tag("char_canonical_act1")
        second = Link.connective("loc_3_1", "loc_3_2").with_tag("char_canonical_act1")
        assert hash(first) == hash(second)
        assert len({first, second, Link.line("coord_3_1", "coord_3_2")}) == 2

    def test_list_endpoints_become_tuples(self):
        link = Link.model_validate({"id": "x", "base": ["a"], "target": ["b"], "link_type": "line"})
        assert link.base == ("a",)
        assert link.bases() == ["a"]

    def test_link_type_parses_from_value(self):
        link = Link.model_validate({"id": "x", "link_type": "connective"})
        assert link.link_type == LinkType.CONNECTIVE
