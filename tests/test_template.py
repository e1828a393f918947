"""Tests for the template model, its validation and YAML loading."""

import dataclasses
import logging

import pytest

from antipattern.errors import TemplateReferenceError, TemplateValidationError
from antipattern.graph import (
    UNBOUNDED,
    Template,
    TemplateValidator,
    VertexType,
    create_edge,
    create_template,
    create_vertex,
    load_template,
    load_templates,
)


def _pair(*edges):
    return create_template(
        [create_vertex("a", "ACTIVITY", "X"), create_vertex("b", "EVENT", "END")],
        edges
    )


# =============================================================================
# Model
# =============================================================================


class TestTemplateModel:
    """Tests for vertices, edges and templates."""

    def test_edge_defaults(self):
        edge = create_edge("a", "b")
        assert (edge.lower, edge.upper) == (1, 1)
        assert edge.missing is False
        assert edge.condition is None
        assert not edge.is_unbounded

    def test_empty_condition_is_dropped(self):
        assert create_edge("a", "b", condition="").condition is None

    def test_vertex_type_from_string(self):
        vertex = create_vertex("gw", "gateway", "EXCLUSIVE")
        assert vertex.type is VertexType.GATEWAY

    def test_placeholder_vertex_has_group_but_no_label(self):
        vertex = create_vertex("s", "ACTIVITY", "S", placeholder=True)
        assert vertex.placeholder_group == "S"
        assert vertex.label is None

    def test_concrete_vertex_label(self):
        vertex = create_vertex("opt", VertexType.ACTIVITY, "NW_OPT")
        assert vertex.placeholder_group is None
        assert vertex.label == "NW_OPT"

    def test_empty_variant_has_no_label(self):
        assert create_vertex("a", "ACTIVITY").label is None

    def test_vertices_keyed_by_id(self):
        template = _pair(create_edge("a", "b"))
        assert list(template.vertices) == ["a", "b"]
        assert template.vertex("b").type is VertexType.EVENT

    def test_template_accepts_mapping_of_vertices(self):
        a = create_vertex("a", "ACTIVITY", "X")
        b = create_vertex("b", "ACTIVITY", "Y")
        template = Template(vertices={"a": a, "b": b}, edges=[create_edge("a", "b")])
        assert template.edges == (create_edge("a", "b"),)

    def test_template_is_immutable(self):
        template = _pair(create_edge("a", "b"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            template.name = "other"
        with pytest.raises(TypeError):
            template.vertices["c"] = create_vertex("c", "ACTIVITY")

    def test_equal_templates_hash_alike(self):
        first = _pair(create_edge("a", "b"))
        second = _pair(create_edge("a", "b"))

        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second, _pair(create_edge("b", "a"))}) == 2

    def test_catalogue_templates_are_hashable(self):
        from antipattern.catalogue import list_anti_patterns

        templates = {anti_pattern.template for anti_pattern in list_anti_patterns()}
        assert len(templates) == len(list_anti_patterns())

    def test_has_missing_edges(self):
        assert not _pair(create_edge("a", "b")).has_missing_edges
        template = _pair(create_edge("a", "b"), create_edge("b", "a", missing=True))
        assert template.has_missing_edges

    def test_to_dict_marks_unbounded_upper_as_none(self):
        template = _pair(create_edge("a", "b", upper=UNBOUNDED, condition="x"))
        edge = template.to_dict()["edges"][0]
        assert edge["upper"] is None
        assert edge["condition"] == "x"


# =============================================================================
# Validation
# =============================================================================


class TestTemplateValidation:
    """Tests for eager validation at construction time."""

    def test_unknown_vertex_reference(self):
        with pytest.raises(TemplateReferenceError, match="'c'"):
            _pair(create_edge("a", "c"))

    def test_reference_error_is_lookup_error(self):
        with pytest.raises(LookupError):
            _pair(create_edge("x", "b"))

    def test_lower_greater_than_upper(self):
        with pytest.raises(TemplateValidationError, match="exceeds"):
            _pair(create_edge("a", "b", lower=3, upper=2))

    def test_negative_lower(self):
        with pytest.raises(TemplateValidationError):
            _pair(create_edge("a", "b", lower=-1))

    def test_negative_upper(self):
        with pytest.raises(TemplateValidationError):
            _pair(create_edge("a", "b", lower=0, upper=-1))

    def test_non_integer_bound(self):
        with pytest.raises(TemplateValidationError):
            _pair(create_edge("a", "b", lower=1.5, upper=UNBOUNDED))

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            _pair(create_edge("a", "b", lower=2, upper=1))

    def test_zero_lower_bound_is_allowed(self):
        template = _pair(create_edge("a", "b", lower=0, upper=UNBOUNDED))
        assert template.edges[0].lower == 0

    def test_template_without_edges(self):
        with pytest.raises(TemplateValidationError, match="no edges"):
            create_template([create_vertex("a", "ACTIVITY")], [])

    def test_missing_edge_needs_earlier_present_edge(self):
        with pytest.raises(TemplateValidationError, match="preceded"):
            _pair(create_edge("a", "b", missing=True))

    def test_unknown_vertex_type(self):
        with pytest.raises(TemplateValidationError, match="Unknown vertex type"):
            create_vertex("a", "TASK")

    def test_duplicate_vertex_ids(self):
        with pytest.raises(TemplateValidationError, match="Duplicate"):
            create_template(
                [create_vertex("a", "ACTIVITY"), create_vertex("a", "EVENT")],
                [create_edge("a", "a")]
            )

    def test_vertex_id_must_be_identifier(self):
        with pytest.raises(TemplateValidationError, match="Invalid vertex id"):
            create_template(
                [create_vertex("a-1", "ACTIVITY"), create_vertex("b", "ACTIVITY")],
                [create_edge("a-1", "b")]
            )

    def test_condition_with_quotes_rejected(self):
        with pytest.raises(TemplateValidationError):
            _pair(create_edge("a", "b", condition='say "hi"'))

    def test_large_placeholder_group_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="antipattern.graph.template_validator"):
            create_template(
                [create_vertex(v, "ACTIVITY", "G", placeholder=True) for v in ("x", "y", "z")],
                [create_edge("x", "y"), create_edge("y", "z")]
            )
        assert "only the first two are compared" in caplog.text

    def test_validation_metrics(self, missing_reversal_template):
        result = TemplateValidator().validate_template(missing_reversal_template)
        assert result.is_valid
        assert result.metrics["edge_count"] == 2
        assert result.metrics["missing_edge_count"] == 1


# =============================================================================
# Loading
# =============================================================================


TEMPLATE_YAML = """
name: missing-reversal
vertices:
  - {id: red, type: ACTIVITY, variant: NW_RED}
  - {id: rev, type: ACTIVITY, variant: NW_RR}
  - {id: end, type: EVENT, variant: END}
edges:
  - {from: red, to: end, upper: "*"}
  - {from: red, to: rev, upper: null, missing: true}
"""


class TestTemplateLoader:
    """Tests for building templates from dictionaries and YAML."""

    def test_load_template_from_yaml(self, tmp_path, missing_reversal_template):
        path = tmp_path / "template.yaml"
        path.write_text(TEMPLATE_YAML)

        template = load_template(path)

        assert template.name == "missing-reversal"
        assert template.edges == missing_reversal_template.edges
        assert template.edges[1].is_unbounded

    def test_from_dict_with_vertex_mapping(self):
        template = Template.from_dict({
            "vertices": {
                "opt": {"type": "ACTIVITY", "variant": "NW_OPT"},
                "gw": {"type": "GATEWAY", "variant": "EXCLUSIVE"},
            },
            "edges": [{"from": "opt", "to": "gw", "lower": 2, "upper": "5"}],
        })
        assert template.edges[0].lower == 2
        assert template.edges[0].upper == 5

    def test_load_multiple_templates(self, tmp_path):
        path = tmp_path / "templates.yaml"
        path.write_text(
            "templates:\n"
            "  - vertices: [{id: a, type: ACTIVITY}, {id: b, type: ACTIVITY}]\n"
            "    edges: [{from: a, to: b}]\n"
            "  - vertices: [{id: c, type: EVENT}, {id: d, type: EVENT}]\n"
            "    edges: [{from: c, to: d}]\n"
        )
        assert len(load_templates(path)) == 2
        with pytest.raises(TemplateValidationError, match="expected one"):
            load_template(path)

    def test_edge_without_endpoints(self):
        with pytest.raises(TemplateValidationError, match="'from' and 'to'"):
            Template.from_dict({
                "vertices": [{"id": "a", "type": "ACTIVITY"}],
                "edges": [{"from": "a"}],
            })

    def test_invalid_upper_token(self):
        with pytest.raises(TemplateValidationError, match="upper bound"):
            Template.from_dict({
                "vertices": [{"id": "a", "type": "ACTIVITY"}, {"id": "b", "type": "ACTIVITY"}],
                "edges": [{"from": "a", "to": "b", "upper": "many"}],
            })

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("vertices: [unclosed")
        with pytest.raises(TemplateValidationError, match="Invalid YAML"):
            load_template(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(TemplateValidationError, match="No template"):
            load_template(path)
