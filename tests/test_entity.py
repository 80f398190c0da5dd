"""Tests for full class descriptors."""
import os

import pytest
from rdflib import RDFS, Graph, Literal, Namespace, URIRef

from brickshape_py.brick import Brick, load_brick
from brickshape_py.errors import MissingLiteralError, UnknownPrefixError
from brickshape_py.namespaces import BRICK_NS
from brickshape_py.schema.brick import LogicalKind
from brickshape_py.schema.common import Curie

DATASET_DIR = os.path.join(os.path.dirname(__file__), "..", "dataset")
BRICK = Namespace(BRICK_NS)


@pytest.fixture(scope="module")
def brick():
    return load_brick(os.path.join(DATASET_DIR, "brick_sample.ttl"))


def test_describe_setpoint(brick):
    desc = brick.describe("brick:Setpoint")
    assert desc.name == "Setpoint"
    assert desc.namespace == BRICK_NS
    assert desc.label == "Setpoint"
    assert desc.definition == "A Setpoint is an input value at which the desired property is set"
    assert desc.types == ["shacl#NodeShape", "owl#Class"]
    assert desc.super_classes == [Curie("brick", "Point")]
    assert desc.tags == ["Point", "Setpoint"]
    assert desc.properties == []


def test_describe_includes_properties(brick):
    desc = brick.describe(Curie("brick", "Site"))
    assert desc.super_classes == [Curie("brick", "Location")]
    assert desc.definition.startswith("A geographic region")
    (has_part,) = desc.properties
    assert has_part.path == "hasPart"
    assert has_part.logical_constraints[0].kind is LogicalKind.OR


def test_label_prefers_english(brick):
    assert brick.describe("brick:Zone").label == "Zone"


def test_missing_label_and_definition(brick):
    desc = brick.describe("brick:Capacity_Sensor")
    assert desc.label == "Capacity Sensor"
    assert desc.definition == ""

    unknown = brick.describe("brick:Not_A_Class")
    assert unknown.name == "Not_A_Class"
    assert unknown.label == ""
    assert unknown.types == []
    assert unknown.properties == []


def test_label_selection_is_deterministic():
    g = Graph()
    g.add((BRICK.Odd_Point, RDFS.label, Literal("Zeta")))
    g.add((BRICK.Odd_Point, RDFS.label, Literal("Alpha")))
    assert Brick.from_graph(g).describe("brick:Odd_Point").label == "Alpha"


def test_non_literal_label_aborts():
    g = Graph()
    g.add((BRICK.Odd_Point, RDFS.label, URIRef("http://example.org/label")))
    with pytest.raises(MissingLiteralError):
        Brick.from_graph(g).describe("brick:Odd_Point")


def test_unknown_prefix(brick):
    with pytest.raises(UnknownPrefixError):
        brick.describe("nope:Setpoint")


def test_load_from_text():
    ttl = """
    @prefix brick: <https://brickschema.org/schema/Brick#> .
    @prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
    brick:Setpoint rdfs:subClassOf brick:Point ; rdfs:label "Setpoint" .
    """
    brick = load_brick(ttl)
    assert brick.describe("brick:Setpoint").super_classes == [Curie("brick", "Point")]


def test_independent_graphs():
    first = load_brick("""
    @prefix ex: <http://example.org/a#> .
    @prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
    ex:Child rdfs:subClassOf ex:Parent .
    """)
    second = load_brick("""
    @prefix ex: <http://example.org/b#> .
    @prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
    ex:Child rdfs:subClassOf ex:Other .
    """)
    assert first.superclasses_of("ex:Child") == [Curie("ex", "Parent")]
    assert second.superclasses_of("ex:Child") == [Curie("ex", "Other")]
