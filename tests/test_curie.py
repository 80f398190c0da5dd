"""Tests for the namespace registry and CURIE codec."""
import pytest
from rdflib import BNode, Graph, Literal, URIRef

from brickshape_py.curie import curie_to_iri, iri_to_curie, local_name, split_iri, type_display
from brickshape_py.errors import (
    InvalidCurieFormatError,
    MissingFragmentOrPathError,
    NotAnIdentifierError,
    UnknownPrefixError,
    UnresolvedNamespaceError,
)
from brickshape_py.namespaces import BRICK_NS, NamespaceRegistry
from brickshape_py.schema.common import Curie, Prefix

BRICK = Prefix("brick", BRICK_NS)
UNIT = Prefix("unit", "http://qudt.org/vocab/unit/")


def _registry(*prefixes):
    return NamespaceRegistry(prefixes or [BRICK, UNIT])


def test_round_trip_location():
    reg = _registry()
    curie = Curie("brick", "Location")
    iri = curie_to_iri(curie, reg)
    assert iri == URIRef("https://brickschema.org/schema/Brick#Location")
    assert iri_to_curie(iri, reg) == curie


def test_round_trip_slash_namespace():
    reg = _registry()
    iri = curie_to_iri("unit:KiloW-HR", reg)
    assert str(iri) == "http://qudt.org/vocab/unit/KiloW-HR"
    assert iri_to_curie(iri, reg) == Curie("unit", "KiloW-HR")


def test_base_without_hash_is_joined_with_hash():
    reg = _registry(Prefix("ex", "http://example.org/building"))
    iri = curie_to_iri("ex:Meter", reg)
    assert str(iri) == "http://example.org/building#Meter"
    assert iri_to_curie(iri, reg) == Curie("ex", "Meter")


def test_unknown_prefix():
    with pytest.raises(UnknownPrefixError) as exc:
        curie_to_iri("foo:Bar", _registry())
    assert exc.value.prefix == "foo"


def test_unresolved_namespace():
    with pytest.raises(UnresolvedNamespaceError):
        iri_to_curie("http://unregistered.example.com/vocab#Thing", _registry())


@pytest.mark.parametrize("iri", ["http://example.org/", "https://brickschema.org/schema/Brick#"])
def test_missing_fragment_or_path(iri):
    with pytest.raises(MissingFragmentOrPathError):
        iri_to_curie(iri, _registry())


@pytest.mark.parametrize("term", [BNode("b0"), Literal("Point")])
def test_non_iri_is_rejected(term):
    with pytest.raises(NotAnIdentifierError):
        iri_to_curie(term, _registry())
    with pytest.raises(NotAnIdentifierError):
        local_name(term)


def test_parse_curie_text():
    assert Curie.parse("brick:Setpoint") == Curie("brick", "Setpoint")
    # Only the first colon separates prefix and local name
    assert Curie.parse("urn:isbn:123") == Curie("urn", "isbn:123")
    assert str(Curie("brick", "Setpoint")) == "brick:Setpoint"


@pytest.mark.parametrize("text", ["Setpoint", ":Setpoint", "brick:", ""])
def test_invalid_curie_format(text):
    with pytest.raises(InvalidCurieFormatError):
        Curie.parse(text)


def test_split_iri():
    assert split_iri("https://brickschema.org/schema/BrickTag#Point") == (
        "https://brickschema.org/schema/BrickTag#",
        "Point",
    )
    assert split_iri("http://qudt.org/vocab/unit/DEG_C") == ("http://qudt.org/vocab/unit/", "DEG_C")


def test_type_display():
    assert type_display(URIRef("http://www.w3.org/ns/shacl#NodeShape")) == "shacl#NodeShape"
    assert type_display(URIRef("http://www.w3.org/2002/07/owl#Class")) == "owl#Class"
    assert type_display(URIRef("http://schema.org/Place")) == "http://schema.org/Place"


def test_registry_lookups():
    reg = _registry()
    assert reg.resolve_prefix("brick") == BRICK_NS
    assert reg.resolve_base(BRICK_NS) == "brick"
    assert reg.resolve_prefix("nope") is None
    assert reg.resolve_base("http://nope.example/") is None
    assert "unit" in reg
    assert len(reg) == 2
    assert Prefix("brick", BRICK_NS) in reg.prefixes()


def test_registry_keeps_both_directions_consistent():
    reg = _registry()
    reg.register("b", BRICK_NS)
    assert reg.resolve_base(BRICK_NS) == "b"
    assert reg.resolve_prefix("brick") is None

    reg.register("b", "http://example.org/other#")
    assert reg.resolve_base(BRICK_NS) is None
    assert reg.resolve_prefix("b") == "http://example.org/other#"


def test_register_is_idempotent():
    reg = _registry()
    reg.register("brick", BRICK_NS)
    reg.register("brick", BRICK_NS)
    assert reg.resolve_prefix("brick") == BRICK_NS
    assert sorted(reg) == ["brick", "unit"]


def test_registry_from_graph_prefers_document_bindings():
    g = Graph(bind_namespaces="none")
    g.bind("sh", "http://example.org/not-shacl#")
    g.bind("ex", "http://example.org/building#")
    reg = NamespaceRegistry.from_graph(g)
    assert reg.resolve_prefix("sh") == "http://example.org/not-shacl#"
    assert reg.resolve_prefix("ex") == "http://example.org/building#"
    assert reg.resolve_prefix("brick") == BRICK_NS
    assert reg.resolve_prefix("skos") == "http://www.w3.org/2004/02/skos/core#"
