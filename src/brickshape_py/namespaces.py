"""Bidirectional prefix <-> base IRI registry."""
from __future__ import annotations

from typing import Iterable, Iterator, Optional

from rdflib import Graph
from rdflib.namespace import OWL, RDF, RDFS, SH, SKOS, XSD

from brickshape_py.schema.common import Prefix

BRICK_NS = "https://brickschema.org/schema/Brick#"
TAG_NS = "https://brickschema.org/schema/BrickTag#"

DEFAULT_PREFIXES = [
    Prefix("brick", BRICK_NS),
    Prefix("tag", TAG_NS),
    Prefix("owl", str(OWL)),
    Prefix("rdf", str(RDF)),
    Prefix("rdfs", str(RDFS)),
    Prefix("sh", str(SH)),
    Prefix("skos", str(SKOS)),
    Prefix("xsd", str(XSD)),
]


class NamespaceRegistry:
    """Prefix table with a consistent inverse index.

    A base IRI is bound to at most one prefix: re-registering a base IRI
    under a new prefix drops the old binding, and re-registering a prefix
    drops its previous base IRI.
    """

    def __init__(self, prefixes: Optional[Iterable[Prefix]] = None):
        self._by_prefix: dict[str, str] = {}
        self._by_base: dict[str, str] = {}
        for p in prefixes or ():
            self.register(p.name, p.iri)

    @classmethod
    def from_graph(cls, g: Graph, defaults: Iterable[Prefix] = DEFAULT_PREFIXES) -> "NamespaceRegistry":
        """Build from the graph's prefix table, filling gaps from ``defaults``."""
        registry = cls()
        for name, uri in g.namespaces():
            registry.register(str(name), str(uri))
        for p in defaults:
            if registry.resolve_prefix(p.name) is None and registry.resolve_base(p.iri) is None:
                registry.register(p.name, p.iri)
        return registry

    def register(self, prefix: str, base_iri: str) -> None:
        old_base = self._by_prefix.pop(prefix, None)
        if old_base is not None:
            self._by_base.pop(old_base, None)
        old_prefix = self._by_base.pop(base_iri, None)
        if old_prefix is not None:
            self._by_prefix.pop(old_prefix, None)
        self._by_prefix[prefix] = base_iri
        self._by_base[base_iri] = prefix

    def resolve_prefix(self, prefix: str) -> Optional[str]:
        return self._by_prefix.get(prefix)

    def resolve_base(self, base_iri: str) -> Optional[str]:
        return self._by_base.get(base_iri)

    def prefixes(self) -> list[Prefix]:
        return [Prefix(name, iri) for name, iri in self._by_prefix.items()]

    def __contains__(self, prefix: str) -> bool:
        return prefix in self._by_prefix

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_prefix)

    def __len__(self) -> int:
        return len(self._by_prefix)
