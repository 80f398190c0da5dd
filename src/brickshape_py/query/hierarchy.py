"""Subclass, superclass and tag lookups."""
from __future__ import annotations

from rdflib import RDFS, URIRef

from brickshape_py.curie import CurieLike, curie_to_iri, iri_to_curie, local_name
from brickshape_py.namespaces import BRICK_NS, NamespaceRegistry
from brickshape_py.schema.common import Curie
from brickshape_py.store import TripleStore

HAS_ASSOCIATED_TAG = URIRef(BRICK_NS + "hasAssociatedTag")


class ClassHierarchy:
    """Class hierarchy queries.

    Results come back in store order. A class with no matching statements
    yields an empty list.
    """

    def __init__(self, store: TripleStore, registry: NamespaceRegistry):
        self.store = store
        self.registry = registry

    def subclasses_of(self, cls: CurieLike) -> list[Curie]:
        iri = curie_to_iri(cls, self.registry)
        return [iri_to_curie(s, self.registry) for s in self.store.subjects(RDFS.subClassOf, iri)]

    def superclasses_of(self, cls: CurieLike) -> list[Curie]:
        iri = curie_to_iri(cls, self.registry)
        return [iri_to_curie(o, self.registry) for o in self.store.objects(iri, RDFS.subClassOf)]

    def tags_of(self, cls: CurieLike) -> list[str]:
        iri = curie_to_iri(cls, self.registry)
        return [local_name(o) for o in self.store.objects(iri, HAS_ASSOCIATED_TAG)]
