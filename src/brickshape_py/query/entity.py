"""Assemble a full class descriptor from hierarchy and shape queries."""
from __future__ import annotations

import logging

from rdflib import RDF, RDFS, Literal
from rdflib.namespace import SKOS
from rdflib.term import Node

from brickshape_py.curie import CurieLike, as_curie, curie_to_iri, type_display
from brickshape_py.errors import MissingLiteralError
from brickshape_py.namespaces import NamespaceRegistry
from brickshape_py.parser.shape_parser import ShapeParser
from brickshape_py.query.hierarchy import ClassHierarchy
from brickshape_py.schema.brick import BrickEntity
from brickshape_py.store import TripleStore

log = logging.getLogger(__name__)


def _literal_rank(lit: Literal) -> tuple:
    return (lit.language not in (None, "en"), str(lit))


class EntityAssembler:
    def __init__(
        self,
        store: TripleStore,
        registry: NamespaceRegistry,
        hierarchy: ClassHierarchy,
        shapes: ShapeParser,
    ):
        self.store = store
        self.registry = registry
        self.hierarchy = hierarchy
        self.shapes = shapes

    def describe(self, cls: CurieLike) -> BrickEntity:
        """Build the descriptor for ``cls``; any failing sub-query aborts."""
        curie = as_curie(cls)
        iri = curie_to_iri(curie, self.registry)
        namespace = self.registry.resolve_prefix(curie.prefix)

        return BrickEntity(
            name=curie.local_name,
            namespace=namespace,
            label=self._pick_literal(iri, RDFS.label, "rdfs:label"),
            definition=self._pick_literal(iri, SKOS.definition, "skos:definition"),
            types=[type_display(o) for o in self.store.objects(iri, RDF.type)],
            super_classes=self.hierarchy.superclasses_of(curie),
            tags=self.hierarchy.tags_of(curie),
            properties=self.shapes.properties_of(curie),
        )

    def _pick_literal(self, subject: Node, predicate: Node, context: str) -> str:
        """Select one literal: untagged or English first, then by text."""
        values = []
        for obj in self.store.objects(subject, predicate):
            if not isinstance(obj, Literal):
                raise MissingLiteralError(obj, context)
            values.append(obj)
        if not values:
            return ""
        values.sort(key=_literal_rank)
        if len(values) > 1:
            log.debug("%s has %d %s values, using %r", subject, len(values), context, str(values[0]))
        return str(values[0])
