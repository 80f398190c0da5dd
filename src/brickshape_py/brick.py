"""Query surface over one loaded ontology."""
from __future__ import annotations

from typing import Optional

from rdflib import Graph

from brickshape_py.curie import CurieLike
from brickshape_py.namespaces import NamespaceRegistry
from brickshape_py.parser.shape_parser import MAX_SHAPE_DEPTH, ShapeParser
from brickshape_py.query.entity import EntityAssembler
from brickshape_py.query.hierarchy import ClassHierarchy
from brickshape_py.schema.brick import BrickEntity, BrickProperty
from brickshape_py.schema.common import Curie
from brickshape_py.store import TripleStore


class Brick:
    """A loaded ontology and its namespace registry.

    Both are built once and never mutated, so one instance can serve
    concurrent read-only queries; several instances may coexist.
    """

    def __init__(
        self,
        store: TripleStore,
        registry: Optional[NamespaceRegistry] = None,
        max_depth: int = MAX_SHAPE_DEPTH,
    ):
        self.store = store
        if registry is None:
            registry = NamespaceRegistry.from_graph(store.graph)
        self.registry = registry
        self.hierarchy = ClassHierarchy(store, self.registry)
        self.shapes = ShapeParser(store, self.registry, max_depth=max_depth)
        self.entities = EntityAssembler(store, self.registry, self.hierarchy, self.shapes)

    @classmethod
    def from_graph(cls, g: Graph, max_depth: int = MAX_SHAPE_DEPTH) -> "Brick":
        return cls(TripleStore(g), max_depth=max_depth)

    def subclasses_of(self, cls: CurieLike) -> list[Curie]:
        return self.hierarchy.subclasses_of(cls)

    def superclasses_of(self, cls: CurieLike) -> list[Curie]:
        return self.hierarchy.superclasses_of(cls)

    def tags_of(self, cls: CurieLike) -> list[str]:
        return self.hierarchy.tags_of(cls)

    def properties_of(self, cls: CurieLike) -> list[BrickProperty]:
        return self.shapes.properties_of(cls)

    def describe(self, cls: CurieLike) -> BrickEntity:
        return self.entities.describe(cls)


def load_brick(source: str, format: str = "turtle", max_depth: int = MAX_SHAPE_DEPTH) -> Brick:
    """Load an ontology from a file path or serialized text.

    Args:
        source: File path or document text.
        format: rdflib parser format (default: turtle).
        max_depth: Maximum nesting depth of logical constraints.

    Returns:
        Brick ready for queries.
    """
    return Brick(TripleStore.load(source, format=format), max_depth=max_depth)
