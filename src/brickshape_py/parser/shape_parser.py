"""Parse SHACL property shapes attached to a class into BrickProperty trees.

Each shape node is read through a subject-scoped pattern match, so one
shape node always yields exactly one BrickProperty regardless of the
order the store returns statements in.

Logical constraints (sh:not, sh:and, sh:or, sh:xone) recurse back into
shape parsing. sh:not points at a single shape; the others point at an
RDF collection of shapes, e.g.

    sh:property [
        sh:path brick:isPartOf ;
        sh:or ( [ sh:class brick:Location ] [ sh:class brick:Equipment ] ) ;
    ] .

Recursion is guarded by the chain of shapes currently being parsed (a shape
may not contain itself) and by ``max_depth``; collection walks keep a
visited-cell set and reject cells with missing or repeated
rdf:first / rdf:rest values.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from rdflib import RDF, RDFS, BNode, Literal, URIRef
from rdflib.namespace import SH
from rdflib.term import Node

from brickshape_py.curie import CurieLike, curie_to_iri, iri_to_curie, local_name
from brickshape_py.errors import (
    MalformedListError,
    MissingLiteralError,
    NotAnIdentifierError,
)
from brickshape_py.namespaces import NamespaceRegistry
from brickshape_py.schema.brick import (
    BrickProperty,
    LogicalConstraint,
    LogicalKind,
    PairKind,
    PropertyPairConstraint,
)
from brickshape_py.schema.common import Curie
from brickshape_py.store import TripleStore

log = logging.getLogger(__name__)

MAX_SHAPE_DEPTH = 64

TEXT_FIELDS = {
    "message": "definition",
    "pattern": "pattern",
}

CURIE_FIELDS = {
    "class": "class_",
    "datatype": "datatype",
    "nodeKind": "node_kind",
}

INT_FIELDS = {
    "minCount": "min_count",
    "maxCount": "max_count",
    "minLength": "min_length",
    "maxLength": "max_length",
}

FLOAT_FIELDS = {
    "minInclusive": "min_inclusive",
    "maxInclusive": "max_inclusive",
    "minExclusive": "min_exclusive",
    "maxExclusive": "max_exclusive",
}

PAIR_KINDS = {
    "equals": PairKind.EQUAL,
    "disjoint": PairKind.DISJOINT,
    "lessThan": PairKind.LESS_THAN,
    "lessThanOrEquals": PairKind.LESS_THAN_OR_EQUAL,
}

LOGICAL_KINDS = {
    "not": LogicalKind.NOT,
    "and": LogicalKind.AND,
    "or": LogicalKind.OR,
    "xone": LogicalKind.XONE,
}

Handler = Callable[["ShapeParser", BrickProperty, Node, tuple], None]


def _literal_text(obj: Node, context: str) -> str:
    if not isinstance(obj, Literal):
        raise MissingLiteralError(obj, context)
    return str(obj)


def _literal_int(obj: Node, context: str) -> int:
    text = _literal_text(obj, context)
    try:
        return int(text)
    except ValueError:
        raise MissingLiteralError(obj, f"{context} expects an integer") from None


def _literal_float(obj: Node, context: str) -> float:
    text = _literal_text(obj, context)
    try:
        return float(text)
    except ValueError:
        raise MissingLiteralError(obj, f"{context} expects a number") from None


def _value_text(obj: Node, context: str) -> str:
    """IRIs as local names, literals as lexical form."""
    if isinstance(obj, URIRef):
        return local_name(obj)
    if isinstance(obj, Literal):
        return str(obj)
    raise NotAnIdentifierError(obj, context)


def _set_text(field: str, context: str) -> Handler:
    def handle(parser, prop, obj, stack):
        value = _literal_text(obj, context)
        if getattr(prop, field):
            log.debug("Keeping first %s, ignoring %r", context, value)
            return
        setattr(prop, field, value)
    return handle


def _set_curie(field: str, context: str) -> Handler:
    def handle(parser, prop, obj, stack):
        setattr(prop, field, parser.to_curie(obj, context))
    return handle


def _set_int(field: str, context: str) -> Handler:
    def handle(parser, prop, obj, stack):
        setattr(prop, field, _literal_int(obj, context))
    return handle


def _set_float(field: str, context: str) -> Handler:
    def handle(parser, prop, obj, stack):
        setattr(prop, field, _literal_float(obj, context))
    return handle


def _add_pair(kind: PairKind) -> Handler:
    def handle(parser, prop, obj, stack):
        other = parser.path_name(obj)
        prop.constraints.append(PropertyPairConstraint(kind=kind, other=other))
    return handle


def _add_logical(kind: LogicalKind) -> Handler:
    def handle(parser, prop, obj, stack):
        if kind is LogicalKind.NOT:
            members = [parser.parse_shape(obj, stack)]
        else:
            members = [parser.parse_shape(item, stack) for item in parser.walk_list(obj)]
        prop.logical_constraints.append(LogicalConstraint(kind=kind, properties=members))
    return handle


def _set_path(parser, prop, obj, stack):
    prop.path = parser.path_name(obj)


def _set_one_of(parser, prop, obj, stack):
    prop.one_of = [_value_text(v, "sh:in") for v in parser.walk_list(obj)]


def _set_has_value(parser, prop, obj, stack):
    prop.has_value = _value_text(obj, "sh:hasValue")


def _add_subclass(parser, prop, obj, stack):
    prop.subclass_of.append(parser.to_curie(obj, "rdfs:subClassOf"))


def _build_dispatch() -> dict[URIRef, Handler]:
    table: dict[URIRef, Handler] = {
        SH.path: _set_path,
        SH["in"]: _set_one_of,
        SH.hasValue: _set_has_value,
        RDFS.subClassOf: _add_subclass,
    }
    for name, field in TEXT_FIELDS.items():
        table[SH[name]] = _set_text(field, f"sh:{name}")
    for name, field in CURIE_FIELDS.items():
        table[SH[name]] = _set_curie(field, f"sh:{name}")
    for name, field in INT_FIELDS.items():
        table[SH[name]] = _set_int(field, f"sh:{name}")
    for name, field in FLOAT_FIELDS.items():
        table[SH[name]] = _set_float(field, f"sh:{name}")
    for name, kind in PAIR_KINDS.items():
        table[SH[name]] = _add_pair(kind)
    for name, kind in LOGICAL_KINDS.items():
        table[SH[name]] = _add_logical(kind)
    return table


# Predicates not in this table are ignored.
DISPATCH = _build_dispatch()


class ShapeParser:
    """Extract the property shapes a class declares through sh:property."""

    def __init__(
        self,
        store: TripleStore,
        registry: NamespaceRegistry,
        max_depth: int = MAX_SHAPE_DEPTH,
    ):
        self.store = store
        self.registry = registry
        self.max_depth = max_depth

    def properties_of(self, cls: CurieLike) -> list[BrickProperty]:
        iri = curie_to_iri(cls, self.registry)
        return [self.parse_shape(node) for node in self.store.objects(iri, SH.property)]

    def parse_shape(self, node: Node, stack: tuple = ()) -> BrickProperty:
        """Parse one shape node; ``stack`` holds the enclosing shape nodes."""
        if not isinstance(node, (URIRef, BNode)):
            raise NotAnIdentifierError(node, "property shape")
        if node in stack:
            raise MalformedListError(f"Shape {node!r} is nested inside itself")
        if len(stack) >= self.max_depth:
            raise MalformedListError(
                f"Shape nesting exceeds max depth {self.max_depth} at {node!r}"
            )

        stack = stack + (node,)
        prop = BrickProperty()
        for _, predicate, obj in self.store.triples(node, None, None):
            handler = DISPATCH.get(predicate)
            if handler is None:
                log.debug("Ignoring %s on shape %s", predicate, node)
                continue
            handler(self, prop, obj, stack)
        return prop

    def walk_list(self, head: Node) -> list[Node]:
        """Return the members of the RDF collection starting at ``head``.

        Cells may be blank or named nodes; a named head typed ``rdf:List``
        is common for collections shared between shapes.
        """
        items: list[Node] = []
        seen: set[Node] = set()
        cell = head
        while cell != RDF.nil:
            if not isinstance(cell, (URIRef, BNode)):
                raise NotAnIdentifierError(cell, "collection cell")
            if cell in seen:
                raise MalformedListError(f"Collection cycles back to {cell!r}")
            seen.add(cell)

            items.append(self._cell_value(cell, RDF.first))
            cell = self._cell_value(cell, RDF.rest)
        return items

    def path_name(self, obj: Node) -> str:
        """Local name of a path, with inverse paths written as ``^name``."""
        if isinstance(obj, URIRef):
            return local_name(obj)
        if isinstance(obj, BNode):
            inverse = self._single(obj, SH.inversePath)
            if isinstance(inverse, URIRef):
                return "^" + local_name(inverse)
        raise NotAnIdentifierError(obj, "sh:path")

    def to_curie(self, obj: Node, context: str) -> Curie:
        if not isinstance(obj, URIRef):
            raise NotAnIdentifierError(obj, context)
        return iri_to_curie(obj, self.registry)

    def _single(self, subject: Node, predicate: Node) -> Optional[Node]:
        return next(self.store.objects(subject, predicate), None)

    def _cell_value(self, cell: Node, predicate: Node) -> Node:
        values = list(self.store.objects(cell, predicate))
        if len(values) != 1:
            raise MalformedListError(
                f"Collection cell {cell!r} has {len(values)} values for {predicate}, expected 1"
            )
        return values[0]
