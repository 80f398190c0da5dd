"""Descriptor models for ontology classes and their property shapes."""
from brickshape_py.schema.common import Cardinality, Curie, Prefix
from brickshape_py.schema.brick import (
    BrickEntity,
    BrickProperty,
    LogicalConstraint,
    LogicalKind,
    PairKind,
    PropertyPairConstraint,
)
