"""brickshape-py: class hierarchy, tags and SHACL property shapes from Brick ontologies."""
__version__ = "0.1.0"

from brickshape_py.errors import (
    BlankNodeExpectedError,
    BrickError,
    InvalidCurieFormatError,
    MalformedListError,
    MissingFragmentOrPathError,
    MissingLiteralError,
    NotAnIdentifierError,
    UnknownPrefixError,
    UnresolvedNamespaceError,
)
from brickshape_py.schema.common import Cardinality, Curie, Prefix
from brickshape_py.schema.brick import (
    BrickEntity,
    BrickProperty,
    LogicalConstraint,
    LogicalKind,
    PairKind,
    PropertyPairConstraint,
)
from brickshape_py.namespaces import NamespaceRegistry
from brickshape_py.curie import curie_to_iri, iri_to_curie
from brickshape_py.store import TripleStore
from brickshape_py.brick import Brick, load_brick
from brickshape_py.serializer.json_serializer import serialize_json

__all__ = [
    # Schema
    "Cardinality", "Curie", "Prefix",
    "BrickEntity", "BrickProperty", "LogicalConstraint", "LogicalKind",
    "PairKind", "PropertyPairConstraint",
    # Namespaces
    "NamespaceRegistry", "curie_to_iri", "iri_to_curie",
    # Queries
    "TripleStore", "Brick", "load_brick",
    # Serializers
    "serialize_json",
    # Errors
    "BrickError", "UnknownPrefixError", "UnresolvedNamespaceError",
    "MissingFragmentOrPathError", "InvalidCurieFormatError",
    "NotAnIdentifierError", "MissingLiteralError", "BlankNodeExpectedError",
    "MalformedListError",
]
