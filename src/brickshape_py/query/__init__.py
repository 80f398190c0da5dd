"""Hierarchy and entity queries over a loaded ontology."""
from brickshape_py.query.hierarchy import ClassHierarchy
from brickshape_py.query.entity import EntityAssembler
