"""Parsers for SHACL property shapes."""
from brickshape_py.parser.shape_parser import MAX_SHAPE_DEPTH, ShapeParser
