"""Serializers for query results."""
from brickshape_py.serializer.json_serializer import serialize_json, to_jsonable
