"""Conversion between CURIEs and IRIs."""
from __future__ import annotations

from typing import Union
from urllib.parse import urlsplit, urlunsplit

from rdflib import URIRef

from brickshape_py.errors import (
    MissingFragmentOrPathError,
    NotAnIdentifierError,
    UnknownPrefixError,
    UnresolvedNamespaceError,
)
from brickshape_py.namespaces import NamespaceRegistry
from brickshape_py.schema.common import Curie

CurieLike = Union[Curie, str]


def as_curie(value: CurieLike) -> Curie:
    """Accept a Curie or its ``prefix:local`` text form."""
    if isinstance(value, Curie):
        return value
    return Curie.parse(value)


def curie_to_iri(curie: CurieLike, registry: NamespaceRegistry) -> URIRef:
    """Expand a CURIE against the registry.

    Base IRIs already ending in ``#`` or ``/`` are used as-is; otherwise the
    local name is joined with ``#``.
    """
    curie = as_curie(curie)
    base = registry.resolve_prefix(curie.prefix)
    if base is None:
        raise UnknownPrefixError(curie.prefix)
    if base.endswith(("#", "/")):
        return URIRef(base + curie.local_name)
    return URIRef(f"{base}#{curie.local_name}")


def split_iri(iri: str) -> tuple[str, str]:
    """Split an IRI into (namespace, local name).

    The local name is the text after the last ``#`` when there is one,
    otherwise the last segment of the path.
    """
    if "#" in iri:
        ns, local = iri.rsplit("#", 1)
        if not local:
            raise MissingFragmentOrPathError(iri)
        return ns + "#", local

    parts = urlsplit(iri)
    local = parts.path.rsplit("/", 1)[-1]
    if not local:
        raise MissingFragmentOrPathError(iri)
    ns_path = parts.path[: len(parts.path) - len(local)]
    return urlunsplit((parts.scheme, parts.netloc, ns_path, "", "")), local


def local_name(term) -> str:
    """Local name of an IRI term, without namespace resolution."""
    if not isinstance(term, URIRef):
        raise NotAnIdentifierError(term)
    return split_iri(str(term))[1]


def iri_to_curie(iri, registry: NamespaceRegistry) -> Curie:
    """Compact an IRI using the registry.

    The namespace part must match a registered base IRI exactly; a base
    registered without its trailing ``#`` is matched too.
    """
    if not _is_iri(iri):
        raise NotAnIdentifierError(iri)
    iri = str(iri)
    ns, local = split_iri(iri)
    prefix = registry.resolve_base(ns)
    if prefix is None and ns.endswith("#"):
        prefix = registry.resolve_base(ns[:-1])
    if prefix is None:
        raise UnresolvedNamespaceError(iri)
    return Curie(prefix=prefix, local_name=local)


def type_display(term) -> str:
    """Render a type IRI as ``<last path segment>#<fragment>``.

    Display only: the segment need not be a registered prefix. IRIs without
    a fragment are returned unchanged.
    """
    if not isinstance(term, URIRef):
        raise NotAnIdentifierError(term, "rdf:type")
    iri = str(term)
    if "#" not in iri:
        return iri
    ns, fragment = iri.rsplit("#", 1)
    segment = ns.rstrip("/").rsplit("/", 1)[-1]
    return f"{segment}#{fragment}"


def _is_iri(value) -> bool:
    # rdflib BNode and Literal are str subclasses too
    return isinstance(value, URIRef) or type(value) is str
