"""Error hierarchy for schema extraction.

All errors are permanent data-quality errors: the graph is static once
loaded, so retrying a failed query fails the same way.
"""
from __future__ import annotations


class BrickError(ValueError):
    """Base class for every error raised while reading the ontology."""


class UnknownPrefixError(BrickError):
    """A CURIE prefix has no registered base IRI."""

    def __init__(self, prefix: str):
        super().__init__(f"Unknown prefix: {prefix!r}")
        self.prefix = prefix


class UnresolvedNamespaceError(BrickError):
    """An IRI's namespace part matches no registered base IRI."""

    def __init__(self, iri: str):
        super().__init__(f"No registered namespace for IRI: {iri!r}")
        self.iri = iri


class MissingFragmentOrPathError(BrickError):
    """An IRI has neither a fragment nor a path segment to use as local name."""

    def __init__(self, iri: str):
        super().__init__(f"IRI has no fragment or path segment: {iri!r}")
        self.iri = iri


class InvalidCurieFormatError(BrickError):
    def __init__(self, text: str):
        super().__init__(f"Invalid CURIE {text!r}, expected 'prefix:local'")
        self.text = text


class NotAnIdentifierError(BrickError):
    """Expected an IRI, found a literal or blank node."""

    def __init__(self, term, context: str = ""):
        where = f" ({context})" if context else ""
        super().__init__(f"Expected an identifier, found {term!r}{where}")
        self.term = term


class MissingLiteralError(BrickError):
    """Expected a literal value (optionally of a given type), found none."""

    def __init__(self, term, context: str = ""):
        where = f" ({context})" if context else ""
        super().__init__(f"Expected a literal value, found {term!r}{where}")
        self.term = term


class BlankNodeExpectedError(BrickError):
    def __init__(self, term, context: str = ""):
        where = f" ({context})" if context else ""
        super().__init__(f"Expected a blank node, found {term!r}{where}")
        self.term = term


class MalformedListError(BrickError):
    """A collection or shape nesting did not terminate within the guard."""
