"""Read-only triple pattern facade over an rdflib graph."""
from __future__ import annotations

import logging
import os
from typing import Iterator, Optional

from rdflib import Graph
from rdflib.term import Node

log = logging.getLogger(__name__)


class TripleStore:
    """Pattern-matching view of a loaded graph.

    Any position of a pattern may be ``None`` (wildcard). The store never
    adds or removes statements after construction.
    """

    def __init__(self, graph: Graph):
        self._graph = graph

    @classmethod
    def load(cls, source: str, format: str = "turtle") -> "TripleStore":
        """Parse a document (file path or serialized text) into a store."""
        g = Graph()
        if os.path.isfile(source):
            g.parse(source=source, format=format)
        else:
            g.parse(data=source, format=format)
        log.info("Loaded %d triples (%s)", len(g), format)
        return cls(g)

    @property
    def graph(self) -> Graph:
        return self._graph

    def triples(
        self,
        subject: Optional[Node] = None,
        predicate: Optional[Node] = None,
        obj: Optional[Node] = None,
    ) -> Iterator[tuple[Node, Node, Node]]:
        return self._graph.triples((subject, predicate, obj))

    def objects(self, subject: Node, predicate: Node) -> Iterator[Node]:
        for _, _, o in self.triples(subject, predicate, None):
            yield o

    def subjects(self, predicate: Node, obj: Node) -> Iterator[Node]:
        for s, _, _ in self.triples(None, predicate, obj):
            yield s

