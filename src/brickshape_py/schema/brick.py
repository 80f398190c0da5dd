"""Class and property descriptor model (BrickEntity, BrickProperty, etc.)."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from brickshape_py.schema.common import Cardinality, Curie


class PairKind(Enum):
    EQUAL = "Equal"
    DISJOINT = "Disjoint"
    LESS_THAN = "LessThan"
    LESS_THAN_OR_EQUAL = "LessThanOrEqual"


class LogicalKind(Enum):
    NOT = "Not"
    AND = "And"
    OR = "Or"
    XONE = "XOne"


@dataclass
class PropertyPairConstraint:
    """Comparison between this property's values and another property's."""

    kind: PairKind
    other: str  # local name of the other property path

    def to_dict(self) -> dict:
        return {self.kind.value: self.other}


@dataclass
class LogicalConstraint:
    """Boolean combinator over nested property shapes.

    ``properties`` may themselves carry logical constraints, so a list of
    these forms an arbitrarily deep tree.
    """

    kind: LogicalKind
    properties: list["BrickProperty"] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {self.kind.value: [p.to_dict() for p in self.properties]}


@dataclass
class BrickProperty:
    path: str = ""
    definition: str = ""
    class_: Optional[Curie] = None
    subclass_of: list[Curie] = field(default_factory=list)

    min_count: Optional[int] = None
    max_count: Optional[int] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None

    min_inclusive: Optional[float] = None
    max_inclusive: Optional[float] = None
    min_exclusive: Optional[float] = None
    max_exclusive: Optional[float] = None

    pattern: Optional[str] = None
    datatype: Optional[Curie] = None
    node_kind: Optional[Curie] = None

    constraints: list[PropertyPairConstraint] = field(default_factory=list)
    logical_constraints: list[LogicalConstraint] = field(default_factory=list)
    one_of: list[str] = field(default_factory=list)
    has_value: Optional[str] = None

    @property
    def cardinality(self) -> Cardinality:
        return Cardinality(min=self.min_count, max=self.max_count)

    def constraint(self, kind: LogicalKind) -> Optional[LogicalConstraint]:
        """Return the first logical constraint of the given kind, if any."""
        for lc in self.logical_constraints:
            if lc.kind is kind:
                return lc
        return None

    def to_dict(self) -> dict:
        d: dict = {"path": self.path}
        if self.definition:
            d["definition"] = self.definition
        if self.class_ is not None:
            d["class"] = str(self.class_)
        if self.subclass_of:
            d["subclassOf"] = [str(c) for c in self.subclass_of]

        for key, value in (
            ("minCount", self.min_count),
            ("maxCount", self.max_count),
            ("minLength", self.min_length),
            ("maxLength", self.max_length),
            ("minInclusive", self.min_inclusive),
            ("maxInclusive", self.max_inclusive),
            ("minExclusive", self.min_exclusive),
            ("maxExclusive", self.max_exclusive),
            ("pattern", self.pattern),
        ):
            if value is not None:
                d[key] = value

        if self.datatype is not None:
            d["datatype"] = str(self.datatype)
        if self.node_kind is not None:
            d["nodeKind"] = str(self.node_kind)
        if self.constraints:
            d["constraints"] = [c.to_dict() for c in self.constraints]
        if self.logical_constraints:
            d["logicalConstraints"] = [lc.to_dict() for lc in self.logical_constraints]
        if self.one_of:
            d["oneOf"] = list(self.one_of)
        if self.has_value is not None:
            d["hasValue"] = self.has_value
        return d


@dataclass
class BrickEntity:
    name: str
    namespace: str = ""
    label: str = ""
    definition: str = ""
    types: list[str] = field(default_factory=list)
    super_classes: list[Curie] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    properties: list[BrickProperty] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "namespace": self.namespace,
            "label": self.label,
            "definition": self.definition,
            "types": list(self.types),
            "superClasses": [c.to_dict() for c in self.super_classes],
            "tags": list(self.tags),
            "properties": [p.to_dict() for p in self.properties],
        }
