"""Shared value types for class and property descriptors."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from brickshape_py.errors import InvalidCurieFormatError


@dataclass(frozen=True)
class Curie:
    """Compact identifier, e.g. ``brick:Location``."""

    prefix: str
    local_name: str

    @classmethod
    def parse(cls, text: str) -> "Curie":
        """Parse ``prefix:local``, splitting on the first colon."""
        parts = text.split(":", 1)
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise InvalidCurieFormatError(text)
        return cls(prefix=parts[0], local_name=parts[1])

    def __str__(self):
        return f"{self.prefix}:{self.local_name}"

    def __repr__(self):
        return f"Curie({str(self)!r})"

    def to_dict(self) -> dict:
        return {"prefix": self.prefix, "localName": self.local_name}


@dataclass
class Prefix:
    name: str
    iri: str


@dataclass
class Cardinality:
    min: Optional[int] = None   # None = not specified
    max: Optional[int] = None   # None = unbounded

    def __str__(self):
        mn = self.min if self.min is not None else 0
        mx = self.max if self.max is not None else "*"
        return f"{{{mn},{mx}}}"

