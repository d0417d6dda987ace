"""Sort discovered symbols into per-namespace name sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Set

from .document import Symbol
from .errors import SymbolNameError
from .kinds import BUCKET_KINDS, SymbolBucket, SymbolKind


@dataclass
class SymbolSets:
    """Short names collected for one namespace, one set per bucket."""

    types: Set[str] = field(default_factory=set)
    enum_cases: Set[str] = field(default_factory=set)
    methods: Set[str] = field(default_factory=set)
    properties: Set[str] = field(default_factory=set)
    functions: Set[str] = field(default_factory=set)
    constants: Set[str] = field(default_factory=set)

    def bucket(self, bucket: SymbolBucket) -> Set[str]:
        return getattr(self, bucket.value)

    def copy(self) -> SymbolSets:
        """Return a copy whose sets are independent of this one."""
        return SymbolSets(**{bucket.value: set(self.bucket(bucket)) for bucket in SymbolBucket})

    def sorted(self) -> Dict[str, List[str]]:
        """Bucket name to sorted names, in declaration order."""
        return {bucket.value: sorted(self.bucket(bucket)) for bucket in SymbolBucket}

    def to_dict(self) -> Dict[str, List[str]]:
        return self.sorted()

    def __len__(self) -> int:
        return sum(len(self.bucket(bucket)) for bucket in SymbolBucket)


def simple_name_of(title: str) -> str:
    """Strip the parameter list and qualifying prefix from a display title.

    ``"Array.append(_:)"`` becomes ``"append"``; ``"Foundation.Data"``
    becomes ``"Data"``.
    """
    unqualified = title.split("(", 1)[0]
    segments = [segment for segment in unqualified.split(".") if segment]
    if not segments:
        raise SymbolNameError(title)
    return segments[-1]


def buckets_for(kind: SymbolKind) -> List[SymbolBucket]:
    # Every table is checked; they are disjoint today, but a new tag could
    # be added to more than one.
    return [bucket for bucket, kinds in BUCKET_KINDS.items() if kind in kinds]


def classify_symbol(symbol: Symbol, symbol_sets: SymbolSets) -> List[SymbolBucket]:
    """Add *symbol*'s short name to every matching bucket of *symbol_sets*.

    Returns the buckets that matched. The name is only extracted when at
    least one bucket matches.
    """
    buckets = buckets_for(SymbolKind.from_tag(symbol.kind))
    if not buckets:
        return buckets

    name = simple_name_of(symbol.title.content)
    for bucket in buckets:
        symbol_sets.bucket(bucket).add(name)
    return buckets
