"""Kind tags used by the documentation schema and the buckets they map to."""

from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, Optional

ROLE_COLLECTION_GROUP = "collectionGroup"
ROLE_PSEUDO_SYMBOL = "pseudoSymbol"
EXCLUDED_DOMAINS: FrozenSet[str] = frozenset({"entitlements"})


class SymbolKind(Enum):
    """Known kind tags; anything else is ``OTHER``."""

    # Types
    CLASS = "cl"
    STRUCT = "struct"
    PROTOCOL = "intf"
    ENUM = "enum"
    TYPEALIAS = "tdef"
    CLASS_TYPEALIAS = "cltdef"
    STRUCT_TYPEALIAS = "structtdef"
    PROTOCOL_TYPEALIAS = "intftdef"
    ENUM_TYPEALIAS = "enumtdef"
    # Enum cases
    ENUM_CASE = "enumelt"
    # Methods
    INSTANCE_METHOD = "instm"
    CLASS_METHOD = "clm"
    STRUCT_METHOD = "structm"
    STRUCT_TYPE_METHOD = "structcm"
    PROTOCOL_METHOD = "intfm"
    PROTOCOL_TYPE_METHOD = "intfcm"
    ENUM_METHOD = "enumm"
    ENUM_TYPE_METHOD = "enumcm"
    # Properties
    INSTANCE_PROPERTY = "instp"
    CLASS_PROPERTY = "cldata"
    STRUCT_PROPERTY = "structp"
    STRUCT_TYPE_PROPERTY = "structdata"
    PROTOCOL_PROPERTY = "intfp"
    PROTOCOL_TYPE_PROPERTY = "intfdata"
    ENUM_PROPERTY = "enump"
    ENUM_TYPE_PROPERTY = "enumdata"
    # Free functions and global constants
    FUNCTION = "func"
    CONSTANT = "data"

    OTHER = "__other__"

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> "SymbolKind":
        if tag is None:
            return cls.OTHER
        return _BY_TAG.get(tag, cls.OTHER)


_BY_TAG: Dict[str, SymbolKind] = {
    kind.value: kind for kind in SymbolKind if kind is not SymbolKind.OTHER
}


class SymbolBucket(Enum):
    """Output categories; values are the :class:`SymbolSets` field names."""

    TYPES = "types"
    ENUM_CASES = "enum_cases"
    METHODS = "methods"
    PROPERTIES = "properties"
    FUNCTIONS = "functions"
    CONSTANTS = "constants"


CLASS_LIKE_KINDS: FrozenSet[SymbolKind] = frozenset(
    {SymbolKind.CLASS, SymbolKind.STRUCT, SymbolKind.PROTOCOL, SymbolKind.ENUM}
)

TYPE_KINDS: FrozenSet[SymbolKind] = frozenset(
    {
        SymbolKind.CLASS,
        SymbolKind.STRUCT,
        SymbolKind.PROTOCOL,
        SymbolKind.ENUM,
        SymbolKind.TYPEALIAS,
        SymbolKind.CLASS_TYPEALIAS,
        SymbolKind.STRUCT_TYPEALIAS,
        SymbolKind.PROTOCOL_TYPEALIAS,
        SymbolKind.ENUM_TYPEALIAS,
    }
)

ENUM_CASE_KINDS: FrozenSet[SymbolKind] = frozenset({SymbolKind.ENUM_CASE})

METHOD_KINDS: FrozenSet[SymbolKind] = frozenset(
    {
        SymbolKind.INSTANCE_METHOD,
        SymbolKind.CLASS_METHOD,
        SymbolKind.STRUCT_METHOD,
        SymbolKind.STRUCT_TYPE_METHOD,
        SymbolKind.PROTOCOL_METHOD,
        SymbolKind.PROTOCOL_TYPE_METHOD,
        SymbolKind.ENUM_METHOD,
        SymbolKind.ENUM_TYPE_METHOD,
    }
)

PROPERTY_KINDS: FrozenSet[SymbolKind] = frozenset(
    {
        SymbolKind.INSTANCE_PROPERTY,
        SymbolKind.CLASS_PROPERTY,
        SymbolKind.STRUCT_PROPERTY,
        SymbolKind.STRUCT_TYPE_PROPERTY,
        SymbolKind.PROTOCOL_PROPERTY,
        SymbolKind.PROTOCOL_TYPE_PROPERTY,
        SymbolKind.ENUM_PROPERTY,
        SymbolKind.ENUM_TYPE_PROPERTY,
    }
)

FUNCTION_KINDS: FrozenSet[SymbolKind] = frozenset({SymbolKind.FUNCTION})

CONSTANT_KINDS: FrozenSet[SymbolKind] = frozenset({SymbolKind.CONSTANT})

BUCKET_KINDS: Dict[SymbolBucket, FrozenSet[SymbolKind]] = {
    SymbolBucket.TYPES: TYPE_KINDS,
    SymbolBucket.ENUM_CASES: ENUM_CASE_KINDS,
    SymbolBucket.METHODS: METHOD_KINDS,
    SymbolBucket.PROPERTIES: PROPERTY_KINDS,
    SymbolBucket.FUNCTIONS: FUNCTION_KINDS,
    SymbolBucket.CONSTANTS: CONSTANT_KINDS,
}


def is_class_like(kind: SymbolKind) -> bool:
    return kind in CLASS_LIKE_KINDS
