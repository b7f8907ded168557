"""Core data models for the parsed documentation corpus."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Literal, Optional, Union

TypeKind = Literal["Class", "Struct", "Interface", "Enum", "Delegate"]
MemberKind = Literal["fields", "properties", "methods", "operators", "events"]

# Type kinds as inferred from the C# signature, mapped to the namespace bucket
# that lists them.
TYPE_KIND_BUCKETS: Dict[TypeKind, str] = {
    "Class": "classes",
    "Struct": "structs",
    "Interface": "interfaces",
    "Enum": "enums",
    "Delegate": "delegates",
}

# Member kinds, named after the type bucket that lists them.
MEMBER_KINDS: tuple[MemberKind, ...] = ("fields", "properties", "methods", "operators", "events")


@dataclass
class NamespaceRecord:
    """A namespace and the identifiers of the types it contains."""

    name: str
    path: str
    types: List[str] = field(default_factory=list)
    classes: List[str] = field(default_factory=list)
    structs: List[str] = field(default_factory=list)
    interfaces: List[str] = field(default_factory=list)
    enums: List[str] = field(default_factory=list)
    delegates: List[str] = field(default_factory=list)
    summary: Optional[str] = None
    remarks: Optional[str] = None
    thread_safe: Optional[str] = None

    def bucket(self, kind: TypeKind) -> List[str]:
        return getattr(self, TYPE_KIND_BUCKETS[kind])


@dataclass
class TypeRecord:
    """A class, struct, interface, enum or delegate.

    Only ``id`` and the member buckets are known after index parsing; the rest
    is filled in when the type's own file is parsed.
    """

    id: str
    name: Optional[str] = None
    namespace: Optional[str] = None
    path: Optional[str] = None
    kind: Optional[TypeKind] = None
    signatures: Dict[str, str] = field(default_factory=dict)
    interfaces: List[str] = field(default_factory=list)
    attributes: List[str] = field(default_factory=list)
    assemblies: Dict[str, List[str]] = field(default_factory=dict)
    base: Optional[str] = None
    base_name: Optional[str] = None
    derived: List[str] = field(default_factory=list)
    fields: List[str] = field(default_factory=list)
    properties: List[str] = field(default_factory=list)
    methods: List[str] = field(default_factory=list)
    operators: List[str] = field(default_factory=list)
    events: List[str] = field(default_factory=list)
    summary: Optional[str] = None
    remarks: Optional[str] = None
    thread_safe: Optional[str] = None

    @property
    def parsed(self) -> bool:
        """True once the type's own document has been ingested."""
        return self.name is not None and self.path is not None

    def bucket(self, member_kind: MemberKind) -> List[str]:
        if member_kind not in MEMBER_KINDS:
            raise KeyError(member_kind)
        return getattr(self, member_kind)


@dataclass
class MemberRecord:
    """Placeholder for a field, property, method, operator or event."""

    id: str
    kind: Optional[MemberKind] = None
    summary: Optional[str] = None


Record = Union[NamespaceRecord, TypeRecord, MemberRecord]


class EntityTable:
    """Lookup table from stable identifier to namespace, type or member record.

    The table is owned by whoever builds it and passed explicitly to the
    parser, resolver and renderer. Records are added once and only mutated
    afterwards.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, Record] = {}
        self.namespaces: List[str] = []
        self.type_paths: List[str] = []

    def reset(self) -> None:
        self._entries = {}
        self.namespaces = []
        self.type_paths = []

    def add(self, identifier: str, record: Record) -> Record:
        if identifier in self._entries:
            raise ValueError(f"Identifier already registered: {identifier}")
        self._entries[identifier] = record
        return record

    def get(self, identifier: str) -> Optional[Record]:
        return self._entries.get(identifier)

    def get_namespace(self, identifier: str) -> Optional[NamespaceRecord]:
        record = self._entries.get(identifier)
        return record if isinstance(record, NamespaceRecord) else None

    def get_type(self, identifier: str) -> Optional[TypeRecord]:
        record = self._entries.get(identifier)
        return record if isinstance(record, TypeRecord) else None

    def iter_namespaces(self) -> Iterator[NamespaceRecord]:
        for identifier in self.namespaces:
            record = self.get_namespace(identifier)
            if record is not None:
                yield record

    def items(self) -> List[tuple[str, Record]]:
        return list(self._entries.items())

    def __getitem__(self, identifier: str) -> Record:
        return self._entries[identifier]

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


__all__ = [
    "EntityTable",
    "MEMBER_KINDS",
    "MemberKind",
    "MemberRecord",
    "NamespaceRecord",
    "Record",
    "TYPE_KIND_BUCKETS",
    "TypeKind",
    "TypeRecord",
]
