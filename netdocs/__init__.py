"""Parse the .NET API documentation corpus into a cross-linked model."""

from .models import EntityTable, MemberRecord, NamespaceRecord, TypeRecord
from .parsing import CorpusParser
from .references import ReferenceResolver

__version__ = "0.1.0"

__all__ = [
    "CorpusParser",
    "EntityTable",
    "MemberRecord",
    "NamespaceRecord",
    "ReferenceResolver",
    "TypeRecord",
]
