"""Corpus parsing: index, namespace and type documents."""

from .parser import FRAMEWORK_ALTERNATE_CLAUSE, CorpusParser, Document
from .text import PLACEHOLDER_TEXT, extract_docs, get_text

__all__ = [
    "CorpusParser",
    "Document",
    "FRAMEWORK_ALTERNATE_CLAUSE",
    "PLACEHOLDER_TEXT",
    "extract_docs",
    "get_text",
]
