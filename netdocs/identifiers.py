"""Identifier and path helpers for corpus DocIds and type names.

Everything here is a pure function of the strings found in the corpus. The
identifier scheme drops the DocId kind prefix (``T:``, ``M:``, ...) so that
``<see cref>`` references, which embed DocIds verbatim, can be looked up by
stripping two characters.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional, Tuple

from .models import TYPE_KIND_BUCKETS, MemberKind, TypeKind

# Keywords that show up first in delegate signatures, e.g.
# ``public delegate void EventHandler(...)``.
DELEGATE_TYPES: tuple[str, ...] = ("Void", "Int", "Bool", "Object", "String")

ROOT_TYPE = "System.Object"

_MEMBER_PREFIXES = {
    "F": "fields",
    "P": "properties",
    "M": "methods",
    "E": "events",
}

_OPERATOR_MARKER = ".op_"

_KIND_KEYWORD = re.compile(r"([a-z]+) [^a-z]")


def strip_doc_id_prefix(doc_id: str) -> str:
    """Return ``doc_id`` without its one-letter kind and colon."""
    return doc_id[2:]


def type_identifier(doc_id: str) -> str:
    return strip_doc_id_prefix(doc_id)


def member_identifier(doc_id: str) -> Tuple[str, Optional[MemberKind]]:
    """Return the member identifier and the bucket it belongs in.

    The bucket is ``None`` for prefixes that aren't field, property, method or
    event. Methods named like ``op_Equality`` are operators.
    """
    identifier = strip_doc_id_prefix(doc_id)
    kind = _MEMBER_PREFIXES.get(doc_id[:1])
    if kind == "methods" and _OPERATOR_MARKER in identifier:
        kind = "operators"
    return identifier, kind


def type_file_path(type_name: str) -> str:
    """Map an index type name to its file path, without extension.

    ``System.Environment/SpecialFolder`` -> ``System/Environment+SpecialFolder``
    """
    normalised = type_name.replace("/", "+")
    head, sep, tail = normalised.rpartition(".")
    if not sep:
        return normalised
    return f"{head}/{tail}"


def display_name(name: str) -> str:
    """Show nested types with a dot instead of the corpus ``+`` separator."""
    return name.replace("+", ".")


def namespace_path(name: str) -> str:
    return name.lower()


def type_path(full_name: str) -> str:
    return display_name(full_name).lower()


def type_kind_from_signature(
    signature: str, pseudo_primitives: Iterable[str] = DELEGATE_TYPES
) -> Optional[TypeKind]:
    """Infer the type kind from a C# signature.

    ``public sealed class String`` -> ``Class``. Delegate signatures start with
    their return type, so a primitive-looking keyword means ``Delegate``.
    Returns ``None`` when no keyword is found or it isn't a known kind.
    """
    match = _KIND_KEYWORD.search(signature or "")
    if match is None:
        return None
    kind = match.group(1).title()
    if kind in set(pseudo_primitives):
        kind = "Delegate"
    if kind not in TYPE_KIND_BUCKETS:
        return None
    return kind


def base_identifier_from_display_name(name: str) -> str:
    """Convert a base type name like ``System.Lazy<T>`` into ``System.Lazy`1``."""
    if "<" not in name:
        return name
    outer, _, rest = name.partition("<")
    arity = 1
    depth = 0
    for char in rest:
        if char == "<":
            depth += 1
        elif char == ">":
            if depth == 0:
                break
            depth -= 1
        elif char == "," and depth == 0:
            arity += 1
    return f"{outer}`{arity}"


__all__ = [
    "DELEGATE_TYPES",
    "ROOT_TYPE",
    "base_identifier_from_display_name",
    "display_name",
    "member_identifier",
    "namespace_path",
    "strip_doc_id_prefix",
    "type_file_path",
    "type_identifier",
    "type_kind_from_signature",
    "type_path",
]
