"""Extraction of narrative documentation text from ``<Docs>`` blocks."""

from __future__ import annotations

import html
from typing import Optional, Union
from urllib.parse import unquote

from lxml import etree

from ..models import NamespaceRecord, TypeRecord

PLACEHOLDER_TEXT = "To be added."

# record attribute -> element name in the corpus
_DOC_SLOTS: tuple[tuple[str, str], ...] = (
    ("summary", "summary"),
    ("remarks", "remarks"),
    ("thread_safe", "threadsafe"),
)


def extract_docs(
    node: Optional[Union[etree._Element, etree._ElementTree]],
    record: Union[NamespaceRecord, TypeRecord],
) -> None:
    """Copy summary, remarks and thread-safety text from ``node`` onto ``record``.

    Missing slots, and slots holding only the corpus placeholder, leave the
    record's field untouched.
    """
    if node is None:
        return
    if isinstance(node, etree._ElementTree):
        node = node.getroot()

    for attribute, tag in _DOC_SLOTS:
        text = get_text(node.find(f".//{tag}"))
        if text is not None:
            setattr(record, attribute, text)


def get_text(node: Optional[etree._Element]) -> Optional[str]:
    """Return the decoded inner markup of ``node``, preferring its ``format`` child."""
    if node is None:
        return None

    format_node = node.find("format")
    if format_node is not None:
        node = format_node

    content = unquote(inner_xml(node).strip())
    if content == PLACEHOLDER_TEXT:
        return None
    return content


def inner_xml(node: etree._Element) -> str:
    """Serialise the children of ``node`` with its text escaped like the tails."""
    parts = [html.escape(node.text or "", quote=False)]
    for child in node:
        parts.append(etree.tostring(child, encoding="unicode", with_tail=True))
    return "".join(parts)


__all__ = ["PLACEHOLDER_TEXT", "extract_docs", "get_text", "inner_xml"]
