"""Tests for documentation text extraction."""

from __future__ import annotations

from lxml import etree

from netdocs.models import NamespaceRecord, TypeRecord
from netdocs.parsing.text import extract_docs, get_text


def _node(xml: str) -> etree._Element:
    return etree.fromstring(xml)


def test_placeholder_summary_is_not_stored() -> None:
    record = TypeRecord(id="Demo.Widget")
    extract_docs(_node("<Docs><summary>To be added.</summary></Docs>"), record)

    assert record.summary is None


def test_extract_docs_fills_all_slots() -> None:
    record = NamespaceRecord(name="Demo", path="demo")
    extract_docs(
        _node(
            "<Docs>"
            "<summary>  Widgets and gadgets. </summary>"
            "<remarks>Use with care.</remarks>"
            "<threadsafe>Instances are not thread safe.</threadsafe>"
            "</Docs>"
        ),
        record,
    )

    assert record.summary == "Widgets and gadgets."
    assert record.remarks == "Use with care."
    assert record.thread_safe == "Instances are not thread safe."


def test_extract_docs_without_block_is_noop() -> None:
    record = TypeRecord(id="Demo.Widget", summary="kept")
    extract_docs(None, record)

    assert record.summary == "kept"


def test_extract_docs_accepts_whole_document() -> None:
    record = NamespaceRecord(name="Demo", path="demo")
    tree = etree.ElementTree(
        _node('<Namespace Name="Demo"><Docs><summary>Top level.</summary></Docs></Namespace>')
    )
    extract_docs(tree, record)

    assert record.summary == "Top level."


def test_get_text_prefers_format_child() -> None:
    node = _node(
        "<remarks><format type=\"text/markdown\"><![CDATA[\n## Remarks\nUse it.\n]]></format></remarks>"
    )

    assert get_text(node) == "## Remarks\nUse it."


def test_get_text_keeps_inline_markup_and_decodes_escapes() -> None:
    node = _node('<summary>Returns 50%25 of <see cref="T:System.String" /> <c>value</c>.</summary>')

    assert get_text(node) == 'Returns 50% of <see cref="T:System.String"/> <c>value</c>.'


def test_get_text_of_missing_node_is_none() -> None:
    assert get_text(None) is None


def test_get_text_escapes_entities_on_both_sides_of_child_elements() -> None:
    node = _node("<summary>if a &lt; b &amp; c <c>x</c> then a &lt; b</summary>")

    assert get_text(node) == "if a &lt; b &amp; c <c>x</c> then a &lt; b"


def test_get_text_escapes_entities_without_child_elements() -> None:
    node = _node("<summary>Returns &lt;script&gt;alert(1)&lt;/script&gt;.</summary>")

    assert get_text(node) == "Returns &lt;script&gt;alert(1)&lt;/script&gt;."


def test_get_text_escapes_markup_inside_format_cdata() -> None:
    node = _node(
        "<remarks><format type=\"text/markdown\"><![CDATA[Use `List<T>` & <b>bold</b>.]]></format></remarks>"
    )

    assert get_text(node) == "Use `List&lt;T&gt;` &amp; &lt;b&gt;bold&lt;/b&gt;."
