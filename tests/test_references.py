"""Tests for cross-reference resolution."""

from __future__ import annotations

from netdocs.models import EntityTable, MemberRecord, NamespaceRecord, TypeRecord
from netdocs.references import ReferenceResolver


def _table() -> EntityTable:
    table = EntityTable()
    table.add("System", NamespaceRecord(name="System", path="system"))
    table.add("System.String", TypeRecord(id="System.String", name="String", path="system.string"))
    table.add(
        "System.Collections.Generic.List`1",
        TypeRecord(
            id="System.Collections.Generic.List`1",
            name="List<T>",
            path="system.collections.generic.list-1",
        ),
    )
    table.add("System.String.Length", MemberRecord(id="System.String.Length", kind="properties"))
    table.add("System.Unparsed", TypeRecord(id="System.Unparsed"))
    return table


def _resolver() -> ReferenceResolver:
    return ReferenceResolver(_table(), "netcore-2.2")


def test_resolve_links_known_type_by_path_and_name() -> None:
    text = 'Compare with <see cref="T:System.String" />.'

    assert _resolver().resolve(text) == 'Compare with <a href="system.string">String</a>.'


def test_resolve_accepts_expanded_see_element() -> None:
    text = '<see cref="N:System"></see>'

    assert _resolver().resolve(text) == '<a href="system">System</a>'


def test_resolve_escapes_display_name() -> None:
    text = '<see cref="T:System.Collections.Generic.List`1"/>'

    assert _resolver().resolve(text) == (
        '<a href="system.collections.generic.list-1">List&lt;T&gt;</a>'
    )


def test_resolve_falls_back_to_external_link() -> None:
    text = '<see cref="T:System.Data.DataSet"/>'

    assert _resolver().resolve(text) == (
        '<a href="https://docs.microsoft.com/en-us/dotnet/api/system.data.dataset'
        '?view=netcore-2.2">System.Data.DataSet</a>'
    )


def test_members_and_unparsed_types_link_externally() -> None:
    resolver = _resolver()

    assert resolver.link_for("P:System.String.Length") == (
        '<a href="https://docs.microsoft.com/en-us/dotnet/api/system.string.length'
        '?view=netcore-2.2">System.String.Length</a>'
    )
    assert "system.unparsed?view=netcore-2.2" in resolver.link_for("T:System.Unparsed")


def test_custom_external_base_url() -> None:
    resolver = ReferenceResolver(
        _table(), "netframework-4.8", external_base_url="https://example.test/api/"
    )

    assert resolver.external_url("System.Foo") == (
        "https://example.test/api/system.foo?view=netframework-4.8"
    )


def test_resolve_is_idempotent_and_read_only() -> None:
    resolver = _resolver()
    before = resolver.table.items()
    text = 'A <see cref="T:System.String"/> and <see cref="T:Other.Thing"/>.'

    once = resolver.resolve(text)

    assert resolver.resolve(once) == once
    assert resolver.table.items() == before


def test_resolve_handles_missing_text() -> None:
    assert _resolver().resolve(None) == ""
    assert _resolver().resolve("") == ""
