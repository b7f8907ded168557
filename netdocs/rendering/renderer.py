"""HTML page rendering for the parsed corpus."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from ..config import VersionConfig
from ..models import EntityTable, NamespaceRecord, TYPE_KIND_BUCKETS, TypeRecord
from ..references import ReferenceResolver

ATTRIBUTION_BASE_URL = "https://docs.microsoft.com/en-us/dotnet/api"

_MEMBER_SECTIONS: tuple[tuple[str, str], ...] = (
    ("fields", "Fields"),
    ("properties", "Properties"),
    ("methods", "Methods"),
    ("operators", "Operators"),
    ("events", "Events"),
)


class HtmlRenderer:
    """Renders index, namespace and type pages from a completed entity table."""

    def __init__(
        self,
        table: EntityTable,
        version: VersionConfig,
        resolver: ReferenceResolver,
        templates_dir: Path | None = None,
    ) -> None:
        self.table = table
        self.version = version
        self.resolver = resolver
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self._env = self._create_env(self.templates_dir)

    def render_index(self) -> str:
        namespaces = list(self.table.iter_namespaces())
        return self._render("index.html.j2", namespaces=namespaces)

    def render_namespace(self, namespace: NamespaceRecord) -> str:
        tables = [
            (kind, self._types(namespace.bucket(kind))) for kind in TYPE_KIND_BUCKETS
        ]
        return self._render("namespace.html.j2", namespace=namespace, tables=tables)

    def render_type(self, type_record: TypeRecord) -> str:
        members = [
            (title, type_record.bucket(kind))
            for kind, title in _MEMBER_SECTIONS
            if type_record.bucket(kind)
        ]
        return self._render(
            "type.html.j2",
            type=type_record,
            inheritance=self._inheritance(type_record),
            derived=self._types(type_record.derived),
            members=members,
        )

    def attribution_link(self, path: str) -> str:
        return f"{ATTRIBUTION_BASE_URL}/{path}?view={self.version.framework_id}"

    # ------------------------------------------------------------------
    # Internal helpers

    def _render(self, template_name: str, **context: object) -> str:
        template = self._env.get_template(template_name)
        return template.render(
            version=self.version, attribution_link=self.attribution_link, **context
        ).strip() + "\n"

    def _types(self, identifiers: Sequence[str]) -> List[TypeRecord]:
        records: List[TypeRecord] = []
        for identifier in identifiers:
            record = self.table.get_type(identifier)
            if record is not None and record.parsed:
                records.append(record)
        return records

    def _inheritance(self, type_record: TypeRecord) -> List[str]:
        """Return base identifiers from the root down, stopping at the first gap."""
        chain: List[str] = []
        seen = {type_record.id}
        current: Optional[TypeRecord] = type_record
        while current is not None and current.base and current.base not in seen:
            chain.append(current.base)
            seen.add(current.base)
            current = self.table.get_type(current.base)
        chain.reverse()
        return chain

    def _format(self, text: Optional[str]) -> Markup:
        return Markup(self.resolver.resolve(text))

    def _link(self, identifier: str) -> Markup:
        return Markup(self.resolver.link_to(identifier))

    def _create_env(self, templates_dir: Path) -> Environment:
        env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "j2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        env.filters["format"] = self._format
        env.filters["link"] = self._link
        env.filters["plural"] = singular_to_plural
        return env


def singular_to_plural(singular: str) -> str:
    suffix = "es" if singular.endswith("s") else "s"
    return singular + suffix


__all__ = ["HtmlRenderer", "singular_to_plural"]
