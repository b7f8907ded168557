"""Resolution of ``<see cref="..."/>`` references into HTML links."""

from __future__ import annotations

import html
import re
from typing import Optional

from .identifiers import strip_doc_id_prefix
from .models import EntityTable

DEFAULT_EXTERNAL_BASE_URL = "https://docs.microsoft.com/en-us/dotnet/api"


class ReferenceResolver:
    """Rewrites cross-references against an entity table.

    A reference whose identifier is a parsed namespace or type links to that
    entity's page. Anything else (excluded from this framework, a member, or
    outside the corpus) links to the canonical documentation site instead.
    The table is only read.
    """

    _SEE_PATTERN = re.compile(r'<see cref="([^"]+)"\s*(?:/>|>\s*</see>)')

    def __init__(
        self,
        table: EntityTable,
        framework_id: str,
        *,
        external_base_url: str = DEFAULT_EXTERNAL_BASE_URL,
    ) -> None:
        self.table = table
        self.framework_id = framework_id
        self.external_base_url = external_base_url.rstrip("/")

    def resolve(self, text: Optional[str]) -> str:
        """Return ``text`` with every cref replaced by an anchor."""
        if not text:
            return ""
        return self._SEE_PATTERN.sub(lambda match: self.link_for(match.group(1)), text)

    def link_for(self, doc_id: str) -> str:
        return self.link_to(strip_doc_id_prefix(doc_id))

    def link_to(self, identifier: str) -> str:
        """Return an anchor for an identifier that already lacks its DocId prefix."""
        target = self.local_target(identifier)
        if target is None:
            href = self.external_url(identifier)
            return f'<a href="{html.escape(href)}">{html.escape(identifier)}</a>'
        path, name = target
        return f'<a href="{html.escape(path)}">{html.escape(name)}</a>'

    def local_target(self, identifier: str) -> Optional[tuple[str, str]]:
        """Return ``(path, name)`` when ``identifier`` has a page of its own."""
        record = self.table.get(identifier)
        path = getattr(record, "path", None)
        name = getattr(record, "name", None)
        if not path or not name:
            return None
        return path, name

    def external_url(self, identifier: str) -> str:
        return f"{self.external_base_url}/{identifier.lower()}?view={self.framework_id}"


__all__ = ["DEFAULT_EXTERNAL_BASE_URL", "ReferenceResolver"]
