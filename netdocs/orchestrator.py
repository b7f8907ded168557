"""Pipeline orchestration: read the corpus, parse it, render and store pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator, List

from .config import NetDocsConfig, VersionConfig
from .errors import MalformedDocument, SetupError
from .logging import get_logger
from .models import EntityTable, NamespaceRecord, TypeRecord
from .parsing import CorpusParser, Document
from .reader import CorpusReader
from .references import ReferenceResolver
from .rendering import HtmlRenderer
from .stores import Entry, EntryIndex

INDEX_FILENAME = "index.json"


@dataclass
class Page:
    """A rendered page and the entries that point at it."""

    path: str
    store_path: str
    output: str
    entries: List[Entry]


@dataclass
class BuildResult:
    """Outcome of a full build run."""

    output_dir: Path
    pages: int
    skipped: List[str] = field(default_factory=list)


class Orchestrator:
    """Drives index, namespace and type ingestion in order, then renders pages."""

    def __init__(
        self,
        config: NetDocsConfig,
        version: VersionConfig,
        reader: CorpusReader | None = None,
    ) -> None:
        self.config = config
        self.version = version
        self.reader = reader or CorpusReader(config.api_docs_dir, config.samples_dir)
        self.table = EntityTable()
        self.parser = CorpusParser(version.framework_id, self.table)
        self.resolver = ReferenceResolver(
            self.table,
            version.framework_id,
            external_base_url=config.external_base_url,
        )
        self.renderer = HtmlRenderer(self.table, version, self.resolver)
        self.logger = get_logger("orchestrator")
        self.skipped: List[str] = []

    @property
    def index_path(self) -> str:
        return f"xml/FrameworksIndex/{self.version.framework_id}.xml"

    def parse_corpus(self) -> EntityTable:
        """Ingest the index, every namespace file and every type file, in that order."""
        self.reader.assert_directories_exist()
        self.skipped = []

        self.logger.info("Running %s from %s", self.version.title, self.index_path)
        index = self.reader.read_file(self.index_path)
        if index is None or isinstance(index, str):
            raise SetupError(f"Framework index could not be read: {self.index_path}")
        self.parser.parse_index(index)

        namespace_paths = self.parser.namespace_paths()
        type_paths = list(self.parser.type_paths)
        self.logger.info(
            "Queued %d namespace files and %d type files", len(namespace_paths), len(type_paths)
        )

        for path in namespace_paths:
            self._ingest(path, self.parser.parse_namespace)
        for path in type_paths:
            self._ingest(path, self.parser.parse_type)

        if self.skipped:
            self.logger.warning("Skipped %d unreadable or malformed files", len(self.skipped))
        return self.table

    def build_pages(self) -> Iterator[Page]:
        """Parse the corpus and yield the index page, then each namespace and its types."""
        self.parse_corpus()

        yield Page(
            path="index",
            store_path="index.html",
            output=self.renderer.render_index(),
            entries=[Entry(name=None, path="index", type=None)],
        )

        for namespace in self.table.iter_namespaces():
            yield self._namespace_page(namespace)
            for type_id in namespace.types:
                type_record = self.table.get_type(type_id)
                if type_record is None or not type_record.parsed:
                    continue
                yield self._type_page(namespace, type_record)

    def run(self, output_dir: Path | None = None) -> BuildResult:
        """Build every page and write it, along with the entry index, to disk."""
        target = Path(output_dir or self.config.output_dir)
        entry_index = EntryIndex(target / INDEX_FILENAME)
        count = 0
        for page in self.build_pages():
            destination = target / page.store_path
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_text(page.output, encoding="utf-8")
            entry_index.add(page.entries)
            count += 1
        entry_index.persist()
        self.logger.info("Wrote %d pages to %s", count, target)
        return BuildResult(output_dir=target, pages=count, skipped=list(self.skipped))

    # ------------------------------------------------------------------
    # Internal helpers

    def _ingest(self, path: str, parse: Callable[[Document], object]) -> None:
        document = self.reader.read_file(path)
        if document is None or isinstance(document, str):
            self.skipped.append(path)
            return
        try:
            parse(document)
        except MalformedDocument as exc:
            self.logger.warning("Skipping %s: %s", path, exc)
            self.skipped.append(path)

    def _namespace_page(self, namespace: NamespaceRecord) -> Page:
        return Page(
            path=namespace.path,
            store_path=f"{namespace.path}.html",
            output=self.renderer.render_namespace(namespace),
            entries=[Entry(name=namespace.name, path=namespace.path, type="Namespaces")],
        )

    def _type_page(self, namespace: NamespaceRecord, type_record: TypeRecord) -> Page:
        path = type_record.path or ""
        return Page(
            path=path,
            store_path=f"{path}.html",
            output=self.renderer.render_type(type_record),
            entries=[Entry(name=type_record.name, path=path, type=namespace.name)],
        )


__all__ = ["BuildResult", "Orchestrator", "Page"]
