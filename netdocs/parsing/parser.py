"""Ingestion of the three corpus tiers into an :class:`EntityTable`.

The caller drives the order: :meth:`CorpusParser.parse_index` once, then
:meth:`CorpusParser.parse_namespace` for every namespace file, then
:meth:`CorpusParser.parse_type` for every type file. Cross-references to types
that haven't been parsed yet are tolerated; references to identifiers the
index never declared are not.
"""

from __future__ import annotations

from typing import Dict, List, Union

from lxml import etree

from ..errors import ContractViolation, MalformedDocument
from ..identifiers import (
    ROOT_TYPE,
    base_identifier_from_display_name,
    display_name,
    member_identifier,
    namespace_path,
    type_file_path,
    type_identifier,
    type_kind_from_signature,
    type_path,
)
from ..logging import get_logger
from ..models import EntityTable, MemberRecord, NamespaceRecord, TypeRecord
from .text import extract_docs

Document = Union[etree._ElementTree, etree._Element]

# Selects nodes that either apply to every framework or list the current one.
FRAMEWORK_ALTERNATE_CLAUSE = (
    "not(@FrameworkAlternate) or contains(@FrameworkAlternate, $framework)"
)


class CorpusParser:
    """Builds the entity table for one framework variant."""

    def __init__(self, framework_id: str, table: EntityTable | None = None) -> None:
        self.framework_id = framework_id
        self.table = table if table is not None else EntityTable()
        self.logger = get_logger("parser")
        self._indexed = False

    @property
    def namespaces(self) -> List[str]:
        return self.table.namespaces

    @property
    def type_paths(self) -> List[str]:
        return self.table.type_paths

    def namespace_paths(self) -> List[str]:
        """Return the namespace file paths to fetch after the index."""
        return [f"xml/ns-{name}.xml" for name in self.table.namespaces]

    # ------------------------------------------------------------------
    # Index tier

    def parse_index(self, document: Document) -> None:
        """Parse a file like ``FrameworksIndex/netcore-2.2.xml``."""
        root = _root(document)
        self.table.reset()

        for namespace_node in root.iter("Namespace"):
            namespace_name = namespace_node.get("Name")
            if not namespace_name:
                self.logger.warning("Skipping namespace without a Name attribute")
                continue

            namespace = NamespaceRecord(
                name=namespace_name, path=namespace_path(namespace_name)
            )
            self.table.add(namespace_name, namespace)
            self.table.namespaces.append(namespace_name)

            for type_node in namespace_node.iter("Type"):
                self._index_type(namespace, type_node)

        self._indexed = True
        self.logger.debug(
            "Indexed %d namespaces and %d types",
            len(self.table.namespaces),
            len(self.table.type_paths),
        )

    def _index_type(self, namespace: NamespaceRecord, type_node: etree._Element) -> None:
        doc_id = type_node.get("Id")
        type_name = type_node.get("Name")
        if not doc_id or not type_name:
            self.logger.warning(
                "Skipping type without Id/Name in namespace %s", namespace.name
            )
            return

        identifier = type_identifier(doc_id)
        record = TypeRecord(id=identifier)
        self.table.add(identifier, record)
        namespace.types.append(identifier)
        self.table.type_paths.append(f"xml/{type_file_path(type_name)}.xml")

        for member_node in type_node.iter("Member"):
            member_id = member_node.get("Id")
            if not member_id:
                continue
            member_name, kind = member_identifier(member_id)
            self.table.add(member_name, MemberRecord(id=member_name, kind=kind))
            if kind is None:
                self.logger.warning(
                    "Unknown type '%s' on member with id '%s'", member_id[:1], member_id
                )
                continue
            record.bucket(kind).append(member_name)

    # ------------------------------------------------------------------
    # Namespace tier

    def parse_namespace(self, document: Document) -> NamespaceRecord:
        """Parse a file like ``ns-System.xml``."""
        self._require_index()
        root = _root(document)
        name = root.get("Name")
        if not name:
            raise MalformedDocument("Namespace document has no Name attribute")

        namespace = self.table.get_namespace(name)
        if namespace is None:
            raise ContractViolation(f"Namespace '{name}' was not declared in the index")

        namespace.path = namespace_path(name)
        extract_docs(root, namespace)
        return namespace

    # ------------------------------------------------------------------
    # Type tier

    def parse_type(self, document: Document) -> TypeRecord:
        """Parse a file like ``System/String.xml``."""
        self._require_index()
        root = _root(document)

        doc_id_nodes = root.xpath(".//TypeSignature[@Language='DocId']")
        doc_id = doc_id_nodes[0].get("Value") if doc_id_nodes else None
        name = root.get("Name")
        full_name = root.get("FullName")
        if not doc_id or not name or not full_name:
            raise MalformedDocument("Type document is missing its DocId, Name or FullName")

        identifier = type_identifier(doc_id)
        record = self.table.get_type(identifier)
        if record is None:
            raise ContractViolation(f"Type '{identifier}' was not declared in the index")

        namespace_name = _namespace_of(full_name, name)
        namespace = self.table.get_namespace(namespace_name)
        if namespace is None:
            raise MalformedDocument(
                f"Type '{identifier}' names unknown namespace '{namespace_name}'"
            )

        docs_nodes = root.xpath("Docs")
        extract_docs(docs_nodes[0] if docs_nodes else None, record)

        record.name = display_name(name)
        record.path = type_path(full_name)
        record.namespace = namespace_name
        record.signatures = self._signatures(root)

        record.kind = type_kind_from_signature(record.signatures.get("C#", ""))
        if record.kind is None:
            self.logger.warning("Could not infer the kind of type '%s'", identifier)
        else:
            _append_once(namespace.bucket(record.kind), identifier)

        record.assemblies = _assemblies(root)
        self._link_base(root, record)

        record.interfaces = [
            node.text.strip() for node in root.iter("InterfaceName") if node.text
        ]
        record.attributes = [
            node.text.strip()
            for node in root.xpath(
                f"Attributes/Attribute[{FRAMEWORK_ALTERNATE_CLAUSE}]/AttributeName",
                framework=self.framework_id,
            )
            if node.text
        ]
        return record

    def _signatures(self, root: etree._Element) -> Dict[str, str]:
        signatures: Dict[str, str] = {}
        for node in root.xpath(
            f"//TypeSignature[{FRAMEWORK_ALTERNATE_CLAUSE}]", framework=self.framework_id
        ):
            language = node.get("Language")
            if language and language != "DocId":
                signatures[language] = node.get("Value", "")
        return signatures

    def _link_base(self, root: etree._Element, record: TypeRecord) -> None:
        base_node = root.find(".//BaseTypeName")
        base_name = base_node.text.strip() if base_node is not None and base_node.text else None
        record.base_name = base_name
        if base_name is None or base_name == ROOT_TYPE:
            record.base = None
            return

        record.base = base_identifier_from_display_name(base_name)
        base = self.table.get_type(record.base)
        if base is None:
            # Excluded from this framework or outside the corpus.
            self.logger.debug("Base type '%s' of '%s' not in corpus", record.base, record.id)
            return
        _append_once(base.derived, record.id)

    def _require_index(self) -> None:
        if not self._indexed:
            raise ContractViolation("parse_index must be called before other documents")


def _root(document: Document) -> etree._Element:
    if isinstance(document, etree._ElementTree):
        return document.getroot()
    return document


def _namespace_of(full_name: str, name: str) -> str:
    suffix = f".{name}"
    if full_name.endswith(suffix):
        return full_name[: -len(suffix)]
    return full_name.rpartition(".")[0]


def _assemblies(root: etree._Element) -> Dict[str, List[str]]:
    assemblies: Dict[str, List[str]] = {}
    for node in root.findall("AssemblyInfo"):
        name = node.findtext("AssemblyName")
        if not name:
            continue
        versions = assemblies.setdefault(name.strip(), [])
        for version_node in node.findall("AssemblyVersion"):
            version = (version_node.text or "").strip()
            if version and version not in versions:
                versions.append(version)
    return assemblies


def _append_once(items: List[str], value: str) -> None:
    if value not in items:
        items.append(value)


__all__ = ["CorpusParser", "FRAMEWORK_ALTERNATE_CLAUSE"]
