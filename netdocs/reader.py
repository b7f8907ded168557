"""Filesystem access to the cloned corpus checkouts."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from lxml import etree

from .errors import SetupError
from .logging import get_logger

SAMPLES_PREFIX = "~/samples/"
API_DOCS_PREFIX = "~/"

_XML_PARSER = etree.XMLParser(resolve_entities=False, no_network=True)


class CorpusReader:
    """Reads files from the API reference and samples checkouts.

    ``read_file`` never raises for I/O or XML syntax problems; it logs a
    warning and returns ``None`` so the caller can skip the page.
    """

    def __init__(self, api_docs_directory: Path, samples_directory: Path) -> None:
        self.api_docs_directory = Path(api_docs_directory)
        self.samples_directory = Path(samples_directory)
        self.logger = get_logger("reader")

    def assert_directories_exist(self) -> None:
        if self.api_docs_directory.is_dir() and self.samples_directory.is_dir():
            return
        raise SetupError(
            "The .NET scraper requires the following GitHub repositories to be cloned "
            "into specific locations:\n"
            f"- https://github.com/dotnet/dotnet-api-docs into {self.api_docs_directory}\n"
            f"- https://github.com/dotnet/samples into {self.samples_directory}"
        )

    def read_file(self, path: str) -> Optional[Union[etree._ElementTree, str]]:
        """Return a parsed document for ``.xml`` paths, text otherwise."""
        target = self.absolute_path(path)
        try:
            if target.suffix == ".xml":
                content: Union[etree._ElementTree, str] = etree.parse(
                    str(target), parser=_XML_PARSER
                )
            else:
                content = target.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError, etree.XMLSyntaxError) as exc:
            self.logger.warning("Failed to open file: %s (%s)", target, exc)
            return None
        self.logger.debug("Read %s", target)
        return content

    def absolute_path(self, path: str) -> Path:
        if path.startswith("/"):
            return Path(path)
        if path.startswith(SAMPLES_PREFIX):
            return self.samples_directory / path[len(SAMPLES_PREFIX):]
        if path.startswith(API_DOCS_PREFIX):
            return self.api_docs_directory / path[len(API_DOCS_PREFIX):]
        return self.api_docs_directory / path


__all__ = ["API_DOCS_PREFIX", "CorpusReader", "SAMPLES_PREFIX"]
