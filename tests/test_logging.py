"""Tests for netdocs logger setup."""

from __future__ import annotations

from pathlib import Path

import pytest

from netdocs.logging import configure_logging, console_prefix, get_logger


def test_console_prefix_names_the_framework() -> None:
    assert console_prefix() == "[netdocs]"
    assert console_prefix("netcore-2.2") == "[netdocs netcore-2.2]"


def test_configure_logging_prefixes_console_with_framework(
    capsys: pytest.CaptureFixture[str],
) -> None:
    configure_logging(framework_id="netframework-4.8")

    get_logger("parser").info("Indexed 3 namespaces")
    get_logger("parser").debug("hidden")

    err = capsys.readouterr().err
    assert "[netdocs netframework-4.8] INFO Indexed 3 namespaces" in err
    assert "hidden" not in err


def test_configure_logging_is_repeatable(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging()
    logger = configure_logging(verbose=True)

    get_logger().debug("once")

    assert len(logger.handlers) == 1
    assert capsys.readouterr().err.count("once") == 1


def test_configure_logging_writes_file_sink(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "build.log"
    configure_logging(log_file=log_file, framework_id="netcore-2.2")

    get_logger("reader").warning("Failed to open file %s", "xml/ns-Demo.xml")

    text = log_file.read_text(encoding="utf-8")
    assert "WARNING netdocs.reader [netcore-2.2]: Failed to open file xml/ns-Demo.xml" in text
