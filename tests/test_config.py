"""Tests for netdocs.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from netdocs.config import DEFAULT_VERSIONS, NetDocsConfig, load_config, resolve_version
from netdocs.errors import ConfigError
from netdocs.references import DEFAULT_EXTERNAL_BASE_URL


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    root = tmp_path.resolve()
    assert isinstance(config, NetDocsConfig)
    assert config.root == root
    assert config.api_docs_dir == root / "docs" / "dotnet" / "dotnet-api-docs"
    assert config.samples_dir == root / "docs" / "dotnet" / "samples"
    assert config.output_dir == root / "build" / "dotnet"
    assert config.version == "core"
    assert config.external_base_url == DEFAULT_EXTERNAL_BASE_URL
    assert config.versions == DEFAULT_VERSIONS


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".netdocs.yml"
    config_file.write_text(
        """
docs_root: corpus
api_docs_dir: api
samples_dir: /opt/samples
output_dir: public/dotnet
version: Framework
external_base_url: https://example.test/api
versions:
  core:
    release: "3.0"
    framework_id: netcore-3.0
  standard:
    name: Standard
    release: "2.0"
    framework_id: netstandard-2.0
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    root = tmp_path.resolve()
    assert config.docs_root == root / "corpus"
    assert config.api_docs_dir == root / "corpus" / "api"
    assert config.samples_dir == Path("/opt/samples")
    assert config.output_dir == root / "public" / "dotnet"
    assert config.version == "framework"
    assert config.external_base_url == "https://example.test/api"

    core = config.versions["core"]
    assert core.name == "Core"
    assert core.release == "3.0"
    assert core.framework_id == "netcore-3.0"
    assert core.code == DEFAULT_VERSIONS["core"].code
    assert config.versions["standard"].title == ".NET Standard 2.0"
    assert config.versions["framework"] == DEFAULT_VERSIONS["framework"]


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    (tmp_path / ".netdocs.yml").write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    (tmp_path / ".netdocs.yml").write_text("versions: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_incomplete_new_version(tmp_path: Path) -> None:
    (tmp_path / ".netdocs.yml").write_text(
        "versions:\n  mono:\n    name: Mono\n", encoding="utf-8"
    )

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_resolve_version_selects_and_overrides(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert resolve_version(config).framework_id == "netcore-2.2"
    framework = resolve_version(config, "FRAMEWORK")
    assert framework.title == ".NET Framework 4.8"

    overridden = resolve_version(config, "core", framework_id="netcore-2.1")
    assert overridden.framework_id == "netcore-2.1"
    assert overridden.release == "2.2"


def test_resolve_version_unknown_raises(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    with pytest.raises(ConfigError) as excinfo:
        resolve_version(config, "silverlight")
    assert "core" in str(excinfo.value)
