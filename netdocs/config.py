"""Configuration loading for netdocs (.netdocs.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError
from .references import DEFAULT_EXTERNAL_BASE_URL

CONFIG_FILENAME = ".netdocs.yml"


@dataclass(frozen=True)
class VersionConfig:
    """One framework variant of the documentation."""

    name: str
    release: str
    framework_id: str
    home: Optional[str] = None
    code: Optional[str] = None

    @property
    def title(self) -> str:
        return f".NET {self.name} {self.release}"


DEFAULT_VERSIONS: Dict[str, VersionConfig] = {
    "core": VersionConfig(
        name="Core",
        release="2.2",
        framework_id="netcore-2.2",
        home="https://docs.microsoft.com/en-us/dotnet/api/?view=netcore-2.2",
        code="https://github.com/dotnet/corefx",
    ),
    "framework": VersionConfig(
        name="Framework",
        release="4.8",
        framework_id="netframework-4.8",
        home="https://docs.microsoft.com/en-us/dotnet/api/?view=netframework-4.8",
        code="https://github.com/microsoft/referencesource",
    ),
}


@dataclass
class NetDocsConfig:
    """Represents the settings defined in .netdocs.yml."""

    root: Path
    docs_root: Path
    api_docs_dir: Path
    samples_dir: Path
    output_dir: Path
    version: str = "core"
    external_base_url: str = DEFAULT_EXTERNAL_BASE_URL
    versions: Dict[str, VersionConfig] = field(default_factory=lambda: dict(DEFAULT_VERSIONS))


def default_config(root: Path) -> NetDocsConfig:
    docs_root = root / "docs" / "dotnet"
    return NetDocsConfig(
        root=root,
        docs_root=docs_root,
        api_docs_dir=docs_root / "dotnet-api-docs",
        samples_dir=docs_root / "samples",
        output_dir=root / "build" / "dotnet",
    )


def load_config(config_path: Path) -> NetDocsConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return default_config(root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    docs_root = _as_path(root, data.get("docs_root")) or root / "docs" / "dotnet"
    api_docs_dir = _as_path(docs_root, data.get("api_docs_dir")) or docs_root / "dotnet-api-docs"
    samples_dir = _as_path(docs_root, data.get("samples_dir")) or docs_root / "samples"
    output_dir = _as_path(root, data.get("output_dir")) or root / "build" / "dotnet"

    versions = dict(DEFAULT_VERSIONS)
    versions_data = data.get("versions")
    if versions_data is not None and not isinstance(versions_data, dict):
        raise ConfigError("'versions' must be a mapping of version keys to settings")
    for key, raw in (versions_data or {}).items():
        versions[str(key).lower()] = _parse_version(str(key), raw, versions.get(str(key).lower()))

    version = _as_str(data.get("version")) or "core"
    external_base_url = _as_str(data.get("external_base_url")) or DEFAULT_EXTERNAL_BASE_URL

    return NetDocsConfig(
        root=root,
        docs_root=docs_root,
        api_docs_dir=api_docs_dir,
        samples_dir=samples_dir,
        output_dir=output_dir,
        version=version.lower(),
        external_base_url=external_base_url,
        versions=versions,
    )


def resolve_version(
    config: NetDocsConfig,
    name: str | None = None,
    *,
    framework_id: str | None = None,
) -> VersionConfig:
    """Return the selected version, optionally overriding its framework id."""
    key = (name or config.version).lower()
    version = config.versions.get(key)
    if version is None:
        known = ", ".join(sorted(config.versions))
        raise ConfigError(f"Unknown version '{key}' (known: {known})")
    if framework_id:
        version = replace(version, framework_id=framework_id)
    return version


def _parse_version(key: str, raw: Any, base: VersionConfig | None) -> VersionConfig:
    if not isinstance(raw, dict):
        raise ConfigError(f"Version '{key}' must be a mapping")
    name = _as_str(raw.get("name")) or (base.name if base else key.title())
    release = _as_str(raw.get("release")) or (base.release if base else None)
    framework_id = _as_str(raw.get("framework_id")) or (base.framework_id if base else None)
    if not release or not framework_id:
        raise ConfigError(f"Version '{key}' needs both 'release' and 'framework_id'")
    return VersionConfig(
        name=name,
        release=release,
        framework_id=framework_id,
        home=_as_str(raw.get("home")) or (base.home if base else None),
        code=_as_str(raw.get("code")) or (base.code if base else None),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_path(base: Path, value: Any) -> Optional[Path]:
    text = _as_str(value)
    if not text:
        return None
    path = Path(text).expanduser()
    return path if path.is_absolute() else base / path


__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_VERSIONS",
    "NetDocsConfig",
    "VersionConfig",
    "default_config",
    "load_config",
    "resolve_version",
]
