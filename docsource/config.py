"""Configuration loading for a docset (docfx.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

import yaml

from .errors import DocsourceError
from .glob_config import GlobConfig, find_glob_value

CONFIG_FILENAME = "docfx.yml"

_MISSING = object()


class ConfigError(DocsourceError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class DocsetConfig:
    """Represents the settings of a docset that the input layer reads."""

    root: Path
    dependencies: Dict[str, str] = field(default_factory=dict)
    template: Optional[str] = None
    fallback: Optional[Path] = None
    file_metadata: Dict[str, List[GlobConfig[Any]]] = field(default_factory=dict)

    def dependency_source(self, name: str) -> str:
        """Return the source descriptor of a declared dependency."""
        try:
            return self.dependencies[name]
        except KeyError:
            raise ConfigError(f"Dependency '{name}' is not declared in {CONFIG_FILENAME}") from None


def load_config(config_path: Path) -> DocsetConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return DocsetConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    dependencies: Dict[str, str] = {}
    for name, source in _as_dict(data.get("dependencies")).items():
        descriptor = _as_str(source)
        if not descriptor:
            raise ConfigError(f"Dependency '{name}' must name a source")
        dependencies[str(name)] = descriptor

    fallback_str = _as_str(data.get("fallback"))
    fallback = (root / fallback_str).resolve() if fallback_str else None

    file_metadata: Dict[str, List[GlobConfig[Any]]] = {}
    for key, raw in _as_dict(data.get("file_metadata")).items():
        file_metadata[str(key)] = _parse_glob_configs(str(key), raw)

    return DocsetConfig(
        root=root,
        dependencies=dependencies,
        template=_as_str(data.get("template")),
        fallback=fallback,
        file_metadata=file_metadata,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _parse_glob_configs(key: str, raw: Any) -> List[GlobConfig[Any]]:
    # Shorthand form maps a single glob pattern to its value.
    if isinstance(raw, dict):
        return [GlobConfig(include=[str(pattern)], value=value) for pattern, value in raw.items()]
    if not isinstance(raw, list):
        raise ConfigError(f"file_metadata.{key} must be a list or a mapping")

    entries: List[GlobConfig[Any]] = []
    for index, item in enumerate(raw):
        if not isinstance(item, dict):
            raise ConfigError(f"file_metadata.{key}[{index}] must be a mapping")
        include = _as_str_list(item.get("include"))
        if not include:
            raise ConfigError(f"file_metadata.{key}[{index}] requires include patterns")
        is_glob = _as_bool(item.get("is_glob"))
        entries.append(
            GlobConfig(
                include=include,
                exclude=_as_str_list(item.get("exclude")),
                value=item.get("value"),
                is_glob=True if is_glob is None else is_glob,
            )
        )
    return entries


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


def metadata_for(config: DocsetConfig, file_path: str) -> Mapping[str, Any]:
    """Return the file metadata values that apply to ``file_path``."""
    result: Dict[str, Any] = {}
    for key, entries in config.file_metadata.items():
        value = find_glob_value(entries, file_path, _MISSING)
        if value is not _MISSING:
            result[key] = value
    return result


__all__ = ["CONFIG_FILENAME", "ConfigError", "DocsetConfig", "load_config", "metadata_for"]
