"""User configuration: remote source and local cache location."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from jsonschema import ValidationError

from framectl.core.errors import ConfigError
from framectl.schemas import load_validator

DEFAULT_REMOTE_BASE = "https://raw.githubusercontent.com/sathoeni/frameit-bezels/main"
DEFAULT_CATALOG_NAME = "device-bezels.json"
LOGGER = logging.getLogger(__name__)


class StrictConfigLoader(yaml.SafeLoader):
    """YAML loader that refuses to silently drop repeated config keys."""


def _construct_unique_mapping(loader: StrictConfigLoader, node: yaml.Node, deep: bool = False) -> dict[str, Any]:
    settings: dict[str, Any] = {}
    for key_node, value_node in node.value:
        name = loader.construct_object(key_node, deep=deep)
        if name in settings:
            raise ConfigError(f"Setting '{name}' is defined more than once")
        settings[name] = loader.construct_object(value_node, deep=deep)
    return settings


StrictConfigLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG,
    _construct_unique_mapping,
)


@dataclass(frozen=True)
class Settings:
    cache_dir: Path
    remote_base: str = DEFAULT_REMOTE_BASE
    catalog_name: str = DEFAULT_CATALOG_NAME

    @property
    def catalog_url(self) -> str:
        return f"{self.remote_base.rstrip('/')}/{self.catalog_name}"


def default_cache_dir() -> Path:
    xdg_cache = Path(os.environ.get("XDG_CACHE_HOME", Path.home() / ".cache"))
    return xdg_cache / "framectl/bezels"


def config_path() -> Path:
    xdg_config = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return xdg_config / "framectl/config.yaml"


def _read_config(path: Path) -> dict[str, Any]:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Could not read config file {path}: {exc}") from exc

    try:
        loaded = yaml.load(content, Loader=StrictConfigLoader)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file {path} must contain a mapping at root")

    try:
        load_validator("config.schema.json").validate(loaded)
    except ValidationError as exc:
        where = ".".join(str(p) for p in exc.path)
        where = f" ({where})" if where else ""
        raise ConfigError(f"Invalid config in {path}{where}: {exc.message}") from exc
    return loaded


def load_settings() -> Settings:
    path = config_path()
    doc: dict[str, Any] = {}
    if path.is_file():
        doc = _read_config(path)
        LOGGER.info("Loaded configuration from %s", path)

    cache_dir = Path(doc["cache_dir"]).expanduser() if "cache_dir" in doc else default_cache_dir()
    return Settings(
        cache_dir=cache_dir,
        remote_base=doc.get("remote_base", DEFAULT_REMOTE_BASE),
        catalog_name=doc.get("catalog_name", DEFAULT_CATALOG_NAME),
    )
