"""Logic for loading, creating and validating the configuration file."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from jvm_bindgen.deep_merge import deep_merge
from jvm_bindgen.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "jvm-bindgen.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "generator": {
        # Renamed type path -> Rust type, e.g. java::lang::String: ejni::String.
        # The Rust type must implement Into<jni::objects::JValue>.
        "mappings": {},
        "module_root": "crate::bindings",
        "rustfmt": True,
    },
    "extraction": {
        "workers": 8,
        "skip_failures": False,
    },
}


def _validate(config: dict[str, Any], path: Path) -> None:
    """Reject configuration values the generator cannot use."""
    generator = config.get("generator")
    if not isinstance(generator, dict):
        msg = f"{path}: 'generator' must be a table"
        raise ConfigError(msg)
    # An empty "mappings:" key loads as None
    if generator.get("mappings") is None:
        generator["mappings"] = {}
    mappings = generator["mappings"]
    if not isinstance(mappings, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in mappings.items()
    ):
        msg = f"{path}: 'generator.mappings' must map type paths to type strings"
        raise ConfigError(msg)
    extraction = config.get("extraction")
    if not isinstance(extraction, dict):
        msg = f"{path}: 'extraction' must be a table"
        raise ConfigError(msg)
    workers = extraction.get("workers")
    if not isinstance(workers, int) or isinstance(workers, bool) or workers < 1:
        msg = f"{path}: 'extraction.workers' must be a positive integer"
        raise ConfigError(msg)


def write_default_config(path: Path) -> None:
    """Create ``path`` holding the default configuration."""
    logger.info("Config file %s does not exist; creating it", path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            yaml.safe_dump(DEFAULT_CONFIG, sort_keys=False), encoding="utf-8"
        )
    except OSError as e:
        msg = f"Cannot create config file {path}: {e}"
        raise ConfigError(msg) from e


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    A missing file is created with the defaults first.
    """
    p = Path(path or DEFAULT_CONFIG_PATH)
    if not p.exists():
        write_default_config(p)
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        msg = f"Cannot read config file {p}: {e}"
        raise ConfigError(msg) from e
    if not isinstance(user_config, dict):
        msg = f"{p}: top level must be a table"
        raise ConfigError(msg)

    config = deep_merge(copy.deepcopy(DEFAULT_CONFIG), user_config)
    _validate(config, p)
    return config
