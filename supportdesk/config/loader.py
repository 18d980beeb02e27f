"""Layered TOML configuration for supportdesk.

Configuration lives in a directory of TOML layers. ``default.toml`` is
always read first; ``{SUPPORTDESK_ENV}.toml`` is merged over it when
present. Environment variables are applied later by the settings model.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "SUPPORTDESK_CONFIG_DIR"
ENVIRONMENT_ENV = "SUPPORTDESK_ENV"
DEFAULT_ENVIRONMENT = "development"
BASE_LAYER = "default.toml"

# <checkout>/supportdesk/config/loader.py -> <checkout>/config
PROJECT_CONFIG_DIR = Path(__file__).resolve().parents[2] / "config"


def get_config_dir() -> Path:
    """Locate the directory holding the TOML layers.

    Resolution order:
    1. ``SUPPORTDESK_CONFIG_DIR``, which must name an existing directory
    2. The ``config/`` directory shipped beside the package in a checkout
    3. ``./config`` relative to the working directory, for installed
       packages that keep configuration with the deployment

    Raises:
        FileNotFoundError: If SUPPORTDESK_CONFIG_DIR points nowhere
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        path = Path(override)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {override}")
        return path

    if PROJECT_CONFIG_DIR.is_dir():
        return PROJECT_CONFIG_DIR

    return Path.cwd() / "config"


def get_environment() -> str:
    return os.environ.get(ENVIRONMENT_ENV) or DEFAULT_ENVIRONMENT


def config_layers(config_dir: Path, env: str) -> list[Path]:
    """Return the TOML files to merge, lowest precedence first.

    Raises:
        FileNotFoundError: If the base layer is missing
    """
    base = config_dir / BASE_LAYER
    if not base.is_file():
        raise FileNotFoundError(
            f"Base configuration not found: {base}. "
            f"Create {BASE_LAYER} there or set {CONFIG_DIR_ENV}."
        )

    layers = [base]
    env_layer = config_dir / f"{env}.toml"
    if env_layer != base and env_layer.is_file():
        layers.append(env_layer)
    return layers


def load_toml(file_path: Path) -> dict[str, Any]:
    """Parse one TOML layer.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into a copy of ``base``.

    Tables merge key by key; any other value in override replaces the
    one in base. Neither input is modified.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def load_config(config_dir: Path | None = None, env: str | None = None) -> dict[str, Any]:
    """Read and merge every layer for ``env`` from ``config_dir``.

    Both arguments default to what the environment selects.
    """
    config_dir = config_dir or get_config_dir()
    env = env or get_environment()

    config: dict[str, Any] = {}
    for layer in config_layers(config_dir, env):
        config = deep_merge(config, load_toml(layer))
    return config
