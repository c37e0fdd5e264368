from __future__ import annotations

from pathlib import Path
from typing import Any

from neighscan.core.errors import ConfigError
from neighscan.utils.yaml import load_yaml

from .schema import ScanConfig

_PATH_KEYS = ("input", "json_out", "md_out")
_KNOWN_KEYS = set(_PATH_KEYS) | {"verbose"}


def _optional_path(data: dict[str, Any], key: str, base: Path) -> Path | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{key} must be a path string")
    path = Path(value)
    return path if path.is_absolute() else base / path


def load_config(path: Path | None) -> ScanConfig:
    """Load settings from ``path``; relative paths resolve against its directory."""
    if path is None:
        return ScanConfig()
    data = load_yaml(path)

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    verbose = data.get("verbose", False)
    if not isinstance(verbose, bool):
        raise ConfigError("verbose must be true or false")

    base = path.parent
    return ScanConfig(
        input=_optional_path(data, "input", base),
        json_out=_optional_path(data, "json_out", base),
        md_out=_optional_path(data, "md_out", base),
        verbose=verbose,
    )
