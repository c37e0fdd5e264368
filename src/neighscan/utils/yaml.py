from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from neighscan.core.errors import ConfigError


def load_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"YAML at {path} must be a mapping")
    return data
