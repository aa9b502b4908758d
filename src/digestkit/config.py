"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX  = "DIGESTKIT_"


class Settings(BaseModel):
    algorithm: str = Field(default="sha256", pattern="^(md5|sha1|sha256|sha512)$", description="Default digest algorithm")
    log_level: str = Field(
        default="WARNING",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Minimum level for CLI log output",
    )


def _read_config_file(path: Path) -> dict[str, Any]:
    """Return the mapping in path, or {} when the file is absent or empty."""
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(data).__name__}")
    return data


def _read_env() -> dict[str, str]:
    """Collect non-empty DIGESTKIT_<FIELD> variables keyed by field name."""
    found = {name: os.getenv(f"{ENV_PREFIX}{name.upper()}") for name in Settings.model_fields}
    return {name: val for name, val in found.items() if val}


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Build Settings from config.yaml, then env vars, then non-None CLI overrides (last wins)."""
    data = _read_config_file(Path(CONFIG_FILE))
    data.update(_read_env())
    data.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return Settings(**data)
