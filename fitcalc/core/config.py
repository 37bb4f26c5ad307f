"""Configuration loading and persistence."""

from __future__ import annotations

import json
import math
import os
from pathlib import Path
from typing import Any, Dict, Optional

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # Python 3.9-3.10
    import tomli as tomllib  # type: ignore[no-redef]

from fitcalc.core.constants import DEFAULT_LABELS, LEN_STEP, SWIMMING_LEN_STEP


class ConfigError(RuntimeError):
    """Raised when a config file cannot be read or holds invalid values."""


def expand_path(path_str: str) -> Path:
    """Expand user/env vars and return absolute path."""
    return Path(os.path.expandvars(path_str)).expanduser().resolve()


def default_config_path() -> Path:
    """Get default config file path."""
    raw = os.getenv("FITCALC_CONFIG_FILE", "~/.config/fitcalc/config.toml")
    return expand_path(raw)


def _default_config() -> Dict[str, Any]:
    return {
        "constants": {
            "len_step": LEN_STEP,
            "swimming_len_step": SWIMMING_LEN_STEP,
        },
        "labels": dict(DEFAULT_LABELS),
        "defaults": {
            "output_format": "text",
        },
    }


DEFAULT_CONFIG: Dict[str, Any] = _default_config()


def _merge_tables(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay config tables key by key; unknown tables are kept as given."""
    merged = {table: dict(values) for table, values in base.items()}
    for table, values in override.items():
        if isinstance(values, dict) and isinstance(merged.get(table), dict):
            merged[table].update(values)
        else:
            merged[table] = values
    return merged


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text()
    try:
        if path.suffix.lower() == ".json":
            loaded = json.loads(text)
        else:
            loaded = tomllib.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config file {path}: {exc}") from exc

    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file {path} must contain an object/table at the root")
    return loaded


def _validate(config: Dict[str, Any], source: Path) -> None:
    for table in ("constants", "labels", "defaults"):
        if not isinstance(config.get(table), dict):
            raise ConfigError(f"[{table}] in {source} must be a table")

    for key, value in config["constants"].items():
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not value > 0:
            raise ConfigError(f"constants.{key} in {source} must be a positive number, got {value!r}")
        if math.isinf(value):
            raise ConfigError(f"constants.{key} in {source} must be finite")

    for table in ("labels", "defaults"):
        for key, value in config[table].items():
            if not isinstance(value, str):
                raise ConfigError(f"{table}.{key} in {source} must be a string, got {value!r}")


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from disk, merged with defaults and validated."""
    cfg_path = path or default_config_path()
    cfg = _default_config()

    if cfg_path.exists():
        cfg = _merge_tables(cfg, _read_config(cfg_path))
        _validate(cfg, cfg_path)

    return cfg


def _toml_value(value: Any) -> str:
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return repr(float(value))


def dump_toml(config: Dict[str, Any]) -> str:
    """Render the table-of-scalars config layout as TOML."""
    blocks = []
    for table, values in config.items():
        lines = [f"[{table}]"]
        lines.extend(f"{key} = {_toml_value(value)}" for key, value in values.items())
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"


def save_config(config: Dict[str, Any], path: Optional[Path] = None) -> Path:
    """Save configuration to disk as TOML (default) or JSON."""
    cfg_path = path or default_config_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)

    if cfg_path.suffix.lower() == ".json":
        cfg_path.write_text(json.dumps(config, indent=2) + "\n")
    else:
        cfg_path.write_text(dump_toml(config))
    return cfg_path


def resolve_label(config: Dict[str, Any], kind: str) -> str:
    """Report label for a workout kind, config first."""
    labels = config.get("labels", {})
    if not isinstance(labels, dict):
        raise ConfigError("[labels] must be a table")
    return str(labels.get(kind) or DEFAULT_LABELS[kind])


def resolve_len_step(config: Dict[str, Any], kind: str, explicit: Optional[float] = None) -> float:
    """Per-unit length in meters with CLI override first."""
    if explicit is not None:
        return float(explicit)
    constants = config.get("constants", {})
    if not isinstance(constants, dict):
        raise ConfigError("[constants] must be a table")
    key = "swimming_len_step" if kind == "swimming" else "len_step"
    value = constants.get(key, SWIMMING_LEN_STEP if kind == "swimming" else LEN_STEP)
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"constants.{key} must be a number, got {value!r}") from exc
