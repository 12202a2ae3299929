"""Simple configuration loader for trade_world."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"
CONFIG_ENV_VAR = "TRADE_WORLD_CONFIG"


@dataclass
class ContainerConfig:
    """Slot counts for the slotted containers."""

    inventory_slots: int = 24
    store_slots: int = 24


@dataclass
class LoggingConfig:
    """Log levels applied by :func:`trade_world.main.configure_logging`."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class PersistenceConfig:
    """Snapshot and event log settings."""

    gzip: bool = True
    event_log: Optional[str] = None
    log_retention_mb: int = 50


@dataclass
class Config:
    """Top level configuration dataclass."""

    containers: ContainerConfig
    logging: LoggingConfig
    persistence: PersistenceConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    container_data = data.get("containers") or {}
    containers = ContainerConfig(
        inventory_slots=int(container_data.get("inventory_slots", 24)),
        store_slots=int(container_data.get("store_slots", 24)),
    )

    logging_data = data.get("logging") or {}
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    persistence_data = data.get("persistence") or {}
    persistence = PersistenceConfig(
        gzip=bool(persistence_data.get("gzip", True)),
        event_log=persistence_data.get("event_log"),
        log_retention_mb=int(persistence_data.get("log_retention_mb", 50)),
    )

    return Config(containers=containers, logging=logging_cfg, persistence=persistence)


def default_config_path() -> Path:
    """Return the config path, honouring ``TRADE_WORLD_CONFIG`` from the environment or ``.env``."""

    load_dotenv()
    override = os.getenv(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config(path: Path | None = None) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path) if path is not None else default_config_path()
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "ContainerConfig",
    "LoggingConfig",
    "PersistenceConfig",
    "load_config",
    "default_config_path",
]
