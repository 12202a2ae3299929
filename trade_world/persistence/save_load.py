"""Load and save inventory and store snapshots."""

from __future__ import annotations

import gzip
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ..config import CONFIG
from ..core.components.inventory import Inventory
from ..core.components.store import Store
from .serializer import (
    inventory_from_dict,
    inventory_to_dict,
    store_from_dict,
    store_to_dict,
)

logger = logging.getLogger(__name__)


def _resolve_gzip(gzip_compress: Optional[bool]) -> bool:
    return CONFIG.persistence.gzip if gzip_compress is None else gzip_compress


GZIP_MAGIC = b"\x1f\x8b"


def _is_gzip_file(path: Path) -> bool:
    with open(path, "rb") as fh:
        return fh.read(2) == GZIP_MAGIC


def _resolve_read_gzip(path: Path, gzip_compress: Optional[bool]) -> bool:
    """Sniff the gzip header when the caller does not say how ``path`` was written."""

    return _is_gzip_file(path) if gzip_compress is None else gzip_compress


def _write_json(data: Dict[str, Any], path: Path, gzip_compress: bool) -> None:
    text = json.dumps(data, indent=2)
    if gzip_compress:
        with gzip.open(path, "wt", encoding="utf-8") as fh:
            fh.write(text)
    else:
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(text)


def _read_json(path: Path, gzip_compress: bool) -> Dict[str, Any]:
    if gzip_compress:
        with gzip.open(path, "rt", encoding="utf-8") as fh:
            return json.load(fh)
    with open(path, "r", encoding="utf-8") as fh:
        return json.load(fh)


def save_inventory(
    inventory: Inventory, path: str | Path, *, gzip_compress: Optional[bool] = None
) -> None:
    """Write ``inventory`` to ``path`` as JSON.

    Parameters
    ----------
    inventory:
        The :class:`~trade_world.core.components.inventory.Inventory` to write.
    path:
        Destination file path.
    gzip_compress:
        Compress the JSON using gzip. Defaults to ``persistence.gzip`` from
        the configuration.
    """

    path = Path(path)
    _write_json(inventory_to_dict(inventory), path, _resolve_gzip(gzip_compress))
    logger.info("[Save] Inventory with %s items written to %s", inventory.count(), path)


def load_inventory(path: str | Path, *, gzip_compress: Optional[bool] = None) -> Inventory:
    """Read an inventory from ``path``, detecting gzip unless ``gzip_compress`` is given."""

    path = Path(path)
    return inventory_from_dict(_read_json(path, _resolve_read_gzip(path, gzip_compress)))


def save_store(store: Store, path: str | Path, *, gzip_compress: Optional[bool] = None) -> None:
    """Write ``store`` to ``path`` as JSON; see :func:`save_inventory`."""

    path = Path(path)
    _write_json(store_to_dict(store), path, _resolve_gzip(gzip_compress))
    logger.info("[Save] Store %s written to %s", store.get_id(), path)


def load_store(path: str | Path, *, gzip_compress: Optional[bool] = None) -> Store:
    """Read a store from ``path``."""

    path = Path(path)
    return store_from_dict(_read_json(path, _resolve_read_gzip(path, gzip_compress)))


__all__ = ["save_inventory", "load_inventory", "save_store", "load_store"]
