"""Per-process state shared by the CLI commands through ``ctx.obj``."""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.model.inventory import InventoryManager


@dataclass
class Session:
    manager: InventoryManager
    currency_symbol: str = "$"
