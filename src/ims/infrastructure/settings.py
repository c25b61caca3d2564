"""Runtime settings read from the environment.

CLI options override these values; see ``ims.infrastructure.cli.main``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    currency_symbol: str = "$"
    seed_catalog: bool = True
    log_level: str = "WARNING"


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    defaults = Settings()
    return Settings(
        currency_symbol=env.get("IMS_CURRENCY_SYMBOL", defaults.currency_symbol),
        seed_catalog=(
            env.get("IMS_SEED_CATALOG", "1").strip().lower() not in _FALSE_VALUES
        ),
        log_level=env.get("IMS_LOG_LEVEL", defaults.log_level).strip().upper(),
    )
