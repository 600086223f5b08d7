from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[3]

DEFAULT_CATALOG_URL = "https://fakestoreapi.com/products"


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_float(*keys: str, default: float) -> float:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    try:
        return float(v)
    except ValueError:
        raise ValueError(f"{keys[0]} must be a number, got {v!r}") from None


def _get_log_level(key: str, default: str) -> str:
    level = (_get_env(key, default=default) or default).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{key} must be a logging level name, got {level!r}")
    return level


@dataclass(frozen=True)
class Settings:
    catalog_url: str
    catalog_file: Path | None
    http_timeout: float
    log_level: str
    currency: str


def load_settings(env_file: Path | None = None) -> Settings:
    """Read settings from the environment, after loading an optional .env."""
    load_dotenv(dotenv_path=env_file or ROOT_DIR / ".env")

    catalog_file = _get_env("STOREFRONT_CATALOG_FILE")
    return Settings(
        catalog_url=_get_env("STOREFRONT_CATALOG_URL", default=DEFAULT_CATALOG_URL)
        or DEFAULT_CATALOG_URL,
        catalog_file=Path(catalog_file) if catalog_file else None,
        http_timeout=_get_float("STOREFRONT_HTTP_TIMEOUT", default=10.0),
        log_level=_get_log_level("STOREFRONT_LOG_LEVEL", default="WARNING"),
        currency=_get_env("STOREFRONT_CURRENCY", default="USD") or "USD",
    )
