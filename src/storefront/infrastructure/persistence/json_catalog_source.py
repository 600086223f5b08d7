"""JSON-file-backed implementation of CatalogSource.

Reads the same array shape the remote endpoint serves, which makes a
saved response usable as an offline catalog.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

from storefront.domain.exceptions import CatalogTransportError
from storefront.domain.model.product import Product
from storefront.domain.repository.catalog_source import CatalogSource
from storefront.infrastructure.serialization import decode_products, product_to_raw


class JsonFileCatalogSource(CatalogSource):

    def __init__(self, file_path: Path, currency: str = "USD") -> None:
        self._file_path = file_path
        self._currency = currency

    # --- CatalogSource interface ----------------------------------------------

    async def fetch_products(self) -> list[Product]:
        body = await asyncio.to_thread(self._load_raw)
        return decode_products(body, self._currency)

    # --- Snapshot -------------------------------------------------------------

    def save(self, products: list[Product]) -> None:
        """Write *products* in catalog order, replacing the file."""
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        raw = [product_to_raw(p) for p in products]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> bytes:
        try:
            return self._file_path.read_bytes()
        except OSError as exc:
            raise CatalogTransportError(
                f"Cannot read catalog file {self._file_path}: {exc.strerror or exc}"
            ) from exc
