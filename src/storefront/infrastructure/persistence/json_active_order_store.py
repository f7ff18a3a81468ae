"""JSON-file-backed implementation of ActiveOrderStore."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from storefront.domain.exceptions import ParseError
from storefront.domain.repository.active_order_store import ActiveOrderStore

logger = logging.getLogger(__name__)

_KEY = "orderId"


class JsonActiveOrderStore(ActiveOrderStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ActiveOrderStore interface -------------------------------------------

    def get(self) -> str | None:
        value = self._load().get(_KEY)
        return str(value) if value is not None else None

    def set(self, order_id: str) -> None:
        data = self._load()
        data[_KEY] = str(order_id)
        self._persist(data)
        logger.debug("Active order id %s written to %s", order_id, self._file_path)

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ParseError(
                f"Active order file {self._file_path} is not valid JSON"
            ) from exc
        return raw if isinstance(raw, dict) else {}

    def _persist(self, data: dict) -> None:
        self._file_path.write_text(
            json.dumps(data, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
