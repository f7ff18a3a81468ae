"""Store configuration as served by the backend."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from storefront.domain.exceptions import ParseError


@dataclass(frozen=True)
class StoreConfig:
    publishable_key: str
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def is_live_mode(self) -> bool:
        """True when the publishable key belongs to a live (non-demo) account."""
        return "live" in self.publishable_key

    @staticmethod
    def from_api(raw: Any) -> StoreConfig:
        key = raw.get("stripePublishableKey") if isinstance(raw, dict) else None
        if not isinstance(key, str):
            raise ParseError("Config response is missing 'stripePublishableKey'")
        return StoreConfig(publishable_key=key, raw=raw)
