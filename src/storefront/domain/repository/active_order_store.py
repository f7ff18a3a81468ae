"""Abstract store for the active order id.

Defined in the domain layer so the client never depends on where the id
is kept. Concrete implementations (JSON file, in-memory) live in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ActiveOrderStore(ABC):

    @abstractmethod
    def get(self) -> str | None:
        """Return the id of the most recently created order, or None."""

    @abstractmethod
    def set(self, order_id: str) -> None:
        """Remember *order_id* as the active order, replacing any previous one."""
