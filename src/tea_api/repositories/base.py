from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tea_api.domain.models import Tea


class AbstractTeaRepository(ABC):
    @abstractmethod
    def create(self, name: str, price: int | float) -> Tea:
        """Stores a new tea under the next free ID."""
        ...

    @abstractmethod
    def find_all(self) -> list[Tea]:
        """Returns all teas in creation order."""
        ...

    @abstractmethod
    def find_by_id(self, tea_id: int) -> Tea | None:
        """Finds a tea by ID."""
        ...

    @abstractmethod
    def update(self, tea_id: int, name: str, price: int | float) -> Tea | None:
        """Overwrites name and price of a tea. Returns None if it does not exist."""
        ...

    @abstractmethod
    def delete(self, tea_id: int) -> bool:
        """Deletes a tea by ID. Returns True if deleted."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Number of teas currently stored."""
        ...
