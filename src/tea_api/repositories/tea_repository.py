# src/tea_api/repositories/tea_repository.py
from __future__ import annotations

import threading

from tea_api.domain.models import Tea
from tea_api.repositories.base import AbstractTeaRepository


class InMemoryTeaRepository(AbstractTeaRepository):
    """
    In-memory storage for teas.

    Teas live in a list so that creation order is kept; IDs come from a
    counter that only ever grows, so an ID is never handed out twice even
    after the tea holding it was deleted. Every method takes the lock and
    returns copies, callers never see or mutate the stored objects.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._teas: list[Tea] = []
        self._next_id = 1

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    def create(self, name: str, price: int | float) -> Tea:
        with self._lock:
            tea = Tea(id=self._next_id, name=name, price=price)
            self._next_id += 1
            self._teas.append(tea)
            return tea.model_copy()

    def find_all(self) -> list[Tea]:
        with self._lock:
            return [t.model_copy() for t in self._teas]

    def find_by_id(self, tea_id: int) -> Tea | None:
        with self._lock:
            tea = self._find(tea_id)
            return tea.model_copy() if tea else None

    def update(self, tea_id: int, name: str, price: int | float) -> Tea | None:
        with self._lock:
            tea = self._find(tea_id)
            if tea is None:
                return None
            tea.name = name
            tea.price = price
            return tea.model_copy()

    def delete(self, tea_id: int) -> bool:
        with self._lock:
            for index, tea in enumerate(self._teas):
                if tea.id == tea_id:
                    del self._teas[index]
                    return True
            return False

    def count(self) -> int:
        with self._lock:
            return len(self._teas)

    def _find(self, tea_id: int) -> Tea | None:
        # caller must hold the lock
        return next((t for t in self._teas if t.id == tea_id), None)
