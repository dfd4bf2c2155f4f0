from __future__ import annotations

import logging
from typing import NoReturn

from tea_api.core.metrics import TEA_OPERATIONS, TEAS_STORED
from tea_api.domain.models import Tea, TeaCreate, TeaNotFoundError, TeaUpdate
from tea_api.repositories.base import AbstractTeaRepository

logger = logging.getLogger(__name__)


class TeaService:
    def __init__(self, repository: AbstractTeaRepository) -> None:
        self._repo = repository

    async def create(self, payload: TeaCreate) -> Tea:
        tea = self._repo.create(name=payload.name, price=payload.price)
        logger.info("Created tea %s (%s)", tea.id, tea.name)
        self._record("create", "ok")
        return tea

    async def get_all(self) -> list[Tea]:
        self._record("list", "ok")
        return self._repo.find_all()

    async def get(self, tea_id: int) -> Tea:
        """Returns a single tea, raises TeaNotFoundError if it does not exist."""
        tea = self._repo.find_by_id(tea_id)
        if tea is None:
            self._not_found("get", tea_id)
        self._record("get", "ok")
        return tea

    async def update(self, tea_id: int, payload: TeaUpdate) -> Tea:
        """Overwrites name and price together; the ID stays unchanged."""
        tea = self._repo.update(tea_id, name=payload.name, price=payload.price)
        if tea is None:
            self._not_found("update", tea_id)
        logger.info("Updated tea %s", tea_id)
        self._record("update", "ok")
        return tea

    async def delete(self, tea_id: int) -> None:
        if not self._repo.delete(tea_id):
            self._not_found("delete", tea_id)
        logger.info("Deleted tea %s", tea_id)
        self._record("delete", "ok")

    def _record(self, operation: str, outcome: str) -> None:
        TEA_OPERATIONS.labels(operation=operation, outcome=outcome).inc()
        TEAS_STORED.set(self._repo.count())

    def _not_found(self, operation: str, tea_id: int) -> NoReturn:
        logger.debug("Tea %s not found (%s)", tea_id, operation)
        self._record(operation, "not_found")
        raise TeaNotFoundError(tea_id)
