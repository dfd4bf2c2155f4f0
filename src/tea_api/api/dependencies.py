# src/tea_api/api/dependencies.py
from functools import lru_cache

from fastapi import Depends

from tea_api.repositories.base import AbstractTeaRepository
from tea_api.repositories.tea_repository import InMemoryTeaRepository
from tea_api.services.tea_service import TeaService


# Singleton Repository: einmal pro Prozess, lebt bis zum Prozessende
@lru_cache
def get_tea_repository() -> AbstractTeaRepository:
    return InMemoryTeaRepository()


def get_tea_service(
    repository: AbstractTeaRepository = Depends(get_tea_repository),
) -> TeaService:
    return TeaService(repository=repository)
