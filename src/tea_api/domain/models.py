# src/tea_api/domain/models.py
from __future__ import annotations

from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Aggregate: Tea
# ---------------------------------------------------------------------------


class Tea(BaseModel):
    """
    Ein Tee-Eintrag im Katalog.
    Die ID vergibt ausschließlich das Repository; sie ändert sich nie.
    """

    id: int = Field(description="Fortlaufende ID, beginnt bei 1 und wird nie wiederverwendet")
    name: str
    price: int | float


# ---------------------------------------------------------------------------
# API Request/Response Schemas
# ---------------------------------------------------------------------------


class TeaCreate(BaseModel):
    name: str
    price: int | float

    model_config = {"frozen": True}


class TeaUpdate(BaseModel):
    # PUT ersetzt immer beide Felder, es gibt kein partielles Update
    name: str
    price: int | float

    model_config = {"frozen": True}


# ---------------------------------------------------------------------------
# Custom Domain Exceptions
# ---------------------------------------------------------------------------


class TeaNotFoundError(Exception):
    def __init__(self, tea_id: int | str):
        super().__init__(f"Tea '{tea_id}' not found")
        self.tea_id = tea_id
