from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status

from tea_api.api.dependencies import get_tea_service
from tea_api.core.rate_limit import limiter, tea_rate_limit
from tea_api.domain.models import Tea, TeaCreate, TeaNotFoundError, TeaUpdate
from tea_api.services.tea_service import TeaService

router = APIRouter(prefix="/teas", tags=["Teas"])

TEA_NOT_FOUND = "Tea not found."


def parse_tea_id(tea_id: str) -> int:
    """Nur reine ASCII-Ziffern sind eine ID; alles andere trifft keinen Tee und liefert 404."""
    if not (tea_id.isascii() and tea_id.isdigit()):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TEA_NOT_FOUND)
    return int(tea_id)


ServiceDep = Annotated[TeaService, Depends(get_tea_service)]
TeaIdDep = Annotated[int, Depends(parse_tea_id)]


@router.post("", response_model=Tea, status_code=status.HTTP_201_CREATED)
@limiter.limit(tea_rate_limit)
async def create_tea(request: Request, payload: TeaCreate, service: ServiceDep) -> Tea:
    return await service.create(payload)


@router.get("", response_model=list[Tea])
@limiter.limit(tea_rate_limit)
async def get_teas(request: Request, service: ServiceDep) -> list[Tea]:
    return await service.get_all()


@router.get("/{tea_id}", response_model=Tea)
@limiter.limit(tea_rate_limit)
async def get_tea(request: Request, tea_id: TeaIdDep, service: ServiceDep) -> Tea:
    try:
        return await service.get(tea_id)
    except TeaNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TEA_NOT_FOUND)


@router.put("/{tea_id}", response_model=Tea)
@limiter.limit(tea_rate_limit)
async def update_tea(
    request: Request, tea_id: TeaIdDep, payload: TeaUpdate, service: ServiceDep
) -> Tea:
    """Replaces name and price of an existing tea."""
    try:
        return await service.update(tea_id, payload)
    except TeaNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TEA_NOT_FOUND)


@router.delete("/{tea_id}", status_code=status.HTTP_204_NO_CONTENT)
@limiter.limit(tea_rate_limit)
async def delete_tea(request: Request, tea_id: TeaIdDep, service: ServiceDep) -> None:
    try:
        await service.delete(tea_id)
    except TeaNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TEA_NOT_FOUND)
