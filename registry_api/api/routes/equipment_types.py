from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from registry_api.core.deps import get_session
from registry_api.repositories.catalog import EquipmentTypeRepository
from registry_api.schemas.catalog import EquipmentTypeCreate, EquipmentTypeRead
from registry_api.schemas.common import SuccessResponse

router = APIRouter(prefix="/equipment-types", tags=["Equipment Types"])


# PUBLIC_INTERFACE
@router.get("", response_model=List[EquipmentTypeRead], summary="List equipment types")
async def list_equipment_types(session: AsyncSession = Depends(get_session)) -> List[EquipmentTypeRead]:
    repo = EquipmentTypeRepository(session)
    return [EquipmentTypeRead.model_validate(x) for x in await repo.list_types()]


# PUBLIC_INTERFACE
@router.get("/{type_id}", response_model=EquipmentTypeRead, summary="Get equipment type")
async def get_equipment_type(
    type_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> EquipmentTypeRead:
    row = await EquipmentTypeRepository(session).get(type_id)
    if not row:
        raise HTTPException(status_code=404, detail="Equipment type not found")
    return EquipmentTypeRead.model_validate(row)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=EquipmentTypeRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create equipment type",
)
async def create_equipment_type(
    payload: EquipmentTypeCreate,
    session: AsyncSession = Depends(get_session),
) -> EquipmentTypeRead:
    created = await EquipmentTypeRepository(session).create(payload)
    return EquipmentTypeRead.model_validate(created)


# PUBLIC_INTERFACE
@router.put("/{type_id}", response_model=EquipmentTypeRead, summary="Update equipment type")
async def update_equipment_type(
    payload: EquipmentTypeCreate,
    type_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> EquipmentTypeRead:
    updated = await EquipmentTypeRepository(session).update(type_id, payload)
    if not updated:
        raise HTTPException(status_code=404, detail="Equipment type not found")
    return EquipmentTypeRead.model_validate(updated)


# PUBLIC_INTERFACE
@router.delete(
    "/{type_id}",
    response_model=SuccessResponse,
    summary="Delete equipment type",
    description="Fails while equipment or components are classified with the type.",
)
async def delete_equipment_type(
    type_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> SuccessResponse:
    if not await EquipmentTypeRepository(session).delete(type_id):
        raise HTTPException(status_code=404, detail="Equipment type not found")
    return SuccessResponse()
