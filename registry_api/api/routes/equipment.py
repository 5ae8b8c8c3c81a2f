from __future__ import annotations

import math
from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from registry_api.core.deps import get_session
from registry_api.repositories.location import EquipmentRepository
from registry_api.schemas.common import PaginationMeta, SuccessResponse
from registry_api.schemas.location import (
    EquipmentCreate,
    EquipmentListItem,
    EquipmentPage,
    EquipmentRead,
)

router = APIRouter(prefix="/equipment", tags=["Equipment"])

SortField = Literal["equipmentId", "equipmentName", "workshopName", "typeName", "baseName", "createdAt"]


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=EquipmentPage,
    summary="List equipment (paginated)",
    description=(
        "Paginated, sortable equipment listing joined with workshop, type and base names. "
        "`pagination.total` counts all rows matching the filters."
    ),
)
async def list_equipment(
    session: AsyncSession = Depends(get_session),
    page: int = Query(1, ge=1, description="1-based page number"),
    limit: int = Query(10, ge=1, le=1000, description="Page size"),
    sort_by: SortField = Query("equipmentId", alias="sortBy"),
    sort_order: Literal["asc", "desc"] = Query("asc", alias="sortOrder"),
    workshop_id: Optional[int] = Query(None, alias="workshopId", ge=1),
    type_id: Optional[int] = Query(None, alias="typeId", ge=1),
    base_id: Optional[int] = Query(None, alias="baseId", ge=1),
    search: Optional[str] = Query(None, description="Substring of the equipment name"),
) -> EquipmentPage:
    repo = EquipmentRepository(session)
    rows, total = await repo.list_equipment(
        workshop_id=workshop_id,
        type_id=type_id,
        base_id=base_id,
        search=search,
        page=page,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return EquipmentPage(
        data=[EquipmentListItem.model_validate(r) for r in rows],
        pagination=PaginationMeta(
            page=page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit),
        ),
    )


# PUBLIC_INTERFACE
@router.get("/{equipment_id}", response_model=EquipmentRead, summary="Get equipment")
async def get_equipment(
    equipment_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> EquipmentRead:
    row = await EquipmentRepository(session).get(equipment_id)
    if not row:
        raise HTTPException(status_code=404, detail="Equipment not found")
    return EquipmentRead.model_validate(row)


# PUBLIC_INTERFACE
@router.post("", response_model=EquipmentRead, status_code=status.HTTP_201_CREATED, summary="Create equipment")
async def create_equipment(
    payload: EquipmentCreate,
    session: AsyncSession = Depends(get_session),
) -> EquipmentRead:
    created = await EquipmentRepository(session).create(payload)
    return EquipmentRead.model_validate(created)


# PUBLIC_INTERFACE
@router.put("/{equipment_id}", response_model=EquipmentRead, summary="Update equipment")
async def update_equipment(
    payload: EquipmentCreate,
    equipment_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> EquipmentRead:
    updated = await EquipmentRepository(session).update(equipment_id, payload)
    if not updated:
        raise HTTPException(status_code=404, detail="Equipment not found")
    return EquipmentRead.model_validate(updated)


# PUBLIC_INTERFACE
@router.delete("/{equipment_id}", response_model=SuccessResponse, summary="Delete equipment")
async def delete_equipment(
    equipment_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> SuccessResponse:
    if not await EquipmentRepository(session).delete(equipment_id):
        raise HTTPException(status_code=404, detail="Equipment not found")
    return SuccessResponse()
