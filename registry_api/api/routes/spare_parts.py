from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from registry_api.core.deps import get_session
from registry_api.repositories.catalog import SparePartRepository
from registry_api.schemas.catalog import SparePartCreate, SparePartRead
from registry_api.schemas.common import SuccessResponse

router = APIRouter(prefix="/spare-parts", tags=["Spare Parts"])

DUPLICATE_MATERIAL_CODE = "Material code already exists"


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[SparePartRead],
    summary="List spare parts",
    description="List spare parts ordered by material code with optional text search and custom flag.",
)
async def list_spare_parts(
    session: AsyncSession = Depends(get_session),
    search: Optional[str] = Query(
        None, description="Substring of material code, manufacturer, specification or description"
    ),
    is_custom: Optional[bool] = Query(None, alias="isCustom", description="Filter by custom part flag"),
) -> List[SparePartRead]:
    rows = await SparePartRepository(session).list_spare_parts(search=search, is_custom=is_custom)
    return [SparePartRead.model_validate(r) for r in rows]


# PUBLIC_INTERFACE
@router.get("/{spare_part_id}", response_model=SparePartRead, summary="Get spare part")
async def get_spare_part(
    spare_part_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> SparePartRead:
    row = await SparePartRepository(session).get(spare_part_id)
    if not row:
        raise HTTPException(status_code=404, detail="Spare part not found")
    return SparePartRead.model_validate(row)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=SparePartRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create spare part",
    description="Create a spare part. The material code must be unique.",
)
async def create_spare_part(
    payload: SparePartCreate,
    session: AsyncSession = Depends(get_session),
) -> SparePartRead:
    repo = SparePartRepository(session)
    if await repo.get_by_material_code(payload.material_code):
        raise HTTPException(status_code=400, detail=DUPLICATE_MATERIAL_CODE)
    created = await repo.create(payload)
    return SparePartRead.model_validate(created)


# PUBLIC_INTERFACE
@router.put("/{spare_part_id}", response_model=SparePartRead, summary="Update spare part")
async def update_spare_part(
    payload: SparePartCreate,
    spare_part_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> SparePartRead:
    repo = SparePartRepository(session)
    existing = await repo.get_by_material_code(payload.material_code)
    if existing and existing.spare_part_id != spare_part_id:
        raise HTTPException(status_code=400, detail=DUPLICATE_MATERIAL_CODE)
    updated = await repo.update(spare_part_id, payload)
    if not updated:
        raise HTTPException(status_code=404, detail="Spare part not found")
    return SparePartRead.model_validate(updated)


# PUBLIC_INTERFACE
@router.delete(
    "/{spare_part_id}",
    response_model=SuccessResponse,
    summary="Delete spare part",
    description="Fails while suppliers or associations reference the part.",
)
async def delete_spare_part(
    spare_part_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> SuccessResponse:
    if not await SparePartRepository(session).delete(spare_part_id):
        raise HTTPException(status_code=404, detail="Spare part not found")
    return SuccessResponse()
