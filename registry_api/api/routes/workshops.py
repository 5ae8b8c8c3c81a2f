from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from registry_api.core.deps import get_session
from registry_api.repositories.location import WorkshopRepository
from registry_api.schemas.common import SuccessResponse
from registry_api.schemas.location import WorkshopCreate, WorkshopRead

router = APIRouter(prefix="/workshops", tags=["Workshops"])


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[WorkshopRead],
    summary="List workshops",
    description="List workshops ordered by name, optionally restricted to one base.",
)
async def list_workshops(
    session: AsyncSession = Depends(get_session),
    base_id: Optional[int] = Query(None, alias="baseId", ge=1, description="Filter by base"),
) -> List[WorkshopRead]:
    repo = WorkshopRepository(session)
    return [WorkshopRead.model_validate(x) for x in await repo.list_workshops(base_id=base_id)]


# PUBLIC_INTERFACE
@router.get("/{workshop_id}", response_model=WorkshopRead, summary="Get workshop")
async def get_workshop(
    workshop_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> WorkshopRead:
    workshop = await WorkshopRepository(session).get(workshop_id)
    if not workshop:
        raise HTTPException(status_code=404, detail="Workshop not found")
    return WorkshopRead.model_validate(workshop)


# PUBLIC_INTERFACE
@router.post("", response_model=WorkshopRead, status_code=status.HTTP_201_CREATED, summary="Create workshop")
async def create_workshop(
    payload: WorkshopCreate,
    session: AsyncSession = Depends(get_session),
) -> WorkshopRead:
    created = await WorkshopRepository(session).create(payload)
    return WorkshopRead.model_validate(created)


# PUBLIC_INTERFACE
@router.put("/{workshop_id}", response_model=WorkshopRead, summary="Update workshop")
async def update_workshop(
    payload: WorkshopCreate,
    workshop_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> WorkshopRead:
    updated = await WorkshopRepository(session).update(workshop_id, payload)
    if not updated:
        raise HTTPException(status_code=404, detail="Workshop not found")
    return WorkshopRead.model_validate(updated)


# PUBLIC_INTERFACE
@router.delete("/{workshop_id}", response_model=SuccessResponse, summary="Delete workshop")
async def delete_workshop(
    workshop_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> SuccessResponse:
    if not await WorkshopRepository(session).delete(workshop_id):
        raise HTTPException(status_code=404, detail="Workshop not found")
    return SuccessResponse()
