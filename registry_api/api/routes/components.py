from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from registry_api.core.deps import get_session
from registry_api.repositories.catalog import ComponentRepository
from registry_api.schemas.catalog import ComponentCreate, ComponentListItem, ComponentRead
from registry_api.schemas.common import SuccessResponse

router = APIRouter(prefix="/components", tags=["Components"])


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[ComponentListItem],
    summary="List components",
    description="List components with their equipment type name, ordered by component name.",
)
async def list_components(
    session: AsyncSession = Depends(get_session),
    type_id: Optional[int] = Query(None, alias="typeId", ge=1, description="Filter by equipment type"),
) -> List[ComponentListItem]:
    rows = await ComponentRepository(session).list_components(type_id=type_id)
    return [ComponentListItem.model_validate(r) for r in rows]


# PUBLIC_INTERFACE
@router.get("/{component_id}", response_model=ComponentRead, summary="Get component")
async def get_component(
    component_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> ComponentRead:
    row = await ComponentRepository(session).get(component_id)
    if not row:
        raise HTTPException(status_code=404, detail="Component not found")
    return ComponentRead.model_validate(row)


# PUBLIC_INTERFACE
@router.post("", response_model=ComponentRead, status_code=status.HTTP_201_CREATED, summary="Create component")
async def create_component(
    payload: ComponentCreate,
    session: AsyncSession = Depends(get_session),
) -> ComponentRead:
    created = await ComponentRepository(session).create(payload)
    return ComponentRead.model_validate(created)


# PUBLIC_INTERFACE
@router.put("/{component_id}", response_model=ComponentRead, summary="Update component")
async def update_component(
    payload: ComponentCreate,
    component_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> ComponentRead:
    updated = await ComponentRepository(session).update(component_id, payload)
    if not updated:
        raise HTTPException(status_code=404, detail="Component not found")
    return ComponentRead.model_validate(updated)


# PUBLIC_INTERFACE
@router.delete("/{component_id}", response_model=SuccessResponse, summary="Delete component")
async def delete_component(
    component_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> SuccessResponse:
    if not await ComponentRepository(session).delete(component_id):
        raise HTTPException(status_code=404, detail="Component not found")
    return SuccessResponse()
