from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from registry_api.core.deps import get_session
from registry_api.repositories.location import BaseSiteRepository
from registry_api.schemas.common import SuccessResponse
from registry_api.schemas.location import BaseSiteCreate, BaseSiteRead

router = APIRouter(prefix="/bases", tags=["Bases"])


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[BaseSiteRead],
    summary="List bases",
    description="List all manufacturing bases ordered by name.",
)
async def list_bases(session: AsyncSession = Depends(get_session)) -> List[BaseSiteRead]:
    repo = BaseSiteRepository(session)
    return [BaseSiteRead.model_validate(x) for x in await repo.list_bases()]


# PUBLIC_INTERFACE
@router.get("/{base_id}", response_model=BaseSiteRead, summary="Get base")
async def get_base(
    base_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> BaseSiteRead:
    base = await BaseSiteRepository(session).get(base_id)
    if not base:
        raise HTTPException(status_code=404, detail="Base not found")
    return BaseSiteRead.model_validate(base)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=BaseSiteRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create base",
)
async def create_base(
    payload: BaseSiteCreate,
    session: AsyncSession = Depends(get_session),
) -> BaseSiteRead:
    created = await BaseSiteRepository(session).create(payload)
    return BaseSiteRead.model_validate(created)


# PUBLIC_INTERFACE
@router.put("/{base_id}", response_model=BaseSiteRead, summary="Update base")
async def update_base(
    payload: BaseSiteCreate,
    base_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> BaseSiteRead:
    updated = await BaseSiteRepository(session).update(base_id, payload)
    if not updated:
        raise HTTPException(status_code=404, detail="Base not found")
    return BaseSiteRead.model_validate(updated)


# PUBLIC_INTERFACE
@router.delete(
    "/{base_id}",
    response_model=SuccessResponse,
    summary="Delete base",
    description="Delete a base. Fails while workshops still reference it.",
)
async def delete_base(
    base_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> SuccessResponse:
    if not await BaseSiteRepository(session).delete(base_id):
        raise HTTPException(status_code=404, detail="Base not found")
    return SuccessResponse()
