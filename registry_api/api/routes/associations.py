from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from registry_api.core.deps import get_association_query, get_session
from registry_api.repositories.association import AssociationRepository
from registry_api.schemas.association import (
    AssociationCreate,
    AssociationListItem,
    AssociationQuery,
    AssociationRead,
)
from registry_api.schemas.common import SuccessResponse

router = APIRouter(prefix="/associations", tags=["Associations"])


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[AssociationListItem],
    summary="Query equipment/component/spare part associations",
    description=(
        "List associations joined with equipment, component and spare part details. "
        "All filters are optional and combined with AND; `importanceLevel` takes a "
        "comma-separated list (A,B) and `supplyCycleRange` an inclusive `min,max` in weeks."
    ),
)
async def list_associations(
    query: AssociationQuery = Depends(get_association_query),
    session: AsyncSession = Depends(get_session),
) -> List[AssociationListItem]:
    rows = await AssociationRepository(session).list_associations(query)
    return [AssociationListItem.model_validate(r) for r in rows]


# PUBLIC_INTERFACE
@router.get("/{association_id}", response_model=AssociationRead, summary="Get association")
async def get_association(
    association_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> AssociationRead:
    row = await AssociationRepository(session).get(association_id)
    if not row:
        raise HTTPException(status_code=404, detail="Association not found")
    return AssociationRead.model_validate(row)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=AssociationRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create association",
)
async def create_association(
    payload: AssociationCreate,
    session: AsyncSession = Depends(get_session),
) -> AssociationRead:
    created = await AssociationRepository(session).create(payload)
    return AssociationRead.model_validate(created)


# PUBLIC_INTERFACE
@router.put("/{association_id}", response_model=AssociationRead, summary="Update association")
async def update_association(
    payload: AssociationCreate,
    association_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> AssociationRead:
    updated = await AssociationRepository(session).update(association_id, payload)
    if not updated:
        raise HTTPException(status_code=404, detail="Association not found")
    return AssociationRead.model_validate(updated)


# PUBLIC_INTERFACE
@router.delete("/{association_id}", response_model=SuccessResponse, summary="Delete association")
async def delete_association(
    association_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> SuccessResponse:
    if not await AssociationRepository(session).delete(association_id):
        raise HTTPException(status_code=404, detail="Association not found")
    return SuccessResponse()
