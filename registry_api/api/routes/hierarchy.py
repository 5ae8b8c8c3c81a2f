from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.ext.asyncio import AsyncSession

from registry_api.core.deps import get_session
from registry_api.schemas.hierarchy import TreeNode
from registry_api.services.hierarchy import HierarchyService

router = APIRouter(prefix="/hierarchy", tags=["Hierarchy"])


# PUBLIC_INTERFACE
@router.get(
    "/base/{base_id}",
    response_model=TreeNode,
    summary="Base hierarchy",
    description="Tree of a base, its workshops and the equipment in each workshop.",
)
async def get_base_hierarchy(
    base_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> TreeNode:
    tree = await HierarchyService(session).build_base_hierarchy(base_id)
    if tree is None:
        raise HTTPException(status_code=404, detail="Base not found")
    return tree


# PUBLIC_INTERFACE
@router.get(
    "/equipment/{equipment_id}",
    response_model=TreeNode,
    summary="Equipment hierarchy",
    description=(
        "Tree of an equipment, the components it has associations for, and the spare "
        "parts linked to each component (with quantity, importance level and supply cycle)."
    ),
)
async def get_equipment_hierarchy(
    equipment_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> TreeNode:
    tree = await HierarchyService(session).build_equipment_hierarchy(equipment_id)
    if tree is None:
        raise HTTPException(status_code=404, detail="Equipment not found")
    return tree
