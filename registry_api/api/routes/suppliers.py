from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from registry_api.core.deps import get_session
from registry_api.repositories.catalog import SupplierRepository
from registry_api.schemas.catalog import SupplierCreate, SupplierListItem, SupplierRead
from registry_api.schemas.common import SuccessResponse

router = APIRouter(prefix="/suppliers", tags=["Suppliers"])


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[SupplierListItem],
    summary="List spare part suppliers",
    description="List suppliers with the supplied part's material code, ordered by supplier name.",
)
async def list_suppliers(
    session: AsyncSession = Depends(get_session),
    spare_part_id: Optional[int] = Query(None, alias="sparePartId", ge=1, description="Filter by spare part"),
) -> List[SupplierListItem]:
    rows = await SupplierRepository(session).list_suppliers(spare_part_id=spare_part_id)
    return [SupplierListItem.model_validate(r) for r in rows]


# PUBLIC_INTERFACE
@router.get("/{supplier_id}", response_model=SupplierRead, summary="Get supplier")
async def get_supplier(
    supplier_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> SupplierRead:
    row = await SupplierRepository(session).get(supplier_id)
    if not row:
        raise HTTPException(status_code=404, detail="Supplier not found")
    return SupplierRead.model_validate(row)


# PUBLIC_INTERFACE
@router.post("", response_model=SupplierRead, status_code=status.HTTP_201_CREATED, summary="Create supplier")
async def create_supplier(
    payload: SupplierCreate,
    session: AsyncSession = Depends(get_session),
) -> SupplierRead:
    created = await SupplierRepository(session).create(payload)
    return SupplierRead.model_validate(created)


# PUBLIC_INTERFACE
@router.put("/{supplier_id}", response_model=SupplierRead, summary="Update supplier")
async def update_supplier(
    payload: SupplierCreate,
    supplier_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> SupplierRead:
    updated = await SupplierRepository(session).update(supplier_id, payload)
    if not updated:
        raise HTTPException(status_code=404, detail="Supplier not found")
    return SupplierRead.model_validate(updated)


# PUBLIC_INTERFACE
@router.delete("/{supplier_id}", response_model=SuccessResponse, summary="Delete supplier")
async def delete_supplier(
    supplier_id: int = Path(..., ge=1),
    session: AsyncSession = Depends(get_session),
) -> SuccessResponse:
    if not await SupplierRepository(session).delete(supplier_id):
        raise HTTPException(status_code=404, detail="Supplier not found")
    return SuccessResponse()
