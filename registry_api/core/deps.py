from __future__ import annotations

import logging
from typing import AsyncGenerator, List, Optional, Tuple

from fastapi import Depends, HTTPException, Query, status
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from registry_api.db.models.enums import ImportanceLevel
from registry_api.db.session import get_async_session
from registry_api.schemas.association import AssociationQuery

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
async def get_session(
    session_dep=Depends(get_async_session),
) -> AsyncGenerator[AsyncSession, None]:
    """
    Yield the request-scoped AsyncSession.

    Routes depend on this rather than on get_async_session directly so tests
    can override the database in one place.
    """
    yield session_dep


def _bad_request(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


# PUBLIC_INTERFACE
def parse_optional_id(value: Optional[str], name: str) -> Optional[int]:
    """
    Parse an id filter from the query string.

    Empty values and the literal ``all`` mean "no filter".
    """
    if value is None or value.strip() in ("", "all"):
        return None
    try:
        parsed = int(value)
    except ValueError:
        raise _bad_request(f"{name} must be an integer or 'all'.")
    if parsed < 1:
        raise _bad_request(f"{name} must be a positive integer.")
    return parsed


# PUBLIC_INTERFACE
def parse_importance_levels(value: Optional[str]) -> Optional[List[ImportanceLevel]]:
    """Parse a comma-separated list such as ``A,B``."""
    if not value:
        return None
    levels = []
    for part in (p.strip().upper() for p in value.split(",")):
        if not part:
            continue
        try:
            levels.append(ImportanceLevel(part))
        except ValueError:
            raise _bad_request(f"importanceLevel contains an unknown level: {part!r} (expected A, B or C).")
    return levels or None


# PUBLIC_INTERFACE
def parse_supply_cycle_range(value: Optional[str]) -> Optional[Tuple[int, int]]:
    """Parse ``min,max`` (inclusive weeks)."""
    if not value:
        return None
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 2:
        raise _bad_request("supplyCycleRange must be two comma-separated integers: min,max.")
    try:
        low, high = int(parts[0]), int(parts[1])
    except ValueError:
        raise _bad_request("supplyCycleRange must be two comma-separated integers: min,max.")
    return low, high


# PUBLIC_INTERFACE
async def get_association_query(
    base_id: Optional[str] = Query(None, alias="baseId", description="Base id or 'all'"),
    workshop_id: Optional[str] = Query(None, alias="workshopId", description="Workshop id or 'all'"),
    type_id: Optional[str] = Query(None, alias="typeId", description="Equipment type id or 'all'"),
    equipment_id: Optional[str] = Query(None, alias="equipmentId", description="Equipment id or 'all'"),
    component_id: Optional[str] = Query(None, alias="componentId", description="Component id or 'all'"),
    spare_part_id: Optional[str] = Query(None, alias="sparePartId", description="Spare part id or 'all'"),
    importance_level: Optional[str] = Query(
        None, alias="importanceLevel", description="Comma-separated importance levels, e.g. A,B"
    ),
    supply_cycle_range: Optional[str] = Query(
        None, alias="supplyCycleRange", description="Inclusive supply cycle range in weeks: min,max"
    ),
    is_custom: Optional[bool] = Query(None, alias="isCustom", description="Custom part flag"),
    keyword: Optional[str] = Query(
        None,
        description="Matches material code, description, specification, equipment or component name",
    ),
) -> AssociationQuery:
    """Build the advanced association query from query-string parameters."""
    try:
        return AssociationQuery(
            base_id=parse_optional_id(base_id, "baseId"),
            workshop_id=parse_optional_id(workshop_id, "workshopId"),
            type_id=parse_optional_id(type_id, "typeId"),
            equipment_id=parse_optional_id(equipment_id, "equipmentId"),
            component_id=parse_optional_id(component_id, "componentId"),
            spare_part_id=parse_optional_id(spare_part_id, "sparePartId"),
            importance_levels=parse_importance_levels(importance_level),
            supply_cycle_range=parse_supply_cycle_range(supply_cycle_range),
            is_custom=is_custom,
            keyword=keyword or None,
        )
    except ValidationError as exc:
        logger.info("Rejected association query: %s", exc.errors())
        raise _bad_request("; ".join(str(e["msg"]) for e in exc.errors()))
