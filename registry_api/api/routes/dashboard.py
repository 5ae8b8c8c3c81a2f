from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from registry_api.core.deps import get_session
from registry_api.schemas.dashboard import DashboardCharts, DashboardStats
from registry_api.services.dashboard import DashboardService

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


# PUBLIC_INTERFACE
@router.get("/stats", response_model=DashboardStats, summary="Dashboard entity counts")
async def get_dashboard_stats(session: AsyncSession = Depends(get_session)) -> DashboardStats:
    return await DashboardService(session).compute_stats()


# PUBLIC_INTERFACE
@router.get(
    "/charts",
    response_model=DashboardCharts,
    summary="Dashboard distributions",
    description="Equipment per type, equipment per base, and components per importance level.",
)
async def get_dashboard_charts(session: AsyncSession = Depends(get_session)) -> DashboardCharts:
    return await DashboardService(session).compute_charts()
