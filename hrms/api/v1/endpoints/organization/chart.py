from fastapi import APIRouter, Depends
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from hrms.core.database import get_async_session
from hrms.schemas.organization.chart_schema import OrgChartNode
from hrms.services.organization.org_chart_service import OrgChartService

router = APIRouter()

@router.get("/chart", response_model=List[OrgChartNode])
async def get_organization_chart(
    session: AsyncSession = Depends(get_async_session),
):
    """
    Get the organization chart: one node per employee holding a position,
    with a level derived from the position title (1 chief, 2 manager, 3 other)
    """
    service = OrgChartService(session)
    return await service.get_organization_chart()
