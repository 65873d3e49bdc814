import logging
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from hrms.core.database import get_async_session
from hrms.services.dashboard.dashboard_service import DashboardService
from hrms.schemas.dashboard.dashboard_schema import DashboardSummary
from hrms.schemas.hr.employee_schema import RecentEmployeeResponse

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("/summary", response_model=DashboardSummary)
async def get_dashboard_summary(
    session: AsyncSession = Depends(get_async_session),
):
    """
    Get the dashboard cards:
    - total employees
    - new hires in the last 30 days
    - pending workflow approvals
    - contracts due for renewal in the next 30 days
    """
    dashboard_service = DashboardService(session)
    summary = await dashboard_service.get_dashboard_summary()
    logger.info(f"Dashboard summary retrieved: {summary.model_dump()}")
    return summary

@router.get("/employees", response_model=List[RecentEmployeeResponse])
async def get_recent_employees(
    session: AsyncSession = Depends(get_async_session),
):
    """Get the most recently hired employees with position and department"""
    dashboard_service = DashboardService(session)
    return await dashboard_service.get_recent_employees()
