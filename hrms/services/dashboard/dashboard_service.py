import logging
from typing import List, Optional
from datetime import date, timedelta
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from hrms.core.config import settings
from hrms.models.hr.employee import Employee
from hrms.models.shared.enums import WorkflowStatus
from hrms.models.workflow.workflow_instance import WorkflowInstance
from hrms.schemas.dashboard.dashboard_schema import DashboardSummary
from hrms.schemas.hr.employee_schema import RecentEmployeeResponse
from hrms.services.hr.contract_service import ContractService
from hrms.services.hr.employee_service import EmployeeService
from hrms.services.organization.department_service import DepartmentService
from hrms.services.organization.position_service import PositionService

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"


class DashboardService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_dashboard_summary(self, today: Optional[date] = None) -> DashboardSummary:
        """Headline counts for the dashboard cards"""
        today = today or date.today()

        total_employees = await EmployeeService(self.session).count()
        new_hires = await self._count_new_hires(today)
        pending_approvals = await self._count_pending_approvals()
        renewals = await ContractService(self.session).get_contracts_for_renewal(
            settings.CONTRACT_RENEWAL_WINDOW_DAYS, today=today
        )

        return DashboardSummary(
            total_employees=total_employees,
            new_hires=new_hires,
            pending_approvals=pending_approvals,
            contract_renewals=len(renewals),
        )

    async def _count_new_hires(self, today: date) -> int:
        """Employees hired within the last N days, today included"""
        window_start = today - timedelta(days=settings.NEW_HIRE_WINDOW_DAYS)
        result = await self.session.execute(
            select(func.count(Employee.id)).where(
                Employee.hire_date.is_not(None),
                Employee.hire_date >= window_start,
                Employee.hire_date <= today,
            )
        )
        return int(result.scalar() or 0)

    async def _count_pending_approvals(self) -> int:
        result = await self.session.execute(
            select(func.count(WorkflowInstance.id)).where(
                WorkflowInstance.status == WorkflowStatus.PENDING.value
            )
        )
        return int(result.scalar() or 0)

    async def get_recent_employees(self, limit: Optional[int] = None) -> List[RecentEmployeeResponse]:
        """Most recently hired employees with their position title and department name.

        Employees without a hire date sort as the oldest.
        """
        limit = settings.RECENT_EMPLOYEES_LIMIT if limit is None else limit

        employees = await EmployeeService(self.session).get_all()
        positions = {p.id: p for p in await PositionService(self.session).get_all()}
        departments = {d.id: d for d in await DepartmentService(self.session).get_all()}

        recent = sorted(employees, key=lambda e: e.hire_date or date.min, reverse=True)[:limit]

        result = []
        for employee in recent:
            position = positions.get(employee.position_id)
            department = departments.get(position.department_id) if position else None
            item = RecentEmployeeResponse.model_validate(
                {
                    **{c: getattr(employee, c) for c in Employee.__table__.c.keys()},
                    "position": position.title if position else UNKNOWN,
                    "department": department.name if department else UNKNOWN,
                }
            )
            result.append(item)
        return result
