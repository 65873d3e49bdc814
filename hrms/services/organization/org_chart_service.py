import logging
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from hrms.schemas.organization.chart_schema import OrgChartNode
from hrms.services.hr.employee_service import EmployeeService
from hrms.services.organization.department_service import DepartmentService
from hrms.services.organization.position_service import PositionService

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"


def classify_level(title: Optional[str]) -> int:
    """Chart level from the position title: chiefs 1, managers 2, everyone else 3.

    A title match only; the reporting tree is not consulted.
    """
    lowered = (title or "").lower()
    if "chief" in lowered:
        return 1
    if "manager" in lowered:
        return 2
    return 3


class OrgChartService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_organization_chart(self) -> List[OrgChartNode]:
        """One node per employee that holds a position.

        Positions or departments that no longer exist show as "Unknown".
        """
        employees = await EmployeeService(self.session).get_all()
        positions = {p.id: p for p in await PositionService(self.session).get_all()}
        departments = {d.id: d for d in await DepartmentService(self.session).get_all()}

        chart = []
        for employee in employees:
            if employee.position_id is None:
                continue
            position = positions.get(employee.position_id)
            department = departments.get(position.department_id) if position else None
            chart.append(
                OrgChartNode(
                    id=employee.id,
                    name=employee.full_name,
                    position=position.title if position else UNKNOWN,
                    department=department.name if department else UNKNOWN,
                    manager_id=employee.manager_id,
                    level=classify_level(position.title if position else None),
                )
            )

        logger.debug(f"Organization chart built with {len(chart)} nodes")
        return chart
