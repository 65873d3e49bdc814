from typing import List
from sqlalchemy import select
from hrms.models.hr.employee import Employee
from hrms.models.organization.position import Position
from hrms.services.base_service import EntityService


class EmployeeService(EntityService[Employee]):
    model = Employee
    entity_name = "Employee"

    async def get_employees_by_position(self, position_id: int) -> List[Employee]:
        return await self.get_by("position_id", position_id)

    async def get_employees_by_manager(self, manager_id: int) -> List[Employee]:
        return await self.get_by("manager_id", manager_id)

    async def get_employees_by_department(self, department_id: int) -> List[Employee]:
        """Employees holding any position that belongs to the department"""
        result = await self.session.execute(
            select(Employee)
            .join(Position, Employee.position_id == Position.id)
            .where(Position.department_id == department_id)
            .order_by(Employee.id)
        )
        return list(result.scalars().all())
