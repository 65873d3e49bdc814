from typing import List
from hrms.models.organization.department import Department
from hrms.services.base_service import EntityService


class DepartmentService(EntityService[Department]):
    model = Department
    entity_name = "Department"

    async def get_sub_departments(self, parent_id: int) -> List[Department]:
        return await self.get_by("parent_id", parent_id)
