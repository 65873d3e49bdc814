from typing import List
from hrms.models.hr.compensation import Compensation
from hrms.services.base_service import EntityService


class CompensationService(EntityService[Compensation]):
    model = Compensation
    entity_name = "Compensation"

    async def get_compensations_by_employee(self, employee_id: int) -> List[Compensation]:
        return await self.get_by("employee_id", employee_id)
