from typing import List
from hrms.models.hr.benefit import Benefit
from hrms.services.base_service import EntityService


class BenefitService(EntityService[Benefit]):
    model = Benefit
    entity_name = "Benefit"

    async def get_benefits_by_employee(self, employee_id: int) -> List[Benefit]:
        return await self.get_by("employee_id", employee_id)
