from typing import List
from hrms.models.organization.position import Position
from hrms.services.base_service import EntityService


class PositionService(EntityService[Position]):
    model = Position
    entity_name = "Position"

    async def get_positions_by_department(self, department_id: int) -> List[Position]:
        return await self.get_by("department_id", department_id)
