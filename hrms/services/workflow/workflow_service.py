from typing import Any, Dict, List
from hrms.models.shared.enums import WorkflowStatus
from hrms.models.workflow.workflow import Workflow
from hrms.models.workflow.workflow_instance import WorkflowInstance
from hrms.services.base_service import EntityService
from hrms.utils.date_time import utc_now


class WorkflowService(EntityService[Workflow]):
    model = Workflow
    entity_name = "Workflow"


class WorkflowInstanceService(EntityService[WorkflowInstance]):
    model = WorkflowInstance
    entity_name = "Workflow instance"
    protected_fields = ("id", "created_at", "updated_at")

    def _server_fields(self) -> Dict[str, Any]:
        now = utc_now()
        # Every instance starts out pending, whatever the caller sent
        return {
            "status": WorkflowStatus.PENDING.value,
            "created_at": now,
            "updated_at": now,
        }

    async def get_instances_by_employee(self, employee_id: int) -> List[WorkflowInstance]:
        return await self.get_by("employee_id", employee_id)

    async def get_instances_by_status(self, status: str) -> List[WorkflowInstance]:
        return await self.get_by("status", status)
