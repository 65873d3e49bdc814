import logging
from typing import Any, Dict, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from hrms.core.exceptions import InvalidStateTransitionError, NotFoundError
from hrms.models.shared.enums import WorkflowStatus
from hrms.models.workflow.workflow_instance import WorkflowInstance
from hrms.schemas.workflow.workflow_instance_schema import WorkflowInstanceCreate, WorkflowProgress
from hrms.services.workflow.workflow_service import WorkflowInstanceService, WorkflowService

logger = logging.getLogger(__name__)


class WorkflowEngine:
    """Moves workflow instances through their template's steps.

    An instance starts ``pending`` and may advance one step at a time until it
    reaches the template's last step. ``approved`` and ``rejected`` are
    terminal: any further transition raises ``InvalidStateTransitionError``.
    Each transition refreshes ``updated_at``; ``created_at`` never changes.
    The step approver is display data only, no actor is checked.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.workflows = WorkflowService(session)
        self.instances = WorkflowInstanceService(session)

    async def start(self, data: WorkflowInstanceCreate) -> WorkflowInstance:
        instance = await self.instances.create(data)
        logger.info(
            f"Workflow instance {instance.id} started for workflow {instance.workflow_id} "
            f"at step {instance.current_step}"
        )
        return instance

    async def _get_instance(self, instance_id: int) -> WorkflowInstance:
        instance = await self.instances.get(instance_id)
        if instance is None:
            raise NotFoundError("Workflow instance not found")
        return instance

    async def _get_pending(self, instance_id: int, action: str) -> WorkflowInstance:
        instance = await self._get_instance(instance_id)
        if instance.status != WorkflowStatus.PENDING.value:
            raise InvalidStateTransitionError(
                f"Cannot {action} workflow instance {instance_id}: status is '{instance.status}'"
            )
        return instance

    async def _apply(self, instance_id: int, changes: Dict[str, Any]) -> WorkflowInstance:
        instance = await self.instances.update(instance_id, changes)
        if instance is None:
            raise NotFoundError("Workflow instance not found")
        return instance

    # ---------- Transitions ----------
    async def advance(self, instance_id: int) -> WorkflowInstance:
        instance = await self._get_pending(instance_id, "advance")
        workflow = await self.workflows.get(instance.workflow_id)
        if workflow is None:
            raise NotFoundError(f"Workflow {instance.workflow_id} not found")

        last_step = len(workflow.steps or []) - 1
        if instance.current_step >= last_step:
            raise InvalidStateTransitionError(
                f"Workflow instance {instance_id} is already at its final step; approve or reject it"
            )

        instance = await self._apply(instance_id, {"current_step": instance.current_step + 1})
        logger.info(f"Workflow instance {instance_id} advanced to step {instance.current_step}")
        return instance

    async def approve(self, instance_id: int) -> WorkflowInstance:
        await self._get_pending(instance_id, "approve")
        instance = await self._apply(instance_id, {"status": WorkflowStatus.APPROVED.value})
        logger.info(f"Workflow instance {instance_id} approved at step {instance.current_step}")
        return instance

    async def reject(self, instance_id: int) -> WorkflowInstance:
        await self._get_pending(instance_id, "reject")
        instance = await self._apply(instance_id, {"status": WorkflowStatus.REJECTED.value})
        logger.info(f"Workflow instance {instance_id} rejected at step {instance.current_step}")
        return instance

    # ---------- Read side ----------
    async def get_progress(self, instance_id: int) -> WorkflowProgress:
        """Resolve the instance's current step against its template.

        A step index outside the template (or a deleted template) is reported
        through ``beyond_last_step`` with a "Step N" placeholder name.
        """
        instance = await self._get_instance(instance_id)
        workflow = await self.workflows.get(instance.workflow_id)
        steps: List[Dict[str, Any]] = list(workflow.steps or []) if workflow else []

        step: Optional[Dict[str, Any]] = None
        if 0 <= instance.current_step < len(steps):
            step = steps[instance.current_step]

        return WorkflowProgress(
            instance_id=instance.id,
            workflow_id=instance.workflow_id,
            workflow_name=workflow.name if workflow else None,
            status=instance.status,
            current_step=instance.current_step,
            total_steps=len(steps),
            step_name=step["name"] if step else f"Step {instance.current_step + 1}",
            approver=step.get("approver") if step else None,
            is_final_step=instance.current_step == len(steps) - 1,
            beyond_last_step=instance.current_step >= len(steps),
        )
