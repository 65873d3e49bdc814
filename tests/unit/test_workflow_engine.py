import pytest
from sqlalchemy.ext.asyncio import AsyncSession
from hrms.core.exceptions import InvalidStateTransitionError, NotFoundError
from hrms.models.shared.enums import WorkflowStatus
from hrms.schemas.workflow.workflow_instance_schema import WorkflowInstanceCreate, WorkflowInstanceUpdate
from hrms.schemas.workflow.workflow_schema import WorkflowCreate
from hrms.services.workflow.workflow_engine import WorkflowEngine
from hrms.services.workflow.workflow_service import WorkflowInstanceService, WorkflowService

STEPS = [
    {"id": 1, "name": "Manager Approval", "approver": None},
    {"id": 2, "name": "HR Review", "approver": 5},
    {"id": 3, "name": "Executive Approval", "approver": 1},
]


async def create_workflow(session: AsyncSession, steps=None):
    return await WorkflowService(session).create(
        WorkflowCreate(name="Promotion Request", steps=steps or STEPS)
    )


@pytest.mark.asyncio
class TestWorkflowEngine:
    """Instance lifecycle: pending -> approved | rejected"""

    async def test_start_is_always_pending(self, session: AsyncSession):
        workflow = await create_workflow(session)
        engine = WorkflowEngine(session)

        instance = await engine.start(
            WorkflowInstanceCreate(workflow_id=workflow.id, employee_id=7, data={"reason": "promotion"})
        )

        assert instance.status == WorkflowStatus.PENDING.value
        assert instance.current_step == 0
        assert instance.created_at == instance.updated_at
        assert instance.data == {"reason": "promotion"}

    async def test_start_ignores_supplied_status(self, session: AsyncSession):
        workflow = await create_workflow(session)
        instance = await WorkflowInstanceService(session).create(
            {"workflow_id": workflow.id, "status": WorkflowStatus.APPROVED.value}
        )
        assert instance.status == WorkflowStatus.PENDING.value

    async def test_advance_moves_one_step(self, session: AsyncSession):
        workflow = await create_workflow(session)
        engine = WorkflowEngine(session)
        instance = await engine.start(WorkflowInstanceCreate(workflow_id=workflow.id))
        created_at, updated_at = instance.created_at, instance.updated_at

        advanced = await engine.advance(instance.id)

        assert advanced.current_step == 1
        assert advanced.status == WorkflowStatus.PENDING.value
        assert advanced.created_at == created_at
        assert advanced.updated_at > updated_at

    async def test_approve_keeps_current_step(self, session: AsyncSession):
        workflow = await create_workflow(session)
        engine = WorkflowEngine(session)
        instance = await engine.start(WorkflowInstanceCreate(workflow_id=workflow.id))
        advanced = await engine.advance(instance.id)
        previous_update = advanced.updated_at

        approved = await engine.approve(instance.id)

        assert approved.status == WorkflowStatus.APPROVED.value
        assert approved.current_step == 1
        assert approved.updated_at > previous_update

    async def test_reject_is_terminal(self, session: AsyncSession):
        workflow = await create_workflow(session)
        engine = WorkflowEngine(session)
        instance = await engine.start(WorkflowInstanceCreate(workflow_id=workflow.id))

        rejected = await engine.reject(instance.id)
        assert rejected.status == WorkflowStatus.REJECTED.value

        with pytest.raises(InvalidStateTransitionError):
            await engine.advance(instance.id)
        with pytest.raises(InvalidStateTransitionError):
            await engine.approve(instance.id)
        with pytest.raises(InvalidStateTransitionError):
            await engine.reject(instance.id)

    async def test_second_approve_is_refused(self, session: AsyncSession):
        workflow = await create_workflow(session)
        engine = WorkflowEngine(session)
        instance = await engine.start(WorkflowInstanceCreate(workflow_id=workflow.id))
        await engine.approve(instance.id)

        with pytest.raises(InvalidStateTransitionError):
            await engine.approve(instance.id)

    async def test_cannot_advance_past_last_step(self, session: AsyncSession):
        workflow = await create_workflow(session)
        engine = WorkflowEngine(session)
        instance = await engine.start(WorkflowInstanceCreate(workflow_id=workflow.id, current_step=2))

        with pytest.raises(InvalidStateTransitionError):
            await engine.advance(instance.id)

        unchanged = await WorkflowInstanceService(session).get(instance.id)
        assert unchanged.current_step == 2
        assert unchanged.status == WorkflowStatus.PENDING.value

    async def test_unknown_instance_is_not_found(self, session: AsyncSession):
        engine = WorkflowEngine(session)
        for action in (engine.advance, engine.approve, engine.reject, engine.get_progress):
            with pytest.raises(NotFoundError):
                await action(999)

    async def test_advance_with_deleted_workflow_is_not_found(self, session: AsyncSession):
        workflow = await create_workflow(session)
        engine = WorkflowEngine(session)
        instance = await engine.start(WorkflowInstanceCreate(workflow_id=workflow.id))
        await WorkflowService(session).delete(workflow.id)

        with pytest.raises(NotFoundError):
            await engine.advance(instance.id)

    async def test_edit_refreshes_updated_at_only(self, session: AsyncSession):
        workflow = await create_workflow(session)
        engine = WorkflowEngine(session)
        instance = await engine.start(WorkflowInstanceCreate(workflow_id=workflow.id))
        created_at, updated_at = instance.created_at, instance.updated_at

        edited = await WorkflowInstanceService(session).update(
            instance.id, WorkflowInstanceUpdate(data={"note": "rush"})
        )

        assert edited.data == {"note": "rush"}
        assert edited.created_at == created_at
        assert edited.updated_at > updated_at


@pytest.mark.asyncio
class TestWorkflowProgress:
    """Step resolution against the template"""

    async def test_progress_resolves_current_step(self, session: AsyncSession):
        workflow = await create_workflow(session)
        engine = WorkflowEngine(session)
        instance = await engine.start(WorkflowInstanceCreate(workflow_id=workflow.id))
        await engine.advance(instance.id)

        progress = await engine.get_progress(instance.id)

        assert progress.workflow_name == "Promotion Request"
        assert progress.current_step == 1
        assert progress.total_steps == 3
        assert progress.step_name == "HR Review"
        assert progress.approver == 5
        assert progress.is_final_step is False
        assert progress.beyond_last_step is False

    async def test_progress_at_final_step(self, session: AsyncSession):
        workflow = await create_workflow(session)
        engine = WorkflowEngine(session)
        instance = await engine.start(WorkflowInstanceCreate(workflow_id=workflow.id, current_step=2))

        progress = await engine.get_progress(instance.id)
        assert progress.step_name == "Executive Approval"
        assert progress.is_final_step is True

    async def test_progress_beyond_last_step(self, session: AsyncSession):
        workflow = await create_workflow(session)
        engine = WorkflowEngine(session)
        instance = await engine.start(WorkflowInstanceCreate(workflow_id=workflow.id, current_step=5))

        progress = await engine.get_progress(instance.id)
        assert progress.beyond_last_step is True
        assert progress.is_final_step is False
        assert progress.step_name == "Step 6"
        assert progress.approver is None
