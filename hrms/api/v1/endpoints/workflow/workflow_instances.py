import logging
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from hrms.core.database import get_async_session
from hrms.models.shared.enums import WorkflowStatus
from hrms.services.workflow.workflow_engine import WorkflowEngine
from hrms.services.workflow.workflow_service import WorkflowInstanceService
from hrms.schemas.workflow.workflow_instance_schema import (
    WorkflowInstanceCreate,
    WorkflowInstanceUpdate,
    WorkflowInstanceResponse,
    WorkflowProgress,
)

router = APIRouter()
logger = logging.getLogger(__name__)

# region ========== Instances ==========

@router.post("/", response_model=WorkflowInstanceResponse, status_code=status.HTTP_201_CREATED)
async def start_workflow_instance(
    instance: WorkflowInstanceCreate,
    session: AsyncSession = Depends(get_async_session),
):
    """Start a workflow instance; it always begins in the pending state"""
    engine = WorkflowEngine(session)
    return await engine.start(instance)

@router.get("/", response_model=List[WorkflowInstanceResponse])
async def get_workflow_instances(
    employee_id: Optional[int] = Query(None),
    status_filter: Optional[WorkflowStatus] = Query(None, alias="status"),
    session: AsyncSession = Depends(get_async_session),
):
    """Get workflow instances for an employee, in a status, or all of them"""
    service = WorkflowInstanceService(session)
    if employee_id is not None:
        return await service.get_instances_by_employee(employee_id)
    if status_filter is not None:
        return await service.get_instances_by_status(status_filter.value)
    return await service.get_all()

@router.get("/{instance_id}", response_model=WorkflowInstanceResponse)
async def get_workflow_instance(
    instance_id: int,
    session: AsyncSession = Depends(get_async_session)
):
    service = WorkflowInstanceService(session)
    instance = await service.get(instance_id)
    if instance is None:
        raise HTTPException(status_code=404, detail="Workflow instance not found")
    return instance

@router.put("/{instance_id}", response_model=WorkflowInstanceResponse)
async def update_workflow_instance(
    instance_id: int,
    instance: WorkflowInstanceUpdate,
    session: AsyncSession = Depends(get_async_session)
):
    """Edit an instance's workflow, employee or data; use the action endpoints to move it"""
    service = WorkflowInstanceService(session)
    updated = await service.update(instance_id, instance)
    if updated is None:
        raise HTTPException(status_code=404, detail="Workflow instance not found")
    return updated

@router.delete("/{instance_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_workflow_instance(
    instance_id: int,
    session: AsyncSession = Depends(get_async_session),
):
    service = WorkflowInstanceService(session)
    if not await service.delete(instance_id):
        raise HTTPException(status_code=404, detail="Workflow instance not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# endregion

# region ========== Actions ==========

@router.post("/{instance_id}/advance", response_model=WorkflowInstanceResponse)
async def advance_workflow_instance(
    instance_id: int,
    session: AsyncSession = Depends(get_async_session),
):
    """Move a pending instance to its next step"""
    engine = WorkflowEngine(session)
    return await engine.advance(instance_id)

@router.post("/{instance_id}/approve", response_model=WorkflowInstanceResponse)
async def approve_workflow_instance(
    instance_id: int,
    session: AsyncSession = Depends(get_async_session),
):
    engine = WorkflowEngine(session)
    return await engine.approve(instance_id)

@router.post("/{instance_id}/reject", response_model=WorkflowInstanceResponse)
async def reject_workflow_instance(
    instance_id: int,
    session: AsyncSession = Depends(get_async_session),
):
    engine = WorkflowEngine(session)
    return await engine.reject(instance_id)

@router.get("/{instance_id}/progress", response_model=WorkflowProgress)
async def get_workflow_instance_progress(
    instance_id: int,
    session: AsyncSession = Depends(get_async_session),
):
    """Current step name, approver and position within the workflow template"""
    engine = WorkflowEngine(session)
    return await engine.get_progress(instance_id)

# endregion
