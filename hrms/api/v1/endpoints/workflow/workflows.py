from fastapi import APIRouter, Depends, HTTPException, Response, status
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from hrms.core.database import get_async_session
from hrms.services.workflow.workflow_service import WorkflowService
from hrms.schemas.workflow.workflow_schema import WorkflowCreate, WorkflowUpdate, WorkflowResponse

router = APIRouter()

@router.post("/", response_model=WorkflowResponse, status_code=status.HTTP_201_CREATED)
async def create_workflow(
    workflow: WorkflowCreate,
    session: AsyncSession = Depends(get_async_session),
):
    """Create a workflow template with its ordered approval steps"""
    service = WorkflowService(session)
    return await service.create(workflow)

@router.get("/", response_model=List[WorkflowResponse])
async def get_workflows(
    session: AsyncSession = Depends(get_async_session),
):
    service = WorkflowService(session)
    return await service.get_all()

@router.get("/{workflow_id}", response_model=WorkflowResponse)
async def get_workflow(
    workflow_id: int,
    session: AsyncSession = Depends(get_async_session)
):
    service = WorkflowService(session)
    workflow = await service.get(workflow_id)
    if workflow is None:
        raise HTTPException(status_code=404, detail="Workflow not found")
    return workflow

@router.put("/{workflow_id}", response_model=WorkflowResponse)
async def update_workflow(
    workflow_id: int,
    workflow: WorkflowUpdate,
    session: AsyncSession = Depends(get_async_session)
):
    service = WorkflowService(session)
    updated = await service.update(workflow_id, workflow)
    if updated is None:
        raise HTTPException(status_code=404, detail="Workflow not found")
    return updated

@router.delete("/{workflow_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_workflow(
    workflow_id: int,
    session: AsyncSession = Depends(get_async_session),
):
    """Delete workflow template; running instances keep their workflow id"""
    service = WorkflowService(session)
    if not await service.delete(workflow_id):
        raise HTTPException(status_code=404, detail="Workflow not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
