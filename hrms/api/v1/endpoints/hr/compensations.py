from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from hrms.core.database import get_async_session
from hrms.services.hr.compensation_service import CompensationService
from hrms.schemas.hr.compensation_schema import CompensationCreate, CompensationUpdate, CompensationResponse

router = APIRouter()

@router.post("/", response_model=CompensationResponse, status_code=status.HTTP_201_CREATED)
async def create_compensation(
    compensation: CompensationCreate,
    session: AsyncSession = Depends(get_async_session),
):
    """Record a compensation change"""
    service = CompensationService(session)
    return await service.create(compensation)

@router.get("/", response_model=List[CompensationResponse])
async def get_compensations(
    employee_id: Optional[int] = Query(None),
    session: AsyncSession = Depends(get_async_session),
):
    """Get compensation history, optionally for one employee"""
    service = CompensationService(session)
    if employee_id is not None:
        return await service.get_compensations_by_employee(employee_id)
    return await service.get_all()

@router.get("/{compensation_id}", response_model=CompensationResponse)
async def get_compensation(
    compensation_id: int,
    session: AsyncSession = Depends(get_async_session)
):
    service = CompensationService(session)
    compensation = await service.get(compensation_id)
    if compensation is None:
        raise HTTPException(status_code=404, detail="Compensation not found")
    return compensation

@router.put("/{compensation_id}", response_model=CompensationResponse)
async def update_compensation(
    compensation_id: int,
    compensation: CompensationUpdate,
    session: AsyncSession = Depends(get_async_session)
):
    service = CompensationService(session)
    updated = await service.update(compensation_id, compensation)
    if updated is None:
        raise HTTPException(status_code=404, detail="Compensation not found")
    return updated

@router.delete("/{compensation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_compensation(
    compensation_id: int,
    session: AsyncSession = Depends(get_async_session),
):
    service = CompensationService(session)
    if not await service.delete(compensation_id):
        raise HTTPException(status_code=404, detail="Compensation not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
