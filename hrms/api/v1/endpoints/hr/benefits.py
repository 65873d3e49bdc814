from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from hrms.core.database import get_async_session
from hrms.services.hr.benefit_service import BenefitService
from hrms.schemas.hr.benefit_schema import BenefitCreate, BenefitUpdate, BenefitResponse

router = APIRouter()

@router.post("/", response_model=BenefitResponse, status_code=status.HTTP_201_CREATED)
async def create_benefit(
    benefit: BenefitCreate,
    session: AsyncSession = Depends(get_async_session),
):
    """Enroll an employee in a benefit"""
    service = BenefitService(session)
    return await service.create(benefit)

@router.get("/", response_model=List[BenefitResponse])
async def get_benefits(
    employee_id: Optional[int] = Query(None),
    session: AsyncSession = Depends(get_async_session),
):
    service = BenefitService(session)
    if employee_id is not None:
        return await service.get_benefits_by_employee(employee_id)
    return await service.get_all()

@router.get("/{benefit_id}", response_model=BenefitResponse)
async def get_benefit(
    benefit_id: int,
    session: AsyncSession = Depends(get_async_session)
):
    service = BenefitService(session)
    benefit = await service.get(benefit_id)
    if benefit is None:
        raise HTTPException(status_code=404, detail="Benefit not found")
    return benefit

@router.put("/{benefit_id}", response_model=BenefitResponse)
async def update_benefit(
    benefit_id: int,
    benefit: BenefitUpdate,
    session: AsyncSession = Depends(get_async_session)
):
    service = BenefitService(session)
    updated = await service.update(benefit_id, benefit)
    if updated is None:
        raise HTTPException(status_code=404, detail="Benefit not found")
    return updated

@router.delete("/{benefit_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_benefit(
    benefit_id: int,
    session: AsyncSession = Depends(get_async_session),
):
    service = BenefitService(session)
    if not await service.delete(benefit_id):
        raise HTTPException(status_code=404, detail="Benefit not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
