from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from hrms.core.database import get_async_session
from hrms.services.hr.contract_service import ContractService
from hrms.schemas.hr.contract_schema import ContractCreate, ContractUpdate, ContractResponse

router = APIRouter()

@router.post("/", response_model=ContractResponse, status_code=status.HTTP_201_CREATED)
async def create_contract(
    contract: ContractCreate,
    session: AsyncSession = Depends(get_async_session),
):
    """Create a new contract"""
    service = ContractService(session)
    return await service.create(contract)

@router.get("/", response_model=List[ContractResponse])
async def get_contracts(
    employee_id: Optional[int] = Query(None),
    renewal_days: Optional[int] = Query(None, ge=0, description="Contracts due for renewal within this many days"),
    session: AsyncSession = Depends(get_async_session),
):
    """Get contracts for an employee, contracts due for renewal, or all contracts"""
    service = ContractService(session)
    if employee_id is not None:
        return await service.get_contracts_by_employee(employee_id)
    if renewal_days is not None:
        return await service.get_contracts_for_renewal(renewal_days)
    return await service.get_all()

@router.get("/{contract_id}", response_model=ContractResponse)
async def get_contract(
    contract_id: int,
    session: AsyncSession = Depends(get_async_session)
):
    """Get contract by ID"""
    service = ContractService(session)
    contract = await service.get(contract_id)
    if contract is None:
        raise HTTPException(status_code=404, detail="Contract not found")
    return contract

@router.put("/{contract_id}", response_model=ContractResponse)
async def update_contract(
    contract_id: int,
    contract: ContractUpdate,
    session: AsyncSession = Depends(get_async_session)
):
    """Update contract"""
    service = ContractService(session)
    updated = await service.update(contract_id, contract)
    if updated is None:
        raise HTTPException(status_code=404, detail="Contract not found")
    return updated

@router.delete("/{contract_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contract(
    contract_id: int,
    session: AsyncSession = Depends(get_async_session),
):
    """Delete contract"""
    service = ContractService(session)
    if not await service.delete(contract_id):
        raise HTTPException(status_code=404, detail="Contract not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
