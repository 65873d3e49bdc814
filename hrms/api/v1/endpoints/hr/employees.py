from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from hrms.core.database import get_async_session
from hrms.services.hr.employee_service import EmployeeService
from hrms.schemas.hr.employee_schema import EmployeeCreate, EmployeeUpdate, EmployeeResponse

router = APIRouter()

@router.post("/", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee: EmployeeCreate,
    session: AsyncSession = Depends(get_async_session),
):
    """Create a new employee"""
    service = EmployeeService(session)
    return await service.create(employee)

@router.get("/", response_model=List[EmployeeResponse])
async def get_employees(
    department_id: Optional[int] = Query(None),
    position_id: Optional[int] = Query(None),
    manager_id: Optional[int] = Query(None),
    session: AsyncSession = Depends(get_async_session),
):
    """Get employees; the first filter given wins (department, position, manager)"""
    service = EmployeeService(session)
    if department_id is not None:
        return await service.get_employees_by_department(department_id)
    if position_id is not None:
        return await service.get_employees_by_position(position_id)
    if manager_id is not None:
        return await service.get_employees_by_manager(manager_id)
    return await service.get_all()

@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: int,
    session: AsyncSession = Depends(get_async_session)
):
    """Get employee by ID"""
    service = EmployeeService(session)
    employee = await service.get(employee_id)
    if employee is None:
        raise HTTPException(status_code=404, detail="Employee not found")
    return employee

@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: int,
    employee: EmployeeUpdate,
    session: AsyncSession = Depends(get_async_session)
):
    """Update employee; fields left out of the payload keep their value"""
    service = EmployeeService(session)
    updated = await service.update(employee_id, employee)
    if updated is None:
        raise HTTPException(status_code=404, detail="Employee not found")
    return updated

@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: int,
    session: AsyncSession = Depends(get_async_session),
):
    """Delete employee"""
    service = EmployeeService(session)
    if not await service.delete(employee_id):
        raise HTTPException(status_code=404, detail="Employee not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
