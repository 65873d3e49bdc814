from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from hrms.core.database import get_async_session
from hrms.services.organization.department_service import DepartmentService
from hrms.schemas.organization.department_schema import DepartmentCreate, DepartmentUpdate, DepartmentResponse

router = APIRouter()

@router.post("/", response_model=DepartmentResponse, status_code=status.HTTP_201_CREATED)
async def create_department(
    department: DepartmentCreate,
    session: AsyncSession = Depends(get_async_session),
):
    """Create a new department"""
    service = DepartmentService(session)
    return await service.create(department)

@router.get("/", response_model=List[DepartmentResponse])
async def get_departments(
    parent_id: Optional[int] = Query(None),
    session: AsyncSession = Depends(get_async_session),
):
    """Get all departments, or the sub-departments of a parent"""
    service = DepartmentService(session)
    if parent_id is not None:
        return await service.get_sub_departments(parent_id)
    return await service.get_all()

@router.get("/{department_id}", response_model=DepartmentResponse)
async def get_department(
    department_id: int,
    session: AsyncSession = Depends(get_async_session)
):
    """Get department by ID"""
    service = DepartmentService(session)
    department = await service.get(department_id)
    if department is None:
        raise HTTPException(status_code=404, detail="Department not found")
    return department

@router.put("/{department_id}", response_model=DepartmentResponse)
async def update_department(
    department_id: int,
    department: DepartmentUpdate,
    session: AsyncSession = Depends(get_async_session)
):
    """Update department"""
    service = DepartmentService(session)
    updated = await service.update(department_id, department)
    if updated is None:
        raise HTTPException(status_code=404, detail="Department not found")
    return updated

@router.delete("/{department_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_department(
    department_id: int,
    session: AsyncSession = Depends(get_async_session),
):
    """Delete department; positions that reference it are left as they are"""
    service = DepartmentService(session)
    if not await service.delete(department_id):
        raise HTTPException(status_code=404, detail="Department not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
