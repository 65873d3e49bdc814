from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from hrms.core.database import get_async_session
from hrms.services.organization.position_service import PositionService
from hrms.schemas.organization.position_schema import PositionCreate, PositionUpdate, PositionResponse

router = APIRouter()

@router.post("/", response_model=PositionResponse, status_code=status.HTTP_201_CREATED)
async def create_position(
    position: PositionCreate,
    session: AsyncSession = Depends(get_async_session),
):
    """Create a new position"""
    service = PositionService(session)
    return await service.create(position)

@router.get("/", response_model=List[PositionResponse])
async def get_positions(
    department_id: Optional[int] = Query(None),
    session: AsyncSession = Depends(get_async_session),
):
    """Get all positions, optionally limited to one department"""
    service = PositionService(session)
    if department_id is not None:
        return await service.get_positions_by_department(department_id)
    return await service.get_all()

@router.get("/{position_id}", response_model=PositionResponse)
async def get_position(
    position_id: int,
    session: AsyncSession = Depends(get_async_session)
):
    """Get position by ID"""
    service = PositionService(session)
    position = await service.get(position_id)
    if position is None:
        raise HTTPException(status_code=404, detail="Position not found")
    return position

@router.put("/{position_id}", response_model=PositionResponse)
async def update_position(
    position_id: int,
    position: PositionUpdate,
    session: AsyncSession = Depends(get_async_session)
):
    """Update position"""
    service = PositionService(session)
    updated = await service.update(position_id, position)
    if updated is None:
        raise HTTPException(status_code=404, detail="Position not found")
    return updated

@router.delete("/{position_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_position(
    position_id: int,
    session: AsyncSession = Depends(get_async_session),
):
    """Delete position"""
    service = PositionService(session)
    if not await service.delete(position_id):
        raise HTTPException(status_code=404, detail="Position not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
