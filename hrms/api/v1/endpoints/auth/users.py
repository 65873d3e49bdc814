from fastapi import APIRouter, Depends, HTTPException, Response, status
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from hrms.core.database import get_async_session
from hrms.services.auth.user_service import UserService
from hrms.schemas.auth.user import UserCreate, UserUpdate, UserResponse

router = APIRouter()

@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user: UserCreate,
    session: AsyncSession = Depends(get_async_session),
):
    service = UserService(session)
    return await service.create(user)

@router.get("/", response_model=List[UserResponse])
async def get_users(
    session: AsyncSession = Depends(get_async_session),
):
    service = UserService(session)
    return await service.get_all()

@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    session: AsyncSession = Depends(get_async_session)
):
    service = UserService(session)
    user = await service.get(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user

@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    user: UserUpdate,
    session: AsyncSession = Depends(get_async_session)
):
    service = UserService(session)
    updated = await service.update(user_id, user)
    if updated is None:
        raise HTTPException(status_code=404, detail="User not found")
    return updated

@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    session: AsyncSession = Depends(get_async_session),
):
    service = UserService(session)
    if not await service.delete(user_id):
        raise HTTPException(status_code=404, detail="User not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
