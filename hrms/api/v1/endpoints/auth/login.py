from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from hrms.core.database import get_async_session
from hrms.schemas.auth.login import LoginRequest, LoginResponse
from hrms.services.auth.auth_service import AuthService

router = APIRouter()

@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    session: AsyncSession = Depends(get_async_session),
):
    """Check a username and password; no token is issued"""
    service = AuthService(session)
    return await service.authenticate(credentials.username, credentials.password)
