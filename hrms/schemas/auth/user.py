from pydantic import BaseModel, ConfigDict, validator
from typing import Optional
from hrms.models.shared.enums import UserRole

class UserBase(BaseModel):
    username: str
    employee_id: Optional[int] = None
    role: str = UserRole.USER.value
    is_active: bool = True

class UserCreate(UserBase):
    password: str

    @validator('username')
    def validate_username(cls, v):
        if not v or len(v.strip()) < 3:
            raise ValueError('Username must be at least 3 characters')
        return v.strip()

class UserUpdate(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None
    employee_id: Optional[int] = None
    role: Optional[str] = None
    is_active: Optional[bool] = None

class UserResponse(UserBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
