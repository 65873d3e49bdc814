from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

class LoginResponse(BaseModel):
    id: int
    username: str
    role: str
    employee_id: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)
