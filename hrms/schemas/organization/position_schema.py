from pydantic import BaseModel, validator
from typing import Optional

class PositionBase(BaseModel):
    title: str
    description: Optional[str] = None
    department_id: int
    payscale_min: Optional[int] = None
    payscale_max: Optional[int] = None

class PositionCreate(PositionBase):
    @validator('title')
    def validate_title(cls, v):
        if not v or not v.strip():
            raise ValueError('Position title is required')
        return v.strip()

    @validator('payscale_max')
    def validate_payscale(cls, v, values):
        low = values.get('payscale_min')
        if v is not None and low is not None and v < low:
            raise ValueError('payscale_max cannot be lower than payscale_min')
        return v

class PositionUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    department_id: Optional[int] = None
    payscale_min: Optional[int] = None
    payscale_max: Optional[int] = None

class PositionResponse(PositionBase):
    id: int

    class Config:
        from_attributes = True
