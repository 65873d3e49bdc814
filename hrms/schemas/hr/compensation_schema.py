from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date

class CompensationBase(BaseModel):
    employee_id: int
    effective_date: date
    salary: int = Field(..., ge=0)
    currency: str = "USD"
    reason: Optional[str] = None
    approved_by: Optional[int] = None

class CompensationCreate(CompensationBase):
    pass

class CompensationUpdate(BaseModel):
    employee_id: Optional[int] = None
    effective_date: Optional[date] = None
    salary: Optional[int] = Field(None, ge=0)
    currency: Optional[str] = None
    reason: Optional[str] = None
    approved_by: Optional[int] = None

class CompensationResponse(CompensationBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
