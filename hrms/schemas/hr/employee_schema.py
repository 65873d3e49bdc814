from pydantic import BaseModel, ConfigDict, validator, EmailStr
from typing import Optional
from datetime import date
from hrms.models.shared.enums import EmployeeStatus

class EmployeeBase(BaseModel):
    first_name: str
    last_name: str
    email: EmailStr
    phone: Optional[str] = None
    address: Optional[str] = None
    date_of_birth: Optional[date] = None
    emergency_contact: Optional[str] = None
    position_id: Optional[int] = None
    manager_id: Optional[int] = None
    hire_date: Optional[date] = None
    # Free text in practice; the EmployeeStatus values are the ones the UI knows
    status: str = EmployeeStatus.ACTIVE.value
    profile_picture: Optional[str] = None

class EmployeeCreate(EmployeeBase):
    @validator('first_name', 'last_name')
    def validate_names(cls, v):
        if not v or not v.strip():
            raise ValueError('Name is required')
        return v.strip()

class EmployeeUpdate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    date_of_birth: Optional[date] = None
    emergency_contact: Optional[str] = None
    position_id: Optional[int] = None
    manager_id: Optional[int] = None
    hire_date: Optional[date] = None
    status: Optional[str] = None
    profile_picture: Optional[str] = None

class EmployeeResponse(EmployeeBase):
    id: int
    email: str

    model_config = ConfigDict(from_attributes=True)

class RecentEmployeeResponse(EmployeeResponse):
    position: str
    department: str
