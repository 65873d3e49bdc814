from pydantic import BaseModel, ConfigDict, validator
from typing import Optional
from datetime import date
from hrms.models.shared.enums import ContractStatus

class ContractBase(BaseModel):
    employee_id: int
    contract_type: str
    start_date: date
    end_date: Optional[date] = None
    salary: Optional[int] = None
    currency: str = "USD"
    documents: Optional[str] = None
    renewal_date: Optional[date] = None
    status: str = ContractStatus.ACTIVE.value

class ContractCreate(ContractBase):
    @validator('currency')
    def validate_currency(cls, v):
        if len(v.strip()) != 3:
            raise ValueError('Currency must be a 3-letter code')
        return v.strip().upper()

class ContractUpdate(BaseModel):
    employee_id: Optional[int] = None
    contract_type: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    salary: Optional[int] = None
    currency: Optional[str] = None
    documents: Optional[str] = None
    renewal_date: Optional[date] = None
    status: Optional[str] = None

class ContractResponse(ContractBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
