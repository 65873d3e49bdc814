from pydantic import BaseModel, ConfigDict, JsonValue
from typing import Dict, Optional
from datetime import date

class BenefitBase(BaseModel):
    employee_id: int
    benefit_type: str
    provider: Optional[str] = None
    policy_number: Optional[str] = None
    start_date: date
    end_date: Optional[date] = None
    amount: Optional[int] = None
    frequency: Optional[str] = None
    details: Optional[Dict[str, JsonValue]] = None

class BenefitCreate(BenefitBase):
    pass

class BenefitUpdate(BaseModel):
    employee_id: Optional[int] = None
    benefit_type: Optional[str] = None
    provider: Optional[str] = None
    policy_number: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    amount: Optional[int] = None
    frequency: Optional[str] = None
    details: Optional[Dict[str, JsonValue]] = None

class BenefitResponse(BenefitBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
