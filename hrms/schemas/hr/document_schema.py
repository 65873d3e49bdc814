from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import date, datetime

class DocumentBase(BaseModel):
    employee_id: int
    name: str
    type: str
    path: str
    expiry_date: Optional[date] = None

class DocumentCreate(DocumentBase):
    pass

class DocumentUpdate(BaseModel):
    employee_id: Optional[int] = None
    name: Optional[str] = None
    type: Optional[str] = None
    path: Optional[str] = None
    expiry_date: Optional[date] = None

class DocumentResponse(DocumentBase):
    id: int
    upload_date: datetime

    model_config = ConfigDict(from_attributes=True)
