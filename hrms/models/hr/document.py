from sqlalchemy import Column, Integer, String, ForeignKey, Date, DateTime
from hrms.db.base import BaseModel

class Document(BaseModel):
    __tablename__ = 'documents'

    employee_id = Column(Integer, ForeignKey('employees.id'), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    type = Column(String(50), nullable=False)  # contract, id, certificate, ...
    path = Column(String(500), nullable=False)
    upload_date = Column(DateTime, nullable=False)
    expiry_date = Column(Date)
