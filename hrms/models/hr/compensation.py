from sqlalchemy import Column, Integer, String, Text, ForeignKey, Date
from hrms.db.base import BaseModel

class Compensation(BaseModel):
    __tablename__ = 'compensations'

    employee_id = Column(Integer, ForeignKey('employees.id'), nullable=False, index=True)
    effective_date = Column(Date, nullable=False)
    salary = Column(Integer, nullable=False)
    currency = Column(String(3), default="USD")
    reason = Column(Text)  # promotion, annual review, ...
    approved_by = Column(Integer, ForeignKey('employees.id'))
