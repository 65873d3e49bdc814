from sqlalchemy import Column, Integer, String, ForeignKey, Date, JSON
from hrms.db.base import BaseModel

class Benefit(BaseModel):
    __tablename__ = 'benefits'

    employee_id = Column(Integer, ForeignKey('employees.id'), nullable=False, index=True)
    benefit_type = Column(String(50), nullable=False)  # health, retirement, ...
    provider = Column(String(100))
    policy_number = Column(String(100))
    start_date = Column(Date, nullable=False)
    end_date = Column(Date)
    amount = Column(Integer)
    frequency = Column(String(20))  # monthly, yearly, ...
    details = Column(JSON)
