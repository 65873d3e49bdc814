from sqlalchemy import Column, Integer, String, ForeignKey, Date
from hrms.db.base import BaseModel
from hrms.models.shared.enums import ContractStatus

class Contract(BaseModel):
    __tablename__ = 'contracts'

    employee_id = Column(Integer, ForeignKey('employees.id'), nullable=False, index=True)
    contract_type = Column(String(50), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date)
    salary = Column(Integer)
    currency = Column(String(3), default="USD")
    documents = Column(String(500))  # Path to the signed contract
    renewal_date = Column(Date, index=True)
    status = Column(String(20), default=ContractStatus.ACTIVE.value)
