from sqlalchemy import Column, Integer, String, Text, ForeignKey, Date
from hrms.db.base import BaseModel
from hrms.models.shared.enums import EmployeeStatus

class Employee(BaseModel):
    __tablename__ = 'employees'

    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(100), nullable=False, index=True)
    phone = Column(String(20))
    address = Column(Text)
    date_of_birth = Column(Date)
    emergency_contact = Column(String(100))
    position_id = Column(Integer, ForeignKey('positions.id'), index=True)
    manager_id = Column(Integer, ForeignKey('employees.id'), index=True)
    hire_date = Column(Date)
    status = Column(String(20), default=EmployeeStatus.ACTIVE.value)
    profile_picture = Column(String(255))

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
