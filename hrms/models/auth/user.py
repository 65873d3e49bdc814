from sqlalchemy import Column, Integer, String, Boolean, ForeignKey
from hrms.db.base import BaseModel
from hrms.models.shared.enums import UserRole

class User(BaseModel):
    __tablename__ = "users"

    username = Column(String(100), index=True, nullable=False)
    # Stored as given; login is a placeholder, not a security boundary
    password = Column(String(255), nullable=False)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=True)
    role = Column(String(50), default=UserRole.USER.value)
    is_active = Column(Boolean, default=True)

    def __repr__(self):
        return f"<User {self.username}>"
