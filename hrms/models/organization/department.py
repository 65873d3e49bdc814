from sqlalchemy import Column, Integer, String, Text, ForeignKey
from hrms.db.base import BaseModel

class Department(BaseModel):
    __tablename__ = 'departments'

    name = Column(String(100), nullable=False)
    description = Column(Text)
    parent_id = Column(Integer, ForeignKey('departments.id'), nullable=True)
