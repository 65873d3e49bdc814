from sqlalchemy import Column, Integer, String, Text, ForeignKey
from hrms.db.base import BaseModel

class Position(BaseModel):
    __tablename__ = 'positions'

    title = Column(String(100), nullable=False)
    description = Column(Text)
    department_id = Column(Integer, ForeignKey('departments.id'), nullable=False, index=True)
    payscale_min = Column(Integer)
    payscale_max = Column(Integer)
