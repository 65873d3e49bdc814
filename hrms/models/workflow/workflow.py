from sqlalchemy import Column, Integer, String, Text, ForeignKey, JSON
from hrms.db.base import BaseModel

class Workflow(BaseModel):
    __tablename__ = 'workflows'

    name = Column(String(100), nullable=False)
    description = Column(Text)
    # Ordered list of {"id", "name", "approver"}; the index is the step number
    steps = Column(JSON(none_as_null=True), nullable=False)
    created_by = Column(Integer, ForeignKey('employees.id'))
