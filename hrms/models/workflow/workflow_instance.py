from sqlalchemy import Column, Integer, String, ForeignKey, JSON, DateTime
from hrms.db.base import BaseModel
from hrms.models.shared.enums import WorkflowStatus

class WorkflowInstance(BaseModel):
    __tablename__ = 'workflow_instances'

    workflow_id = Column(Integer, ForeignKey('workflows.id'), nullable=False, index=True)
    employee_id = Column(Integer, ForeignKey('employees.id'), index=True)
    # Index into Workflow.steps; may point past the last step
    current_step = Column(Integer, nullable=False, default=0)
    status = Column(String(20), nullable=False, default=WorkflowStatus.PENDING.value, index=True)
    data = Column(JSON)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)
