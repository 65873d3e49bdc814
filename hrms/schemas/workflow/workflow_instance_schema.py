from pydantic import BaseModel, ConfigDict, Field, JsonValue
from typing import Dict, Optional
from datetime import datetime
from hrms.models.shared.enums import WorkflowStatus

class WorkflowInstanceCreate(BaseModel):
    workflow_id: int
    employee_id: Optional[int] = None
    current_step: int = Field(0, ge=0)
    data: Optional[Dict[str, JsonValue]] = None

class WorkflowInstanceUpdate(BaseModel):
    """Editable fields only; status and step move through the engine"""
    workflow_id: Optional[int] = None
    employee_id: Optional[int] = None
    data: Optional[Dict[str, JsonValue]] = None

class WorkflowInstanceResponse(BaseModel):
    id: int
    workflow_id: int
    employee_id: Optional[int] = None
    current_step: int
    status: WorkflowStatus
    data: Optional[Dict[str, JsonValue]] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class WorkflowProgress(BaseModel):
    instance_id: int
    workflow_id: int
    workflow_name: Optional[str] = None
    status: WorkflowStatus
    current_step: int
    total_steps: int
    step_name: str
    approver: Optional[int] = None
    is_final_step: bool
    beyond_last_step: bool
