from pydantic import BaseModel, ConfigDict, validator
from typing import List, Optional

class WorkflowStep(BaseModel):
    id: int
    name: str
    approver: Optional[int] = None  # Employee id; display only

class WorkflowBase(BaseModel):
    name: str
    description: Optional[str] = None
    steps: List[WorkflowStep]
    created_by: Optional[int] = None

class WorkflowCreate(WorkflowBase):
    @validator('steps')
    def validate_steps(cls, v):
        if not v:
            raise ValueError('A workflow needs at least one step')
        return v

class WorkflowUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    steps: Optional[List[WorkflowStep]] = None
    created_by: Optional[int] = None

    @validator('steps')
    def validate_steps(cls, v):
        # Runs only when steps was supplied; an explicit null is refused
        if not v:
            raise ValueError('A workflow needs at least one step')
        return v

class WorkflowResponse(WorkflowBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
