from hrms.models.auth.user import User
from hrms.models.hr.benefit import Benefit
from hrms.models.hr.compensation import Compensation
from hrms.models.hr.contract import Contract
from hrms.models.hr.document import Document
from hrms.models.hr.employee import Employee
from hrms.models.organization.department import Department
from hrms.models.organization.position import Position
from hrms.models.workflow.workflow import Workflow
from hrms.models.workflow.workflow_instance import WorkflowInstance


__all__ = [
    "User",
    "Benefit",
    "Compensation",
    "Contract",
    "Document",
    "Employee",
    "Department",
    "Position",
    "Workflow",
    "WorkflowInstance",
]
