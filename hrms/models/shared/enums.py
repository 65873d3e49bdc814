from enum import Enum

# Enums
class EmployeeStatus(str, Enum):
    ACTIVE = "active"
    ONBOARDING = "onboarding"
    INACTIVE = "inactive"
    TERMINATED = "terminated"

class ContractType(str, Enum):
    PERMANENT = "permanent"
    TEMPORARY = "temporary"
    CONTRACTOR = "contractor"

class ContractStatus(str, Enum):
    ACTIVE = "active"
    PENDING = "pending"
    TERMINATED = "terminated"

class WorkflowStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

class UserRole(str, Enum):
    ADMIN = "admin"
    HR_MANAGER = "hr_manager"
    EMPLOYEE = "employee"
    USER = "user"
