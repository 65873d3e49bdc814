from pydantic import BaseModel

class DashboardSummary(BaseModel):
    total_employees: int
    new_hires: int
    pending_approvals: int
    contract_renewals: int
