from pydantic import BaseModel
from typing import Optional

class OrgChartNode(BaseModel):
    id: int
    name: str
    position: str
    department: str
    manager_id: Optional[int] = None
    level: int
