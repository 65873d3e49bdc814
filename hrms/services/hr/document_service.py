from typing import Any, Dict, List
from hrms.models.hr.document import Document
from hrms.services.base_service import EntityService
from hrms.utils.date_time import utc_now


class DocumentService(EntityService[Document]):
    model = Document
    entity_name = "Document"
    protected_fields = ("id", "upload_date")

    def _server_fields(self) -> Dict[str, Any]:
        return {"upload_date": utc_now()}

    async def get_documents_by_employee(self, employee_id: int) -> List[Document]:
        return await self.get_by("employee_id", employee_id)
