from datetime import date, timedelta
from typing import List, Optional
from sqlalchemy import select
from hrms.models.hr.contract import Contract
from hrms.services.base_service import EntityService


class ContractService(EntityService[Contract]):
    model = Contract
    entity_name = "Contract"

    async def get_contracts_by_employee(self, employee_id: int) -> List[Contract]:
        return await self.get_by("employee_id", employee_id)

    async def get_contracts_for_renewal(self, days: int, today: Optional[date] = None) -> List[Contract]:
        """Contracts whose renewal date falls in [today, today + days], both ends included.

        Contracts without a renewal date never match.
        """
        start = today or date.today()
        end = start + timedelta(days=days)
        if end < start:
            return []

        result = await self.session.execute(
            select(Contract)
            .where(
                Contract.renewal_date.is_not(None),
                Contract.renewal_date >= start,
                Contract.renewal_date <= end,
            )
            .order_by(Contract.renewal_date, Contract.id)
        )
        return list(result.scalars().all())
