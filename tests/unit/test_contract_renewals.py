import pytest
from datetime import date, timedelta
from sqlalchemy.ext.asyncio import AsyncSession
from hrms.schemas.hr.contract_schema import ContractCreate
from hrms.services.hr.contract_service import ContractService

TODAY = date(2024, 6, 1)


async def add_contract(service: ContractService, renewal_date=None):
    return await service.create(
        ContractCreate(
            employee_id=1,
            contract_type="permanent",
            start_date=date(2022, 1, 1),
            renewal_date=renewal_date,
        )
    )


@pytest.mark.asyncio
class TestContractRenewals:
    """Renewal window is [today, today + days], both ends included"""

    async def test_renewal_today_is_included_with_zero_days(self, session: AsyncSession):
        service = ContractService(session)
        contract = await add_contract(service, TODAY)

        due = await service.get_contracts_for_renewal(0, today=TODAY)
        assert [c.id for c in due] == [contract.id]

    async def test_window_end_is_inclusive(self, session: AsyncSession):
        service = ContractService(session)
        edge = await add_contract(service, TODAY + timedelta(days=30))
        await add_contract(service, TODAY + timedelta(days=31))

        due = await service.get_contracts_for_renewal(30, today=TODAY)
        assert [c.id for c in due] == [edge.id]

    async def test_past_and_missing_renewal_dates_are_excluded(self, session: AsyncSession):
        service = ContractService(session)
        await add_contract(service, TODAY - timedelta(days=1))
        await add_contract(service, None)

        assert await service.get_contracts_for_renewal(30, today=TODAY) == []

    async def test_negative_window_is_empty(self, session: AsyncSession):
        service = ContractService(session)
        await add_contract(service, TODAY)

        assert await service.get_contracts_for_renewal(-1, today=TODAY) == []

    async def test_results_ordered_by_renewal_date(self, session: AsyncSession):
        service = ContractService(session)
        later = await add_contract(service, TODAY + timedelta(days=20))
        sooner = await add_contract(service, TODAY + timedelta(days=5))

        due = await service.get_contracts_for_renewal(30, today=TODAY)
        assert [c.id for c in due] == [sooner.id, later.id]
