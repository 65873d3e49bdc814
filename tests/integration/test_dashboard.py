import pytest
from httpx import AsyncClient
from fastapi import status


@pytest.mark.asyncio
class TestDashboard:
    """Dashboard endpoints over the sample organization"""

    async def test_summary(self, seeded_client: AsyncClient):
        response = await seeded_client.get("/api/v1/dashboard/summary")
        assert response.status_code == status.HTTP_200_OK

        summary = response.json()
        assert summary["total_employees"] == 9
        assert summary["pending_approvals"] == 2
        assert set(summary) == {"total_employees", "new_hires", "pending_approvals", "contract_renewals"}

    async def test_recent_employees(self, seeded_client: AsyncClient):
        response = await seeded_client.get("/api/v1/dashboard/employees")
        assert response.status_code == status.HTTP_200_OK

        recent = response.json()
        assert [e["first_name"] for e in recent] == ["Alex", "Maria", "James", "Rebecca"]
        assert recent[1]["position"] == "UX Designer"
        assert recent[1]["department"] == "Design"

    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "healthy"
        assert "X-Process-Time" in response.headers
