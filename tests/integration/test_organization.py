import pytest
from httpx import AsyncClient
from fastapi import status


@pytest.mark.asyncio
class TestOrganization:
    """Departments, positions and the org chart"""

    async def test_department_crud(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/departments/",
            json={"name": "Engineering", "description": "Builds things"},
        )
        assert response.status_code == status.HTTP_201_CREATED
        department = response.json()
        assert department["id"] == 1

        response = await client.put(
            f"/api/v1/departments/{department['id']}",
            json={"description": "Builds and runs things"},
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] == "Engineering"
        assert response.json()["description"] == "Builds and runs things"

        response = await client.delete(f"/api/v1/departments/{department['id']}")
        assert response.status_code == status.HTTP_204_NO_CONTENT

        response = await client.get(f"/api/v1/departments/{department['id']}")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    async def test_sub_departments(self, client: AsyncClient):
        parent = (await client.post("/api/v1/departments/", json={"name": "Engineering"})).json()
        await client.post("/api/v1/departments/", json={"name": "Platform", "parent_id": parent["id"]})
        await client.post("/api/v1/departments/", json={"name": "Finance"})

        response = await client.get("/api/v1/departments/", params={"parent_id": parent["id"]})
        assert [d["name"] for d in response.json()] == ["Platform"]

    async def test_position_payscale_validation(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/positions/",
            json={"title": "Analyst", "department_id": 1, "payscale_min": 90000, "payscale_max": 50000},
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    async def test_positions_by_department(self, seeded_client: AsyncClient):
        response = await seeded_client.get("/api/v1/positions/", params={"department_id": 1})
        assert response.status_code == status.HTTP_200_OK
        titles = [p["title"] for p in response.json()]
        assert len(titles) == 4
        assert all(t.startswith("Chief") for t in titles)

    async def test_org_chart(self, seeded_client: AsyncClient):
        response = await seeded_client.get("/api/v1/organization/chart")
        assert response.status_code == status.HTTP_200_OK

        chart = response.json()
        assert len(chart) == 9
        assert sorted({node["level"] for node in chart}) == [1, 2, 3]
