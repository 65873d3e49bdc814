import pytest
from httpx import AsyncClient
from fastapi import status

STEPS = [
    {"id": 1, "name": "Document Collection", "approver": 5},
    {"id": 2, "name": "Equipment Setup", "approver": 2},
]


async def create_workflow(client: AsyncClient) -> dict:
    response = await client.post(
        "/api/v1/workflows/",
        json={"name": "Employee Onboarding", "steps": STEPS},
    )
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


async def start_instance(client: AsyncClient, workflow_id: int, **extra) -> dict:
    response = await client.post(
        "/api/v1/workflow-instances/",
        json={"workflow_id": workflow_id, "employee_id": 7, **extra},
    )
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


@pytest.mark.asyncio
class TestWorkflows:
    """Workflow templates"""

    async def test_workflow_needs_steps(self, client: AsyncClient):
        response = await client.post("/api/v1/workflows/", json={"name": "Empty", "steps": []})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    async def test_workflow_round_trip(self, client: AsyncClient):
        workflow = await create_workflow(client)

        response = await client.get(f"/api/v1/workflows/{workflow['id']}")
        assert response.status_code == status.HTTP_200_OK
        assert [s["name"] for s in response.json()["steps"]] == ["Document Collection", "Equipment Setup"]


@pytest.mark.asyncio
class TestWorkflowInstances:
    """Instance lifecycle over HTTP"""

    async def test_start_ignores_status(self, client: AsyncClient):
        workflow = await create_workflow(client)
        instance = await start_instance(client, workflow["id"], status="approved")

        assert instance["status"] == "pending"
        assert instance["current_step"] == 0
        assert instance["created_at"] == instance["updated_at"]

    async def test_advance_then_approve(self, client: AsyncClient):
        workflow = await create_workflow(client)
        instance = await start_instance(client, workflow["id"])

        response = await client.post(f"/api/v1/workflow-instances/{instance['id']}/advance")
        assert response.status_code == status.HTTP_200_OK
        advanced = response.json()
        assert advanced["current_step"] == 1
        assert advanced["status"] == "pending"
        assert advanced["created_at"] == instance["created_at"]

        response = await client.post(f"/api/v1/workflow-instances/{instance['id']}/approve")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "approved"
        assert response.json()["current_step"] == 1

    async def test_transition_after_terminal_is_conflict(self, client: AsyncClient):
        workflow = await create_workflow(client)
        instance = await start_instance(client, workflow["id"])
        await client.post(f"/api/v1/workflow-instances/{instance['id']}/reject")

        for action in ("advance", "approve", "reject"):
            response = await client.post(f"/api/v1/workflow-instances/{instance['id']}/{action}")
            assert response.status_code == status.HTTP_409_CONFLICT

    async def test_advance_past_last_step_is_conflict(self, client: AsyncClient):
        workflow = await create_workflow(client)
        instance = await start_instance(client, workflow["id"], current_step=1)

        response = await client.post(f"/api/v1/workflow-instances/{instance['id']}/advance")
        assert response.status_code == status.HTTP_409_CONFLICT

    async def test_unknown_instance(self, client: AsyncClient):
        response = await client.post("/api/v1/workflow-instances/999/approve")
        assert response.status_code == status.HTTP_404_NOT_FOUND

        response = await client.get("/api/v1/workflow-instances/999")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    async def test_edit_cannot_change_status(self, client: AsyncClient):
        workflow = await create_workflow(client)
        instance = await start_instance(client, workflow["id"])

        response = await client.put(
            f"/api/v1/workflow-instances/{instance['id']}",
            json={"status": "approved", "data": {"laptop": "ordered"}},
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "pending"
        assert response.json()["data"] == {"laptop": "ordered"}

    async def test_progress(self, client: AsyncClient):
        workflow = await create_workflow(client)
        instance = await start_instance(client, workflow["id"])

        response = await client.get(f"/api/v1/workflow-instances/{instance['id']}/progress")
        assert response.status_code == status.HTTP_200_OK

        progress = response.json()
        assert progress["step_name"] == "Document Collection"
        assert progress["approver"] == 5
        assert progress["total_steps"] == 2
        assert progress["is_final_step"] is False

    async def test_filter_by_status(self, seeded_client: AsyncClient):
        await seeded_client.post("/api/v1/workflow-instances/2/reject")

        response = await seeded_client.get("/api/v1/workflow-instances/", params={"status": "pending"})
        assert [i["id"] for i in response.json()] == [1]

        response = await seeded_client.get("/api/v1/workflow-instances/", params={"status": "rejected"})
        assert [i["id"] for i in response.json()] == [2]

    async def test_filter_by_unknown_status(self, client: AsyncClient):
        response = await client.get("/api/v1/workflow-instances/", params={"status": "archived"})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


@pytest.mark.asyncio
class TestNullUpdates:
    """Explicit null for a required field is refused and the stored record survives"""

    async def test_workflow_steps_null(self, client: AsyncClient):
        workflow = await create_workflow(client)

        response = await client.put(f"/api/v1/workflows/{workflow['id']}", json={"steps": None})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

        response = await client.get("/api/v1/workflows/")
        assert response.status_code == status.HTTP_200_OK
        assert [s["name"] for s in response.json()[0]["steps"]] == ["Document Collection", "Equipment Setup"]

    async def test_workflow_name_null(self, client: AsyncClient):
        workflow = await create_workflow(client)

        response = await client.put(f"/api/v1/workflows/{workflow['id']}", json={"name": None})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert (await client.get(f"/api/v1/workflows/{workflow['id']}")).json()["name"] == "Employee Onboarding"

    async def test_instance_workflow_id_null(self, client: AsyncClient):
        workflow = await create_workflow(client)
        instance = await start_instance(client, workflow["id"])

        response = await client.put(
            f"/api/v1/workflow-instances/{instance['id']}",
            json={"workflow_id": None},
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

        stored = (await client.get(f"/api/v1/workflow-instances/{instance['id']}")).json()
        assert stored["workflow_id"] == workflow["id"]
        assert stored["updated_at"] == instance["updated_at"]
