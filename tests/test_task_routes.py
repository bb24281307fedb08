"""
Tests for the bearer-protected task CRUD routes.
"""

import uuid

import pytest


async def _token(client, email="a@x.com") -> dict:
    resp = await client.post(
        "/register",
        json={"username": email.split("@")[0], "email": email, "password": "secret123"},
    )
    return {"Authorization": f"Bearer {resp.json()['token']}"}


class TestAuthRequired:
    @pytest.mark.asyncio
    async def test_no_token(self, client):
        resp = await client.get("/tasks")
        assert resp.status_code == 401
        assert resp.json() == {"message": "Not authorized, no token"}

    @pytest.mark.asyncio
    async def test_bad_token(self, client):
        resp = await client.get("/tasks", headers={"Authorization": "Bearer garbage"})
        assert resp.status_code == 401
        assert resp.json() == {"message": "Not authorized, token failed"}


class TestTaskCrud:
    @pytest.mark.asyncio
    async def test_create_and_list(self, client):
        headers = await _token(client)
        resp = await client.post(
            "/tasks",
            json={"title": "Buy milk", "dueDate": "2026-10-20", "dueTime": "09:00"},
            headers=headers,
        )
        assert resp.status_code == 201
        body = resp.json()
        assert body["title"] == "Buy milk"
        assert body["dueDate"] == "2026-10-20"
        assert body["dueTime"] == "09:00"
        assert body["completed"] is False

        listed = (await client.get("/tasks", headers=headers)).json()
        assert [t["id"] for t in listed] == [body["id"]]

    @pytest.mark.asyncio
    async def test_title_required(self, client):
        headers = await _token(client)
        resp = await client.post("/tasks", json={"dueDate": "2026-10-20"}, headers=headers)
        assert resp.status_code == 400

    @pytest.mark.asyncio
    async def test_partial_update(self, client):
        headers = await _token(client)
        created = (await client.post("/tasks", json={"title": "Write report"}, headers=headers)).json()

        resp = await client.patch(f"/tasks/{created['id']}", json={"completed": True}, headers=headers)
        assert resp.status_code == 200
        assert resp.json()["completed"] is True
        assert resp.json()["title"] == "Write report"

    @pytest.mark.asyncio
    async def test_delete(self, client):
        headers = await _token(client)
        created = (await client.post("/tasks", json={"title": "Temp"}, headers=headers)).json()

        resp = await client.delete(f"/tasks/{created['id']}", headers=headers)
        assert resp.status_code == 204
        resp = await client.get(f"/tasks/{created['id']}", headers=headers)
        assert resp.status_code == 404
        assert resp.json() == {"message": "Task not found"}

    @pytest.mark.asyncio
    async def test_unknown_and_malformed_ids(self, client):
        headers = await _token(client)
        assert (await client.get(f"/tasks/{uuid.uuid4()}", headers=headers)).status_code == 404
        assert (await client.get("/tasks/not-a-uuid", headers=headers)).status_code == 404


class TestIsolation:
    @pytest.mark.asyncio
    async def test_users_only_see_their_own_tasks(self, client):
        alice = await _token(client, "a@x.com")
        bob = await _token(client, "b@x.com")
        task = (await client.post("/tasks", json={"title": "Alice's"}, headers=alice)).json()

        assert (await client.get("/tasks", headers=bob)).json() == []
        assert (await client.get(f"/tasks/{task['id']}", headers=bob)).status_code == 404
        assert (await client.delete(f"/tasks/{task['id']}", headers=bob)).status_code == 404
        assert len((await client.get("/tasks", headers=alice)).json()) == 1


class TestFreeFormFields:
    @pytest.mark.asyncio
    async def test_long_due_date_and_time_round_trip(self, client):
        headers = await _token(client)
        due_date = "every second Tuesday of the month, starting 2026-11-10"
        due_time = "after the standup, roughly 09:30 Europe/Amsterdam"
        resp = await client.post(
            "/tasks",
            json={"title": "Review", "dueDate": due_date, "dueTime": due_time},
            headers=headers,
        )
        assert resp.status_code == 201
        fetched = (await client.get(f"/tasks/{resp.json()['id']}", headers=headers)).json()
        assert fetched["dueDate"] == due_date
        assert fetched["dueTime"] == due_time
