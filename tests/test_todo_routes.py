"""
HTTP-level tests for the owner-scoped task endpoints.
"""

import uuid

import pytest

from auth.jwt import create_token
from conftest import bearer, register_user


async def _login(client, email="ana@x.com", name="Ana") -> dict:
    body = (await register_user(client, name=name, email=email)).json()
    return bearer(body["token"])


class TestTodoAuth:
    @pytest.mark.asyncio
    async def test_missing_token(self, client):
        resp = await client.get("/todos")
        assert resp.status_code == 401
        assert resp.json() == {"error": "Token não fornecido."}

    @pytest.mark.asyncio
    async def test_expired_token(self, client):
        token = create_token(str(uuid.uuid4()), "Ana", expires_in=-5)
        resp = await client.get("/todos", headers=bearer(token))
        assert resp.status_code == 401
        assert resp.json() == {"error": "Token inválido ou expirado."}

    @pytest.mark.asyncio
    async def test_malformed_token(self, client):
        resp = await client.get("/todos", headers=bearer("garbage"))
        assert resp.status_code == 401


class TestTodoCrud:
    @pytest.mark.asyncio
    async def test_add_task_scenario(self, client):
        headers = await _login(client)

        created = await client.post("/todos", json={"text": "Buy milk"}, headers=headers)
        assert created.status_code == 201

        tasks = (await client.get("/todos", headers=headers)).json()
        assert len(tasks) == 1
        assert tasks[0]["text"] == "Buy milk"
        assert tasks[0]["completed"] is False
        assert tasks[0]["id"] == created.json()["id"]

    @pytest.mark.asyncio
    async def test_blank_text_rejected(self, client):
        headers = await _login(client)
        resp = await client.post("/todos", json={"text": "   "}, headers=headers)
        assert resp.status_code == 400
        assert (await client.get("/todos", headers=headers)).json() == []

    @pytest.mark.asyncio
    async def test_toggle_twice_restores_flag(self, client):
        headers = await _login(client)
        task = (await client.post("/todos", json={"text": "Buy milk"}, headers=headers)).json()

        first = await client.patch(f"/todos/{task['id']}/toggle", json={"completed": True}, headers=headers)
        assert first.status_code == 200
        assert first.json()["completed"] is True

        second = await client.patch(f"/todos/{task['id']}/toggle", json={"completed": False}, headers=headers)
        assert second.json()["completed"] is False
        assert second.json()["text"] == "Buy milk"

    @pytest.mark.asyncio
    async def test_partial_update_returns_full_task(self, client):
        headers = await _login(client)
        task = (await client.post("/todos", json={"text": "Buy milk"}, headers=headers)).json()

        resp = await client.put(f"/todos/{task['id']}", json={"text": "Buy oat milk"}, headers=headers)

        assert resp.status_code == 200
        body = resp.json()
        assert body["id"] == task["id"]
        assert body["text"] == "Buy oat milk"
        assert body["completed"] is False

    @pytest.mark.asyncio
    async def test_update_unknown_task(self, client):
        headers = await _login(client)
        resp = await client.put(f"/todos/{uuid.uuid4()}", json={"completed": True}, headers=headers)
        assert resp.status_code == 404
        assert resp.json() == {"error": "Tarefa não encontrada."}

    @pytest.mark.asyncio
    async def test_delete_removes_and_is_idempotent(self, client):
        headers = await _login(client)
        keep = (await client.post("/todos", json={"text": "Keep"}, headers=headers)).json()
        drop = (await client.post("/todos", json={"text": "Drop"}, headers=headers)).json()

        assert (await client.delete(f"/todos/{drop['id']}", headers=headers)).status_code == 204
        assert (await client.delete(f"/todos/{drop['id']}", headers=headers)).status_code == 204
        assert (await client.delete(f"/todos/{uuid.uuid4()}", headers=headers)).status_code == 204

        tasks = (await client.get("/todos", headers=headers)).json()
        assert [t["id"] for t in tasks] == [keep["id"]]

    @pytest.mark.asyncio
    async def test_tasks_are_scoped_to_owner(self, client):
        ana = await _login(client)
        bob = await _login(client, email="bob@x.com", name="Bob")
        task = (await client.post("/todos", json={"text": "Ana only"}, headers=ana)).json()

        assert (await client.get("/todos", headers=bob)).json() == []
        toggled = await client.patch(f"/todos/{task['id']}/toggle", json={"completed": True}, headers=bob)
        assert toggled.status_code == 404

        await client.delete(f"/todos/{task['id']}", headers=bob)
        assert len((await client.get("/todos", headers=ana)).json()) == 1


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, client):
        resp = await client.get("/health")
        assert resp.json() == {"status": "ok"}
        assert "X-Process-Time" in resp.headers
