"""회원가입 / 이메일 조회 테스트"""

from bson import ObjectId
from httpx import AsyncClient


class TestRegister:
    async def test_register_returns_201(self, client: AsyncClient, db):
        resp = await client.post("/users", json={"email": "bob@example.com", "password": "pw"})

        assert resp.status_code == 201
        assert resp.json() == {"msg": "User created successfully"}

        stored = db["users"].docs
        assert len(stored) == 1
        assert stored[0]["email"] == "bob@example.com"
        assert stored[0]["tasks"] == []

    async def test_password_is_hashed(self, client: AsyncClient, db):
        await client.post("/users", json={"email": "bob@example.com", "password": "pw"})

        stored = db["users"].docs[0]["password"]
        assert stored != "pw"
        assert stored.startswith("$2")

    async def test_duplicate_email_conflicts(self, client: AsyncClient, db):
        body = {"email": "bob@example.com", "password": "pw"}
        first = await client.post("/users", json=body)
        second = await client.post("/users", json={**body, "password": "other"})

        assert first.status_code == 201
        assert second.status_code == 400
        assert second.json() == {"msg": "User already exists"}
        assert [u["email"] for u in db["users"].docs] == ["bob@example.com"]

    async def test_missing_password_rejected(self, client: AsyncClient, db):
        resp = await client.post("/users", json={"email": "bob@example.com"})

        assert resp.status_code == 422
        assert db["users"].docs == []

    async def test_blank_email_rejected(self, client: AsyncClient):
        resp = await client.post("/users", json={"email": "   ", "password": "pw"})
        assert resp.status_code == 422


class TestReadEmail:
    async def test_returns_email(self, client: AsyncClient, registered_user: dict):
        resp = await client.get(f"/users/{registered_user['userId']}/email")

        assert resp.status_code == 200
        assert resp.json() == {"email": "alice@example.com"}

    async def test_unknown_user_404(self, client: AsyncClient):
        resp = await client.get(f"/users/{ObjectId()}/email")

        assert resp.status_code == 404
        assert resp.json() == {"msg": "User not found"}

    async def test_malformed_id_404(self, client: AsyncClient):
        resp = await client.get("/users/not-an-object-id/email")
        assert resp.status_code == 404

    async def test_store_failure_500(self, client: AsyncClient, db):
        db.down = True

        resp = await client.get(f"/users/{ObjectId()}/email")

        assert resp.status_code == 500
        assert resp.json() == {"msg": "Error while retrieving the user's email"}
