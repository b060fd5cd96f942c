"""로그인 / 토큰 발급 테스트"""

from httpx import AsyncClient

from tasklist.core.security import decode_access_token


class TestLogin:
    async def test_token_carries_user_id(self, client: AsyncClient, registered_user: dict, settings):
        claims = decode_access_token(registered_user["token"], settings)

        assert claims["sub"] == registered_user["userId"]
        assert claims["type"] == "access"
        assert "exp" in claims

    async def test_wrong_password_and_unknown_email_look_identical(self, client: AsyncClient, registered_user: dict):
        wrong_pw = await client.post("/auth", json={"email": registered_user["email"], "password": "nope"})
        unknown = await client.post("/auth", json={"email": "nobody@example.com", "password": "nope"})

        assert wrong_pw.status_code == unknown.status_code == 401
        assert wrong_pw.json() == unknown.json() == {"msg": "Incorrect email or password"}

    async def test_login_response_shape(self, client: AsyncClient, registered_user: dict):
        resp = await client.post(
            "/auth",
            json={"email": registered_user["email"], "password": registered_user["password"]},
        )

        assert resp.status_code == 200
        assert set(resp.json()) == {"token", "userId"}

    async def test_store_failure_500(self, client: AsyncClient, db):
        db.down = True

        resp = await client.post("/auth", json={"email": "a@example.com", "password": "pw"})

        assert resp.status_code == 500
        assert resp.json() == {"msg": "Error while logging in"}

    async def test_password_over_72_bytes(self, client: AsyncClient):
        """bcrypt 72바이트 한도를 넘는 비밀번호도 가입/로그인 가능"""
        creds = {"email": "long@example.com", "password": "p" * 100}

        registered = await client.post("/users", json=creds)
        logged_in = await client.post("/auth", json=creds)

        assert registered.status_code == 201
        assert logged_in.status_code == 200
