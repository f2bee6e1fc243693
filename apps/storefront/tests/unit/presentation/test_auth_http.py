"""Auth HTTP 테스트.

TestClient + dependency_overrides로 DB/Redis 없이 라우터 전체를 검증합니다.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from apps.storefront.application.common.exceptions import SessionPersistenceError
from apps.storefront.application.common.messages import MessageCatalog
from apps.storefront.application.token.services import TokenService
from apps.storefront.domain.entities.user import User
from apps.storefront.infrastructure.persistence_redis import RedisActionTokenStore
from apps.storefront.infrastructure.security.password_hasher_bcrypt import BcryptPasswordHasher
from apps.storefront.presentation.http.controllers import root_router
from apps.storefront.presentation.http.errors import register_exception_handlers
from apps.storefront.setup import dependencies as deps
from apps.storefront.tests.unit.factories import create_user

UNAUTHORIZED_BODY = {"detail": "token is invalid or has already expired", "code": "UNAUTHORIZED"}

REGISTER_BODY = {
    "first_name": "Jane",
    "last_name": "Doe",
    "username": "jane",
    "email": "Jane@Example.com",
    "password": "s3cret",
}


class InMemoryUsers:
    """UserQueryGateway + UserCommandGateway 대역."""

    def __init__(self) -> None:
        self.users: dict[int, User] = {}

    async def get_by_id(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    async def get_by_email(self, email: str) -> User | None:
        return next((u for u in self.users.values() if u.email == email), None)

    async def add(self, user: User) -> User:
        user.id = 42 + len(self.users)
        self.users[user.id] = user
        return user

    async def update(self, user: User) -> User:
        self.users[user.id] = user
        return user


class RecordingMailSender:
    """MailSender 대역. 보낸 토큰을 템플릿별로 기록합니다."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, int, str]] = []

    async def send_email_verification(self, user: User, token: str) -> None:
        self.sent.append(("email_verification", user.id, token))

    async def send_password_reset(self, user: User, token: str) -> None:
        self.sent.append(("password_reset", user.id, token))


@pytest.fixture
def users() -> InMemoryUsers:
    return InMemoryUsers()


@pytest.fixture
def mail_sender() -> RecordingMailSender:
    return RecordingMailSender()


@pytest.fixture
def app(
    token_service: TokenService,
    users: InMemoryUsers,
    mail_sender: RecordingMailSender,
    fake_redis,
) -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app, MessageCatalog({"sr": {"api.unauthorized": "neovlašćeno"}}))
    app.include_router(root_router)

    hasher = BcryptPasswordHasher(rounds=4)
    app.dependency_overrides[deps.get_token_service] = lambda: token_service
    app.dependency_overrides[deps.get_user_query_gateway] = lambda: users
    app.dependency_overrides[deps.get_user_command_gateway] = lambda: users
    app.dependency_overrides[deps.get_transaction_manager] = lambda: AsyncMock()
    app.dependency_overrides[deps.get_password_hasher] = lambda: hasher
    app.dependency_overrides[deps.get_action_token_store] = lambda: RedisActionTokenStore(fake_redis)
    app.dependency_overrides[deps.get_mail_sender] = lambda: mail_sender
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


def register(client: TestClient) -> dict:
    response = client.post("/api/v1/users", json=REGISTER_BODY)
    assert response.status_code == 201, response.text
    return response.json()


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class TestRegisterAndLogin:
    def test_register_sets_cookies(self, client: TestClient) -> None:
        body = register(client)

        assert body["user"]["id"] == 42
        assert body["user"]["email"] == "jane@example.com"
        assert "password" not in body["user"]
        assert client.cookies.get("access_token") == body["tokens"]["access_token"]
        assert client.cookies.get("refresh_token") == body["tokens"]["refresh_token"]

    def test_register_duplicate(self, client: TestClient) -> None:
        register(client)

        response = client.post("/api/v1/users", json=REGISTER_BODY)

        assert response.status_code == 409
        assert response.json()["code"] == "USER_ALREADY_EXISTS"

    def test_register_without_session_store_sets_no_cookies(
        self, app: FastAPI, jwt_service
    ) -> None:
        store = AsyncMock()
        store.save.side_effect = SessionPersistenceError()
        app.dependency_overrides[deps.get_token_service] = lambda: TokenService(
            issuer=jwt_service, session_store=store
        )
        client = TestClient(app)

        response = client.post("/api/v1/users", json=REGISTER_BODY)

        assert response.status_code == 503
        assert response.json()["code"] == "SESSION_STORE_UNAVAILABLE"
        assert "set-cookie" not in response.headers

    def test_login(self, client: TestClient) -> None:
        register(client)
        client.cookies.clear()

        response = client.post(
            "/api/v1/users/login", json={"email": "jane@example.com", "password": "s3cret"}
        )

        assert response.status_code == 200
        assert response.json()["user"]["last_login_at"] is not None
        assert client.cookies.get("access_token")

    def test_login_wrong_password(self, client: TestClient) -> None:
        register(client)

        response = client.post(
            "/api/v1/users/login", json={"email": "jane@example.com", "password": "nope"}
        )

        assert response.status_code == 401
        assert response.json() == {"detail": "invalid credentials", "code": "INVALID_CREDENTIALS"}


class TestSessionLifecycle:
    def test_me_with_bearer(self, client: TestClient) -> None:
        tokens = register(client)["tokens"]
        client.cookies.clear()

        response = client.get("/api/v1/users/me", headers=bearer(tokens["access_token"]))

        assert response.status_code == 200
        assert response.json()["id"] == 42

    def test_me_with_cookie(self, client: TestClient) -> None:
        register(client)

        assert client.get("/api/v1/users/me").status_code == 200

    def test_me_without_token(self, client: TestClient) -> None:
        response = client.get("/api/v1/users/me")

        assert response.status_code == 401
        assert response.json() == UNAUTHORIZED_BODY

    def test_expired_token_gets_generic_401(self, client: TestClient, clock) -> None:
        tokens = register(client)["tokens"]
        client.cookies.clear()
        clock.advance(16 * 60)

        response = client.get("/api/v1/users/me", headers=bearer(tokens["access_token"]))

        assert response.status_code == 401
        assert response.json() == UNAUTHORIZED_BODY

    def test_tampered_token_gets_generic_401(self, client: TestClient) -> None:
        response = client.get("/api/v1/users/me", headers=bearer("a.b.c"))

        assert response.status_code == 401
        assert response.json() == UNAUTHORIZED_BODY

    def test_refresh_token_not_accepted_as_access(self, client: TestClient) -> None:
        tokens = register(client)["tokens"]
        client.cookies.clear()

        response = client.get("/api/v1/users/me", headers=bearer(tokens["refresh_token"]))

        assert response.status_code == 401

    def test_unauthorized_message_is_localized(self, client: TestClient) -> None:
        response = client.get("/api/v1/users/me", headers={"Accept-Language": "sr-RS,sr;q=0.9"})

        assert response.json() == {"detail": "neovlašćeno", "code": "UNAUTHORIZED"}

    def test_logout_revokes_session(self, client: TestClient) -> None:
        tokens = register(client)["tokens"]

        response = client.post("/api/v1/users/logout")

        assert response.status_code == 200
        assert not client.cookies.get("access_token")
        me = client.get("/api/v1/users/me", headers=bearer(tokens["access_token"]))
        assert me.status_code == 401
        assert me.json() == UNAUTHORIZED_BODY

    def test_logout_without_session_succeeds(self, client: TestClient) -> None:
        response = client.post("/api/v1/users/logout")

        assert response.status_code == 200
        assert response.json() == {"message": "Successfully logged out"}

    def test_logout_with_tampered_token_clears_cookies(self, client: TestClient) -> None:
        tokens = register(client)["tokens"]

        response = client.post(
            "/api/v1/users/logout", headers=bearer(tokens["access_token"][:-2] + "xx")
        )

        assert response.status_code == 200
        cleared = response.headers.get_list("set-cookie")
        for name in ("access_token", "refresh_token"):
            assert any(c.startswith(f"{name}=") and "Max-Age=0" in c for c in cleared)


class TestRefresh:
    def test_refresh_with_body(self, client: TestClient) -> None:
        tokens = register(client)["tokens"]
        client.cookies.clear()

        response = client.post(
            "/api/v1/users/token/refresh", json={"refresh_token": tokens["refresh_token"]}
        )

        assert response.status_code == 200
        new_tokens = response.json()
        assert new_tokens["refresh_token"] != tokens["refresh_token"]
        assert client.cookies.get("refresh_token") == new_tokens["refresh_token"]

    def test_refresh_with_header_then_reuse_fails(self, client: TestClient) -> None:
        tokens = register(client)["tokens"]
        client.cookies.clear()
        headers = {"X-Refresh-Token": tokens["refresh_token"]}

        first = client.post("/api/v1/users/token/refresh", headers=headers)
        client.cookies.clear()
        second = client.post("/api/v1/users/token/refresh", headers=headers)

        assert first.status_code == 200
        assert second.status_code == 401
        assert second.json() == UNAUTHORIZED_BODY

    def test_refresh_with_cookie(self, client: TestClient) -> None:
        register(client)

        assert client.post("/api/v1/users/token/refresh").status_code == 200

    def test_refresh_invalidates_old_access(self, client: TestClient) -> None:
        tokens = register(client)["tokens"]

        client.post("/api/v1/users/token/refresh")
        response = client.get("/api/v1/users/me", headers=bearer(tokens["access_token"]))

        assert response.status_code == 401

    def test_refresh_without_token(self, client: TestClient) -> None:
        response = client.post("/api/v1/users/token/refresh")

        assert response.status_code == 401
        assert response.json() == UNAUTHORIZED_BODY


class TestAdminGuard:
    def test_delete_user_requires_admin(self, client: TestClient) -> None:
        register(client)

        response = client.delete("/api/v1/users/42")

        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN"

    def test_admin_soft_deletes_user(self, client: TestClient, users: InMemoryUsers) -> None:
        register(client)
        users.users[42].role = "admin"
        users.users[7] = create_user(user_id=7, email="other@example.com", username="other")

        response = client.delete("/api/v1/users/7")

        assert response.status_code == 204
        assert users.users[7].deleted_at is not None


class TestAccountEmails:
    def test_send_for_unknown_email_succeeds(
        self, client: TestClient, mail_sender: RecordingMailSender
    ) -> None:
        for path in ("/api/v1/users/email/verify/send", "/api/v1/users/password/reset/send"):
            response = client.post(path, json={"email": "nobody@example.com"})

            assert response.status_code == 200
            assert response.json() == {"message": "success"}
        assert mail_sender.sent == []

    def test_verify_email_once(
        self, client: TestClient, users: InMemoryUsers, mail_sender: RecordingMailSender
    ) -> None:
        register(client)
        client.post("/api/v1/users/email/verify/send", json={"email": "jane@example.com"})
        [(template, user_id, token)] = mail_sender.sent

        response = client.post("/api/v1/users/email/verify", json={"token": token})

        assert (template, user_id) == ("email_verification", 42)
        assert response.status_code == 200
        assert users.users[42].email_verified is True

        reused = client.post("/api/v1/users/email/verify", json={"token": token})

        assert reused.status_code == 400
        assert reused.json()["code"] == "INVALID_TOKEN"

    def test_reset_password_then_login(
        self, client: TestClient, mail_sender: RecordingMailSender
    ) -> None:
        register(client)
        client.post("/api/v1/users/password/reset/send", json={"email": "jane@example.com"})
        [(_, _, token)] = mail_sender.sent

        response = client.post(
            "/api/v1/users/password/reset", json={"token": token, "password": "n3w-secret"}
        )

        assert response.status_code == 200
        assert response.json() == {"message": "password updated"}
        old = client.post(
            "/api/v1/users/login", json={"email": "jane@example.com", "password": "s3cret"}
        )
        new = client.post(
            "/api/v1/users/login", json={"email": "jane@example.com", "password": "n3w-secret"}
        )
        assert old.status_code == 401
        assert new.status_code == 200

    def test_reset_with_unknown_token(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/users/password/reset", json={"token": "bogus", "password": "n3w-secret"}
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_TOKEN"
