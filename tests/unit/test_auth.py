"""Unit tests for authentication state and endpoints."""
import json
import pytest

from foodly.main import app
from foodly.core.dependencies import get_identity_provider
from foodly.services.identity.auth_store import USER_STORAGE_KEY, AuthStore
from foodly.services.identity.base import AuthenticationError, IdentityProvider, User
from foodly.services.identity.mock_provider import MockIdentityProvider, generate_user_id


class RejectingIdentityProvider(IdentityProvider):
    """Identity provider that rejects every login."""

    async def login(self, email: str, password: str) -> User:
        raise AuthenticationError("bad credentials")

    async def signup(self, name: str, email: str, password: str) -> User:
        raise AuthenticationError("signups closed")


class TestMockIdentityProvider:
    """Test the mock identity provider."""

    @pytest.mark.asyncio
    async def test_login_returns_demo_user(self):
        """Test that login yields the demo user with the given email."""
        user = await MockIdentityProvider().login("diner@example.com", "pw")

        assert user.id == "user-123"
        assert user.name == "Demo User"
        assert user.email == "diner@example.com"
        assert user.is_admin is False

    @pytest.mark.asyncio
    async def test_signup_mints_user_id(self):
        """Test that signup creates a user with the given name."""
        user = await MockIdentityProvider().signup("Dana", "dana@example.com", "pw")

        assert user.name == "Dana"
        assert user.id.startswith("user-")
        assert len(user.id) == len("user-") + 9

    def test_generated_ids_are_unique(self):
        """Test that generated user ids differ."""
        ids = {generate_user_id() for _ in range(20)}

        assert len(ids) == 20
        assert all(i[5:].isalnum() and i[5:].lower() == i[5:] for i in ids)


class TestAuthStore:
    """Test persisted authentication state."""

    @pytest.mark.asyncio
    async def test_load_signed_out(self, memory_storage):
        """Test that a client with no saved user is signed out."""
        store = await AuthStore.load(memory_storage, MockIdentityProvider())

        assert store.user is None
        assert store.is_authenticated is False

    @pytest.mark.asyncio
    async def test_login_persists_user(self, memory_storage):
        """Test that login stores the user record."""
        store = await AuthStore.load(memory_storage, MockIdentityProvider())

        await store.login("diner@example.com", "pw")

        data = json.loads(await memory_storage.get(USER_STORAGE_KEY))
        assert data == {
            "id": "user-123",
            "name": "Demo User",
            "email": "diner@example.com",
            "isAdmin": False,
        }

    @pytest.mark.asyncio
    async def test_user_survives_reload(self, memory_storage):
        """Test that a new store rehydrates the signed-in user."""
        store = await AuthStore.load(memory_storage, MockIdentityProvider())
        user = await store.signup("Dana", "dana@example.com", "pw")

        restored = await AuthStore.load(memory_storage, MockIdentityProvider())

        assert restored.user == user
        assert restored.is_authenticated is True

    @pytest.mark.asyncio
    async def test_logout_removes_user(self, memory_storage):
        """Test that logout clears the stored user."""
        store = await AuthStore.load(memory_storage, MockIdentityProvider())
        await store.login("diner@example.com", "pw")

        await store.logout()

        assert store.user is None
        assert await memory_storage.get(USER_STORAGE_KEY) is None

    @pytest.mark.asyncio
    async def test_malformed_saved_user(self, memory_storage):
        """Test that a malformed saved user reads as signed out."""
        await memory_storage.set(USER_STORAGE_KEY, '{"name": "missing id"}')

        store = await AuthStore.load(memory_storage, MockIdentityProvider())

        assert store.user is None

    @pytest.mark.asyncio
    async def test_rejected_login_leaves_state(self, memory_storage):
        """Test that a rejected login keeps the previous identity."""
        store = await AuthStore.load(memory_storage, MockIdentityProvider())
        await store.login("diner@example.com", "pw")
        store.identity_provider = RejectingIdentityProvider()

        with pytest.raises(AuthenticationError):
            await store.login("other@example.com", "pw")

        assert store.user.email == "diner@example.com"


class TestAuthAPIEndpoints:
    """Test authentication API endpoints."""

    def test_login_success(self, test_client):
        """Test successful login."""
        response = test_client.post(
            "/api/auth/login",
            json={"email": "diner@example.com", "password": "secret"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Login successful"
        assert data["user"]["email"] == "diner@example.com"

        # Client cookie is issued on first contact
        assert "foodly_client" in response.cookies

    def test_login_missing_fields(self, test_client):
        """Test that blank credentials fail validation."""
        response = test_client.post("/api/auth/login", json={"email": "", "password": ""})

        assert response.status_code == 422

    def test_login_rejected(self, test_client):
        """Test that provider rejection returns 401."""
        app.dependency_overrides[get_identity_provider] = lambda: RejectingIdentityProvider()

        response = test_client.post(
            "/api/auth/login",
            json={"email": "diner@example.com", "password": "wrong"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials"

    def test_signup_rejected(self, test_client):
        """Test that provider rejection of a signup returns 400 and stays signed out."""
        app.dependency_overrides[get_identity_provider] = lambda: RejectingIdentityProvider()

        response = test_client.post(
            "/api/auth/signup",
            json={"name": "Dana", "email": "dana@example.com", "password": "secret"}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Signup failed"
        assert test_client.get("/api/auth/session").json()["authenticated"] is False

    def test_signup(self, test_client):
        """Test signup signs the new user in."""
        response = test_client.post(
            "/api/auth/signup",
            json={"name": "Dana", "email": "dana@example.com", "password": "secret"}
        )

        assert response.status_code == 200
        user_id = response.json()["user"]["id"]

        session = test_client.get("/api/auth/session").json()
        assert session["authenticated"] is True
        assert session["user"]["id"] == user_id

    def test_get_session_status_authenticated(self, authenticated_client):
        """Test session status with a signed-in user."""
        response = authenticated_client.get("/api/auth/session")

        assert response.status_code == 200
        data = response.json()
        assert data["authenticated"] is True
        assert data["user"]["name"] == "Demo User"

    def test_get_session_status_unauthenticated(self, test_client):
        """Test session status without a signed-in user."""
        response = test_client.get("/api/auth/session")

        assert response.status_code == 200
        data = response.json()
        assert data["authenticated"] is False
        assert data["user"] is None

    def test_logout(self, authenticated_client):
        """Test logout signs the user out."""
        response = authenticated_client.post("/api/auth/logout")
        assert response.status_code == 200
        assert response.json()["message"] == "Logged out"

        session = authenticated_client.get("/api/auth/session").json()
        assert session["authenticated"] is False

    def test_logout_keeps_cart(self, authenticated_client):
        """Test that signing out doesn't empty the cart."""
        authenticated_client.post("/api/cart/items", json={"menu_item_id": "a"})

        authenticated_client.post("/api/auth/logout")

        cart = authenticated_client.get("/api/cart").json()
        assert cart["item_count"] == 1

    def test_clients_do_not_share_identity(self, authenticated_client):
        """Test that a fresh client without the cookie is signed out."""
        from fastapi.testclient import TestClient

        other_client = TestClient(app)
        response = other_client.get("/api/auth/session")

        assert response.json()["authenticated"] is False
