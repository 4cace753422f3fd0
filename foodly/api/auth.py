"""Authentication endpoints."""
import logging
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from typing import Optional

from foodly.core.dependencies import get_client_session
from foodly.services.client_session.models import ClientSession
from foodly.services.identity.base import AuthenticationError, User

router = APIRouter()
logger = logging.getLogger(__name__)


class LoginRequest(BaseModel):
    """Login request model."""
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class SignupRequest(BaseModel):
    """Signup request model."""
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserResponse(BaseModel):
    """User response model."""
    id: str
    name: str
    email: str
    is_admin: bool = False


class AuthResponse(BaseModel):
    """Login/signup response model."""
    success: bool
    message: str
    user: UserResponse


class SessionInfo(BaseModel):
    """Session information response."""
    authenticated: bool
    user: Optional[UserResponse] = None


def _user_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, name=user.name, email=user.email, is_admin=user.is_admin)


@router.post("/api/auth/login", response_model=AuthResponse)
async def login(login_req: LoginRequest, session: ClientSession = Depends(get_client_session)):
    """Login endpoint."""
    try:
        user = await session.auth_store.login(login_req.email, login_req.password)
    except AuthenticationError:
        logger.info(f"[AUTH] Login rejected for client {session.client_id}")
        raise HTTPException(status_code=401, detail="Invalid credentials")

    return AuthResponse(success=True, message="Login successful", user=_user_response(user))


@router.post("/api/auth/signup", response_model=AuthResponse)
async def signup(signup_req: SignupRequest, session: ClientSession = Depends(get_client_session)):
    """Signup endpoint."""
    try:
        user = await session.auth_store.signup(signup_req.name, signup_req.email, signup_req.password)
    except AuthenticationError:
        logger.info(f"[AUTH] Signup rejected for client {session.client_id}")
        raise HTTPException(status_code=400, detail="Signup failed")

    return AuthResponse(success=True, message="Signup successful", user=_user_response(user))


@router.post("/api/auth/logout")
async def logout(session: ClientSession = Depends(get_client_session)):
    """Logout endpoint. The cart is kept."""
    await session.auth_store.logout()
    return {"success": True, "message": "Logged out"}


@router.get("/api/auth/session", response_model=SessionInfo)
async def get_session_info(session: ClientSession = Depends(get_client_session)):
    """Get current session information."""
    user = session.auth_store.user
    if user:
        return SessionInfo(authenticated=True, user=_user_response(user))

    return SessionInfo(authenticated=False)
