"""
Auth API Routes

Endpoints for admin sign-in:
- POST /login - Exchange email/password for a bearer token
- GET /me - Current admin
"""
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from app.adapters.auth_adapter_interface import (
    AuthAdapterInterface,
    AuthServiceError,
    AuthSession,
    InvalidCredentialsError,
)
from app.core.dependencies import get_current_admin
from app.models.user import AuthUser
from app.services.auth_service import get_auth

router = APIRouter()


@router.post(
    "/login",
    response_model=AuthSession,
    summary="Admin sign-in",
    description="Sign in with email (as `username`) and password against the hosted auth service."
)
async def login(
    form: OAuth2PasswordRequestForm = Depends(),
    auth: AuthAdapterInterface = Depends(get_auth)
):
    try:
        return await auth.sign_in(form.username, form.password)
    except InvalidCredentialsError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except AuthServiceError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=e.message
        )


@router.get(
    "/me",
    response_model=AuthUser,
    summary="Current admin"
)
async def me(current_admin: AuthUser = Depends(get_current_admin)):
    return current_admin
