from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from app.adapters.auth_adapter_interface import AuthAdapterInterface, AuthServiceError
from app.models.user import AuthUser
from app.services.auth_service import get_auth

# OAuth2 scheme for token authentication
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login")


async def get_current_user(
    token: str = Depends(oauth2_scheme),
    auth: AuthAdapterInterface = Depends(get_auth)
) -> AuthUser:
    """
    Dependency to get the current authenticated user.

    Usage in routes:
        current_user: AuthUser = Depends(get_current_user)
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        user = await auth.get_user(token)
    except AuthServiceError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=e.message
        )

    if user is None:
        raise credentials_exception

    return user


async def get_current_admin(
    current_user: AuthUser = Depends(get_current_user)
) -> AuthUser:
    """
    Dependency to ensure user has the admin role.
    """
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to perform this action"
        )
    return current_user
