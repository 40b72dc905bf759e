"""Shared API dependencies for storage, services and actor resolution."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from dopameter.core.security import InvalidTokenError, decode_access_token
from dopameter.core.settings import Settings
from dopameter.services import ChartService, ContentService
from dopameter.storage import Storage

# Credentials are optional so anonymous mode works without a header.
bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    """Return the settings the application was built with."""
    return request.app.state.settings


def get_storage(request: Request) -> Storage:
    """Return the storage backend owned by the application."""
    return request.app.state.storage


SettingsDep = Annotated[Settings, Depends(get_settings)]
StorageDep = Annotated[Storage, Depends(get_storage)]


def get_content_service(storage: StorageDep) -> ContentService:
    return ContentService(storage)


def get_chart_service(storage: StorageDep) -> ChartService:
    return ChartService(storage)


ContentServiceDep = Annotated[ContentService, Depends(get_content_service)]
ChartServiceDep = Annotated[ChartService, Depends(get_chart_service)]


def get_current_actor(
    settings: SettingsDep,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> str:
    """Resolve the id of the user making the request.

    Args:
        settings: Application settings selecting the strategy via ``AUTH_MODE``
        credentials: Optional HTTP Bearer credentials

    Returns:
        ``ANONYMOUS_USER_ID`` in anonymous mode, otherwise the token's ``sub``

    Raises:
        HTTPException: If JWT mode is active and the token is missing or invalid
    """
    if settings.auth_mode == "anonymous":
        return settings.anonymous_user_id

    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return decode_access_token(credentials.credentials, settings)
    except InvalidTokenError as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        ) from err


# Type alias for current actor dependency
CurrentActorDep = Annotated[str, Depends(get_current_actor)]
