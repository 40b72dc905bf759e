"""Session introspection for the configured actor resolution strategy."""

from fastapi import APIRouter, HTTPException, status

from ..dependencies import CurrentActorDep, SettingsDep

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/user")
async def get_auth_user(settings: SettingsDep, actor: CurrentActorDep) -> dict[str, str]:
    """Return the authenticated user's id.

    Anonymous deployments have no user session and always answer 401.
    """
    if settings.auth_mode == "anonymous":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return {"id": actor}
