"""Content, vote and favorite endpoints for the Dopameter API."""

from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, File, Form, Query, UploadFile, status

from dopameter.core.errors import ValidationError
from dopameter.schemas import (
    ContentImport,
    ContentType,
    EnrichedContent,
    MessageResponse,
    SaveResponse,
    VoteCreate,
    VoteOut,
)
from dopameter.services.uploads import content_type_for, store_upload

from ..dependencies import ContentServiceDep, CurrentActorDep, SettingsDep

router = APIRouter(prefix="/content", tags=["content"])

LimitQuery = Annotated[int | None, Query(ge=1, description="Maximum number of items to return")]


@router.get("", response_model=list[EnrichedContent])
async def list_content(service: ContentServiceDep) -> list[EnrichedContent]:
    """Return every content item with its vote statistics."""
    return service.list_content()


@router.get("/trending", response_model=list[EnrichedContent])
async def get_trending(
    service: ContentServiceDep,
    settings: SettingsDep,
    limit: LimitQuery = None,
) -> list[EnrichedContent]:
    """Return the most voted content, ties broken by average rating."""
    return service.trending(limit or settings.default_list_limit)


@router.get("/latest", response_model=list[EnrichedContent])
async def get_latest(
    service: ContentServiceDep,
    settings: SettingsDep,
    limit: LimitQuery = None,
) -> list[EnrichedContent]:
    """Return the newest content."""
    return service.latest(limit or settings.default_list_limit)


@router.get("/{content_id}", response_model=EnrichedContent)
async def get_content(content_id: int, service: ContentServiceDep) -> EnrichedContent:
    """Get a specific content item by ID.

    Raises:
        NotFoundError: If the content does not exist
    """
    return service.get_content(content_id)


@router.post("/upload", response_model=EnrichedContent, status_code=status.HTTP_201_CREATED)
async def upload_content(
    service: ContentServiceDep,
    settings: SettingsDep,
    actor: CurrentActorDep,
    file: Annotated[UploadFile | None, File()] = None,
    content_type: Annotated[ContentType | None, Form(alias="type")] = None,
) -> EnrichedContent:
    """Store an uploaded image or video and register it as content.

    The content type comes from the ``type`` form field when given, otherwise
    from the file's MIME type.
    """
    if file is None or not file.filename:
        raise ValidationError("No file uploaded")

    url = store_upload(
        file.file,
        filename=file.filename,
        mimetype=file.content_type,
        upload_dir=Path(settings.upload_dir),
        max_bytes=settings.max_upload_bytes,
        size=file.size,
    )
    return service.create_content(actor, content_type or content_type_for(file.content_type), url)


@router.post("/import", response_model=EnrichedContent, status_code=status.HTTP_201_CREATED)
async def import_content(
    payload: ContentImport,
    service: ContentServiceDep,
    actor: CurrentActorDep,
) -> EnrichedContent:
    """Register an image or video hosted at an external URL."""
    return service.import_content(actor, payload.url, payload.type)


@router.post("/{content_id}/vote", response_model=VoteOut, status_code=status.HTTP_201_CREATED)
async def cast_vote(
    content_id: int,
    payload: VoteCreate,
    service: ContentServiceDep,
    actor: CurrentActorDep,
) -> VoteOut:
    """Record an emoji vote. Repeat votes by the same user are all counted."""
    return service.record_vote(content_id, actor, payload.emoji)


@router.post("/{content_id}/save", response_model=SaveResponse)
async def save_content(
    content_id: int,
    service: ContentServiceDep,
    actor: CurrentActorDep,
) -> SaveResponse:
    """Add content to the caller's favorites; saving twice is harmless."""
    service.save_favorite(actor, content_id)
    return SaveResponse(message="Content saved to favorites", saved=True)


@router.post("/{content_id}/unsave", response_model=SaveResponse)
async def unsave_content(
    content_id: int,
    service: ContentServiceDep,
    actor: CurrentActorDep,
) -> SaveResponse:
    """Remove content from the caller's favorites if present."""
    service.remove_favorite(actor, content_id)
    return SaveResponse(message="Content removed from favorites", saved=False)


@router.post("/{content_id}/share", response_model=MessageResponse)
async def share_content(content_id: int) -> MessageResponse:
    """Acknowledge a share; nothing is persisted."""
    return MessageResponse(message="Content shared")
