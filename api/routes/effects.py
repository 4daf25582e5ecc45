"""Visual effect endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from api.dependencies import CallerDep, ContentStoreDep
from models.entities import VisualEffect

router = APIRouter(
    prefix="/effects",
    tags=["effects"],
)


class CreateEffectRequest(BaseModel):
    """Request model for creating a visual effect.

    Attributes:
        name: Display name.
        effect_type: Effect kind (filter, overlay, ...).
        intensity: Strength from 0 to 100. Values outside that range are
            replaced with the configured default, not rejected.
        preview_url: Link to a preview image.
    """

    name: str = Field(min_length=1)
    effect_type: str = Field(min_length=1)
    intensity: int = Field(default=50)
    preview_url: str = Field(default="")


@router.post("", response_model=VisualEffect)
async def create_visual_effect(
    request: CreateEffectRequest, store: ContentStoreDep, caller: CallerDep
) -> VisualEffect:
    """Create a visual effect preset as the caller."""
    return store.create_visual_effect(
        caller, request.name, request.effect_type, request.intensity, request.preview_url
    )


@router.get("", response_model=list[VisualEffect])
async def get_visual_effects(store: ContentStoreDep) -> list[VisualEffect]:
    """List every visual effect in creation order."""
    return store.get_visual_effects()
