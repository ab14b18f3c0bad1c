"""
Generation Routes - Research, image generation, and image editing endpoints.

All routes require a session (see auth.require_identity). Pipeline outcomes
are mapped to HTTP here: invalid input → 400, any other failure → 500 with
the upstream message.
"""

from __future__ import annotations

from typing import TypeVar

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from infographer.config import BadRequestError, GenerationError
from infographer.domains.generation import (
    ComplexityLevel,
    Err,
    FailureKind,
    InfographicPipeline,
    Language,
    Outcome,
    ResearchResult,
    VisualStyle,
)
from infographer.domains.session import Identity
from infographer.interfaces.api.auth import require_identity
from infographer.interfaces.api.deps import get_pipeline

router = APIRouter()

T = TypeVar("T")


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResearchRequest(_CamelModel):
    """Research request body."""

    topic: str | None = None
    complexity_level: ComplexityLevel | None = None
    visual_style: VisualStyle | None = None
    language: Language = Language.ENGLISH


class GenerateImageRequest(_CamelModel):
    """Image generation request body."""

    prompt: str | None = None


class EditImageRequest(_CamelModel):
    """Image edit request body."""

    image_base64: str | None = None
    edit_instruction: str | None = None


class ImageResponse(_CamelModel):
    """Image payload as a data URI."""

    image_data: str


def _unwrap(outcome: Outcome[T]) -> T:
    if isinstance(outcome, Err):
        if outcome.kind is FailureKind.INVALID_INPUT:
            raise BadRequestError(outcome.message)
        raise GenerationError(outcome.message, {"kind": outcome.kind.value})
    return outcome.value


@router.post("/research", response_model=ResearchResult)
async def research(
    request: ResearchRequest | None = None,
    user: Identity = Depends(require_identity),
    pipeline: InfographicPipeline = Depends(get_pipeline),
):
    """
    Research a topic and plan an infographic.

    Returns facts, an image prompt, and de-duplicated web sources.
    """
    if request is None or not request.topic:
        raise BadRequestError("Topic is required")

    outcome = await pipeline.research(
        request.topic,
        request.complexity_level,
        request.visual_style,
        request.language,
    )
    return _unwrap(outcome)


@router.post("/generate-image", response_model=ImageResponse)
async def generate_image(
    request: GenerateImageRequest | None = None,
    user: Identity = Depends(require_identity),
    pipeline: InfographicPipeline = Depends(get_pipeline),
):
    """Generate an infographic image from a prompt."""
    if request is None or not request.prompt:
        raise BadRequestError("Prompt is required")

    outcome = await pipeline.generate_image(request.prompt)
    return ImageResponse(image_data=_unwrap(outcome))


@router.post("/edit-image", response_model=ImageResponse)
async def edit_image(
    request: EditImageRequest | None = None,
    user: Identity = Depends(require_identity),
    pipeline: InfographicPipeline = Depends(get_pipeline),
):
    """
    Apply one edit to an image.

    The client sends the full current image on every call; multi-step editing
    is a client-side loop.
    """
    if request is None or not request.image_base64 or not request.edit_instruction:
        raise BadRequestError("Image and edit instruction are required")

    outcome = await pipeline.edit_image(request.image_base64, request.edit_instruction)
    return ImageResponse(image_data=_unwrap(outcome))
