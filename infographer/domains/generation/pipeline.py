"""
Infographic Pipeline - Research, generate, and edit stages.

Each stage is one model call and is fully stateless: the caller carries the
research result and the current image between calls. Stages never raise for
model problems; they return Ok(value) or Err(kind, message) and leave the
HTTP mapping to the transport layer. There are no retries and no caching.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re
import time
from typing import TYPE_CHECKING

from infographer.config.errors import LLMError

from .models import (
    ComplexityLevel,
    Err,
    FailureKind,
    Language,
    Ok,
    Outcome,
    ResearchResult,
    VisualStyle,
)
from .parser import collect_search_results, parse_facts, parse_image_prompt
from .prompts import build_research_prompt, fallback_image_prompt

if TYPE_CHECKING:
    from .contracts import GenerativeModel

logger = logging.getLogger(__name__)

__all__ = ["InfographicPipeline", "to_data_uri", "split_data_uri"]

DATA_URI_PREFIX = "data:image/png;base64,"

_DATA_URI_RE = re.compile(r"^data:image/(png|jpeg|jpg);base64,")


def to_data_uri(image: bytes) -> str:
    """Encode raw image bytes as a PNG data URI."""
    return DATA_URI_PREFIX + base64.b64encode(image).decode("ascii")


def split_data_uri(image_base64: str) -> tuple[str, str]:
    """
    Strip an optional data-URI prefix.

    Returns:
        (mime_type, bare base64 payload). Without a prefix the image is assumed JPEG.
    """
    match = _DATA_URI_RE.match(image_base64)
    if not match:
        return "image/jpeg", image_base64
    mime_type = "image/png" if match.group(1) == "png" else "image/jpeg"
    return mime_type, image_base64[match.end() :]


class InfographicPipeline:
    """
    Three composable stages around a generative model.

    Example:
        >>> pipeline = InfographicPipeline(GeminiClient(api_key="..."))
        >>> research = await pipeline.research("Volcanoes", ComplexityLevel.COLLEGE)
        >>> image = await pipeline.generate_image(research.value.image_prompt)
        >>> edited = await pipeline.edit_image(image.value, "Label the magma chamber")
    """

    def __init__(self, model: GenerativeModel) -> None:
        self._model = model

    async def research(
        self,
        topic: str,
        level: ComplexityLevel | None = None,
        style: VisualStyle | None = None,
        language: Language = Language.ENGLISH,
    ) -> Outcome[ResearchResult]:
        """
        Research a topic with search grounding and plan the infographic.

        Args:
            topic: Infographic subject
            level: Audience preset (generic audience if None)
            style: Aesthetic preset (generic aesthetic if None)
            language: Output language

        Returns:
            Ok(ResearchResult) or Err(UPSTREAM)
        """
        prompt = build_research_prompt(topic, level, style, language)
        start_time = time.perf_counter()

        try:
            response = await self._model.generate_text(prompt, use_search=True)
        except LLMError as e:
            logger.error("Research failed: topic=%r error=%s", topic, e.message)
            return Err(FailureKind.UPSTREAM, e.message)

        result = ResearchResult(
            image_prompt=parse_image_prompt(
                response.text, fallback_image_prompt(topic, level, style)
            ),
            facts=parse_facts(response.text),
            search_results=collect_search_results(response.grounding_chunks),
        )
        logger.info(
            "Research complete: facts=%d sources=%d duration_ms=%.2f",
            len(result.facts),
            len(result.search_results),
            (time.perf_counter() - start_time) * 1000,
        )
        return Ok(result)

    async def generate_image(self, prompt: str) -> Outcome[str]:
        """
        Generate an infographic image.

        Args:
            prompt: Image prompt (usually ResearchResult.image_prompt)

        Returns:
            Ok(data URI) or Err(UPSTREAM | NO_IMAGE)
        """
        try:
            response = await self._model.generate_image(prompt)
        except LLMError as e:
            logger.error("Image generation failed: %s", e.message)
            return Err(FailureKind.UPSTREAM, e.message)

        if not response.has_image:
            return Err(FailureKind.NO_IMAGE, "Failed to generate image")
        return Ok(to_data_uri(response.image))

    async def edit_image(self, image_base64: str, instruction: str) -> Outcome[str]:
        """
        Apply one edit instruction to an image.

        The server keeps no image history: every call must carry the full
        current image.

        Args:
            image_base64: Current image, bare base64 or a png/jpeg data URI
            instruction: Free-text edit instruction

        Returns:
            Ok(data URI) or Err(INVALID_INPUT | UPSTREAM | NO_IMAGE)
        """
        mime_type, payload = split_data_uri(image_base64.strip())
        try:
            image = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError):
            image = b""
        if not image:
            return Err(FailureKind.INVALID_INPUT, "Image is not valid base64")

        try:
            response = await self._model.generate_image(
                instruction, image=image, image_mime_type=mime_type
            )
        except LLMError as e:
            logger.error("Image edit failed: %s", e.message)
            return Err(FailureKind.UPSTREAM, e.message)

        if not response.has_image:
            return Err(FailureKind.NO_IMAGE, "Failed to edit image")
        return Ok(to_data_uri(response.image))
