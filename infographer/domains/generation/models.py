"""
Generation Models - Data types for the generation domain.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ComplexityLevel(str, Enum):
    """Target audience of the infographic."""

    ELEMENTARY = "Elementary"
    HIGH_SCHOOL = "High School"
    COLLEGE = "College"
    EXPERT = "Expert"


class VisualStyle(str, Enum):
    """Visual aesthetic of the infographic."""

    DEFAULT = "Default"
    MINIMALIST = "Minimalist"
    REALISTIC = "Realistic"
    CARTOON = "Cartoon"
    VINTAGE = "Vintage"
    FUTURISTIC = "Futuristic"
    RENDER_3D = "3D Render"
    SKETCH = "Sketch"


class Language(str, Enum):
    """Output language."""

    ENGLISH = "English"
    SPANISH = "Spanish"
    FRENCH = "French"
    GERMAN = "German"
    MANDARIN = "Mandarin"
    JAPANESE = "Japanese"
    HINDI = "Hindi"
    ARABIC = "Arabic"
    PORTUGUESE = "Portuguese"
    RUSSIAN = "Russian"


class SearchResultItem(BaseModel):
    """Web source that grounded the research."""

    title: str
    url: str

    model_config = {"frozen": True}


class ResearchResult(BaseModel):
    """Output of the research stage."""

    image_prompt: str
    facts: list[str] = Field(default_factory=list)
    search_results: list[SearchResultItem] = Field(default_factory=list)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FailureKind(str, Enum):
    """Why a pipeline stage produced no result."""

    UPSTREAM = "upstream"  # model call raised
    NO_IMAGE = "no_image"  # model answered without an image part
    INVALID_INPUT = "invalid_input"  # caller-supplied data unusable


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful stage outcome."""

    value: T


@dataclass(frozen=True)
class Err:
    """Failed stage outcome."""

    kind: FailureKind
    message: str


Outcome = Union[Ok[T], Err]
