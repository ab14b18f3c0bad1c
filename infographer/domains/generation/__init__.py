"""
Generation Domain - Infographic research and image pipeline.

This domain handles:
- Audience/style prompt presets
- Parsing model research output into facts, prompt, and sources
- Image generation and single-turn editing
"""

from .contracts import GenerativeModel
from .models import (
    ComplexityLevel,
    Err,
    FailureKind,
    Language,
    Ok,
    Outcome,
    ResearchResult,
    SearchResultItem,
    VisualStyle,
)
from .pipeline import InfographicPipeline

__all__ = [
    # Contracts
    "GenerativeModel",
    # Models
    "ComplexityLevel",
    "VisualStyle",
    "Language",
    "ResearchResult",
    "SearchResultItem",
    "FailureKind",
    "Ok",
    "Err",
    "Outcome",
    # Implementations
    "InfographicPipeline",
]
