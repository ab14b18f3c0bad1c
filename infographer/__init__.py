"""
Infographer - Authenticated gateway for AI-generated infographics.

Example:
    >>> from infographer.domains.generation import InfographicPipeline
    >>> pipeline = InfographicPipeline(GeminiClient(api_key="..."))
    >>> outcome = await pipeline.research("Photosynthesis")
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
