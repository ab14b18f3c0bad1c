"""
Prompt Presets - Audience and style directives for infographic prompts.
"""

from __future__ import annotations

from .models import ComplexityLevel, Language, VisualStyle

__all__ = ["level_instruction", "style_instruction", "build_research_prompt", "fallback_image_prompt"]

_LEVEL_INSTRUCTIONS = {
    ComplexityLevel.ELEMENTARY: (
        "Target Audience: Elementary School (Ages 6-10). Style: Bright, simple, fun. "
        "Use large clear icons and very minimal text labels."
    ),
    ComplexityLevel.HIGH_SCHOOL: (
        "Target Audience: High School. Style: Standard Textbook. Clean lines, clear labels, "
        "accurate maps or diagrams. Avoid cartoony elements."
    ),
    ComplexityLevel.COLLEGE: (
        "Target Audience: University. Style: Academic Journal. High detail, data-rich, "
        "precise cross-sections or complex schematics."
    ),
    ComplexityLevel.EXPERT: (
        "Target Audience: Industry Expert. Style: Technical Blueprint/Schematic. Extremely "
        "dense detail, monochrome or technical coloring, precise annotations."
    ),
}
_DEFAULT_LEVEL_INSTRUCTION = "Target Audience: General Public. Style: Clear and engaging."

_STYLE_INSTRUCTIONS = {
    VisualStyle.MINIMALIST: (
        "Aesthetic: Bauhaus Minimalist. Flat vector art, limited color palette (2-3 colors), "
        "reliance on negative space and simple geometric shapes."
    ),
    VisualStyle.REALISTIC: (
        "Aesthetic: Photorealistic Composite. Cinematic lighting, 8k resolution, highly "
        "detailed textures. Looks like a photograph."
    ),
    VisualStyle.CARTOON: (
        "Aesthetic: Educational Comic. Vibrant colors, thick outlines, expressive cel-shaded style."
    ),
    VisualStyle.VINTAGE: (
        "Aesthetic: 19th Century Scientific Lithograph. Engraving style, sepia tones, "
        "textured paper background, fine hatch lines."
    ),
    VisualStyle.FUTURISTIC: (
        "Aesthetic: Cyberpunk HUD. Glowing neon blue/cyan lines on dark background, "
        "holographic data visualization, 3D wireframes."
    ),
    VisualStyle.RENDER_3D: (
        "Aesthetic: 3D Isometric Render. Claymorphism or high-gloss plastic texture, studio "
        "lighting, soft shadows, looks like a physical model."
    ),
    VisualStyle.SKETCH: (
        "Aesthetic: Da Vinci Notebook. Ink on parchment sketch, handwritten annotations "
        "style, rough but accurate lines."
    ),
}
_DEFAULT_STYLE_INSTRUCTION = (
    "Aesthetic: High-quality digital scientific illustration. Clean, modern, highly detailed."
)


def level_instruction(level: ComplexityLevel | None) -> str:
    return _LEVEL_INSTRUCTIONS.get(level, _DEFAULT_LEVEL_INSTRUCTION)


def style_instruction(style: VisualStyle | None) -> str:
    # Default shares the generic aesthetic
    return _STYLE_INSTRUCTIONS.get(style, _DEFAULT_STYLE_INSTRUCTION)


def build_research_prompt(
    topic: str,
    level: ComplexityLevel | None,
    style: VisualStyle | None,
    language: Language,
) -> str:
    """
    Build the research instruction, including the FACTS/IMAGE_PROMPT output contract.

    Args:
        topic: Infographic subject
        level: Audience preset
        style: Aesthetic preset
        language: Output language

    Returns:
        Prompt text for the text model
    """
    return f"""You are an expert visual researcher.
Your goal is to research the topic: "{topic}" and create a plan for an infographic.

**IMPORTANT: Use the Google Search tool to find the most accurate, up-to-date information about this topic.**

Context:
{level_instruction(level)}
{style_instruction(style)}
Language: {language.value}

Please provide your response in the following format EXACTLY:

FACTS:
- [Fact 1]
- [Fact 2]
- [Fact 3]

IMAGE_PROMPT:
[A highly detailed image generation prompt describing the visual composition, colors, and layout for the infographic. Do not include citations in the prompt.]
"""


def fallback_image_prompt(
    topic: str,
    level: ComplexityLevel | None,
    style: VisualStyle | None,
) -> str:
    """Prompt used when the model response has no usable IMAGE_PROMPT section."""
    return (
        f"Create a detailed infographic about {topic}. "
        f"{level_instruction(level)} {style_instruction(style)}"
    )
