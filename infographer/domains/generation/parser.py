"""
Research Parser - Extract the FACTS and IMAGE_PROMPT sections from model text.

The research prompt asks the model to answer in exactly this shape::

    FACTS:
    - fact one
    - fact two

    IMAGE_PROMPT:
    free text until the end of the response

Parsing never fails. Rules:
- Markers are matched case-insensitively.
- FACTS runs from its marker to IMAGE_PROMPT (or the end). Each line has a
  leading "-" bullet stripped; blank lines are dropped; at most 5 are kept.
- IMAGE_PROMPT is everything after its marker, trimmed. If the marker is
  missing or the section is empty, the caller's fallback prompt is used.
- Grounding chunks lacking a title or url are dropped; duplicates by url keep
  the first occurrence.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from infographer.adapters.gemini import GroundingChunk

from .models import SearchResultItem

__all__ = ["MAX_FACTS", "parse_facts", "parse_image_prompt", "collect_search_results"]

MAX_FACTS = 5

_FACTS_RE = re.compile(r"FACTS:\s*(.*?)(?=IMAGE_PROMPT:|\Z)", re.IGNORECASE | re.DOTALL)
_PROMPT_RE = re.compile(r"IMAGE_PROMPT:\s*(.*)\Z", re.IGNORECASE | re.DOTALL)
_BULLET_RE = re.compile(r"^-\s*")


def parse_facts(text: str) -> list[str]:
    match = _FACTS_RE.search(text)
    if not match:
        return []

    facts = []
    for line in match.group(1).strip().split("\n"):
        fact = _BULLET_RE.sub("", line).strip()
        if fact:
            facts.append(fact)
    return facts[:MAX_FACTS]


def parse_image_prompt(text: str, fallback: str) -> str:
    match = _PROMPT_RE.search(text)
    prompt = match.group(1).strip() if match else ""
    return prompt or fallback


def collect_search_results(chunks: Iterable[GroundingChunk]) -> list[SearchResultItem]:
    """Turn grounding chunks into unique search results, in first-seen order."""
    results: dict[str, SearchResultItem] = {}
    for chunk in chunks:
        if not chunk.uri or not chunk.title:
            continue
        if chunk.uri not in results:
            results[chunk.uri] = SearchResultItem(title=chunk.title, url=chunk.uri)
    return list(results.values())
