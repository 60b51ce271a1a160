"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions never are — the service orchestrates the awaits
"""

from typing import Mapping, Protocol

from app.core.domain_types import ElementRecord


class ElementRepository(Protocol):
    """Contract for element persistence — implemented by shell.

    find_one filters are exact matches on word1/word2 or on text.
    """
    async def find_one(self, filters: Mapping[str, str]) -> ElementRecord | None: ...
    async def create(self, record: ElementRecord) -> ElementRecord: ...


class TextGenerator(Protocol):
    """Contract for the text-generation endpoint — implemented by shell.

    generate raises GenerationAPIError on transport or HTTP failure and
    returns the raw generated text (possibly empty) otherwise.
    """
    async def generate(self, prompt: str) -> str: ...
