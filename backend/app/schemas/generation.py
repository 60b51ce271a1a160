"""Generation Response Schemas — the envelope shapes a model server may return.

Invariants:
    - One pydantic model per known shape; one decoder per model
    - Decoders are tried in a fixed order: flat `response`, `choices`, `output`
    - The first shape that validates decides the result; no fall-through to a
      later shape once one has matched
    - extract_generated_text returns None when no shape matches or the
      matched shape carries no text

Design Decisions:
    - Non-string fragment texts are dropped rather than failing validation,
      so one odd fragment does not hide its siblings
"""

from typing import Callable

from pydantic import BaseModel, Field, ValidationError, field_validator


def _string_or_none(v: object) -> str | None:
    return v if isinstance(v, str) else None


class ContentFragment(BaseModel):
    """A piece of generated content inside `choices[].content` or `output[].content`."""
    text: str | None = None

    @field_validator("text", mode="before")
    @classmethod
    def drop_non_string(cls, v: object) -> str | None:
        return _string_or_none(v)


def _join_fragments(fragments: list[ContentFragment]) -> str:
    return "".join(f.text or "" for f in fragments)


class FlatGenerateResponse(BaseModel):
    """Ollama /api/generate with stream=false: {"response": "..."}."""
    response: str


class Choice(BaseModel):
    content: list[ContentFragment] | None = None
    text: str | None = None

    @field_validator("content", mode="before")
    @classmethod
    def drop_non_list(cls, v: object) -> object:
        return v if isinstance(v, list) else None

    @field_validator("text", mode="before")
    @classmethod
    def drop_non_string(cls, v: object) -> str | None:
        return _string_or_none(v)


class ChoicesResponse(BaseModel):
    """Completion-style envelope: {"choices": [{"content": [...]} | {"text": "..."}]}."""
    choices: list[Choice] = Field(min_length=1)


class OutputItem(BaseModel):
    content: list[ContentFragment] | None = None

    @field_validator("content", mode="before")
    @classmethod
    def drop_non_list(cls, v: object) -> object:
        return v if isinstance(v, list) else None


class OutputResponse(BaseModel):
    """Responses-style envelope: {"output": [{"content": [...]}]}."""
    output: list[OutputItem] = Field(min_length=1)


def _decode_flat(payload: object) -> str | None:
    return FlatGenerateResponse.model_validate(payload).response


def _decode_choices(payload: object) -> str | None:
    choice = ChoicesResponse.model_validate(payload).choices[0]
    if choice.content is not None:
        return _join_fragments(choice.content)
    return choice.text


def _decode_output(payload: object) -> str | None:
    item = OutputResponse.model_validate(payload).output[0]
    if item.content is not None:
        return _join_fragments(item.content)
    return None


_DECODERS: tuple[Callable[[object], str | None], ...] = (
    _decode_flat,
    _decode_choices,
    _decode_output,
)


def extract_generated_text(payload: object) -> str | None:
    """Generated text from a decoded JSON body, or None if no known shape matches."""
    for decode in _DECODERS:
        try:
            text = decode(payload)
        except ValidationError:
            continue
        return text or None
    return None
