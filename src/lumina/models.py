"""Wire schema for the generateContent endpoint.

Python attributes are snake_case; the JSON keys are the camelCase names the
Gemini API uses (``safetySettings``, ``topP``, ``maxOutputTokens``...).
Serialization omits ``None`` fields instead of sending ``null``, and
deserialization ignores keys this schema does not know about.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from lumina.types import SafetyCategory, SafetyThreshold


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON-ready dict form, with absent fields dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        """Return the JSON text sent over the wire."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


class Part(_WireModel):
    """A single text fragment of a content block."""

    text: str


class Content(_WireModel):
    """One conversational turn: an ordered list of parts."""

    parts: list[Part]


class SafetyRule(_WireModel):
    """A (category, threshold) content-filter directive."""

    category: SafetyCategory
    threshold: SafetyThreshold

    @field_validator("category", mode="before")
    @classmethod
    def _parse_category(cls, v: Any) -> SafetyCategory:
        return SafetyCategory.parse(v)

    @field_validator("threshold", mode="before")
    @classmethod
    def _parse_threshold(cls, v: Any) -> SafetyThreshold:
        return SafetyThreshold.parse(v)


class GenerationParameters(_WireModel):
    """Sampling controls. ``None`` means the remote default applies.

    Values are not range-checked locally; the service rejects out-of-range
    input with a non-2xx status. NaN and infinity are rejected here because
    JSON cannot carry them.
    """

    # Re-checked when nested in a request, so model_construct() cannot bypass it.
    model_config = ConfigDict(allow_inf_nan=False, revalidate_instances="always")

    temperature: float | None = None
    top_p: float | None = None
    top_k: int | None = None
    max_output_tokens: int | None = None
    stop_sequences: tuple[str, ...] | None = None


class GenerationRequest(_WireModel):
    """Request body for ``:generateContent``."""

    contents: list[Content]
    safety_settings: list[SafetyRule] | None = None
    generation_config: GenerationParameters | None = None

    @classmethod
    def for_prompt(
        cls,
        prompt: str,
        *,
        safety_settings: list[SafetyRule] | None = None,
        generation_config: GenerationParameters | None = None,
    ) -> GenerationRequest:
        """Build the single-content, single-part request used by the client."""
        return cls(
            contents=[Content(parts=[Part(text=prompt)])],
            safety_settings=safety_settings,
            generation_config=generation_config,
        )


class Candidate(_WireModel):
    """One generated alternative.

    ``content`` is absent when the candidate was blocked before producing text.
    """

    content: Content | None = None


class GenerationResponse(_WireModel):
    """Response body for ``:generateContent``.

    ``candidates`` may be missing or empty even on HTTP 200, e.g. when the
    prompt itself was blocked.
    """

    candidates: list[Candidate] | None = None

    @property
    def text(self) -> str:
        """Return the first candidate's first text part, or ``""``."""
        if not self.candidates:
            return ""
        content = self.candidates[0].content
        if content is None or not content.parts:
            return ""
        return content.parts[0].text


__all__ = [
    "Candidate",
    "Content",
    "GenerationParameters",
    "GenerationRequest",
    "GenerationResponse",
    "Part",
    "SafetyRule",
]
