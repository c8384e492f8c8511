"""Closed enumerations for the values the Gemini API treats as open strings.

Each member's ``value`` is the exact wire string. ``parse`` accepts a member,
its wire value (``"BLOCK_NONE"``) or its name in any case (``"block_none"``).
"""

from __future__ import annotations

from contextlib import suppress
from enum import Enum
from typing import Any

from lumina.errors import ConfigurationError


class _WireEnum(Enum):
    @classmethod
    def parse(cls, value: Any) -> Any:
        """Convert a member, wire value or member name to a member."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            with suppress(ValueError):
                return cls(text)
            with suppress(KeyError):
                return cls[text.upper().replace("-", "_")]
        allowed = ", ".join(m.value for m in cls)
        raise ConfigurationError(
            f"Unknown {cls.__name__}: {value!r}",
            hint=f"Use one of: {allowed}",
        )

    def __str__(self) -> str:
        return str(self.value)


class SafetyCategory(_WireEnum):
    """Harm categories a safety rule can target."""

    HARM_CATEGORY_HARASSMENT = "HARM_CATEGORY_HARASSMENT"
    HARM_CATEGORY_HATE_SPEECH = "HARM_CATEGORY_HATE_SPEECH"
    HARM_CATEGORY_SEXUALLY_EXPLICIT = "HARM_CATEGORY_SEXUALLY_EXPLICIT"
    HARM_CATEGORY_DANGEROUS_CONTENT = "HARM_CATEGORY_DANGEROUS_CONTENT"
    HARM_CATEGORY_CIVIC_INTEGRITY = "HARM_CATEGORY_CIVIC_INTEGRITY"


class SafetyThreshold(_WireEnum):
    """How aggressively the remote service filters a category."""

    BLOCK_NONE = "BLOCK_NONE"
    BLOCK_ONLY_HIGH = "BLOCK_ONLY_HIGH"
    BLOCK_MEDIUM_AND_ABOVE = "BLOCK_MEDIUM_AND_ABOVE"
    BLOCK_LOW_AND_ABOVE = "BLOCK_LOW_AND_ABOVE"


class GeminiModel(_WireEnum):
    """Known model identifiers. Any other string is accepted where a model is expected."""

    GEMINI_15PRO = "gemini-1.5-pro"
    GEMINI_20FLASH = "gemini-2.0-flash"
    GEMINI_20FLASH_EXP = "gemini-2.0-flash-thinking-exp-01-21"
    GEMINI_20FLASH_PRO = "gemini-2.0-pro-exp-02-05"


DEFAULT_MODEL = GeminiModel.GEMINI_15PRO


def model_name(model: GeminiModel | str) -> str:
    """Return the wire identifier for a model member or free-form name."""
    if isinstance(model, GeminiModel):
        return model.value
    return model.strip()


__all__ = [
    "DEFAULT_MODEL",
    "GeminiModel",
    "SafetyCategory",
    "SafetyThreshold",
    "model_name",
]
