"""Chainable builders for safety rules and generation parameters.

Example:
    safety = (
        SafetySettingsBuilder()
        .block_only_high_harassment()
        .block_medium_and_above(SafetyCategory.HARM_CATEGORY_HATE_SPEECH)
        .build()
    )
    params = GenerationConfigBuilder().temperature(0.4).top_k(8).build()

Builders are plain mutable accumulators meant for a single construction
sequence; ``build()`` returns a snapshot that later builder calls never touch.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lumina.models import GenerationParameters, SafetyRule
from lumina.types import SafetyCategory, SafetyThreshold

if TYPE_CHECKING:
    from collections.abc import Iterable

CategoryInput = SafetyCategory | str
ThresholdInput = SafetyThreshold | str


class SafetySettingsBuilder:
    """Accumulates an ordered list of safety rules.

    Duplicate categories are kept as given; no de-duplication is applied.
    """

    def __init__(self) -> None:
        self._rules: list[SafetyRule] = []

    def add_rule(self, rule: SafetyRule) -> SafetySettingsBuilder:
        """Append a prebuilt rule."""
        self._rules.append(rule)
        return self

    def add_setting(
        self, category: CategoryInput, threshold: ThresholdInput
    ) -> SafetySettingsBuilder:
        """Append a rule for *category* at *threshold*.

        Raises:
            ConfigurationError: If either value is not a known wire string.
        """
        return self.add_rule(
            SafetyRule(
                category=SafetyCategory.parse(category),
                threshold=SafetyThreshold.parse(threshold),
            )
        )

    def block_none(self, category: CategoryInput) -> SafetySettingsBuilder:
        return self.add_setting(category, SafetyThreshold.BLOCK_NONE)

    def block_only_high(self, category: CategoryInput) -> SafetySettingsBuilder:
        return self.add_setting(category, SafetyThreshold.BLOCK_ONLY_HIGH)

    def block_medium_and_above(
        self, category: CategoryInput
    ) -> SafetySettingsBuilder:
        return self.add_setting(category, SafetyThreshold.BLOCK_MEDIUM_AND_ABOVE)

    def block_low_and_above(self, category: CategoryInput) -> SafetySettingsBuilder:
        return self.add_setting(category, SafetyThreshold.BLOCK_LOW_AND_ABOVE)

    # Per-category shortcuts

    def block_medium_and_above_harassment(self) -> SafetySettingsBuilder:
        return self.block_medium_and_above(SafetyCategory.HARM_CATEGORY_HARASSMENT)

    def block_medium_and_above_hate_speech(self) -> SafetySettingsBuilder:
        return self.block_medium_and_above(SafetyCategory.HARM_CATEGORY_HATE_SPEECH)

    def block_medium_and_above_sexually_explicit(self) -> SafetySettingsBuilder:
        return self.block_medium_and_above(
            SafetyCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT
        )

    def block_medium_and_above_dangerous_content(self) -> SafetySettingsBuilder:
        return self.block_medium_and_above(
            SafetyCategory.HARM_CATEGORY_DANGEROUS_CONTENT
        )

    def block_medium_and_above_civic_integrity(self) -> SafetySettingsBuilder:
        return self.block_medium_and_above(
            SafetyCategory.HARM_CATEGORY_CIVIC_INTEGRITY
        )

    def block_only_high_harassment(self) -> SafetySettingsBuilder:
        return self.block_only_high(SafetyCategory.HARM_CATEGORY_HARASSMENT)

    def block_only_high_hate_speech(self) -> SafetySettingsBuilder:
        return self.block_only_high(SafetyCategory.HARM_CATEGORY_HATE_SPEECH)

    def block_only_high_sexually_explicit(self) -> SafetySettingsBuilder:
        return self.block_only_high(SafetyCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT)

    def block_only_high_dangerous_content(self) -> SafetySettingsBuilder:
        return self.block_only_high(SafetyCategory.HARM_CATEGORY_DANGEROUS_CONTENT)

    def block_only_high_civic_integrity(self) -> SafetySettingsBuilder:
        return self.block_only_high(SafetyCategory.HARM_CATEGORY_CIVIC_INTEGRITY)

    def build(self) -> list[SafetyRule]:
        """Return a copy of the accumulated rules."""
        return list(self._rules)


class GenerationConfigBuilder:
    """Accumulates sampling parameters for a ``GenerationParameters`` record.

    Setters store values verbatim; passing ``None`` clears a field.
    """

    def __init__(self) -> None:
        self._temperature: float | None = None
        self._top_p: float | None = None
        self._top_k: int | None = None
        self._max_output_tokens: int | None = None
        self._stop_sequences: tuple[str, ...] | None = None

    def temperature(self, value: float | None) -> GenerationConfigBuilder:
        self._temperature = value
        return self

    def top_p(self, value: float | None) -> GenerationConfigBuilder:
        self._top_p = value
        return self

    def top_k(self, value: int | None) -> GenerationConfigBuilder:
        self._top_k = value
        return self

    def max_output_tokens(self, value: int | None) -> GenerationConfigBuilder:
        self._max_output_tokens = value
        return self

    def stop_sequences(
        self, value: Iterable[str] | str | None = (), *more: str
    ) -> GenerationConfigBuilder:
        """Set the stop sequences.

        Accepts one iterable (``stop_sequences(["END"])``), several strings
        (``stop_sequences("END", "STOP")``) or ``None`` to clear. With no
        arguments the field becomes an empty tuple, sent as ``[]``.
        """
        if isinstance(value, str):
            self._stop_sequences = (value, *more)
        elif value is None and not more:
            self._stop_sequences = None
        else:
            self._stop_sequences = (*(value or ()), *more)
        return self

    def build(self) -> GenerationParameters:
        return GenerationParameters(
            temperature=self._temperature,
            top_p=self._top_p,
            top_k=self._top_k,
            max_output_tokens=self._max_output_tokens,
            stop_sequences=self._stop_sequences,
        )


__all__ = ["GenerationConfigBuilder", "SafetySettingsBuilder"]
