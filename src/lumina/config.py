"""Configuration: frozen client settings plus preset factories."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
import os

from dotenv import load_dotenv

from lumina.builders import GenerationConfigBuilder, SafetySettingsBuilder
from lumina.constants import API_KEY_ENV_VAR, MODEL_ENV_VAR, MODELS_BASE_URL
from lumina.errors import ConfigurationError
from lumina.models import GenerationParameters, SafetyRule
from lumina.types import DEFAULT_MODEL, GeminiModel, model_name

SafetyConfigurer = (
    SafetySettingsBuilder | Callable[[SafetySettingsBuilder], object] | None
)
GenerationConfigurer = (
    GenerationConfigBuilder | Callable[[GenerationConfigBuilder], object] | None
)


def model_base_url(model: GeminiModel | str) -> str:
    """Return the endpoint prefix for *model*, e.g. ``.../v1beta/models/gemini-2.0-flash``."""
    return f"{MODELS_BASE_URL}/{model_name(model)}"


@dataclass(frozen=True)
class Configuration:
    """Immutable settings for a ``GeminiClient``.

    ``api_base_url`` is derived from ``model`` unless given explicitly.
    The credential is not validated locally; an empty or wrong key surfaces as
    a non-2xx status from the service.

    Example:
        config = Configuration.create(
            "my-key",
            GeminiModel.GEMINI_20FLASH,
            safety_settings=lambda b: b.block_only_high_harassment(),
            generation_config=lambda b: b.temperature(0.3),
        )
    """

    api_key: str
    model: str = DEFAULT_MODEL.value
    api_base_url: str = ""
    #: ``None`` means no ``safetySettings`` key is sent.
    default_safety_settings: tuple[SafetyRule, ...] | None = field(
        default_factory=lambda: tuple(default_safety_settings())
    )
    #: ``None`` means no ``generationConfig`` key is sent.
    default_generation_config: GenerationParameters | None = None

    def __post_init__(self) -> None:
        """Normalize the model name, derive the base URL, freeze the rule list."""
        object.__setattr__(self, "model", model_name(self.model))
        if not self.api_base_url:
            object.__setattr__(self, "api_base_url", model_base_url(self.model))
        if self.default_safety_settings is not None:
            object.__setattr__(
                self, "default_safety_settings", tuple(self.default_safety_settings)
            )

    @classmethod
    def default(cls, api_key: str) -> Configuration:
        """Default model, medium-and-above safety, remote generation defaults."""
        return cls(api_key=api_key)

    @classmethod
    def with_model(cls, api_key: str, model: GeminiModel | str) -> Configuration:
        """Like ``default`` but for *model*; the base URL follows the model."""
        return cls(api_key=api_key, model=model_name(model))

    @classmethod
    def create(
        cls,
        api_key: str,
        model: GeminiModel | str = DEFAULT_MODEL,
        *,
        safety_settings: SafetyConfigurer = None,
        generation_config: GenerationConfigurer = None,
    ) -> Configuration:
        """Build a configuration whose defaults come from the two builders.

        Each configurer is either a builder instance or a callable that
        receives a fresh builder and chains calls on it. A missing configurer
        yields an empty rule list and an all-``None`` parameter record; no
        preset is applied implicitly.
        """
        return cls(
            api_key=api_key,
            model=model_name(model),
            default_safety_settings=tuple(_build_safety(safety_settings)),
            default_generation_config=_build_generation(generation_config),
        )

    @classmethod
    def from_env(cls, model: GeminiModel | str | None = None) -> Configuration:
        """Resolve the credential (and optionally the model) from the environment.

        Loads a ``.env`` file first. An explicit *model* wins over
        ``GEMINI_MODEL``.

        Raises:
            ConfigurationError: If ``GEMINI_API_KEY`` is unset or blank.
        """
        load_dotenv()
        api_key = (os.environ.get(API_KEY_ENV_VAR) or "").strip()
        if not api_key:
            raise ConfigurationError(
                "API key required for Gemini",
                hint=f"Set {API_KEY_ENV_VAR} environment variable or pass api_key=...",
            )
        if model is None:
            model = os.environ.get(MODEL_ENV_VAR) or DEFAULT_MODEL
        return cls(api_key=api_key, model=model_name(model))

    def __str__(self) -> str:
        """Return a redacted, developer-friendly representation."""
        return (
            f"Configuration(model={self.model!r}, "
            f"api_key={'[REDACTED]' if self.api_key else None}, "
            f"api_base_url={self.api_base_url!r})"
        )

    __repr__ = __str__


def _build_safety(configurer: SafetyConfigurer) -> list[SafetyRule]:
    if isinstance(configurer, SafetySettingsBuilder):
        return configurer.build()
    builder = SafetySettingsBuilder()
    if configurer is not None:
        configurer(builder)
    return builder.build()


def _build_generation(configurer: GenerationConfigurer) -> GenerationParameters:
    if isinstance(configurer, GenerationConfigBuilder):
        return configurer.build()
    builder = GenerationConfigBuilder()
    if configurer is not None:
        configurer(builder)
    return builder.build()


# --- Presets ---


def default_safety_settings() -> list[SafetyRule]:
    """Block medium-and-above for every category."""
    return (
        SafetySettingsBuilder()
        .block_medium_and_above_harassment()
        .block_medium_and_above_hate_speech()
        .block_medium_and_above_sexually_explicit()
        .block_medium_and_above_dangerous_content()
        .block_medium_and_above_civic_integrity()
        .build()
    )


def relaxed_safety_settings() -> list[SafetyRule]:
    """Block only high-probability harm for every category."""
    return (
        SafetySettingsBuilder()
        .block_only_high_harassment()
        .block_only_high_hate_speech()
        .block_only_high_sexually_explicit()
        .block_only_high_dangerous_content()
        .block_only_high_civic_integrity()
        .build()
    )


def no_safety_settings() -> list[SafetyRule]:
    """An empty rule list. Sent as ``[]``, which overrides any defaults."""
    return []


def creative_generation_config() -> GenerationParameters:
    return (
        GenerationConfigBuilder()
        .temperature(0.9)
        .top_p(0.9)
        .top_k(30)
        .max_output_tokens(1000)
        .build()
    )


def precise_generation_config() -> GenerationParameters:
    return (
        GenerationConfigBuilder()
        .temperature(0.2)
        .top_p(0.3)
        .top_k(5)
        .max_output_tokens(500)
        .build()
    )


def default_generation_config() -> GenerationParameters | None:
    """``None``: let the service pick sampling parameters."""
    return None


__all__ = [
    "Configuration",
    "creative_generation_config",
    "default_generation_config",
    "default_safety_settings",
    "model_base_url",
    "no_safety_settings",
    "precise_generation_config",
    "relaxed_safety_settings",
]
