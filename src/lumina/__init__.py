"""Lumina: a small synchronous client for the Gemini generateContent API.

Public API:
    - Configuration: frozen client settings and preset factories
    - GeminiClient: generate_content() returning a ResultEnvelope
    - SafetySettingsBuilder / GenerationConfigBuilder: chainable builders
    - Wire models: GenerationRequest, GenerationResponse and friends
"""

from __future__ import annotations

import logging

from lumina.builders import GenerationConfigBuilder, SafetySettingsBuilder
from lumina.client import GeminiClient
from lumina.config import (
    Configuration,
    creative_generation_config,
    default_generation_config,
    default_safety_settings,
    no_safety_settings,
    precise_generation_config,
    relaxed_safety_settings,
)
from lumina.constants import TRANSPORT_FAILURE_STATUS
from lumina.errors import APIError, ConfigurationError, LuminaError
from lumina.models import (
    Candidate,
    Content,
    GenerationParameters,
    GenerationRequest,
    GenerationResponse,
    Part,
    SafetyRule,
)
from lumina.result import ResultEnvelope
from lumina.types import GeminiModel, SafetyCategory, SafetyThreshold

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("lumina-client")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("lumina").addHandler(logging.NullHandler())

__all__ = [
    "TRANSPORT_FAILURE_STATUS",
    "APIError",
    "Candidate",
    "Configuration",
    "ConfigurationError",
    "Content",
    "GeminiClient",
    "GeminiModel",
    "GenerationConfigBuilder",
    "GenerationParameters",
    "GenerationRequest",
    "GenerationResponse",
    "LuminaError",
    "Part",
    "ResultEnvelope",
    "SafetyCategory",
    "SafetyRule",
    "SafetySettingsBuilder",
    "SafetyThreshold",
    "creative_generation_config",
    "default_generation_config",
    "default_safety_settings",
    "no_safety_settings",
    "precise_generation_config",
    "relaxed_safety_settings",
]
