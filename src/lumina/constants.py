"""Endpoint and environment constants shared across Lumina."""

from __future__ import annotations

API_HOST = "https://generativelanguage.googleapis.com"
API_VERSION = "v1beta"
MODELS_BASE_URL = f"{API_HOST}/{API_VERSION}/models"

GENERATE_CONTENT_METHOD = "generateContent"

# Not an HTTP status: the call failed before any response could be used.
TRANSPORT_FAILURE_STATUS = -1

API_KEY_ENV_VAR = "GEMINI_API_KEY"
MODEL_ENV_VAR = "GEMINI_MODEL"
