"""Synchronous client for the Gemini ``generateContent`` endpoint."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

import httpx
from pydantic import BaseModel

from lumina._errors import wrap_call_error
from lumina.constants import GENERATE_CONTENT_METHOD
from lumina.models import (
    GenerationParameters,
    GenerationRequest,
    GenerationResponse,
    SafetyRule,
)
from lumina.result import ResultEnvelope

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import TracebackType

    from lumina.config import Configuration

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)

_JSON_HEADERS = {"Content-Type": "application/json"}


class GeminiClient:
    """Send prompts to one Gemini model and return typed result envelopes.

    The configuration is read-only, so one client may serve concurrent calls
    when the underlying ``httpx.Client`` does. Pass ``http_client`` to control
    timeouts, proxies or transports; an injected client is never closed here.

    Example:
        with GeminiClient(Configuration.default("my-key")) as client:
            result = client.generate_content("Write a haiku about rain")
            if result.ok and result.body is not None:
                print(result.body.text)
    """

    def __init__(
        self,
        configuration: Configuration,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.configuration = configuration
        self._client = http_client
        self._owns_client = http_client is None

    def _get_client(self) -> httpx.Client:
        """Lazy-initialize the HTTP client."""
        if self._client is None:
            self._client = httpx.Client()
        return self._client

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> GeminiClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def generate_content_url(self) -> str:
        """Endpoint URL without the credential query parameter."""
        return f"{self.configuration.api_base_url}:{GENERATE_CONTENT_METHOD}"

    def generate_content(
        self,
        prompt: str,
        safety_settings: Sequence[SafetyRule] | None = None,
        generation_config: GenerationParameters | None = None,
    ) -> ResultEnvelope[GenerationResponse]:
        """Generate content for a single text prompt.

        Per-call ``safety_settings`` and ``generation_config`` replace the
        configuration defaults wholesale when not ``None``; an explicit empty
        list is sent as ``[]``.

        Never raises. Non-2xx responses come back with their real status code;
        failures before a usable response yield ``status_code == -1``.
        """
        cfg = self.configuration
        rules = (
            safety_settings
            if safety_settings is not None
            else cfg.default_safety_settings
        )
        params = (
            generation_config
            if generation_config is not None
            else cfg.default_generation_config
        )

        try:
            content = GenerationRequest.for_prompt(
                prompt,
                safety_settings=list(rules) if rules is not None else None,
                generation_config=params,
            ).to_json()
        except Exception as e:
            err = wrap_call_error(e, phase="encode", api_key=cfg.api_key)
            logger.debug("generateContent request rejected locally: %s", err)
            return ResultEnvelope.failure(err)

        return self._post(self.generate_content_url, content, GenerationResponse)

    def _post(
        self,
        url: str,
        content: str,
        response_type: type[ResponseT],
    ) -> ResultEnvelope[ResponseT]:
        """POST JSON *content* and decode the body into *response_type*."""
        api_key = self.configuration.api_key

        try:
            response = self._get_client().post(
                url,
                params={"key": api_key},
                content=content,
                headers=_JSON_HEADERS,
            )
        except Exception as e:
            err = wrap_call_error(e, phase="transport", api_key=api_key)
            logger.debug(
                "%s transport failure (%s)", GENERATE_CONTENT_METHOD, type(e).__name__
            )
            return ResultEnvelope.failure(err)

        status = response.status_code
        logger.debug(
            "%s model=%s status=%d",
            GENERATE_CONTENT_METHOD,
            self.configuration.model,
            status,
        )

        try:
            text = response.text
            if not text.strip():
                return ResultEnvelope(status, None)
            body = response_type.model_validate_json(text)
        except Exception as e:
            err = wrap_call_error(
                e, phase="decode", api_key=api_key, status_code=status
            )
            logger.debug(
                "%s decode failure status=%d (%s)",
                GENERATE_CONTENT_METHOD,
                status,
                type(e).__name__,
            )
            return ResultEnvelope.failure(err)

        return ResultEnvelope(status, body)
