"""Exception hierarchy for Lumina."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_HTTP_ERROR_HINTS = {
    400: "The request was rejected; check safety settings and generation config.",
    401: "Verify GEMINI_API_KEY is valid.",
    403: "Check API key permissions or project status.",
    404: "Model not found or API endpoint invalid.",
    429: "Rate limit exceeded; wait and retry.",
    500: "Gemini API internal error; retry later.",
    503: "Service unavailable; the model might be overloaded.",
}


class LuminaError(Exception):
    """Base exception for all Lumina errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(LuminaError):
    """Configuration validation or resolution failed."""


class APIError(LuminaError):
    """A generateContent call failed before a typed body could be produced.

    The client never raises this from ``generate_content``; it is attached to
    the returned envelope so callers can see which phase failed.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        retryable: bool | None = None,
        status_code: int | None = None,
        phase: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.retryable = retryable
        self.status_code = status_code
        self.phase = phase


def get_http_error_hint(status_code: int) -> str | None:
    """Return an actionable hint for a given HTTP status code."""
    return _HTTP_ERROR_HINTS.get(status_code)


def _walk_exception_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield *exc* and its ``__cause__``/``__context__`` chain, with cycle protection."""
    seen: set[int] = set()
    stack: list[BaseException] = [exc]
    while stack:
        cur = stack.pop()
        if id(cur) in seen:
            continue
        seen.add(id(cur))
        yield cur

        cause = cur.__cause__
        if isinstance(cause, BaseException):
            stack.append(cause)
        context = cur.__context__
        if isinstance(context, BaseException):
            stack.append(context)
