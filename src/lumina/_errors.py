"""Map exceptions raised during a call into ``APIError`` descriptions.

Exception messages from the HTTP stack can echo the request URL, which carries
the credential as a query parameter, so messages are redacted before they are
stored or logged.
"""

from __future__ import annotations

from urllib.parse import quote, quote_plus

import httpx

from lumina.errors import APIError, _walk_exception_chain

REDACTED = "[REDACTED]"


def redact(text: str, secret: str | None) -> str:
    """Replace every occurrence of *secret* in *text*, raw or URL-encoded."""
    if not secret:
        return text
    for form in (secret, quote_plus(secret), quote(secret, safe="")):
        text = text.replace(form, REDACTED)
    return text


def is_transport_error(exc: BaseException) -> bool:
    """True when the chain contains an httpx transport-level failure."""
    return any(
        isinstance(e, (httpx.TimeoutException, httpx.RequestError))
        for e in _walk_exception_chain(exc)
    )


def wrap_call_error(
    exc: BaseException,
    *,
    phase: str,
    api_key: str | None,
    status_code: int | None = None,
) -> APIError:
    """Describe *exc* as an ``APIError`` for the given call *phase*.

    ``phase`` is ``"encode"`` when the request body could not be built and
    nothing was sent, ``"transport"`` when no response arrived, and
    ``"decode"`` when a response arrived but its body did not match the
    expected shape.
    """
    if isinstance(exc, APIError):
        if exc.phase is None:
            exc.phase = phase
        return exc

    timed_out = any(
        isinstance(e, httpx.TimeoutException) for e in _walk_exception_chain(exc)
    )
    retryable = phase == "transport" and is_transport_error(exc)

    if phase == "encode":
        msg = "generateContent request could not be encoded"
        hint = "Check the prompt, safety settings and generation config values."
    elif phase == "decode":
        msg = "generateContent response could not be decoded"
        hint = "The service returned a body that is not a GenerateContentResponse."
    elif timed_out:
        msg = "generateContent request timed out"
        hint = "Pass an httpx.Client with a longer timeout to GeminiClient."
    else:
        msg = "generateContent request failed"
        hint = "Check network connectivity to generativelanguage.googleapis.com."

    status_note = f" (status={status_code})" if isinstance(status_code, int) else ""
    cause = redact(str(exc), api_key)
    detail = f"{type(exc).__name__}: {cause}" if cause else type(exc).__name__
    return APIError(
        f"{msg}{status_note}: {detail}",
        hint=hint,
        retryable=retryable,
        status_code=status_code,
        phase=phase,
    )
