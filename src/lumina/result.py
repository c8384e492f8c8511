"""Result envelope returned by every client call."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from lumina.constants import TRANSPORT_FAILURE_STATUS
from lumina.errors import APIError, get_http_error_hint

T = TypeVar("T")


@dataclass(frozen=True)
class ResultEnvelope(Generic[T]):
    """Status code plus optional typed body.

    ``status_code`` is the real HTTP status whenever a response arrived, 2xx
    or not. ``-1`` means no usable response: the request never completed or
    its body could not be decoded. In that case ``body`` is ``None`` and
    ``error`` says which phase failed.

    Envelopes compare by value but are not hashable: the body holds lists.
    """

    status_code: int
    body: T | None = None
    #: Set only for ``-1`` envelopes. Excluded from equality.
    error: APIError | None = field(default=None, compare=False)

    __hash__ = None  # type: ignore[assignment]

    @property
    def ok(self) -> bool:
        """True for a 2xx status."""
        return 200 <= self.status_code < 300

    @property
    def failed(self) -> bool:
        """True when no response could be used (``status_code == -1``)."""
        return self.status_code == TRANSPORT_FAILURE_STATUS

    @property
    def hint(self) -> str | None:
        """Actionable hint for a failed or non-2xx call, if one is known."""
        if self.error is not None:
            return self.error.hint
        return get_http_error_hint(self.status_code)

    @classmethod
    def failure(cls, error: APIError | None = None) -> ResultEnvelope[T]:
        return cls(TRANSPORT_FAILURE_STATUS, None, error)
