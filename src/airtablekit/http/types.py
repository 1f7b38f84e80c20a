from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from airtablekit.types import Method


@dataclass(frozen=True)
class Request:
    """
    One outbound call to the Airtable API. The URL has already been
    validated; headers (including ``Authorization``) and the serialized
    body are sent exactly as given.
    """

    method: Method
    url: str
    headers: dict[str, str]
    body: bytes | None


@dataclass(frozen=True)
class Response:
    status: int
    body: bytes


@dataclass
class RequestFailed(Exception):
    """
    Raised by an HTTP implementation when no HTTP response was received.
    ``Requester`` turns it into ``FailedRequest`` without keeping ``inner``.
    """

    inner: Exception


# Transport seam injected into ``Requester``; see ``http.httpx`` and
# ``http.aiohttp`` for the bundled implementations.
HttpImplementation = Callable[[Request], Awaitable[Response]]
