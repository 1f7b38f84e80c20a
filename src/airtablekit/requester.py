import asyncio
import logging
import re
from dataclasses import dataclass
from urllib.parse import urlsplit

from .errors import FailedRequest, InvalidURLString
from .http.types import HttpImplementation, Request, Response
from .models import HTTPResponse
from .types import URL, Body, Headers, Method

logger = logging.getLogger("airtablekit")

# characters RFC 3986 never allows unencoded in a URI (whitespace and controls
# included) or a "%" that does not start a percent-escape
ILLEGAL_URL_CHARACTERS = re.compile(r'[\s\x00-\x1f\x7f"<>\\^`{|}]|%(?![0-9A-Fa-f]{2})')


def parse_url(url: URL) -> URL:
    """
    Checks that ``url`` is a syntactically valid absolute URL and returns it
    unchanged, raising ``InvalidURLString`` otherwise.
    """
    if not url or ILLEGAL_URL_CHARACTERS.search(url):
        raise InvalidURLString(url)
    try:
        parts = urlsplit(url)
        # accessing port validates it
        parts.port
    except ValueError:
        raise InvalidURLString(url) from None
    if not parts.scheme or not parts.netloc or not parts.hostname:
        raise InvalidURLString(url)
    return url


@dataclass(frozen=True)
class Requester:
    """
    Sends requests to the Airtable API.

    The CRUD helpers of a base build the URL, headers and JSON body and hand
    them to ``send_request``, which performs exactly one call through the
    ``http`` implementation and classifies the status code.
    """

    http: HttpImplementation

    async def send_request(
        self,
        url: URL,
        method: Method | str,
        headers: Headers,
        body: Body | None = None,
    ) -> tuple[bytes, HTTPResponse]:
        """
        Sends a single request and returns the raw response body together
        with its ``HTTPResponse`` classification.

        Error statuses (4xx, 5xx) are returned, not raised: check the
        ``HTTPResponse`` before treating the body as data.

        :param url: Airtable API URL, including base and table.
        :param method: HTTP method to use.
        :param headers: Header mapping, sent as is. Callers supply their own
            ``Authorization`` and ``Content-Type`` headers.
        :param body: Already serialized payload, sent byte for byte.
        :raises InvalidURLString: ``url`` is not a valid absolute URL. No
            request is made.
        :raises FailedRequest: The request did not complete or did not
            produce an HTTP response.
        """
        url = parse_url(url)
        request = Request(
            method=Method(method),
            url=url,
            headers=dict(headers),
            body=body,
        )
        logger.debug("sending %s %s", request.method.value, request.url)
        try:
            response = await self.http(request)
        except (Exception, asyncio.CancelledError):
            raise FailedRequest() from None
        if not isinstance(response, Response):
            raise FailedRequest()
        outcome = HTTPResponse.from_status(response.status)
        logger.debug(
            "%s %s answered %d (%s)",
            request.method.value,
            request.url,
            response.status,
            outcome.name,
        )
        return response.body, outcome
