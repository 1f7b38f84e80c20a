from __future__ import annotations

from enum import Enum, unique


@unique
class HTTPResponse(Enum):
    """
    Classification of the status code Airtable answered with.

    Lookup is total: codes Airtable does not document map to
    ``unknown_response`` instead of raising ``ValueError``.
    """

    ok = 200
    bad_request = 400
    unauthorized = 401
    payment_required = 402
    forbidden = 403
    not_found = 404
    request_entity_too_large = 413
    invalid_request = 422
    too_many_requests = 429
    internal_server_error = 500
    bad_gateway = 502
    service_unavailable = 503
    # not a real status code, never sent over the wire
    unknown_response = 0

    @classmethod
    def _missing_(cls, value: object) -> HTTPResponse:
        return cls.unknown_response

    @classmethod
    def from_status(cls, status: int) -> HTTPResponse:
        return cls(status)

    @property
    def code(self) -> int | None:
        if self is HTTPResponse.unknown_response:
            return None
        return self.value

    @property
    def message(self) -> str:
        return MESSAGES[self]

    @property
    def is_success(self) -> bool:
        return self is HTTPResponse.ok


MESSAGES: dict[HTTPResponse, str] = {
    HTTPResponse.ok: "Request completed successfully.",
    HTTPResponse.bad_request: "The request encoding is invalid; the request can't be parsed as a valid JSON.",
    HTTPResponse.unauthorized: "Accessing a protected resource without authorization or with invalid credentials.",
    HTTPResponse.payment_required: "The account associated with the API key making requests hits a quota that can be increased by upgrading the Airtable account plan.",
    HTTPResponse.forbidden: "Accessing a protected resource with API credentials that don't have access to that resource.",
    HTTPResponse.not_found: "Route or resource is not found.",
    HTTPResponse.request_entity_too_large: "The request exceeded the maximum allowed payload size.",
    HTTPResponse.invalid_request: "The request data is invalid.",
    HTTPResponse.too_many_requests: "Rate limit exceeded. Please try again later.",
    HTTPResponse.internal_server_error: "The server encountered an unexpected condition.",
    HTTPResponse.bad_gateway: "Airtable's servers are restarting or an unexpected outage is in progress.",
    HTTPResponse.service_unavailable: "The server could not process your request in time. The server could be temporarily unavailable, or it could have timed out processing your request.",
    HTTPResponse.unknown_response: "Unknown response.",
}
