from .errors import FailedRequest, InvalidURLString, RequestError
from .models import HTTPResponse
from .requester import Requester
from .types import Method

__all__ = [
    "FailedRequest",
    "HTTPResponse",
    "InvalidURLString",
    "Method",
    "RequestError",
    "Requester",
]
