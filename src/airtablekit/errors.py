class RequestError(Exception):
    pass


class InvalidURLString(RequestError):
    """
    The URL text could not be parsed into a valid absolute URL. Raised
    before any network activity happens.
    """

    def __init__(self, url: str):
        super().__init__(url)
        self.url = url


class FailedRequest(RequestError):
    """
    The transport did not complete the call or did not produce an HTTP
    response. The underlying cause is intentionally not kept.
    """
