from enum import Enum, unique

URL = str
Headers = dict[str, str]
Body = bytes


@unique
class Method(Enum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"
    PATCH = "PATCH"
