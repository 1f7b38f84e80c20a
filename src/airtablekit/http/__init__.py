from .types import HttpImplementation, Request, RequestFailed, Response

__all__ = ["HttpImplementation", "Request", "RequestFailed", "Response"]
