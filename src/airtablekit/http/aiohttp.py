from dataclasses import dataclass

from aiohttp import ClientError, ClientSession

from .types import Request, RequestFailed, Response


@dataclass(frozen=True)
class AIOHTTP:
    session: ClientSession

    async def __call__(self, request: Request) -> Response:
        try:
            async with self.session.request(
                request.method.value,
                request.url,
                headers=request.headers,
                data=request.body,
                # bytes bodies would otherwise be sent as application/octet-stream
                skip_auto_headers=("Content-Type",),
            ) as response:
                return Response(response.status, await response.read())
        except ClientError as exc:
            raise RequestFailed(exc)
