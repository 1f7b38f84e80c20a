from dataclasses import dataclass

import httpx

from .types import Request, RequestFailed, Response


@dataclass(frozen=True)
class HTTPX:
    client: httpx.AsyncClient

    async def __call__(self, request: Request) -> Response:
        try:
            response = await self.client.request(
                method=request.method.value,
                url=request.url,
                headers=request.headers,
                content=request.body,
            )
            return Response(response.status_code, await response.aread())
        except httpx.HTTPError as exc:
            raise RequestFailed(exc)
