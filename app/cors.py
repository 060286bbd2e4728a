from __future__ import annotations

from typing import Awaitable, Callable, Dict

from fastapi import FastAPI, Request, Response


CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


def install_cors(app: FastAPI) -> None:
    """Answer every pre-flight directly and stamp the CORS headers on all responses.

    Starlette's CORSMiddleware only decorates requests that carry an Origin
    header, so browser-less callers would get no headers at all.
    """

    @app.middleware("http")
    async def permissive_cors(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response
