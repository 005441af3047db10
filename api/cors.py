"""
api/cors.py -- Cross-origin policy middleware.

Starlette's CORSMiddleware differs from the policy this service needs in a few
places, so this subclass overrides them:

  1. Any OPTIONS request with an Origin header is a preflight, even without
     Access-Control-Request-Method. Starlette would forward such a request to
     the router, which answers 405.
  2. With allow_origins=["*"] every response (preflight or simple) carries
     Access-Control-Allow-Origin: "*", even when credentials are allowed.
     Starlette echoes the requesting origin in that case.
  3. Preflights only check the origin. The requested method and headers are
     not validated; the browser compares them against the advertised lists.

Successful preflights return 204 with no body; a disallowed origin gets 403.
Simple requests from an explicit origin list go through Starlette unchanged.
"""

from __future__ import annotations

import typing

from starlette.datastructures import Headers, MutableHeaders
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import PlainTextResponse, Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send


class PreflightCORSMiddleware(CORSMiddleware):
    def __init__(
        self,
        app: ASGIApp,
        allow_origins: typing.Sequence[str] = (),
        allow_methods: typing.Sequence[str] = ("GET",),
        allow_headers: typing.Sequence[str] = (),
        allow_credentials: bool = False,
        expose_headers: typing.Sequence[str] = (),
        max_age: int = 600,
    ) -> None:
        super().__init__(
            app,
            allow_origins=allow_origins,
            allow_methods=allow_methods,
            allow_headers=allow_headers,
            allow_credentials=allow_credentials,
            expose_headers=expose_headers,
            max_age=max_age,
        )
        self.wildcard = "*" in allow_origins
        # Headers added to every non-preflight response when all origins are allowed.
        self.wildcard_headers = {"Access-Control-Allow-Origin": "*"}
        if allow_credentials:
            self.wildcard_headers["Access-Control-Allow-Credentials"] = "true"
        if expose_headers:
            self.wildcard_headers["Access-Control-Expose-Headers"] = ", ".join(expose_headers)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = Headers(scope=scope)
        if "origin" not in headers:
            await self.app(scope, receive, send)
            return

        if scope["method"] == "OPTIONS":
            response = self.preflight_response(request_headers=headers)
            await response(scope, receive, send)
            return

        if self.wildcard:
            await self.app(scope, receive, self._wildcard_send(send))
            return

        await super().__call__(scope, receive, send)

    def _wildcard_send(self, send: Send) -> Send:
        async def send_with_cors(message: Message) -> None:
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                MutableHeaders(scope=message).update(self.wildcard_headers)
            await send(message)

        return send_with_cors

    def preflight_response(self, request_headers: Headers) -> Response:
        requested_origin = request_headers["origin"]
        requested_headers = request_headers.get("access-control-request-headers")

        headers = dict(self.preflight_headers)

        if self.wildcard:
            headers["Access-Control-Allow-Origin"] = "*"
            headers.pop("Vary", None)
        elif self.is_allowed_origin(origin=requested_origin):
            headers["Access-Control-Allow-Origin"] = requested_origin
        else:
            return PlainTextResponse("Disallowed CORS origin", status_code=403, headers=headers)

        if self.allow_all_headers and requested_headers is not None:
            headers["Access-Control-Allow-Headers"] = requested_headers

        return Response(status_code=204, headers=headers)
