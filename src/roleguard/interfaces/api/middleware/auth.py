"""Auth middleware - extracts bearer credentials for the authorization guard."""

import falcon.asgi


class AuthMiddleware:
    """Sets req.context.credentials to the bearer token, or None.

    Tokens are not validated here; resources hand them to the authorization
    guard, which resolves the session only when an operation needs it.
    """

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract token from Authorization header."""
        auth = req.get_header("Authorization")
        if auth and auth.startswith("Bearer ") and auth[7:].strip():
            req.context.credentials = auth[7:].strip()
        else:
            req.context.credentials = None
