"""
API dependencies for dependency injection
"""

from typing import Any, Callable, Coroutine, Generator, Optional
from fastapi import Request, Response
from fastapi.routing import APIRoute
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import UnauthorizedError
from domain.models import get_db_session
from domain.session import SessionToken


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def _cookie_token(request: Request) -> Optional[SessionToken]:
    raw = request.cookies.get(settings.session_cookie_name)
    if raw is None or not raw.strip():
        return None
    return SessionToken(raw)


def get_optional_session_token(request: Request) -> Optional[SessionToken]:
    """Session token from the cookie, or None when the client has none yet."""
    return _cookie_token(request)


def require_session_token(request: Request) -> SessionToken:
    """
    Authorization guard for meal routes.

    Only checks that a token is present. Whether it belongs to a registered
    user is not verified; an unknown token simply owns no meals.

    Raises:
        UnauthorizedError: If the session cookie is missing or blank
    """
    token = _cookie_token(request)
    if token is None:
        raise UnauthorizedError("Missing session credential", code="UNAUTHORIZED")
    return token


class SessionRequiredRoute(APIRoute):
    """
    Route class for session-scoped routers.

    Runs the session guard before FastAPI reads or parses the request body,
    so a request without a cookie is rejected as unauthorized even when its
    body is malformed. Handlers still receive the token through
    ``Depends(require_session_token)``.
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        route_handler = super().get_route_handler()

        async def guarded_route_handler(request: Request) -> Response:
            require_session_token(request)
            return await route_handler(request)

        return guarded_route_handler
