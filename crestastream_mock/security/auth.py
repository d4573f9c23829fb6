"""Bearer-token dependencies for FastAPI routers."""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Depends, HTTPException, Request, status

from ..services import ServiceContainer, get_services
from .sessions import SessionGrant, TokenKind


def unauthorized(message: str) -> HTTPException:
    """401 carrying the ``{success: false, error}`` envelope."""

    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={"success": False, "error": message},
    )


def extract_bearer_token(request: Request) -> str | None:
    """Return the credentials of a ``Bearer`` Authorization header, if any."""

    authorization = request.headers.get("Authorization")
    if not authorization:
        return None
    scheme, _, credentials = authorization.partition(" ")
    credentials = credentials.strip()
    if not credentials or scheme.lower() != "bearer":
        return None
    return credentials


@dataclass(frozen=True)
class AuthenticatedSession:
    token: str
    grant: SessionGrant


def get_current_session(
    request: Request,
    services: ServiceContainer = Depends(get_services),
) -> AuthenticatedSession:
    """Resolve the bearer access token or fail with 401."""

    token = extract_bearer_token(request)
    if token is None:
        raise unauthorized("Missing bearer token")
    grant = services.sessions.resolve(token)
    if grant is None:
        raise unauthorized("Invalid token")
    if grant.kind is not TokenKind.ACCESS:
        raise unauthorized("Access token required")
    return AuthenticatedSession(token=token, grant=grant)
