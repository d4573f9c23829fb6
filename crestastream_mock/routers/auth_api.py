"""Login, token rotation and logout."""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Request

from ..conversations.schemas import CamelModel
from ..security.auth import (
    AuthenticatedSession,
    extract_bearer_token,
    get_current_session,
    unauthorized,
)
from ..security.sessions import TokenPair
from ..services import ServicesDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

CurrentSession = Annotated[AuthenticatedSession, Depends(get_current_session)]


class LoginRequest(CamelModel):
    # Loosely typed so wrong-typed credentials are a failed login, not a 422.
    email: Any = None
    password: Any = None


class RefreshRequest(CamelModel):
    refresh_token: Any = None


def _parse_body(model: type[CamelModel], payload: Any) -> Any:
    if isinstance(payload, dict):
        return model.model_validate(payload)
    return model()


def _token_response(pair: TokenPair) -> dict[str, Any]:
    return {
        "success": True,
        "token": pair.access_token,
        "refreshToken": pair.refresh_token,
        "user": pair.identity.public_profile(),
    }


@router.post("/login")
def login(
    services: ServicesDep,
    payload: Annotated[Any, Body()] = None,
) -> dict[str, Any]:
    """Exchange static credentials for an access/refresh token pair."""

    credentials = _parse_body(LoginRequest, payload)
    email = credentials.email
    identity = services.identities.authenticate(email, credentials.password)
    if identity is None:
        logger.warning("Login failed for %s", email)
        raise unauthorized("Invalid credentials")
    logger.info("Login successful for %s", identity.email)
    return _token_response(services.sessions.issue(identity))


@router.post("/refresh")
def refresh(
    request: Request,
    services: ServicesDep,
    payload: Annotated[Any, Body()] = None,
) -> dict[str, Any]:
    """Rotate a refresh token taken from the body or the bearer header."""

    token = _parse_body(RefreshRequest, payload).refresh_token
    if not isinstance(token, str) or not token:
        token = extract_bearer_token(request)
    pair = services.sessions.rotate(token)
    if pair is None:
        raise unauthorized("Invalid token")
    return _token_response(pair)


@router.post("/logout")
def logout(session: CurrentSession, services: ServicesDep) -> dict[str, Any]:
    services.sessions.revoke(session.token)
    logger.info("Logout for %s", session.grant.identity.email)
    return {"success": True}


@router.get("/me")
def me(session: CurrentSession) -> dict[str, Any]:
    """Return the profile bound to the bearer access token."""

    return {"success": True, "user": session.grant.identity.public_profile()}
