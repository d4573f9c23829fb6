"""Opaque session tokens bound to identities.

Tokens are ``secrets.token_urlsafe`` strings (32 random bytes from the OS
CSPRNG), so collisions are not handled explicitly. There is no time-based
expiry: a token lives until it is revoked or rotated away.

Each login issues a pair. The access token authenticates bearer requests;
the refresh token is only accepted by :meth:`SessionRegistry.rotate`.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from enum import Enum
from threading import Lock
from uuid import uuid4

from .identities import Identity

logger = logging.getLogger(__name__)

TOKEN_BYTES = 32


class TokenKind(str, Enum):
    ACCESS = "access"
    REFRESH = "refresh"


@dataclass(frozen=True)
class SessionGrant:
    """What a token resolves to."""

    identity: Identity
    kind: TokenKind
    session_id: str


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str
    identity: Identity


class SessionRegistry:
    """Sole owner of the token → identity mapping."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._grants: dict[str, SessionGrant] = {}
        self._pairs: dict[str, tuple[str, str]] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._grants)

    def _issue_locked(self, identity: Identity) -> TokenPair:
        session_id = uuid4().hex
        access = f"token-{secrets.token_urlsafe(TOKEN_BYTES)}"
        refresh = f"ref-token-{secrets.token_urlsafe(TOKEN_BYTES)}"
        self._grants[access] = SessionGrant(identity, TokenKind.ACCESS, session_id)
        self._grants[refresh] = SessionGrant(identity, TokenKind.REFRESH, session_id)
        self._pairs[session_id] = (access, refresh)
        return TokenPair(access_token=access, refresh_token=refresh, identity=identity)

    def issue(self, identity: Identity) -> TokenPair:
        with self._lock:
            pair = self._issue_locked(identity)
        logger.info("Issued session tokens for %s", identity.email)
        return pair

    def resolve(self, token: str | None) -> SessionGrant | None:
        if not token:
            return None
        with self._lock:
            return self._grants.get(token)

    def rotate(self, refresh_token: str | None) -> TokenPair | None:
        """Swap a refresh token's whole pair for a fresh one.

        Returns ``None`` when the token is unknown or is not a refresh token.
        """

        if not refresh_token:
            return None
        with self._lock:
            grant = self._grants.get(refresh_token)
            if grant is None or grant.kind is not TokenKind.REFRESH:
                return None
            for token in self._pairs.pop(grant.session_id, (refresh_token,)):
                self._grants.pop(token, None)
            pair = self._issue_locked(grant.identity)
        logger.info("Rotated session tokens for %s", grant.identity.email)
        return pair

    def revoke(self, token: str | None) -> None:
        """Forget ``token``; unknown tokens are ignored."""

        if not token:
            return
        with self._lock:
            grant = self._grants.pop(token, None)
        if grant is not None:
            logger.info("Revoked %s token for %s", grant.kind.value, grant.identity.email)
