"""Identity lookup, session tokens and bearer authentication."""

from .identities import Identity, IdentityStore
from .sessions import SessionGrant, SessionRegistry, TokenKind, TokenPair

__all__ = [
    "Identity",
    "IdentityStore",
    "SessionGrant",
    "SessionRegistry",
    "TokenKind",
    "TokenPair",
]
