"""Static credential table used by the login endpoint."""

from __future__ import annotations

import hmac
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Identity:
    email: str
    password: str
    role: str
    display_name: str

    def public_profile(self) -> dict[str, Any]:
        """Profile returned to clients; never includes the password."""

        return {"email": self.email, "name": self.display_name, "role": self.role}


class IdentityStore:
    """Immutable email → identity lookup seeded at start-up."""

    def __init__(self, identities: Iterable[Identity] = ()) -> None:
        self._by_email: dict[str, Identity] = {}
        for identity in identities:
            if identity.email in self._by_email:
                raise ValueError(f"Duplicate identity email: {identity.email}")
            self._by_email[identity.email] = identity

    def __len__(self) -> int:
        return len(self._by_email)

    def get(self, email: str) -> Identity | None:
        return self._by_email.get(email)

    def authenticate(self, email: object, password: object) -> Identity | None:
        """Return the identity whose plaintext password matches verbatim.

        Anything other than a non-empty email string and a password string is
        rejected like a wrong password.
        """

        if not isinstance(email, str) or not email or not isinstance(password, str):
            return None
        identity = self._by_email.get(email)
        if identity is None:
            return None
        if not hmac.compare_digest(
            identity.password.encode("utf-8"), password.encode("utf-8")
        ):
            return None
        return identity
