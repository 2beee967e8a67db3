"""
Session token value type.

A session token is the only credential the service knows about: it is minted at
registration, handed to the client in a cookie, and every meal query is scoped
by it. Repositories accept a ``SessionToken`` rather than a bare string so an
unscoped call cannot be written by accident.
"""

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class SessionToken:
    """Opaque, non-empty session credential"""

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Session token must be a non-empty string")

    @classmethod
    def issue(cls) -> "SessionToken":
        """Mint a new globally unique token"""
        return cls(str(uuid.uuid4()))

    @property
    def short(self) -> str:
        """Prefix safe to write to logs"""
        return self.value[:8]

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"SessionToken({self.short}...)"
