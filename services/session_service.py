"""
Session identity resolution.

A session token is an opaque string: it is only ever compared for equality,
never parsed. Persisting a newly minted token (the cookie) is the HTTP
layer's job.
"""

from dataclasses import dataclass
from typing import Optional
import uuid


@dataclass(frozen=True)
class SessionIdentity:
    token: str
    is_new: bool = False


class SessionService:
    @staticmethod
    def new_token() -> str:
        return str(uuid.uuid4())

    @staticmethod
    def resolve(presented_token: Optional[str]) -> SessionIdentity:
        """
        Return the presented token unchanged, or mint a fresh one.

        Args:
            presented_token: token read from the request, if any

        Returns:
            SessionIdentity with is_new=True only when a token was minted
        """
        if presented_token:
            return SessionIdentity(token=presented_token, is_new=False)
        return SessionIdentity(token=SessionService.new_token(), is_new=True)
