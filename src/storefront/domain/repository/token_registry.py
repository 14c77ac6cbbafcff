"""Abstract mapping from bearer tokens to authenticated callers.

Issuing and verifying real credentials belongs to the authentication
service; the storefront only needs to know who a presented token
stands for.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.identity import Caller


class TokenRegistry(ABC):

    @abstractmethod
    def resolve(self, token: str) -> Caller | None:
        """Return the caller a token belongs to, or None if unknown."""

    @abstractmethod
    def issue(self, caller: Caller) -> str:
        """Register a new token for *caller* and return it."""
