"""JSON-file-backed implementation of TokenRegistry."""

from __future__ import annotations

import secrets
from pathlib import Path

from storefront.domain.model.identity import Caller, Role
from storefront.domain.repository.token_registry import TokenRegistry
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonTokenRegistry(TokenRegistry):
    """Stores ``{token: {"email": ..., "roles": [...]}}``."""

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty={})

    def resolve(self, token: str) -> Caller | None:
        raw = self._file.read().get(token)
        if raw is None:
            return None
        return Caller(
            email=raw["email"],
            roles=frozenset(Role(r) for r in raw["roles"]),
        )

    def issue(self, caller: Caller) -> str:
        token = secrets.token_urlsafe(32)
        with self._file.lock:
            tokens = self._file.read()
            tokens[token] = {
                "email": caller.email,
                "roles": sorted(role.value for role in caller.roles),
            }
            self._file.write(tokens)
        return token
