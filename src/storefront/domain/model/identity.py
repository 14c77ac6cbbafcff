"""The authenticated caller, as handed over by the authentication layer.

The domain never parses credentials; it only sees who is calling and
which roles they hold.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Role(Enum):
    ADMINISTRATOR = "ADMINISTRATOR"
    STOCKIST = "STOCKIST"
    CUSTOMER = "CUSTOMER"


# Roles allowed to see every order and to change order status.
BACK_OFFICE_ROLES = (Role.ADMINISTRATOR, Role.STOCKIST)


@dataclass(frozen=True)
class Caller:
    email: str
    roles: frozenset[Role] = field(default_factory=frozenset)

    def has_any_role(self, *roles: Role) -> bool:
        return any(role in self.roles for role in roles)

    @staticmethod
    def customer(email: str) -> Caller:
        return Caller(email=email.strip().lower(), roles=frozenset({Role.CUSTOMER}))
