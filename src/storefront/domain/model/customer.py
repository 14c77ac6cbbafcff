"""Customer and delivery address records.

Both are owned by the customer directory. Orders reference them by id
and never embed them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError

_POSTAL_CODE_RE = re.compile(r"^\d{8}$")
_STATE_RE = re.compile(r"^[A-Z]{2}$")


@dataclass
class Customer:
    id: str
    email: str
    full_name: str

    @staticmethod
    def register(customer_id: str, email: str, full_name: str) -> Customer:
        if not email or "@" not in email:
            raise ValidationError(f"Invalid email: {email!r}")
        if not full_name or not full_name.strip():
            raise ValidationError("Customer name is required")
        return Customer(
            id=customer_id,
            email=email.strip().lower(),
            full_name=full_name.strip(),
        )


@dataclass
class DeliveryAddress:
    """A shippable address belonging to exactly one customer."""

    id: str
    customer_id: str
    postal_code: str
    street: str
    number: str
    district: str
    city: str
    state: str
    complement: str = ""
    is_default: bool = False

    def __post_init__(self) -> None:
        if not _POSTAL_CODE_RE.match(self.postal_code or ""):
            raise ValidationError("Postal code must contain exactly 8 digits")
        if not _STATE_RE.match(self.state or ""):
            raise ValidationError("State must be 2 uppercase letters")
        for label, value in (
            ("Street", self.street),
            ("Number", self.number),
            ("District", self.district),
            ("City", self.city),
        ):
            if not value or not value.strip():
                raise ValidationError(f"{label} is required")

    def belongs_to(self, customer_id: str) -> bool:
        return self.customer_id == customer_id
