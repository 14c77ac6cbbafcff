"""Application services: the caller's delivery address book.

``ListDeliveryAddressesHandler`` backs the checkout page, which needs
at least one address to offer.
"""

from __future__ import annotations

from storefront.application.add_product import next_sequential_id
from storefront.application.customer_lookup import customer_for
from storefront.application.dto import AddressDTO, to_address_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.customer import DeliveryAddress
from storefront.domain.model.identity import Caller, Role
from storefront.domain.repository.customer_repository import (
    AddressRepository,
    CustomerRepository,
)
from storefront.domain.service.authorization import require_role


class AddDeliveryAddressHandler:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        address_repo: AddressRepository,
    ) -> None:
        self._customer_repo = customer_repo
        self._address_repo = address_repo

    def handle(
        self,
        caller: Caller,
        postal_code: str,
        street: str,
        number: str,
        district: str,
        city: str,
        state: str,
        complement: str = "",
    ) -> AddressDTO:
        """Add an address; a customer's first address becomes the default."""
        require_role(caller, Role.CUSTOMER)
        customer = customer_for(caller, self._customer_repo)

        owned = self._address_repo.list_by_customer(customer.id)
        address = DeliveryAddress(
            id=next_sequential_id([a.id for a in self._address_repo.list_all()]),
            customer_id=customer.id,
            postal_code=postal_code,
            street=street,
            number=number,
            district=district,
            city=city,
            state=state,
            complement=complement,
            is_default=not owned,
        )
        self._address_repo.save(address)
        return to_address_dto(address)


class ListDeliveryAddressesHandler:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        address_repo: AddressRepository,
    ) -> None:
        self._customer_repo = customer_repo
        self._address_repo = address_repo

    def handle(self, caller: Caller) -> list[AddressDTO]:
        require_role(caller, Role.CUSTOMER)
        customer = customer_for(caller, self._customer_repo)

        addresses = self._address_repo.list_by_customer(customer.id)
        if not addresses:
            raise ValidationError("A delivery address is required to check out")
        return [to_address_dto(a) for a in addresses]
