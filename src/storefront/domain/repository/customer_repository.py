"""Abstract repositories for the customer directory and address book."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.customer import Customer, DeliveryAddress


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_id(self, customer_id: str) -> Customer | None:
        """Return a customer by id, or None."""

    @abstractmethod
    def get_by_email(self, email: str) -> Customer | None:
        """Return the customer registered under *email*, or None."""

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every customer."""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """Persist a new or updated customer."""


class AddressRepository(ABC):

    @abstractmethod
    def get_by_id(self, address_id: str) -> DeliveryAddress | None:
        """Return a delivery address by id, or None."""

    @abstractmethod
    def list_by_customer(self, customer_id: str) -> list[DeliveryAddress]:
        """Return the delivery addresses a customer owns."""

    @abstractmethod
    def list_all(self) -> list[DeliveryAddress]:
        """Return every delivery address."""

    @abstractmethod
    def save(self, address: DeliveryAddress) -> None:
        """Persist a new or updated delivery address."""
