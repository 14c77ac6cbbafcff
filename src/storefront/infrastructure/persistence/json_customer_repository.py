"""JSON-file-backed customer directory and address book."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path

from storefront.domain.model.customer import Customer, DeliveryAddress
from storefront.domain.repository.customer_repository import (
    AddressRepository,
    CustomerRepository,
)
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    def get_by_id(self, customer_id: str) -> Customer | None:
        return self._load().get(customer_id)

    def get_by_email(self, email: str) -> Customer | None:
        wanted = email.strip().lower()
        for customer in self._load().values():
            if customer.email == wanted:
                return customer
        return None

    def list_all(self) -> list[Customer]:
        return list(self._load().values())

    def save(self, customer: Customer) -> None:
        with self._file.lock:
            customers = self._load()
            customers[customer.id] = customer
            self._file.write([asdict(c) for c in customers.values()])

    def _load(self) -> dict[str, Customer]:
        return {raw["id"]: Customer(**raw) for raw in self._file.read()}


class JsonAddressRepository(AddressRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    def get_by_id(self, address_id: str) -> DeliveryAddress | None:
        return self._load().get(address_id)

    def list_by_customer(self, customer_id: str) -> list[DeliveryAddress]:
        return [a for a in self._load().values() if a.customer_id == customer_id]

    def list_all(self) -> list[DeliveryAddress]:
        return list(self._load().values())

    def save(self, address: DeliveryAddress) -> None:
        with self._file.lock:
            addresses = self._load()
            addresses[address.id] = address
            self._file.write([asdict(a) for a in addresses.values()])

    def _load(self) -> dict[str, DeliveryAddress]:
        return {raw["id"]: DeliveryAddress(**raw) for raw in self._file.read()}
