"""Application service: Register Customer use case."""

from __future__ import annotations

from storefront.application.add_product import next_sequential_id
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.customer import Customer
from storefront.domain.repository.customer_repository import CustomerRepository


class RegisterCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, email: str, full_name: str) -> Customer:
        if email and self._customer_repo.get_by_email(email.strip().lower()) is not None:
            raise ValidationError(f"Email '{email}' is already registered")

        customer = Customer.register(
            customer_id=next_sequential_id([c.id for c in self._customer_repo.list_all()]),
            email=email,
            full_name=full_name,
        )
        self._customer_repo.save(customer)
        return customer
