"""Resolve the authenticated caller to a customer record."""

from __future__ import annotations

from storefront.domain.exceptions import CustomerNotFoundError
from storefront.domain.model.customer import Customer
from storefront.domain.model.identity import Caller
from storefront.domain.repository.customer_repository import CustomerRepository


def customer_for(caller: Caller, customer_repo: CustomerRepository) -> Customer:
    customer = customer_repo.get_by_email(caller.email)
    if customer is None:
        raise CustomerNotFoundError(f"Customer not found: '{caller.email}'")
    return customer
