"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and API layers can catch them uniformly and translate them into
user-facing messages or HTTP status codes.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidStatusTransitionError(ValidationError):
    """An order status change is not allowed by the lifecycle."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CustomerNotFoundError(EntityNotFoundError):
    pass


class AddressNotFoundError(EntityNotFoundError):
    pass


class ProductNotFoundError(EntityNotFoundError):
    pass


class OrderNotFoundError(EntityNotFoundError):
    pass


class AccessDeniedError(DomainException):
    """The caller may not see or change the requested resource."""


class AllocationError(DomainException):
    """The order-number source could not hand out a new number."""
