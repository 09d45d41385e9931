"""Domain validation errors."""


class CartDomainError(ValueError):
    """Base class for cart model contract violations."""


class InvalidProduct(CartDomainError):
    """Raised for a malformed product or a non-Product where one is required."""


class InvalidQuantity(CartDomainError):
    """Raised for a quantity that is not a positive integer."""
