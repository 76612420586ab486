from .exceptions import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    InvalidArgumentException,
)

__all__ = [
    "DomainException",
    "InvalidArgumentException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
]
