"""Business logic services for the account portal.

This package contains service modules that implement business logic,
separate from API endpoints and request schemas.
"""

from .accounts import AccountService

__all__ = ["AccountService"]
