"""
Exceptions raised by the issuer store and controller.
"""

from __future__ import annotations


class IssuerError(Exception):
    """Base class for issuer errors."""


class IssuerNotFound(IssuerError):
    """No issuer exists with the requested identifier."""

    def __init__(self, issuer_id):
        self.issuer_id = issuer_id
        super().__init__(f"Issuer with id={issuer_id!r} not found")


class IssuerValidationError(IssuerError):
    """
    The store refused to persist an issuer.

    Attributes:
        errors: Mapping of field name to a list of messages.
        issuer: The rejected, unpersisted issuer (when available).
    """

    def __init__(self, errors: dict[str, list[str]], issuer=None):
        self.errors = errors
        self.issuer = issuer
        summary = "; ".join(
            f"{field}: {' '.join(messages)}" for field, messages in errors.items()
        )
        super().__init__(f"Invalid issuer ({summary})")
