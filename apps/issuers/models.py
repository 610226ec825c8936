"""
Issuer model.

An issuer is an entity that issues financial instruments. The only attribute
clients manage is its name; identifiers and timestamps belong to the store.
"""

from __future__ import annotations

from django.db import models
from django.utils.translation import gettext_lazy as _

from libs.models import TimeStampedModel


class Issuer(TimeStampedModel):
    """
    Issuer record.

    Attributes:
        id (int): Primary key assigned by the database on creation.
        name (str): Full name of the issuer.
        created_at (datetime): When the record was created.
        updated_at (datetime): When the record was last updated.

    Example:
        >>> issuer = Issuer.objects.create(name="Acme Bank")
        >>> print(issuer.name)
        Acme Bank
    """

    name = models.CharField(_("Name"), max_length=255)

    class Meta:
        verbose_name = _("Issuer")
        verbose_name_plural = _("Issuers")
        ordering = ["name", "id"]
        indexes = [
            models.Index(fields=["name"], name="issuers_name_idx"),
        ]

    def __str__(self) -> str:
        return self.name
