"""
Base model mixins shared across apps.

Provides TimeStampedModel, an abstract base that:
- Adds created_at / updated_at columns maintained by the database layer
- Keeps those columns out of client-writable input
"""

from __future__ import annotations

from django.db import models
from django.utils.translation import gettext_lazy as _


class TimeStampedModel(models.Model):
    """
    Abstract base model for records that track their own lifecycle timestamps.

    Usage:
        class Issuer(TimeStampedModel):
            name = models.CharField(max_length=255)
            # created_at / updated_at are added automatically

    Both timestamp fields are non-editable, so ModelForms and the admin never
    expose them as inputs.
    """

    created_at = models.DateTimeField(_("Created At"), auto_now_add=True)
    updated_at = models.DateTimeField(_("Updated At"), auto_now=True)

    class Meta:
        abstract = True

    @classmethod
    def writable_field_names(cls) -> list[str]:
        """Return the names of concrete fields that clients may set."""
        return [
            field.name
            for field in cls._meta.concrete_fields
            if field.editable and not field.primary_key
        ]
