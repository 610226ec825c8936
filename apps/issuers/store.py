"""
Persistence layer for issuers.

The controller never touches the ORM directly: it talks to an object that
satisfies IssuerStore. DjangoIssuerStore is the default implementation;
settings.ISSUER_STORE selects the class used by the views.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils.module_loading import import_string

from apps.issuers.exceptions import IssuerNotFound, IssuerValidationError
from apps.issuers.models import Issuer


class IssuerStore(Protocol):
    """Operations the issuer controller needs from a persistence backend."""

    def find_all(self) -> list[Issuer]: ...

    def find_by_id(self, issuer_id: Any) -> Issuer: ...

    def build(self, **fields: Any) -> Issuer: ...

    def create(self, fields: Mapping[str, Any]) -> Issuer: ...

    def update(self, issuer: Issuer, fields: Mapping[str, Any]) -> bool: ...

    def delete(self, issuer: Issuer) -> None: ...


class DjangoIssuerStore:
    """
    IssuerStore backed by the Django ORM.

    Validation is the model's own field validation (full_clean); writes run
    inside a transaction. Only fields the model marks as editable are ever
    assigned, so ids and timestamps stay under the store's control.
    """

    model = Issuer

    def find_all(self) -> list[Issuer]:
        return list(self.model.objects.all())

    def find_by_id(self, issuer_id: Any) -> Issuer:
        """
        Fetch a single issuer.

        Raises:
            IssuerNotFound: If no issuer has this id, or the id is not a valid
                primary key value.
        """
        pk = self._coerce_id(issuer_id)
        try:
            return self.model.objects.get(pk=pk)
        except self.model.DoesNotExist:
            raise IssuerNotFound(issuer_id)

    def build(self, **fields: Any) -> Issuer:
        """Return an unsaved issuer populated with the writable fields given."""
        return self.model(**self._writable(fields))

    def create(self, fields: Mapping[str, Any]) -> Issuer:
        """
        Validate and insert a new issuer.

        Raises:
            IssuerValidationError: If model validation fails. The rejected
                instance is attached to the exception.
        """
        issuer = self.build(**fields)
        self._validate(issuer)
        with transaction.atomic():
            issuer.save()
        return issuer

    def update(self, issuer: Issuer, fields: Mapping[str, Any]) -> bool:
        """
        Apply writable fields to an existing issuer and save it.

        Returns False without writing if validation fails. The issuer then
        keeps the rejected values and exposes the messages on issuer.errors.
        """
        changes = self._writable(fields)
        for name, value in changes.items():
            setattr(issuer, name, value)

        try:
            self._validate(issuer)
        except IssuerValidationError as exc:
            issuer.errors = exc.errors
            return False

        issuer.errors = {}
        with transaction.atomic():
            issuer.save(update_fields=[*changes, "updated_at"])
        return True

    def delete(self, issuer: Issuer) -> None:
        with transaction.atomic():
            issuer.delete()

    def _coerce_id(self, issuer_id: Any) -> int:
        # bool is an int subclass and floats would be truncated by the ORM
        if isinstance(issuer_id, int) and not isinstance(issuer_id, bool):
            return issuer_id
        if isinstance(issuer_id, str) and issuer_id.isascii() and issuer_id.isdigit():
            return int(issuer_id)
        raise IssuerNotFound(issuer_id)

    def _writable(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        allowed = self.model.writable_field_names()
        return {name: value for name, value in fields.items() if name in allowed}

    def _validate(self, issuer: Issuer) -> None:
        try:
            issuer.full_clean()
        except ValidationError as exc:
            raise IssuerValidationError(exc.message_dict, issuer=issuer)


def get_issuer_store() -> IssuerStore:
    """Instantiate the store class named by settings.ISSUER_STORE."""
    store_class = import_string(settings.ISSUER_STORE)
    return store_class()
