"""
Issuer resource controller.

This module provides the seven CRUD actions for issuers (list, new, create,
show, edit, update, destroy). Actions never build HTTP responses themselves:
they return a Render (template + context) or a Redirect (URL name + args),
and the view layer turns those into responses.

The persistence backend is passed in explicitly, so the controller can run
against any object that satisfies IssuerStore.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from apps.issuers.exceptions import IssuerValidationError
from apps.issuers.models import Issuer
from apps.issuers.store import IssuerStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IssuerParams:
    """
    Client-writable issuer input.

    Only ``name`` exists on this type, so any other submitted key is dropped
    when request data is mapped onto it.
    """

    name: str = ""

    @classmethod
    def from_data(cls, data: Mapping[str, Any], prefix: str = "issuer") -> IssuerParams:
        """
        Build params from submitted form or JSON data.

        Accepts either a flat ``name`` key or the nested ``issuer[name]`` form
        key. Every other key is ignored.
        """
        nested_key = f"{prefix}[name]"
        if nested_key in data:
            value = data.get(nested_key)
        else:
            value = data.get("name", "")
        return cls(name="" if value is None else str(value).strip())

    def as_fields(self) -> dict[str, Any]:
        return {"name": self.name}


@dataclass(frozen=True)
class Success:
    """The issuer was persisted."""

    issuer: Issuer


@dataclass(frozen=True)
class Failure:
    """The store rejected the input; ``issuer`` holds the submitted state."""

    issuer: Issuer
    errors: dict[str, list[str]] = field(default_factory=dict)


SaveResult = Union[Success, Failure]


@dataclass(frozen=True)
class Render:
    """Render ``template_name`` with ``context``."""

    template_name: str
    context: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Redirect:
    """Redirect to the URL named ``url_name``."""

    url_name: str
    args: tuple = ()
    message: str | None = None


ActionResult = Union[Render, Redirect]


class IssuerController:
    """
    CRUD actions for issuers.

    Each action is independent: the controller keeps no state between calls
    besides the store it was given.

    Raises:
        IssuerNotFound: From show, edit, update and destroy when the id does
            not resolve to an issuer.
    """

    INDEX_TEMPLATE = "issuers/index.html"
    NEW_TEMPLATE = "issuers/new.html"
    SHOW_TEMPLATE = "issuers/show.html"
    EDIT_TEMPLATE = "issuers/edit.html"

    def __init__(self, store: IssuerStore):
        self.store = store

    # Persist operations

    def create_issuer(self, params: IssuerParams) -> SaveResult:
        """Persist a new issuer from params."""
        try:
            issuer = self.store.create(params.as_fields())
        except IssuerValidationError as exc:
            logger.warning(f"Issuer create rejected: {exc.errors}")
            rejected = exc.issuer if exc.issuer is not None else self.store.build(
                **params.as_fields()
            )
            return Failure(issuer=rejected, errors=exc.errors)

        logger.info(f"Created issuer {issuer.pk} ({issuer.name!r})")
        return Success(issuer=issuer)

    def update_issuer(self, issuer_id: Any, params: IssuerParams) -> SaveResult:
        """Apply params to an existing issuer."""
        issuer = self.store.find_by_id(issuer_id)
        if not self.store.update(issuer, params.as_fields()):
            errors = getattr(issuer, "errors", {}) or {}
            logger.warning(f"Issuer {issuer.pk} update rejected: {errors}")
            return Failure(issuer=issuer, errors=errors)

        logger.info(f"Updated issuer {issuer.pk} ({issuer.name!r})")
        return Success(issuer=issuer)

    # Actions

    def list(self) -> Render:
        return Render(self.INDEX_TEMPLATE, {"issuers": self.store.find_all()})

    def new(self) -> Render:
        return Render(self.NEW_TEMPLATE, {"issuer": self.store.build(), "errors": {}})

    def create(self, params: IssuerParams) -> ActionResult:
        result = self.create_issuer(params)
        if isinstance(result, Success):
            return Redirect(
                "issuers:show",
                args=(result.issuer.pk,),
                message="Issuer was successfully created.",
            )
        return Render(
            self.NEW_TEMPLATE, {"issuer": result.issuer, "errors": result.errors}
        )

    def show(self, issuer_id: Any) -> Render:
        return Render(self.SHOW_TEMPLATE, {"issuer": self.store.find_by_id(issuer_id)})

    def edit(self, issuer_id: Any) -> Render:
        return Render(
            self.EDIT_TEMPLATE,
            {"issuer": self.store.find_by_id(issuer_id), "errors": {}},
        )

    def update(self, issuer_id: Any, params: IssuerParams) -> ActionResult:
        result = self.update_issuer(issuer_id, params)
        if isinstance(result, Success):
            return Redirect(
                "issuers:show",
                args=(result.issuer.pk,),
                message="Issuer was successfully updated.",
            )
        return Render(
            self.EDIT_TEMPLATE, {"issuer": result.issuer, "errors": result.errors}
        )

    def destroy(self, issuer_id: Any) -> Redirect:
        issuer = self.store.find_by_id(issuer_id)
        self.store.delete(issuer)
        logger.info(f"Deleted issuer {issuer_id}")
        return Redirect("issuers:index", message="Issuer was successfully destroyed.")
