"""
Views for issuer CRUD operations.

Each view maps the request onto controller input, runs one controller action
and turns the returned Render/Redirect into an HTTP response. A missing
issuer becomes a 404.
"""

from __future__ import annotations

from django.contrib import messages
from django.http import Http404, HttpResponseRedirect
from django.shortcuts import render
from django.urls import reverse
from django.views.decorators.http import require_http_methods

from apps.issuers.controller import (
    ActionResult,
    IssuerController,
    IssuerParams,
    Redirect,
)
from apps.issuers.exceptions import IssuerNotFound
from apps.issuers.store import get_issuer_store


def _controller() -> IssuerController:
    return IssuerController(get_issuer_store())


def _respond(request, result: ActionResult):
    if isinstance(result, Redirect):
        if result.message:
            messages.success(request, result.message)
        return HttpResponseRedirect(reverse(result.url_name, args=result.args))
    return render(request, result.template_name, result.context)


@require_http_methods(["GET", "POST"])
def issuer_collection(request):
    """
    Issuer collection endpoint.

    GET: List all issuers.
    POST: Create an issuer from the submitted name.
    """
    controller = _controller()
    if request.method == "POST":
        return _respond(request, controller.create(IssuerParams.from_data(request.POST)))
    return _respond(request, controller.list())


@require_http_methods(["GET"])
def issuer_new(request):
    """Display the empty issuer form."""
    return _respond(request, _controller().new())


@require_http_methods(["GET", "POST"])
def issuer_detail(request, issuer_id: int):
    """
    Single issuer endpoint.

    GET: Show the issuer.
    POST: Update the issuer's name.
    """
    controller = _controller()
    try:
        if request.method == "POST":
            result = controller.update(issuer_id, IssuerParams.from_data(request.POST))
        else:
            result = controller.show(issuer_id)
    except IssuerNotFound as exc:
        raise Http404(str(exc))
    return _respond(request, result)


@require_http_methods(["GET"])
def issuer_edit(request, issuer_id: int):
    """Display the edit form for an issuer."""
    try:
        result = _controller().edit(issuer_id)
    except IssuerNotFound as exc:
        raise Http404(str(exc))
    return _respond(request, result)


@require_http_methods(["POST"])
def issuer_delete(request, issuer_id: int):
    """Delete an issuer and return to the list."""
    try:
        result = _controller().destroy(issuer_id)
    except IssuerNotFound as exc:
        raise Http404(str(exc))
    return _respond(request, result)
