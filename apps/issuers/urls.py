"""
URL configuration for issuers app.
"""

from django.urls import path

from apps.issuers import views

app_name = "issuers"

urlpatterns = [
    path("", views.issuer_collection, name="index"),
    path("new/", views.issuer_new, name="new"),
    path("<int:issuer_id>/", views.issuer_detail, name="show"),
    path("<int:issuer_id>/edit/", views.issuer_edit, name="edit"),
    path("<int:issuer_id>/delete/", views.issuer_delete, name="delete"),
]
