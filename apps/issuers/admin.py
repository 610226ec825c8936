"""
Admin interface for issuers.
"""

from __future__ import annotations

from django.contrib import admin, messages
from django.http import HttpResponse

from apps.issuers.models import Issuer
from apps.issuers.services.export_excel import export_issuers_to_excel


@admin.register(Issuer)
class IssuerAdmin(admin.ModelAdmin):
    """
    Admin interface for Issuer model.

    Supports bulk export to the Excel layout read by import_issuers_excel.
    """

    list_display = ["name", "created_at", "updated_at"]
    list_filter = ["created_at"]
    search_fields = ["name"]
    readonly_fields = ["created_at", "updated_at"]
    ordering = ["name"]
    actions = ["export_to_excel"]

    @admin.action(description="Export selected issuers to Excel")
    def export_to_excel(self, request, queryset):
        """Export selected issuers to an xlsx download."""
        if not queryset.exists():
            self.message_user(request, "No issuers selected.", messages.WARNING)
            return None

        response = HttpResponse(
            export_issuers_to_excel(queryset.order_by("name", "id")),
            content_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )
        response["Content-Disposition"] = 'attachment; filename="issuers_export.xlsx"'
        return response
