"""
Management command to import issuers from Excel.

Usage:
    python manage.py import_issuers_excel \
        --file ./scripts/data/issuers_master.xlsx \
        --sheet ISSUERS
"""

from __future__ import annotations

import os

from django.core.management.base import BaseCommand, CommandError

from apps.issuers.services.import_excel import import_issuers_from_file


class Command(BaseCommand):
    """
    Management command for importing issuers from Excel files.

    Reads the ``name`` column of the given sheet and creates one issuer per
    row. Invalid rows are reported and skipped; the rest are still imported.
    """

    help = "Import issuers from an Excel file"

    def add_arguments(self, parser):
        """Add command-line arguments."""
        parser.add_argument(
            "--file",
            type=str,
            required=True,
            help="Path to Excel file",
        )
        parser.add_argument(
            "--sheet",
            type=str,
            default="ISSUERS",
            help="Sheet name to read (default: ISSUERS)",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        file_path = options["file"]
        sheet_name = options["sheet"]

        if not os.path.exists(file_path):
            raise CommandError(f"File not found: {file_path}")

        self.stdout.write(f"Importing issuers from file: {file_path}")
        self.stdout.write(f"Sheet: {sheet_name}")
        self.stdout.write("")

        try:
            result = import_issuers_from_file(file_path=file_path, sheet_name=sheet_name)
        except ValueError as e:
            raise CommandError(f"Import failed: {str(e)}")

        self.stdout.write(
            self.style.SUCCESS(
                f"✓ Created {result['created']} issuers "
                f"from {result['total_rows']} rows"
            )
        )

        if result["errors"]:
            self.stdout.write("")
            self.stdout.write(self.style.ERROR(f"✗ {len(result['errors'])} errors:"))
            for error in result["errors"][:20]:
                self.stdout.write(f"  - {error}")
            if len(result["errors"]) > 20:
                self.stdout.write(f"  ... and {len(result['errors']) - 20} more")
