"""
Tests for issuer Excel import and export services.
"""

from __future__ import annotations

import tempfile
from io import BytesIO
from pathlib import Path

import pandas as pd
import pytest

from apps.issuers.models import Issuer
from apps.issuers.services import export_issuers_to_excel, import_issuers_from_file
from tests.factories import IssuerFactory


@pytest.fixture
def excel_file():
    """Write a DataFrame to a temporary xlsx file and clean it up afterwards."""
    paths = []

    def _write(df, sheet_name="ISSUERS"):
        with tempfile.NamedTemporaryFile(suffix=".xlsx", delete=False) as tmp_file:
            tmp_path = tmp_file.name
        df.to_excel(tmp_path, index=False, sheet_name=sheet_name)
        paths.append(tmp_path)
        return tmp_path

    yield _write

    for path in paths:
        Path(path).unlink(missing_ok=True)


class TestImportIssuersExcel:
    """Test cases for import_issuers_from_file."""

    def test_import_issuers_basic(self, excel_file):
        """Test basic import of issuers."""
        path = excel_file(pd.DataFrame({"name": ["Test Issuer 1", "Test Issuer 2"]}))

        result = import_issuers_from_file(file_path=path)

        assert result["created"] == 2
        assert result["errors"] == []
        assert result["total_rows"] == 2
        assert set(Issuer.objects.values_list("name", flat=True)) == {
            "Test Issuer 1",
            "Test Issuer 2",
        }

    def test_import_ignores_extra_columns(self, excel_file):
        """Test that columns other than name are not applied."""
        path = excel_file(pd.DataFrame({"name": ["Acme"], "id": [999], "country": ["CM"]}))

        import_issuers_from_file(file_path=path)

        issuer = Issuer.objects.get()
        assert issuer.name == "Acme"
        assert issuer.pk != 999

    def test_import_reports_blank_names(self, excel_file):
        """Test that blank names are reported with their spreadsheet row."""
        path = excel_file(pd.DataFrame({"name": ["Acme", None, "   "]}))

        result = import_issuers_from_file(file_path=path)

        assert result["created"] == 1
        assert result["errors"] == [
            "Row 3: name is required",
            "Row 4: name is required",
        ]

    def test_import_reports_store_rejections(self, excel_file):
        """Test that names rejected by model validation are reported."""
        path = excel_file(pd.DataFrame({"name": ["x" * 300, "Acme"]}))

        result = import_issuers_from_file(file_path=path)

        assert result["created"] == 1
        assert len(result["errors"]) == 1
        assert result["errors"][0].startswith("Row 2: name:")

    def test_import_missing_name_column(self, excel_file):
        """Test import fails without a name column."""
        path = excel_file(pd.DataFrame({"short_name": ["TI"]}))

        with pytest.raises(ValueError, match="Missing required columns"):
            import_issuers_from_file(file_path=path)

    def test_import_missing_sheet(self, excel_file):
        """Test import fails when the sheet does not exist."""
        path = excel_file(pd.DataFrame({"name": ["Acme"]}), sheet_name="Sheet1")

        with pytest.raises(ValueError, match="Failed to read Excel file"):
            import_issuers_from_file(file_path=path, sheet_name="ISSUERS")


class TestExportIssuersExcel:
    """Test cases for export_issuers_to_excel."""

    def test_export_writes_one_row_per_issuer(self):
        first = IssuerFactory(name="Alpha")
        second = IssuerFactory(name="Beta")

        content = export_issuers_to_excel([first, second])

        df = pd.read_excel(BytesIO(content), sheet_name="ISSUERS", engine="openpyxl")
        assert list(df.columns) == ["id", "name", "created_at", "updated_at"]
        assert list(df["name"]) == ["Alpha", "Beta"]
        assert list(df["id"]) == [first.pk, second.pk]

    def test_export_empty(self):
        content = export_issuers_to_excel([])

        df = pd.read_excel(BytesIO(content), sheet_name="ISSUERS", engine="openpyxl")
        assert df.empty

    def test_export_can_be_imported(self, tmp_path):
        """Test that an exported workbook is accepted by the importer."""
        IssuerFactory(name="Alpha")
        path = tmp_path / "export.xlsx"
        path.write_bytes(export_issuers_to_excel(Issuer.objects.all()))
        Issuer.objects.all().delete()

        result = import_issuers_from_file(file_path=str(path))

        assert result["created"] == 1
        assert Issuer.objects.get().name == "Alpha"
