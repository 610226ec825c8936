"""
Excel import service for issuer records.

Reads issuer names from an Excel sheet and creates one Issuer per row
through the issuer store, so imported rows get the same validation as
records created through the web interface.

Expected Excel format:
    name
    AFRICA BRIGHT ASSET MANAGEMENT
"""

from __future__ import annotations

import logging

import pandas as pd

from apps.issuers.controller import IssuerController, IssuerParams, Success
from apps.issuers.store import IssuerStore, get_issuer_store

logger = logging.getLogger(__name__)


def import_issuers_from_file(
    file_path: str,
    sheet_name: str | None = "ISSUERS",
    store: IssuerStore | None = None,
) -> dict:
    """
    Import issuers from an Excel file path.

    Columns other than ``name`` are ignored. Rows with a blank name or a
    name the store rejects are reported in ``errors`` and skipped.

    Args:
        file_path: Path to Excel file (local filesystem path).
        sheet_name: Sheet name to read (default: "ISSUERS").
        store: Store to create issuers in (default: settings.ISSUER_STORE).

    Returns:
        dict: Summary with keys 'created', 'errors', 'total_rows'.

    Raises:
        ValueError: If the file cannot be read or has no ``name`` column.

    Example:
        >>> result = import_issuers_from_file("issuers.xlsx")
        >>> print(f"Created {result['created']} issuers")
    """
    try:
        df = pd.read_excel(file_path, sheet_name=sheet_name, engine="openpyxl")
    except Exception as e:
        raise ValueError(f"Failed to read Excel file: {str(e)}")

    if "name" not in df.columns:
        raise ValueError(
            f"Missing required columns: ['name']. Found columns: {list(df.columns)}"
        )

    controller = IssuerController(store or get_issuer_store())
    created = 0
    errors = []

    for idx, row in df.iterrows():
        # Row numbers are 1-based and the header occupies row 1
        row_number = idx + 2
        if pd.isna(row["name"]) or not str(row["name"]).strip():
            errors.append(f"Row {row_number}: name is required")
            continue

        result = controller.create_issuer(IssuerParams.from_data({"name": row["name"]}))
        if isinstance(result, Success):
            created += 1
        else:
            messages = "; ".join(
                f"{field}: {' '.join(field_errors)}"
                for field, field_errors in result.errors.items()
            )
            errors.append(f"Row {row_number}: {messages}")

    logger.info(
        f"Imported issuers from {file_path}: {created} created, {len(errors)} errors"
    )
    return {
        "created": created,
        "errors": errors,
        "total_rows": len(df),
    }
