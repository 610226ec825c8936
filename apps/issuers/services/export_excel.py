"""
Excel export service for issuers.

Writes issuers in the same sheet layout the import service reads, so an
export can be edited and imported again.
"""

from __future__ import annotations

from io import BytesIO
from typing import Iterable

import pandas as pd

from apps.issuers.models import Issuer

EXPORT_COLUMNS = ["id", "name", "created_at", "updated_at"]


def export_issuers_to_excel(
    issuers: Iterable[Issuer],
    sheet_name: str = "ISSUERS",
) -> bytes:
    """
    Serialize issuers to an xlsx workbook.

    Args:
        issuers: Issuers to export, in output order.
        sheet_name: Name of the worksheet to write.

    Returns:
        bytes: The workbook contents.
    """
    data = [
        {
            "id": issuer.pk,
            "name": issuer.name or "",
            # Excel cannot store timezone-aware datetimes
            "created_at": issuer.created_at.replace(tzinfo=None)
            if issuer.created_at
            else None,
            "updated_at": issuer.updated_at.replace(tzinfo=None)
            if issuer.updated_at
            else None,
        }
        for issuer in issuers
    ]
    df = pd.DataFrame(data, columns=EXPORT_COLUMNS)

    output = BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=sheet_name, index=False)
    return output.getvalue()
