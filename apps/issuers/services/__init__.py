"""
Issuer spreadsheet services.

Excel import and export of issuer records.
"""

from apps.issuers.services.export_excel import export_issuers_to_excel
from apps.issuers.services.import_excel import import_issuers_from_file

__all__ = ["export_issuers_to_excel", "import_issuers_from_file"]
