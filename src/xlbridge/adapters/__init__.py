"""openpyxl-backed native engine.

Importing this package registers every native entry point in
``registry.NATIVE``.
"""

from xlbridge.adapters import (  # noqa: F401
    auto_filters,
    borders,
    cells,
    charts,
    comments,
    conditional_formatting,
    csv_export,
    data_validation,
    document_properties,
    drawings,
    file_format,
    fills,
    fonts,
    formulas,
    hyperlinks,
    ole_objects,
    page_breaks,
    pivot_tables,
    print_settings,
    protection,
    rich_text,
    rows_columns,
    sheet_views,
    sheets,
    tables,
    workbook,
    workbook_views,
)
from xlbridge.adapters.registry import NATIVE, REGISTRY

__all__ = ["NATIVE", "REGISTRY"]
