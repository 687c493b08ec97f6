"""Native resource objects held by the registry."""

from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Any

import openpyxl
from openpyxl.workbook import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from xlbridge.adapters.registry import NativeFault
from xlbridge.contracts.results import ERROR

# encrypted OOXML packages are stored inside an OLE compound file
OLE_SIGNATURE = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"
ENCRYPTED_UNREADABLE = "password protected files cannot be opened by this engine"


def is_encrypted(data: bytes) -> bool:
    return data[:len(OLE_SIGNATURE)] == OLE_SIGNATURE


def load_source(source: str | Path | bytes) -> Workbook:
    """Parse a workbook from a path or an in-memory package."""
    if isinstance(source, (bytes, bytearray)):
        data = bytes(source)
    else:
        path = Path(source)
        if not path.exists():
            raise NativeFault((ERROR, f"File not found: {path}"))
        data = path.read_bytes()
    if is_encrypted(data):
        raise NativeFault(ENCRYPTED_UNREADABLE)
    return openpyxl.load_workbook(BytesIO(data), rich_text=True)


class PivotRecord:
    """A pivot table definition kept beside the workbook.

    Fields are zero-based column offsets into the source range; data fields
    are ``(offset, function, caption)`` triples.
    """

    def __init__(
        self,
        name: str,
        source_sheet: str,
        source_range: str,
        target_cell: str,
        row_fields: list[int],
        column_fields: list[int],
        data_fields: list[tuple[int, str, str]],
        *,
        cache_id: int = 0,
        from_file: bool = False,
    ) -> None:
        self.name = name
        self.source_sheet = source_sheet
        self.source_range = source_range
        self.target_cell = target_cell
        self.row_fields = list(row_fields)
        self.column_fields = list(column_fields)
        self.data_fields = [tuple(f) for f in data_fields]
        self.cache_id = cache_id
        self.from_file = from_file
        self.refreshed = False

    def info(self) -> tuple[str, str, str, str]:
        return (self.name, self.target_cell, self.source_range, str(self.cache_id))

    def fields(self) -> tuple[list[int], list[int], list[tuple[int, str, str]]]:
        return (list(self.row_fields), list(self.column_fields), list(self.data_fields))


class Book:
    """One open spreadsheet document.

    ``lazy_read`` books keep only their source until the first call that
    touches the workbook.
    """

    def __init__(self, wb: Workbook | None = None, *, source: Any = None) -> None:
        self._wb = wb
        self.source = source
        self.ole: dict[Worksheet, Any] = {}
        self._pivots: dict[Worksheet, list[PivotRecord]] = {}

    @property
    def loaded(self) -> bool:
        return self._wb is not None

    @property
    def wb(self) -> Workbook:
        if self._wb is None:
            self._wb = load_source(self.source)
        return self._wb

    def sheet(self, name: str) -> Worksheet:
        if name not in self.wb.sheetnames:
            raise NativeFault((ERROR, f"Sheet not found: {name}"))
        return self.wb[name]

    def forget_sheet(self, ws: Worksheet) -> None:
        self.ole.pop(ws, None)
        self._pivots.pop(ws, None)

    def pivots(self, ws: Worksheet) -> list[PivotRecord]:
        if ws not in self._pivots:
            self._pivots[ws] = [_record_from_definition(p) for p in getattr(ws, "_pivots", [])]
        return self._pivots[ws]


def _record_from_definition(pivot: Any) -> PivotRecord:
    cache = pivot.cache
    source = cache.cacheSource.worksheetSource if cache and cache.cacheSource else None
    rows = [f.x for f in (pivot.rowFields or []) if f.x is not None and f.x >= 0]
    cols = [f.x for f in (pivot.colFields or []) if f.x is not None and f.x >= 0]
    data = [(f.fld, f.subtotal or "sum", f.name or "") for f in (pivot.dataFields or [])]
    location = pivot.location.ref if pivot.location else ""
    return PivotRecord(
        pivot.name,
        source.sheet if source and source.sheet else "",
        source.ref if source and source.ref else "",
        location.split(":")[0],
        rows,
        cols,
        data,
        cache_id=pivot.cacheId or 0,
        from_file=True,
    )


class OleObject:
    """An embedded object payload plus its descriptive properties."""

    def __init__(
        self,
        data: bytes = b"",
        extension: str = "",
        prog_id: str = "",
        requires: str = "",
        properties: "EmbeddedObjectProperties | None" = None,
    ) -> None:
        self.data = data
        self.extension = extension
        self.prog_id = prog_id
        self.requires = requires
        self.properties = properties or EmbeddedObjectProperties(prog_id=prog_id)


class EmbeddedObjectProperties:
    def __init__(self, prog_id: str = "", shape_id: int = 0) -> None:
        self.prog_id = prog_id
        self.shape_id = shape_id


class OleObjects:
    """Ordered collection of OLE objects attached to one worksheet."""

    def __init__(self) -> None:
        self.items: list[OleObject] = []
