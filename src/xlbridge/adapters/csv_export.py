"""Native CSV rendering of one worksheet."""

from __future__ import annotations

import csv
import io
from datetime import date, datetime, time
from pathlib import Path
from typing import Any

from xlbridge.adapters.helpers import sheet
from xlbridge.adapters.registry import native
from xlbridge.contracts.options import CsvWriterOptions
from xlbridge.contracts.results import OK


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render(ws, options: CsvWriterOptions) -> str:
    buf = io.StringIO()
    if not ws._cells:
        return ""
    if options.wrap_with_char:
        writer = csv.writer(
            buf, delimiter=options.delimiter, quotechar=options.wrap_with_char,
            quoting=csv.QUOTE_ALL, lineterminator="\r\n",
        )
    else:
        writer = csv.writer(
            buf, delimiter=options.delimiter, quoting=csv.QUOTE_MINIMAL, lineterminator="\r\n",
        )
    for row in ws.iter_rows(values_only=True):
        cells = [_text(v) for v in row]
        if options.do_trim:
            cells = [c.strip() for c in cells]
        writer.writerow(cells)
    return buf.getvalue()


@native
def write_csv(ident, sheet_name, path):
    ws = sheet(ident, sheet_name)
    Path(path).write_text(render(ws, CsvWriterOptions()), encoding="utf-8", newline="")
    return OK


@native
def write_csv_with_options(ident, sheet_name, path, options):
    ws = sheet(ident, sheet_name)
    opts = CsvWriterOptions.model_validate(options)
    Path(path).write_bytes(render(ws, opts).encode(opts.codec))
    return (OK, OK)
