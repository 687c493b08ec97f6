"""CSV export of a single worksheet."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from xlbridge.contracts.common import ArgumentError
from xlbridge.contracts.handles import Handle
from xlbridge.contracts.options import CsvWriterOptions
from xlbridge.engine.boundary import call
from xlbridge.engine.operation import command
from xlbridge.validation.arguments import check_path, check_sheet_name


def _options(options: CsvWriterOptions | dict[str, Any]) -> CsvWriterOptions:
    if isinstance(options, CsvWriterOptions):
        return options
    if not isinstance(options, dict):
        raise ArgumentError(f"options must be CsvWriterOptions or a mapping, got {type(options).__name__}")
    try:
        return CsvWriterOptions.model_validate(options)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(p) for p in first["loc"])
        raise ArgumentError(f"Invalid CSV option {field}: {first['msg']}") from exc


@command("failed to write CSV")
def write_csv(book: Handle, sheet: str, path: str | Path):
    check_sheet_name(sheet)
    return call("write_csv", book, sheet, check_path(path))


@command("failed to write CSV")
def write_csv_with_options(book: Handle, sheet: str, path: str | Path, options: CsvWriterOptions | dict[str, Any]):
    """Write ``sheet`` as CSV using ``options`` (encoding, delimiter, trim, quoting)."""
    check_sheet_name(sheet)
    opts = _options(options)
    return call("write_csv_with_options", book, sheet, check_path(path), opts.model_dump(mode="json"))
