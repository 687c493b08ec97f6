"""Writers with explicit packaging options."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from xlbridge.contracts.common import ArgumentError
from xlbridge.contracts.handles import Handle
from xlbridge.contracts.options import EncryptionOptions
from xlbridge.engine.boundary import call
from xlbridge.engine.operation import command, query
from xlbridge.validation.arguments import check_choice, check_int_range, check_path

ENCRYPTION_ALGORITHMS = ("AES128", "AES192", "AES256", "default")


@command("failed to write compressed spreadsheet")
def write_with_compression(book: Handle, path: str | Path, level: int):
    """Save with every package member deflated at ``level`` (0-9)."""
    check_int_range(level, 0, 9, "compression level")
    return call("write_with_compression", book, check_path(path), level)


@command("failed to write encrypted spreadsheet")
def write_with_encryption_options(
    book: Handle,
    path: str | Path,
    password: str,
    algorithm: str,
    salt: str | None = None,
    spin_count: int | None = None,
):
    check_path(path)
    check_choice(algorithm, ENCRYPTION_ALGORITHMS, "algorithm")
    if spin_count is not None:
        check_int_range(spin_count, 1, 10_000_000, "spin_count")
    try:
        opts = EncryptionOptions(password=password, algorithm=algorithm, salt=salt, spin_count=spin_count)
    except ValidationError as exc:
        raise ArgumentError(exc.errors()[0]["msg"]) from exc
    return call(
        "write_with_encryption_options",
        book, str(path), opts.password, opts.algorithm, opts.salt, opts.spin_count,
    )


@query("failed to serialise spreadsheet")
def to_binary_xlsx(book: Handle):
    """The spreadsheet as xlsx package bytes."""
    return call("to_binary_xlsx", book)
