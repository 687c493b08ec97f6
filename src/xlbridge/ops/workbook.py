"""Spreadsheet lifecycle: create, load and persist."""

from __future__ import annotations

from pathlib import Path

from xlbridge.contracts.common import ArgumentError
from xlbridge.contracts.handles import Handle, HandleKind
from xlbridge.engine.boundary import call, minted
from xlbridge.engine.operation import command, query
from xlbridge.validation.arguments import check_name, check_path


@query("could not create spreadsheet")
def new():
    """Create a spreadsheet with one default sheet."""
    return minted(call("new"), HandleKind.SPREADSHEET)


@query("could not create spreadsheet")
def new_empty():
    """Create a spreadsheet with no sheets at all."""
    return minted(call("new_empty"), HandleKind.SPREADSHEET)


@query("could not read spreadsheet")
def read(source: str | Path | bytes):
    """Load a spreadsheet from a path or from xlsx bytes."""
    if not isinstance(source, (bytes, bytearray)):
        source = check_path(source, "source")
    elif not source:
        raise ArgumentError("source bytes are empty")
    return minted(call("read", source), HandleKind.SPREADSHEET)


@query("could not read spreadsheet")
def lazy_read(path: str | Path):
    """Open a spreadsheet whose parsing is deferred until first use."""
    return minted(call("lazy_read", check_path(path)), HandleKind.SPREADSHEET)


@command("failed to write spreadsheet")
def write(book: Handle, path: str | Path):
    """Save to ``path``; locked and atomic unless ``atomic_writes`` is off."""
    return call("write", book, check_path(path))


@command("failed to write spreadsheet")
def write_light(book: Handle, path: str | Path):
    return call("write_light", book, check_path(path))


@command("failed to write password protected spreadsheet")
def write_with_password(book: Handle, path: str | Path, password: str):
    check_path(path)
    check_name(password, "password")
    return call("write_with_password", book, str(path), password)


@command("failed to set password")
def set_password(input_path: str | Path, output_path: str | Path, password: str):
    """Re-save an existing file with a password."""
    check_path(input_path, "input_path")
    check_path(output_path, "output_path")
    check_name(password, "password")
    return call("set_password", str(input_path), str(output_path), password)
