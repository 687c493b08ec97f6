"""Native workbook lifecycle: construction, loading, persistence."""

from __future__ import annotations

from io import BytesIO
from pathlib import Path

from msoffcrypto.format.ooxml import OOXMLFile
from openpyxl import Workbook

from xlbridge.adapters.drawings import reusable_images
from xlbridge.adapters.helpers import book, fault
from xlbridge.adapters.registry import NativeFault, mint, native
from xlbridge.adapters.resources import Book, is_encrypted, load_source
from xlbridge.config import get_config
from xlbridge.contracts.handles import HandleKind
from xlbridge.contracts.results import ERROR, OK
from xlbridge.io.fileops import write_package

# ECMA-376 agile encryption as written by msoffcrypto: AES-256, SHA-512, random salt
AGILE_ALGORITHM = "AES256"
AGILE_SPIN_COUNT = 100_000


def package(doc: Book) -> bytes:
    """Serialise a book to an xlsx package in memory."""
    if not doc.wb.sheetnames:
        raise NativeFault((ERROR, "workbook has no sheets"))
    buf = BytesIO()
    with reusable_images(doc.wb):
        doc.wb.save(buf)
    return buf.getvalue()


def encrypt_package(data: bytes, password: str) -> bytes:
    """Wrap xlsx package bytes in a password protected container."""
    out = BytesIO()
    OOXMLFile(BytesIO(data)).encrypt(password, out)
    return out.getvalue()


def store(path: str | Path, data: bytes) -> None:
    """Write package bytes to disk, locked and atomic when configured."""
    cfg = get_config()
    target = Path(path)
    if not target.parent.exists():
        raise NativeFault((ERROR, f"Directory not found: {target.parent}"))
    write_package(target, data, atomic=cfg.atomic_writes, lock_timeout=cfg.lock_timeout)


@native
def new():
    return (OK, mint(HandleKind.SPREADSHEET, Book(Workbook())))


@native
def new_empty():
    wb = Workbook()
    wb.remove(wb.active)
    return (OK, mint(HandleKind.SPREADSHEET, Book(wb)))


@native
def read(source):
    return (OK, mint(HandleKind.SPREADSHEET, Book(load_source(source))))


@native
def lazy_read(path):
    if not Path(path).exists():
        raise NativeFault((ERROR, f"File not found: {path}"))
    return (OK, mint(HandleKind.SPREADSHEET, Book(source=str(path))))


@native
def write(ident, path):
    store(path, package(book(ident)))
    return (OK, OK)


@native
def write_light(ident, path):
    doc = book(ident)
    if not doc.wb.sheetnames:
        raise NativeFault(ERROR)
    with reusable_images(doc.wb):
        doc.wb.save(str(path))
    return OK


@native
def write_with_password(ident, path, password):
    store(path, encrypt_package(package(book(ident)), password))
    return (OK, OK)


@native
def set_password(input_path, output_path, password):
    if not Path(input_path).exists():
        raise NativeFault((ERROR, f"File not found: {input_path}"))
    data = Path(input_path).read_bytes()
    if is_encrypted(data):
        raise fault(f"{input_path} is already password protected")
    store(output_path, encrypt_package(data, password))
    return (OK, OK)
