"""Native writers with explicit packaging options."""

from __future__ import annotations

import zipfile
from io import BytesIO

from xlbridge.adapters.helpers import book, fault
from xlbridge.adapters.registry import native
from xlbridge.adapters.workbook import AGILE_ALGORITHM, AGILE_SPIN_COUNT, encrypt_package, package, store
from xlbridge.contracts.results import OK


def recompress(data: bytes, level: int) -> bytes:
    """Rewrite every package member at the given deflate level (0 stores)."""
    method = zipfile.ZIP_STORED if level == 0 else zipfile.ZIP_DEFLATED
    out = BytesIO()
    with zipfile.ZipFile(BytesIO(data)) as src, zipfile.ZipFile(
        out, "w", compression=method, compresslevel=None if level == 0 else level
    ) as dst:
        for info in src.infolist():
            dst.writestr(info.filename, src.read(info.filename))
    return out.getvalue()


@native
def write_with_compression(ident, path, level):
    store(path, recompress(package(book(ident)), level))
    return (OK, OK)


@native
def write_with_encryption_options(ident, path, password, algorithm, salt=None, spin_count=None):
    data = package(book(ident))
    # the salt is always random and the spin count fixed, so only the agile defaults can be honoured
    if algorithm not in (AGILE_ALGORITHM, "default"):
        raise fault(f"{algorithm} encryption is not supported by this engine")
    if salt is not None:
        raise fault("a caller supplied salt is not supported by this engine")
    if spin_count not in (None, AGILE_SPIN_COUNT):
        raise fault(f"spin count {spin_count} is not supported by this engine (fixed at {AGILE_SPIN_COUNT})")
    store(path, encrypt_package(data, password))
    return (OK, OK)


@native
def to_binary_xlsx(ident):
    return (OK, package(book(ident)))
