"""Writing spreadsheet packages to disk: sidecar locks, atomic replace, digests."""

from __future__ import annotations

import hashlib
import os
import socket
import tempfile
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import IO

import portalocker

LOCK_SUFFIX = ".xlbridge.lock"
_CHUNK = 64 * 1024


def fingerprint(source: str | Path | bytes) -> str:
    """``sha256:<hex>`` digest of a file on disk or of package bytes."""
    digest = hashlib.sha256()
    if isinstance(source, (bytes, bytearray)):
        digest.update(source)
    else:
        with open(source, "rb") as fh:
            while chunk := fh.read(_CHUNK):
                digest.update(chunk)
    return f"sha256:{digest.hexdigest()}"


def atomic_write(target: str | Path, data: bytes) -> None:
    """Replace ``target`` with ``data`` so readers never see a partial package."""
    target = Path(target)
    tmp = tempfile.NamedTemporaryFile(
        dir=target.parent, prefix=".xlbridge_tmp_", suffix=target.suffix, delete=False
    )
    try:
        with tmp:
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp.name, target)
    except BaseException:
        Path(tmp.name).unlink(missing_ok=True)
        raise


class SidecarLock:
    """Exclusive ``<file>.xlbridge.lock`` held while a package is written.

    ``timeout`` of 0 fails at once when another writer holds the lock;
    a positive timeout polls until it expires.  The OS drops the lock if
    the holder dies, leaving a stale but reusable sidecar.
    """

    def __init__(self, target: str | Path, *, timeout: float = 0) -> None:
        target = Path(target).resolve()
        self.path = target.with_name(target.name + LOCK_SUFFIX)
        self.timeout = timeout
        self._fh: IO[str] | None = None

    def _try(self, fh: IO[str]) -> bool:
        try:
            portalocker.lock(fh, portalocker.LOCK_EX | portalocker.LOCK_NB)
        except portalocker.LockException:
            return False
        return True

    def acquire(self) -> None:
        fh = open(self.path, "a+")  # noqa: SIM115
        deadline = time.monotonic() + self.timeout
        while not self._try(fh):
            if time.monotonic() >= deadline:
                fh.close()
                raise portalocker.LockException(f"{self.path.name} is held by another writer")
            time.sleep(min(0.1, max(0.01, self.timeout / 20)))
        fh.seek(0)
        fh.truncate()
        fh.write(f"pid={os.getpid()} host={socket.gethostname()}\n")
        fh.write(f"since={datetime.now(timezone.utc).isoformat()}\n")
        fh.flush()
        self._fh = fh

    def release(self) -> None:
        if self._fh is None:
            return
        try:
            portalocker.unlock(self._fh)
        finally:
            self._fh.close()
            self._fh = None

    @property
    def held(self) -> bool:
        return self._fh is not None

    def __enter__(self) -> "SidecarLock":
        self.acquire()
        return self

    def __exit__(self, *exc: object) -> None:
        self.release()


def write_package(target: str | Path, data: bytes, *, atomic: bool = True, lock_timeout: float = 0) -> None:
    """Store package bytes at ``target``; locked and atomic unless ``atomic`` is off."""
    if not atomic:
        Path(target).write_bytes(data)
        return
    with SidecarLock(target, timeout=lock_timeout):
        atomic_write(target, data)


def read_text_safe(path: str | Path) -> str:
    """Read a text file with UTF-8 BOM tolerance."""
    return Path(path).read_text(encoding="utf-8-sig")
