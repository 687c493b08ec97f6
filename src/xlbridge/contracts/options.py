"""Option models passed as aggregate arguments to persistence operations."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class CsvEncoding(str, Enum):
    UTF8 = "utf8"
    SHIFT_JIS = "shift_jis"
    KOI8U = "koi8u"
    KOI8R = "koi8r"
    ISO88598I = "iso88598i"
    GBK = "gbk"


# Python codec for each encoding token
CSV_CODECS = {
    CsvEncoding.UTF8: "utf-8",
    CsvEncoding.SHIFT_JIS: "shift_jis",
    CsvEncoding.KOI8U: "koi8_u",
    CsvEncoding.KOI8R: "koi8_r",
    CsvEncoding.ISO88598I: "iso8859_8",
    CsvEncoding.GBK: "gbk",
}


class CsvWriterOptions(BaseModel):
    """How a sheet is rendered to CSV."""

    encoding: CsvEncoding = CsvEncoding.UTF8
    delimiter: str = ","
    do_trim: bool = False
    wrap_with_char: str = ""

    @field_validator("delimiter")
    @classmethod
    def _single_char_delimiter(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("delimiter must be a single character")
        return v

    @field_validator("wrap_with_char")
    @classmethod
    def _short_wrap(cls, v: str) -> str:
        if len(v) > 1:
            raise ValueError("wrap_with_char must be empty or a single character")
        return v

    @property
    def codec(self) -> str:
        return CSV_CODECS[self.encoding]


class EncryptionOptions(BaseModel):
    """Arguments of ``write_with_encryption_options`` after validation."""

    password: str = Field(min_length=1)
    algorithm: str
    salt: str | None = None
    spin_count: int | None = Field(default=None, ge=1, le=10_000_000)
