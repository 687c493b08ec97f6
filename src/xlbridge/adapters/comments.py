"""Native cell comments."""

from __future__ import annotations

from openpyxl.comments import Comment

from xlbridge.adapters.helpers import cell, existing_cell, not_found, sheet
from xlbridge.adapters.registry import native
from xlbridge.contracts.results import OK


def _commented(ident, sheet_name, address):
    ws = sheet(ident, sheet_name)
    c = existing_cell(ws, address)
    if c is None or c.comment is None:
        raise not_found("Comment", f"{sheet_name}!{address}")
    return c


def _all(ws):
    return [c for c in ws._cells.values() if c.comment is not None]


@native
def add_comment(ident, sheet_name, address, text, author):
    cell(ident, sheet_name, address).comment = Comment(text, author)
    return (OK, OK)


@native
def get_comment(ident, sheet_name, address):
    c = _commented(ident, sheet_name, address)
    return (OK, (c.comment.text, c.comment.author or ""))


@native
def update_comment(ident, sheet_name, address, text, author=None):
    c = _commented(ident, sheet_name, address)
    c.comment = Comment(text, author if author is not None else c.comment.author)
    return (OK, OK)


@native
def remove_comment(ident, sheet_name, address):
    _commented(ident, sheet_name, address).comment = None
    return OK


@native
def has_comments(ident, sheet_name):
    return (OK, bool(_all(sheet(ident, sheet_name))))


@native
def get_comments_count(ident, sheet_name):
    return (OK, len(_all(sheet(ident, sheet_name))))


@native
def get_all_comments(ident, sheet_name):
    ws = sheet(ident, sheet_name)
    ordered = sorted(_all(ws), key=lambda c: (c.row, c.column))
    return (OK, [
        {"cell": c.coordinate, "text": c.comment.text, "author": c.comment.author or ""}
        for c in ordered
    ])
