"""Cell comments (notes)."""

from __future__ import annotations

from xlbridge.contracts.handles import Handle
from xlbridge.engine.boundary import call
from xlbridge.engine.operation import command, query
from xlbridge.validation.arguments import check_cell, check_sheet_name, check_text


def _at(sheet: str, cell: str) -> str:
    check_sheet_name(sheet)
    return check_cell(cell)


@command("failed to add comment")
def add_comment(book: Handle, sheet: str, cell: str, text: str, author: str):
    address = _at(sheet, cell)
    return call("add_comment", book, sheet, address, check_text(text), check_text(author, "author"))


@query("failed to read comment")
def get_comment(book: Handle, sheet: str, cell: str):
    """``(text, author)`` of the comment on ``cell``."""
    return call("get_comment", book, sheet, _at(sheet, cell))


@command("failed to update comment")
def update_comment(book: Handle, sheet: str, cell: str, text: str, author: str | None = None):
    """Replace the text; the author is kept unless a new one is given."""
    address = _at(sheet, cell)
    if author is not None:
        check_text(author, "author")
    return call("update_comment", book, sheet, address, check_text(text), author)


@command("failed to remove comment")
def remove_comment(book: Handle, sheet: str, cell: str):
    return call("remove_comment", book, sheet, _at(sheet, cell))


@query("failed to check comments")
def has_comments(book: Handle, sheet: str):
    return call("has_comments", book, check_sheet_name(sheet))


@query("failed to count comments")
def get_comments_count(book: Handle, sheet: str):
    return call("get_comments_count", book, check_sheet_name(sheet))


@query("failed to list comments")
def get_all_comments(book: Handle, sheet: str):
    return call("get_all_comments", book, check_sheet_name(sheet))
