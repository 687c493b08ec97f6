"""Images placed on a worksheet, addressed by their anchor cell, and drawing shapes."""

from __future__ import annotations

from pathlib import Path

from xlbridge.contracts.handles import Handle
from xlbridge.engine.boundary import call
from xlbridge.engine.operation import command, query
from xlbridge.validation.arguments import (
    check_cell,
    check_choice,
    check_number,
    check_path,
    check_sheet_name,
    check_text,
    normalize_color,
)


def _at(sheet: str, cell: str) -> str:
    check_sheet_name(sheet)
    return check_cell(cell)


@command("failed to add image")
def add_image(book: Handle, sheet: str, cell: str, image_path: str | Path):
    address = _at(sheet, cell)
    return call("add_image", book, sheet, address, check_path(image_path, "image_path"))


@command("failed to download image")
def download_image(book: Handle, sheet: str, cell: str, output_path: str | Path):
    """Write the image anchored at ``cell``; the file suffix picks the output format."""
    address = _at(sheet, cell)
    return call("download_image", book, sheet, address, check_path(output_path, "output_path"))


@command("failed to change image")
def change_image(book: Handle, sheet: str, cell: str, new_image_path: str | Path):
    address = _at(sheet, cell)
    return call("change_image", book, sheet, address, check_path(new_image_path, "new_image_path"))


@command("failed to remove image")
def remove_image(book: Handle, sheet: str, cell: str):
    return call("remove_image", book, sheet, _at(sheet, cell))


@query("failed to read image dimensions")
def get_image_dimensions(book: Handle, sheet: str, cell: str):
    """``(width, height)`` in pixels."""
    return call("get_image_dimensions", book, sheet, _at(sheet, cell))


@query("failed to list images")
def list_images(book: Handle, sheet: str):
    return call("list_images", book, check_sheet_name(sheet))


@query("failed to count images")
def count_images(book: Handle, sheet: str):
    return call("count_images", book, check_sheet_name(sheet))


SHAPE_TYPES = (
    "rectangle", "ellipse", "oval", "circle", "rounded_rectangle", "triangle", "right_triangle",
    "pentagon", "hexagon", "octagon", "trapezoid", "diamond", "arrow", "line", "connector",
)


def _size(width: float, height: float) -> tuple[float, float]:
    return check_number(width, "width", low=1), check_number(height, "height", low=1)


@command("failed to add shape")
def add_shape(
    book: Handle,
    sheet: str,
    cell: str,
    shape_type: str,
    width: float,
    height: float,
    fill_color: str,
    outline_color: str,
    outline_width: float,
):
    """Place a preset shape at ``cell``.

    The openpyxl engine cannot write drawing shapes, so after the arguments
    and the sheet are checked this reports ``Err(NATIVE, "drawing shapes are
    not supported by this engine")``.  The same holds for ``add_text_box``
    and ``add_connector``.
    """
    address = _at(sheet, cell)
    return call(
        "add_shape", book, sheet, address, check_choice(shape_type, SHAPE_TYPES, "shape_type"), *_size(width, height),
        normalize_color(fill_color, "fill_color"), normalize_color(outline_color, "outline_color"),
        check_number(outline_width, "outline_width", low=0),
    )


@command("failed to add text box")
def add_text_box(
    book: Handle,
    sheet: str,
    cell: str,
    text: str,
    width: float,
    height: float,
    fill_color: str,
    text_color: str,
    outline_color: str,
    outline_width: float,
):
    address = _at(sheet, cell)
    return call(
        "add_text_box", book, sheet, address, check_text(text), *_size(width, height),
        normalize_color(fill_color, "fill_color"), normalize_color(text_color, "text_color"),
        normalize_color(outline_color, "outline_color"), check_number(outline_width, "outline_width", low=0),
    )


@command("failed to add connector")
def add_connector(book: Handle, sheet: str, from_cell: str, to_cell: str, line_color: str, line_width: float):
    check_sheet_name(sheet)
    return call(
        "add_connector", book, sheet, check_cell(from_cell, "from_cell"), check_cell(to_cell, "to_cell"),
        normalize_color(line_color, "line_color"), check_number(line_width, "line_width", low=0),
    )
