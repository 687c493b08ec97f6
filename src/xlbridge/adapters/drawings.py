"""Native images anchored to cells."""

from __future__ import annotations

from contextlib import contextmanager
from io import BytesIO
from pathlib import Path

from openpyxl.drawing.image import Image
from openpyxl.utils import get_column_letter
from PIL import Image as PILImage

from xlbridge.adapters.helpers import not_found, sheet
from xlbridge.adapters.registry import NativeFault, native
from xlbridge.contracts.results import ERROR, OK

# output suffix -> Pillow format name
SAVE_FORMATS = {".png": "PNG", ".jpg": "JPEG", ".jpeg": "JPEG", ".gif": "GIF", ".bmp": "BMP"}


def anchor_cell(img: Image) -> str:
    anchor = img.anchor
    if isinstance(anchor, str):
        return anchor.replace("$", "").upper()
    marker = anchor._from
    return f"{get_column_letter(marker.col + 1)}{marker.row + 1}"


def _load(path) -> Image:
    source = Path(path)
    if not source.exists():
        raise NativeFault((ERROR, f"File not found: {source}"))
    return Image(BytesIO(source.read_bytes()))


@contextmanager
def reusable_images(wb):
    """Give in-memory images a fresh source buffer once a save has consumed them."""
    kept = [
        (img, img.ref.getvalue())
        for ws in wb.worksheets
        for img in ws._images
        if isinstance(img.ref, BytesIO)
    ]
    try:
        yield
    finally:
        for img, raw in kept:
            img.ref = BytesIO(raw)


def _payload(img: Image) -> bytes:
    # openpyxl closes the source buffer once it has been read
    data = img._data()
    if img.format in ("gif", "jpeg", "png"):
        img.ref = BytesIO(data)
    return data


def _find(ws, address):
    target = address.replace("$", "").upper()
    for img in ws._images:
        if anchor_cell(img) == target:
            return img
    raise not_found("Image", f"{ws.title}!{target}")


@native
def add_image(ident, sheet_name, address, image_path):
    ws = sheet(ident, sheet_name)
    img = _load(image_path)
    img.anchor = address.upper()
    ws.add_image(img)
    return (OK, OK)


@native
def download_image(ident, sheet_name, address, output_path):
    img = _find(sheet(ident, sheet_name), address)
    data = _payload(img)
    out = Path(output_path)
    wanted = SAVE_FORMATS.get(out.suffix.lower())
    if wanted is not None and wanted.lower() != ("jpeg" if img.format == "jpg" else img.format):
        with PILImage.open(BytesIO(data)) as pic:
            buf = BytesIO()
            (pic.convert("RGB") if wanted == "JPEG" else pic).save(buf, format=wanted)
            data = buf.getvalue()
    out.write_bytes(data)
    return OK


@native
def change_image(ident, sheet_name, address, new_image_path):
    ws = sheet(ident, sheet_name)
    old = _find(ws, address)
    img = _load(new_image_path)
    img.anchor = old.anchor
    ws._images[ws._images.index(old)] = img
    return (OK, OK)


@native
def remove_image(ident, sheet_name, address):
    ws = sheet(ident, sheet_name)
    ws._images.remove(_find(ws, address))
    return (OK, OK)


@native
def get_image_dimensions(ident, sheet_name, address):
    img = _find(sheet(ident, sheet_name), address)
    return (OK, (int(img.width), int(img.height)))


@native
def list_images(ident, sheet_name):
    return (OK, [
        {"cell": anchor_cell(img), "width": int(img.width), "height": int(img.height), "format": img.format}
        for img in sheet(ident, sheet_name)._images
    ])


@native
def count_images(ident, sheet_name):
    return (OK, len(sheet(ident, sheet_name)._images))


# openpyxl writes only charts and pictures into a sheet drawing
SHAPES_UNSUPPORTED = "drawing shapes are not supported by this engine"


@native
def add_shape(ident, sheet_name, address, shape_type, width, height, fill_color, outline_color, outline_width):
    sheet(ident, sheet_name)
    raise NativeFault(SHAPES_UNSUPPORTED)


@native
def add_text_box(ident, sheet_name, address, text, width, height, fill_color, text_color, outline_color, outline_width):
    sheet(ident, sheet_name)
    raise NativeFault(SHAPES_UNSUPPORTED)


@native
def add_connector(ident, sheet_name, from_cell, to_cell, line_color, line_width):
    sheet(ident, sheet_name)
    raise NativeFault(SHAPES_UNSUPPORTED)
