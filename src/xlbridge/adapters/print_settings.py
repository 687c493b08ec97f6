"""Native page setup, margins, headers and print ranges."""

from __future__ import annotations

from xlbridge.adapters.helpers import plain_ref, sheet
from xlbridge.adapters.registry import native
from xlbridge.contracts.results import OK


@native
def set_page_orientation(ident, name, orientation):
    sheet(ident, name).page_setup.orientation = orientation
    return OK


@native
def get_page_orientation(ident, name):
    return (OK, sheet(ident, name).page_setup.orientation or "")


@native
def set_paper_size(ident, name, paper_size):
    sheet(ident, name).page_setup.paperSize = paper_size
    return OK


@native
def get_paper_size(ident, name):
    return (OK, int(sheet(ident, name).page_setup.paperSize or 0))


@native
def set_page_scale(ident, name, scale):
    sheet(ident, name).page_setup.scale = scale
    return OK


@native
def get_page_scale(ident, name):
    return (OK, int(sheet(ident, name).page_setup.scale or 0))


@native
def set_fit_to_page(ident, name, width, height):
    ws = sheet(ident, name)
    ws.sheet_properties.pageSetUpPr.fitToPage = True
    ws.page_setup.fitToWidth = width
    ws.page_setup.fitToHeight = height
    return (OK, OK)


@native
def get_fit_to_page(ident, name):
    setup = sheet(ident, name).page_setup
    return (OK, (int(setup.fitToWidth or 0), int(setup.fitToHeight or 0)))


@native
def set_page_margins(ident, name, top, right, bottom, left):
    margins = sheet(ident, name).page_margins
    margins.top, margins.right, margins.bottom, margins.left = top, right, bottom, left
    return (OK, OK)


@native
def get_page_margins(ident, name):
    m = sheet(ident, name).page_margins
    return (OK, {"top": m.top, "right": m.right, "bottom": m.bottom, "left": m.left})


@native
def set_header_footer_margins(ident, name, header, footer):
    margins = sheet(ident, name).page_margins
    margins.header, margins.footer = header, footer
    return (OK, OK)


@native
def get_header_footer_margins(ident, name):
    m = sheet(ident, name).page_margins
    return (OK, {"header": m.header, "footer": m.footer})


@native
def set_header(ident, name, text):
    sheet(ident, name).oddHeader.center.text = text
    return OK


@native
def get_header(ident, name):
    return (OK, sheet(ident, name).oddHeader.center.text or "")


@native
def set_footer(ident, name, text):
    sheet(ident, name).oddFooter.center.text = text
    return OK


@native
def get_footer(ident, name):
    return (OK, sheet(ident, name).oddFooter.center.text or "")


@native
def set_print_centered(ident, name, horizontal, vertical):
    options = sheet(ident, name).print_options
    options.horizontalCentered = horizontal
    options.verticalCentered = vertical
    return (OK, OK)


@native
def get_print_centered(ident, name):
    options = sheet(ident, name).print_options
    return (OK, (bool(options.horizontalCentered), bool(options.verticalCentered)))


@native
def set_print_area(ident, name, area):
    sheet(ident, name).print_area = area
    return (OK, OK)


@native
def get_print_area(ident, name):
    return (OK, plain_ref(sheet(ident, name).print_area))


@native
def set_print_titles(ident, name, rows, columns):
    ws = sheet(ident, name)
    if rows:
        ws.print_title_rows = rows
    if columns:
        ws.print_title_cols = columns
    return (OK, OK)


@native
def get_print_titles(ident, name):
    ws = sheet(ident, name)
    return (OK, (plain_ref(ws.print_title_rows), plain_ref(ws.print_title_cols)))
