"""Native formulas and defined names."""

from __future__ import annotations

from openpyxl.utils import quote_sheetname
from openpyxl.utils.cell import absolute_coordinate
from openpyxl.workbook.defined_name import DefinedName
from openpyxl.worksheet.formula import ArrayFormula

from xlbridge.adapters.helpers import book, cell, existing_cell, not_found, sheet
from xlbridge.adapters.registry import NativeFault, native
from xlbridge.contracts.results import ERROR, OK


def _formula(text: str) -> str:
    return text if text.startswith("=") else f"={text}"


@native
def set_formula(ident, sheet_name, address, formula):
    cell(ident, sheet_name, address).value = _formula(formula)
    return (OK, OK)


@native
def get_cell_formula(ident, sheet_name, address):
    c = existing_cell(sheet(ident, sheet_name), address)
    if c is None:
        return (OK, "")
    if isinstance(c.value, ArrayFormula):
        return (OK, c.value.text or "")
    if c.data_type == "f":
        return (OK, str(c.value))
    return (OK, "")


@native
def set_array_formula(ident, sheet_name, cell_range, formula):
    ws = sheet(ident, sheet_name)
    first = cell_range.split(":")[0]
    ws[first] = ArrayFormula(ref=cell_range, text=_formula(formula))
    return (OK, OK)


@native
def create_named_range(ident, name, sheet_name, cell_range):
    doc = book(ident)
    doc.sheet(sheet_name)
    if name in doc.wb.defined_names:
        raise NativeFault((ERROR, f"Defined name already exists: {name}"))
    ref = f"{quote_sheetname(sheet_name)}!{absolute_coordinate(cell_range)}"
    doc.wb.defined_names[name] = DefinedName(name, attr_text=ref)
    return (OK, OK)


@native
def create_defined_name(ident, name, formula, local_sheet=None):
    doc = book(ident)
    text = formula[1:] if formula.startswith("=") else formula
    if local_sheet is not None:
        doc.sheet(local_sheet).defined_names[name] = DefinedName(name, attr_text=text)
    else:
        doc.wb.defined_names[name] = DefinedName(name, attr_text=text)
    return OK


@native
def get_defined_names(ident):
    wb = book(ident).wb
    names = [
        {"name": dn.name, "value": dn.attr_text, "scope": ""}
        for dn in wb.defined_names.values()
        if not dn.is_reserved
    ]
    for ws in wb.worksheets:
        names.extend(
            {"name": dn.name, "value": dn.attr_text, "scope": ws.title}
            for dn in ws.defined_names.values()
            if not dn.is_reserved
        )
    return (OK, names)


@native
def remove_defined_name(ident, name):
    wb = book(ident).wb
    if name in wb.defined_names:
        del wb.defined_names[name]
        return (OK, OK)
    for ws in wb.worksheets:
        if name in ws.defined_names:
            del ws.defined_names[name]
            return (OK, OK)
    raise not_found("Defined name", name)
