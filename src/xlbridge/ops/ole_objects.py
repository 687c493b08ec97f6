"""Embedded OLE objects.

Three handle kinds are involved: a worksheet's object collection, the
objects themselves and their embedding properties.  Collections fetched
from a worksheet are live; a collection built with ``new_ole_objects`` is
attached with ``set_ole_objects_to_worksheet``.
"""

from __future__ import annotations

from pathlib import Path

from xlbridge.contracts.common import ArgumentError
from xlbridge.contracts.handles import Handle, HandleKind
from xlbridge.engine.boundary import call, minted
from xlbridge.engine.operation import command, infallible, query
from xlbridge.validation.arguments import check_int_range, check_name, check_path, check_sheet_name, check_text


def _extension(extension: str) -> str:
    check_name(extension, "extension")
    return extension


def _data(data: bytes) -> bytes:
    if not isinstance(data, (bytes, bytearray)):
        raise ArgumentError(f"data must be bytes, got {type(data).__name__}")
    return bytes(data)


@query("failed to create OLE object collection")
def new_ole_objects():
    return minted(call("new_ole_objects"), HandleKind.OLE_OBJECTS)


@query("failed to create OLE object")
def new_ole_object():
    return minted(call("new_ole_object"), HandleKind.OLE_OBJECT)


@query("failed to load OLE object")
def new_ole_object_from_file(path: str | Path):
    """Read ``path`` into a new object; the prog id follows the file extension."""
    return minted(call("new_ole_object_from_file", check_path(path)), HandleKind.OLE_OBJECT)


@query("failed to create OLE object")
def new_ole_object_with_data(data: bytes, extension: str):
    return minted(call("new_ole_object_with_data", _data(data), _extension(extension)), HandleKind.OLE_OBJECT)


@query("failed to create embedded object properties")
def new_embedded_object_properties():
    return minted(call("new_embedded_object_properties"), HandleKind.EMBEDDED_OBJECT_PROPERTIES)


@query("failed to read OLE objects")
def get_ole_objects_from_worksheet(book: Handle, sheet: str):
    return minted(
        call("get_ole_objects_from_worksheet", book, check_sheet_name(sheet)),
        HandleKind.OLE_OBJECTS,
    )


@command("failed to attach OLE objects")
def set_ole_objects_to_worksheet(book: Handle, sheet: str, objects: Handle):
    return call("set_ole_objects_to_worksheet", book, check_sheet_name(sheet), objects)


@command("failed to add OLE object")
def add_ole_object(objects: Handle, ole_object: Handle):
    return call("add_ole_object", objects, ole_object)


@query("failed to list OLE objects")
def list_ole_objects(objects: Handle):
    return minted(call("list_ole_objects", objects), HandleKind.OLE_OBJECT)


@query("failed to count OLE objects")
def count_ole_objects(objects: Handle):
    return call("count_ole_objects", objects)


@query("failed to check OLE objects")
def has_ole_objects(objects: Handle):
    return call("has_ole_objects", objects)


@query("failed to read OLE object properties")
def get_ole_object_properties(ole_object: Handle):
    return minted(call("get_ole_object_properties", ole_object), HandleKind.EMBEDDED_OBJECT_PROPERTIES)


@command("failed to set OLE object properties")
def set_ole_object_properties(ole_object: Handle, properties: Handle):
    return call("set_ole_object_properties", ole_object, properties)


@query("failed to read OLE object requirement")
def get_ole_object_requires(ole_object: Handle):
    return call("get_ole_object_requires", ole_object)


@command("failed to set OLE object requirement")
def set_ole_object_requires(ole_object: Handle, requires: str):
    return call("set_ole_object_requires", ole_object, check_text(requires, "requires"))


@query("failed to read OLE object prog id")
def get_ole_object_prog_id(ole_object: Handle):
    return call("get_ole_object_prog_id", ole_object)


@command("failed to set OLE object prog id")
def set_ole_object_prog_id(ole_object: Handle, prog_id: str):
    return call("set_ole_object_prog_id", ole_object, check_name(prog_id, "prog_id"))


@query("failed to read OLE object extension")
def get_ole_object_extension(ole_object: Handle):
    return call("get_ole_object_extension", ole_object)


@command("failed to set OLE object extension")
def set_ole_object_extension(ole_object: Handle, extension: str):
    return call("set_ole_object_extension", ole_object, _extension(extension))


@query("failed to read OLE object data")
def get_ole_object_data(ole_object: Handle):
    return call("get_ole_object_data", ole_object)


@command("failed to set OLE object data")
def set_ole_object_data(ole_object: Handle, data: bytes):
    return call("set_ole_object_data", ole_object, _data(data))


@command("failed to load OLE object")
def load_ole_object_from_file(ole_object: Handle, path: str | Path):
    return call("load_ole_object_from_file", ole_object, check_path(path))


@command("failed to save OLE object")
def save_ole_object_to_file(ole_object: Handle, path: str | Path):
    return call("save_ole_object_to_file", ole_object, check_path(path))


@query("failed to inspect OLE object")
def is_ole_object_binary_format(ole_object: Handle):
    return call("is_ole_object_binary_format", ole_object)


@query("failed to inspect OLE object")
def is_ole_object_excel_format(ole_object: Handle):
    return call("is_ole_object_excel_format", ole_object)


@query("failed to read embedded object prog id")
def get_embedded_object_prog_id(properties: Handle):
    return call("get_embedded_object_prog_id", properties)


@command("failed to set embedded object prog id")
def set_embedded_object_prog_id(properties: Handle, prog_id: str):
    return call("set_embedded_object_prog_id", properties, check_name(prog_id, "prog_id"))


@query("failed to read embedded object shape id")
def get_embedded_object_shape_id(properties: Handle):
    return call("get_embedded_object_shape_id", properties)


@command("failed to set embedded object shape id")
def set_embedded_object_shape_id(properties: Handle, shape_id: int):
    return call(
        "set_embedded_object_shape_id", properties,
        check_int_range(shape_id, 0, 4_294_967_295, "shape_id"),
    )


@infallible()
def determine_prog_id(extension: str):
    """Prog id for a file extension, ``"Package"`` when unknown."""
    return call("determine_prog_id", _extension(extension))
