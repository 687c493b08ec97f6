"""Native OLE objects and the per-worksheet collections that hold them.

Collections live beside the workbook (``Book.ole``) and are not written into
the saved package.
"""

from __future__ import annotations

from pathlib import Path

from xlbridge.adapters.helpers import book
from xlbridge.adapters.registry import NativeFault, mint, native, resolve
from xlbridge.adapters.resources import EmbeddedObjectProperties, OleObject, OleObjects
from xlbridge.contracts.handles import HandleKind
from xlbridge.contracts.results import ERROR, OK

PROG_IDS = {
    "docx": "Word.Document.12",
    "xlsx": "Excel.Sheet.12",
    "pptx": "PowerPoint.Show.12",
    "pdf": "AcroExch.Document",
    "txt": "txtfile",
}
FALLBACK_PROG_ID = "Package"


def prog_id_for(extension: str) -> str:
    return PROG_IDS.get(extension.lower().lstrip("."), FALLBACK_PROG_ID)


def _object(ident) -> OleObject:
    return resolve(ident, HandleKind.OLE_OBJECT)


def _collection(ident) -> OleObjects:
    return resolve(ident, HandleKind.OLE_OBJECTS)


def _properties(ident) -> EmbeddedObjectProperties:
    return resolve(ident, HandleKind.EMBEDDED_OBJECT_PROPERTIES)


def _read(path) -> tuple[bytes, str]:
    source = Path(path)
    if not source.is_file():
        raise NativeFault((ERROR, f"File not found: {source}"))
    return source.read_bytes(), source.suffix.lstrip(".").lower()


@native
def new_ole_objects():
    return (OK, mint(HandleKind.OLE_OBJECTS, OleObjects()))


@native
def new_ole_object():
    return (OK, mint(HandleKind.OLE_OBJECT, OleObject()))


@native
def new_ole_object_from_file(path):
    data, extension = _read(path)
    obj = OleObject(data=data, extension=extension, prog_id=prog_id_for(extension))
    return (OK, mint(HandleKind.OLE_OBJECT, obj))


@native
def new_ole_object_with_data(data, extension):
    ext = extension.lstrip(".").lower()
    obj = OleObject(data=bytes(data), extension=ext, prog_id=prog_id_for(ext))
    return (OK, mint(HandleKind.OLE_OBJECT, obj))


@native
def new_embedded_object_properties():
    return (OK, mint(HandleKind.EMBEDDED_OBJECT_PROPERTIES, EmbeddedObjectProperties()))


@native
def get_ole_objects_from_worksheet(ident, sheet_name):
    doc = book(ident)
    ws = doc.sheet(sheet_name)
    collection = doc.ole.setdefault(ws, OleObjects())
    return (OK, mint(HandleKind.OLE_OBJECTS, collection))


@native
def set_ole_objects_to_worksheet(ident, sheet_name, collection_ident):
    doc = book(ident)
    ws = doc.sheet(sheet_name)
    doc.ole[ws] = _collection(collection_ident)
    return (OK, OK)


@native
def add_ole_object(collection_ident, object_ident):
    _collection(collection_ident).items.append(_object(object_ident))
    return OK


@native
def list_ole_objects(collection_ident):
    items = _collection(collection_ident).items
    return (OK, [mint(HandleKind.OLE_OBJECT, obj) for obj in items])


@native
def count_ole_objects(collection_ident):
    return (OK, len(_collection(collection_ident).items))


@native
def has_ole_objects(collection_ident):
    return (OK, bool(_collection(collection_ident).items))


@native
def get_ole_object_properties(object_ident):
    return (OK, mint(HandleKind.EMBEDDED_OBJECT_PROPERTIES, _object(object_ident).properties))


@native
def set_ole_object_properties(object_ident, properties_ident):
    _object(object_ident).properties = _properties(properties_ident)
    return (OK, OK)


@native
def get_ole_object_requires(object_ident):
    return (OK, _object(object_ident).requires)


@native
def set_ole_object_requires(object_ident, requires):
    _object(object_ident).requires = requires
    return OK


@native
def get_ole_object_prog_id(object_ident):
    return (OK, _object(object_ident).prog_id)


@native
def set_ole_object_prog_id(object_ident, prog_id):
    _object(object_ident).prog_id = prog_id
    return OK


@native
def get_ole_object_extension(object_ident):
    return (OK, _object(object_ident).extension)


@native
def set_ole_object_extension(object_ident, extension):
    _object(object_ident).extension = extension.lstrip(".").lower()
    return OK


@native
def get_ole_object_data(object_ident):
    return (OK, _object(object_ident).data)


@native
def set_ole_object_data(object_ident, data):
    _object(object_ident).data = bytes(data)
    return (OK, OK)


@native
def load_ole_object_from_file(object_ident, path):
    obj = _object(object_ident)
    obj.data, obj.extension = _read(path)
    obj.prog_id = prog_id_for(obj.extension)
    return (OK, OK)


@native
def save_ole_object_to_file(object_ident, path):
    obj = _object(object_ident)
    if not obj.data:
        raise NativeFault("OLE object has no data")
    Path(path).write_bytes(obj.data)
    return (OK, OK)


@native
def is_ole_object_binary_format(object_ident):
    return (OK, _object(object_ident).extension == "bin")


@native
def is_ole_object_excel_format(object_ident):
    return (OK, _object(object_ident).extension == "xlsx")


@native
def get_embedded_object_prog_id(properties_ident):
    return (OK, _properties(properties_ident).prog_id)


@native
def set_embedded_object_prog_id(properties_ident, prog_id):
    _properties(properties_ident).prog_id = prog_id
    return OK


@native
def get_embedded_object_shape_id(properties_ident):
    return (OK, _properties(properties_ident).shape_id)


@native
def set_embedded_object_shape_id(properties_ident, shape_id):
    _properties(properties_ident).shape_id = shape_id
    return OK


@native
def determine_prog_id(extension):
    return prog_id_for(extension)
