"""Tests for OLE objects, their collections and embedding properties."""

from __future__ import annotations

from pathlib import Path

import pytest

import xlbridge
from xlbridge.contracts.handles import HandleKind
from xlbridge.contracts.results import COMMAND_OK, Err, ErrorCode, QueryOk


@pytest.fixture
def doc_file(tmp_path: Path) -> Path:
    path = tmp_path / "memo.docx"
    path.write_bytes(b"PK\x03\x04 not really a document")
    return path


class TestObjects:
    def test_new_object_is_blank(self):
        obj = xlbridge.new_ole_object().value
        assert obj.kind is HandleKind.OLE_OBJECT
        assert xlbridge.get_ole_object_data(obj) == QueryOk(value=b"")
        assert xlbridge.get_ole_object_prog_id(obj).value == ""

    def test_from_file(self, doc_file: Path):
        obj = xlbridge.new_ole_object_from_file(doc_file).value
        assert xlbridge.get_ole_object_extension(obj).value == "docx"
        assert xlbridge.get_ole_object_prog_id(obj).value == "Word.Document.12"
        assert xlbridge.get_ole_object_data(obj).value == doc_file.read_bytes()

    def test_from_missing_file(self, tmp_path: Path):
        result = xlbridge.new_ole_object_from_file(tmp_path / "gone.pdf")
        assert result.code is ErrorCode.NOT_FOUND

    def test_with_data(self):
        obj = xlbridge.new_ole_object_with_data(b"\x00\x01", ".XLSX").value
        assert xlbridge.get_ole_object_extension(obj).value == "xlsx"
        assert xlbridge.is_ole_object_excel_format(obj).value is True
        assert xlbridge.is_ole_object_binary_format(obj).value is False

    def test_data_must_be_bytes(self):
        assert xlbridge.new_ole_object_with_data("text", "bin").code is ErrorCode.VALIDATION

    def test_setters(self):
        obj = xlbridge.new_ole_object().value
        assert xlbridge.set_ole_object_data(obj, b"raw") == COMMAND_OK
        xlbridge.set_ole_object_extension(obj, "bin")
        xlbridge.set_ole_object_prog_id(obj, "Package")
        xlbridge.set_ole_object_requires(obj, "Excel 2010")
        assert xlbridge.get_ole_object_data(obj).value == b"raw"
        assert xlbridge.is_ole_object_binary_format(obj).value is True
        assert xlbridge.get_ole_object_prog_id(obj).value == "Package"
        assert xlbridge.get_ole_object_requires(obj).value == "Excel 2010"

    def test_load_and_save(self, doc_file: Path, tmp_path: Path):
        obj = xlbridge.new_ole_object().value
        assert xlbridge.load_ole_object_from_file(obj, doc_file) == COMMAND_OK
        out = tmp_path / "copy.docx"
        assert xlbridge.save_ole_object_to_file(obj, out) == COMMAND_OK
        assert out.read_bytes() == doc_file.read_bytes()

    def test_save_without_data(self, tmp_path: Path):
        obj = xlbridge.new_ole_object().value
        result = xlbridge.save_ole_object_to_file(obj, tmp_path / "x.bin")
        assert result == Err(code=ErrorCode.NATIVE, reason="OLE object has no data")


class TestProperties:
    def test_object_properties_follow_prog_id(self):
        obj = xlbridge.new_ole_object_with_data(b"x", "pdf").value
        props = xlbridge.get_ole_object_properties(obj).value
        assert props.kind is HandleKind.EMBEDDED_OBJECT_PROPERTIES
        assert xlbridge.get_embedded_object_prog_id(props).value == "AcroExch.Document"

    def test_replace_properties(self):
        obj = xlbridge.new_ole_object().value
        props = xlbridge.new_embedded_object_properties().value
        xlbridge.set_embedded_object_prog_id(props, "Excel.Sheet.12")
        xlbridge.set_embedded_object_shape_id(props, 1025)
        assert xlbridge.set_ole_object_properties(obj, props) == COMMAND_OK
        again = xlbridge.get_ole_object_properties(obj).value
        assert xlbridge.get_embedded_object_shape_id(again).value == 1025
        assert xlbridge.get_embedded_object_prog_id(again).value == "Excel.Sheet.12"

    def test_shape_id_range(self):
        props = xlbridge.new_embedded_object_properties().value
        assert xlbridge.set_embedded_object_shape_id(props, -1).code is ErrorCode.VALIDATION


class TestCollections:
    def test_worksheet_collection_is_live(self, book):
        objects = xlbridge.get_ole_objects_from_worksheet(book, "Sheet").value
        assert xlbridge.has_ole_objects(objects).value is False
        xlbridge.add_ole_object(objects, xlbridge.new_ole_object().value)
        again = xlbridge.get_ole_objects_from_worksheet(book, "Sheet").value
        assert xlbridge.count_ole_objects(again).value == 1

    def test_attach_new_collection(self, book):
        objects = xlbridge.new_ole_objects().value
        xlbridge.add_ole_object(objects, xlbridge.new_ole_object_with_data(b"1", "txt").value)
        xlbridge.add_ole_object(objects, xlbridge.new_ole_object_with_data(b"2", "bin").value)
        assert xlbridge.set_ole_objects_to_worksheet(book, "Sheet", objects) == COMMAND_OK
        attached = xlbridge.get_ole_objects_from_worksheet(book, "Sheet").value
        listed = xlbridge.list_ole_objects(attached).value
        assert [xlbridge.get_ole_object_data(o).value for o in listed] == [b"1", b"2"]
        assert all(o.kind is HandleKind.OLE_OBJECT for o in listed)

    def test_missing_sheet(self, book):
        result = xlbridge.get_ole_objects_from_worksheet(book, "Ghost")
        assert result == Err(code=ErrorCode.NOT_FOUND, reason="Sheet not found: Ghost")

    def test_object_is_not_a_collection(self):
        obj = xlbridge.new_ole_object().value
        assert xlbridge.count_ole_objects(obj).code is ErrorCode.INVALID_HANDLE


class TestProgIds:
    @pytest.mark.parametrize(
        "extension, expected",
        [("docx", "Word.Document.12"), (".PPTX", "PowerPoint.Show.12"), ("txt", "txtfile"), ("zip", "Package")],
    )
    def test_determine_prog_id(self, extension, expected):
        assert xlbridge.determine_prog_id(extension) == expected
