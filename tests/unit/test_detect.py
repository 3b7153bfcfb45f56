"""
Unit tests for loader selection (spreadsheet_reader.detect).

Files are written to ``tmp_path`` with crafted leading bytes so the
content-signature and extension branches can be tested separately.
"""

import pytest

from spreadsheet_reader.detect import detect_loader
from spreadsheet_reader.exceptions import UnsupportedFormatError
from spreadsheet_reader.loaders.delimited import DelimitedLoader
from spreadsheet_reader.loaders.xls import XlsLoader
from spreadsheet_reader.loaders.xlsx import XlsxLoader

OLE2_HEADER = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1" + b"\x00" * 24


class TestDetectBySignature:

    def test_real_workbook(self, people_xlsx):
        assert detect_loader(people_xlsx) is XlsxLoader

    def test_zip_signature_beats_extension(self, tmp_path):
        f = tmp_path / "export.csv"
        f.write_bytes(b"PK\x03\x04rest-of-archive")
        assert detect_loader(f) is XlsxLoader

    def test_ole2_signature(self, tmp_path):
        f = tmp_path / "legacy.dat"
        f.write_bytes(OLE2_HEADER)
        assert detect_loader(f) is XlsLoader


class TestDetectByExtension:

    @pytest.mark.parametrize("name,expected", [
        ("data.csv", DelimitedLoader),
        ("data.TSV", DelimitedLoader),
        ("data.txt", DelimitedLoader),
        ("data.xls", XlsLoader),
        ("data.xlsx", XlsxLoader),
        ("data.xlsm", XlsxLoader),
    ])
    def test_extension_fallback(self, tmp_path, name, expected):
        f = tmp_path / name
        f.write_text("a,b\n1,2\n", encoding="utf-8")
        assert detect_loader(f) is expected

    def test_unknown_extension(self, tmp_path):
        f = tmp_path / "data.json"
        f.write_text("{}", encoding="utf-8")
        with pytest.raises(UnsupportedFormatError, match="Could not detect"):
            detect_loader(f)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="not found"):
            detect_loader(tmp_path / "missing.xlsx")

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            detect_loader(tmp_path)
