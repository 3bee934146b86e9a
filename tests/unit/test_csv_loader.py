"""Unit tests for the CSV record loader."""

import logging

import pytest

from globe_lexicon.loaders.csv_loader import CSVRecordLoader
from globe_lexicon.loaders.exceptions import (
    DatasetCorruptedError,
    DatasetFormatError,
    DatasetNotFoundError,
    DatasetUnreadableError,
    LoadError,
)

HEADER = (
    "Modèle,,,,,Directive,,,,,CGI,,\n"
    "art,FR,,EN,,art,FR,,EN,,art,FR,\n"
    "src,terme,def,term,def,src,terme,def,term,def,src,terme,def\n"
)

ROW_1 = '1.4.1,Entité,"Désigne :\na) une société ;\nb) un trust",Entity,Means,3,,,,,,,\n'
ROW_2 = ",,,,,,,,,,223 VJ,Groupe,Ensemble d'entités\n"


@pytest.fixture
def loader():
    return CSVRecordLoader()


class TestParseText:
    """Decoding of CSV text into data rows."""

    def test_header_rows_skipped(self, loader):
        rows = loader.parse_text(HEADER + ROW_1 + ROW_2)
        assert len(rows) == 2
        assert rows[0][1] == "Entité"
        assert rows[1][11] == "Groupe"

    def test_quoted_multiline_cell_kept(self, loader):
        rows = loader.parse_text(HEADER + ROW_1)
        assert rows[0][2] == "Désigne :\na) une société ;\nb) un trust"

    def test_blank_lines_skipped_before_header_count(self, loader):
        rows = loader.parse_text("\n" + HEADER + "\n" + ROW_1 + "\n\n" + ROW_2)
        assert [row[0] for row in rows] == ["1.4.1", ""]

    def test_header_only(self, loader):
        assert loader.parse_text(HEADER) == []

    def test_custom_delimiter_and_header_size(self):
        loader = CSVRecordLoader(delimiter=";", header_rows=1, min_columns=2)
        rows = loader.parse_text("a;b\n1;2\n")
        assert rows == [["1", "2"]]


class TestColumnCheck:
    """Short rows fail in strict mode and warn otherwise."""

    def test_strict_mode_rejects_short_row(self, loader):
        with pytest.raises(DatasetFormatError) as exc_info:
            loader.parse_text(HEADER + ROW_1 + "1,2,3\n", file_path="lexique.csv")

        error = exc_info.value
        assert error.location == "data row 2"
        assert error.expected_columns == 13
        assert error.actual_columns == 3
        assert "lexique.csv" in str(error)
        assert error.to_dict()["error_type"] == "DatasetFormatError"

    def test_lenient_mode_keeps_short_row(self, caplog):
        loader = CSVRecordLoader(strict_columns=False)
        with caplog.at_level(logging.WARNING):
            rows = loader.parse_text(HEADER + "1,Terme\n")

        assert rows == [["1", "Terme"]]
        assert "Data row 1 has 2 columns" in caplog.text


class TestLoadFile:
    """Loading from disk."""

    def test_load_file(self, loader, tmp_path):
        path = tmp_path / "globeLexicon.csv"
        path.write_text(HEADER + ROW_1 + ROW_2, encoding="utf-8")

        rows = loader.load(str(path))
        assert len(rows) == 2

    def test_utf8_bom_is_ignored(self, loader, tmp_path):
        path = tmp_path / "bom.csv"
        path.write_bytes(b"\xef\xbb\xbf" + (HEADER + ROW_1).encode("utf-8"))

        rows = loader.load(str(path))
        assert rows[0][0] == "1.4.1"

    def test_missing_file(self, loader, tmp_path):
        with pytest.raises(DatasetNotFoundError) as exc_info:
            loader.load(str(tmp_path / "absent.csv"))
        assert isinstance(exc_info.value, LoadError)

    def test_undecodable_file(self, loader, tmp_path):
        path = tmp_path / "latin1.csv"
        path.write_bytes((HEADER + ROW_1).encode("latin-1"))

        with pytest.raises(DatasetCorruptedError) as exc_info:
            loader.load(str(path))

        error = exc_info.value
        assert error.location.startswith("byte ")
        assert error.to_dict()["code"] == "corrupted"
        assert error.details["encoding"] == "utf-8-sig"
        assert any("utf-8-sig" in s for s in error.get_recovery_suggestions())

    def test_directory_is_unreadable(self, loader, tmp_path):
        with pytest.raises(DatasetUnreadableError) as exc_info:
            loader.load(str(tmp_path))

        error = exc_info.value
        assert isinstance(error, LoadError)
        assert error.message.startswith("Dataset cannot be read")
        assert error.to_dict()["code"] == "unreadable"

    def test_carriage_return_in_quoted_cell_kept(self, loader, tmp_path):
        path = tmp_path / "cr.csv"
        path.write_bytes(
            (HEADER + '1.4.1,Entité,"Désigne :\ra) une société",Entity,Means,3,,,,,,,\n').encode("utf-8")
        )

        rows = loader.load(str(path))
        assert rows[0][2] == "Désigne :\ra) une société"


class TestLoadErrorFormatting:
    """Error text and dictionary form."""

    def test_str_with_file_and_location(self):
        error = DatasetFormatError(message="Too short", file_path="lexique.csv", location="data row 4")
        assert str(error) == "Too short (lexique.csv, data row 4)"

    def test_str_with_location_only(self):
        assert str(LoadError(message="Bad", location="line 2")) == "Bad (line 2)"

    def test_str_message_only(self):
        assert str(DatasetNotFoundError(message="Missing")) == "Missing"

    def test_to_dict_copies_details(self):
        error = DatasetCorruptedError(message="x", details={"encoding": "latin-1"})
        data = error.to_dict()
        data["details"]["encoding"] = "utf-8"
        assert error.details["encoding"] == "latin-1"
        assert data["error_type"] == "DatasetCorruptedError"
