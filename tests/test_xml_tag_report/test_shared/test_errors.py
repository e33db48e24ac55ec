"""Tests for the extraction error taxonomy."""

from xml_tag_report.shared import ExtractionError, ParseError, ReadError


class TestExtractionErrors:
    """Test error attributes and messages."""

    def test_read_error(self) -> None:
        cause = FileNotFoundError("No such file or directory")
        error = ReadError("dados.xml", cause)

        assert isinstance(error, ExtractionError)
        assert error.path == "dados.xml"
        assert error.cause is cause
        assert str(error) == "Erro ao ler o arquivo dados.xml: No such file or directory"

    def test_parse_error(self) -> None:
        error = ParseError("dados.xml", ValueError("bad markup"))

        assert str(error) == "Erro ao analisar o arquivo dados.xml: bad markup"

    def test_missing_cause(self) -> None:
        assert str(ReadError("dados.xml")).endswith("unknown error")
