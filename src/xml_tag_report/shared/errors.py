"""Error taxonomy for per-file extraction failures."""

from pathlib import Path
from typing import Optional, Union


class ExtractionError(Exception):
    """Base class for failures that exclude one file from the report.

    Attributes:
        path: File the failure belongs to
        cause: Underlying exception raised by the OS or the XML parser
    """

    action = "Erro ao processar o arquivo"

    def __init__(self, path: Union[str, Path], cause: Optional[BaseException] = None) -> None:
        self.path = str(path)
        self.cause = cause
        detail = str(cause) if cause is not None else "unknown error"
        super().__init__(f"{self.action} {self.path}: {detail}")


class ReadError(ExtractionError):
    """File is missing or cannot be read."""

    action = "Erro ao ler o arquivo"


class ParseError(ExtractionError):
    """File content is not well-formed XML."""

    action = "Erro ao analisar o arquivo"
