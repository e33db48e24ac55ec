"""Per-file tag extraction.

Each file is an independent unit of work: read, parse, then collect and clean
every requested tag. A read or parse failure discards the whole file.
"""

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple, Union

from xml_tag_report.shared import ExtractionError, get_logger
from xml_tag_report.tree import clean_values, collect_tag, parse_file

PathLike = Union[str, Path]
Outcome = Union["FileResult", ExtractionError]


@dataclass(frozen=True)
class FileResult:
    """Cleaned values of every requested tag for one file."""

    path: str
    values: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = MappingProxyType(
            {tag: tuple(items) for tag, items in self.values.items()}
        )
        object.__setattr__(self, "values", frozen)

    @property
    def tags(self) -> List[str]:
        return list(self.values)

    def get(self, tag: str) -> Tuple[str, ...]:
        """Values collected for ``tag``, empty when it was not requested."""
        return self.values.get(tag, ())

    @property
    def is_empty(self) -> bool:
        return not any(self.values.values())


def resolve_path(file_path: PathLike, base_dir: Optional[Path] = None) -> Path:
    """Join a relative path to ``base_dir``; absolute paths are kept."""
    path_obj = Path(file_path)
    if base_dir is None or path_obj.is_absolute():
        return path_obj
    return Path(base_dir) / path_obj


def extract_tags(
    file_path: PathLike,
    tags: Sequence[str],
    source: Optional[str] = None,
    correlation_id: Optional[str] = None
) -> FileResult:
    """Extract the cleaned values of ``tags`` from one XML file.

    Args:
        file_path: File to read
        tags: Element names to collect
        source: Identifier recorded on the result (defaults to ``file_path``)
        correlation_id: Optional correlation ID for run tracking

    Returns:
        FileResult with one entry per requested tag

    Raises:
        ReadError: If the file cannot be read
        ParseError: If the file is not well-formed XML
    """
    logger = get_logger(__name__, correlation_id, "extractor")
    source = source or str(file_path)

    logger.info(f"Lendo o arquivo: {file_path}", extra={"source": source})
    tree = parse_file(file_path, source=source)

    values = {tag: clean_values(collect_tag(tree, tag)) for tag in tags}

    logger.debug(
        "Tags extracted",
        extra={
            "source": source,
            "counts": {tag: len(items) for tag, items in values.items()},
        }
    )
    return FileResult(path=source, values=values)


async def extract_tags_async(
    file_path: PathLike,
    tags: Sequence[str],
    source: Optional[str] = None,
    correlation_id: Optional[str] = None
) -> FileResult:
    """Run :func:`extract_tags` in a worker thread."""
    return await asyncio.to_thread(
        extract_tags, file_path, tags, source, correlation_id
    )


async def extract_all(
    files: Sequence[PathLike],
    tags: Sequence[str],
    base_dir: Optional[Path] = None,
    concurrent: bool = False,
    correlation_id: Optional[str] = None
) -> List[Tuple[str, Outcome]]:
    """Extract ``tags`` from every file, keeping input order.

    Files are processed one after the other unless ``concurrent`` is set, in
    which case they all run at once and are joined in input order after every
    task has settled. Read and parse failures are logged and returned as
    outcomes; any other exception propagates.

    Returns:
        ``(source, FileResult | ExtractionError)`` pairs in input order
    """
    logger = get_logger(__name__, correlation_id, "extractor")
    sources = [str(file_path) for file_path in files]
    resolved = [resolve_path(file_path, base_dir) for file_path in files]

    outcomes: List[Outcome] = []
    if concurrent:
        gathered = await asyncio.gather(
            *(
                extract_tags_async(path, tags, source, correlation_id)
                for path, source in zip(resolved, sources)
            ),
            return_exceptions=True,
        )
        for outcome in gathered:
            if isinstance(outcome, ExtractionError):
                logger.error(str(outcome), extra={"source": outcome.path})
            elif not isinstance(outcome, FileResult):
                raise outcome
            outcomes.append(outcome)
    else:
        for path, source in zip(resolved, sources):
            try:
                outcomes.append(
                    await extract_tags_async(path, tags, source, correlation_id)
                )
            except ExtractionError as e:
                logger.error(str(e), extra={"source": e.path})
                outcomes.append(e)

    return list(zip(sources, outcomes))
