"""Document tree layer for XML tag reporting.

Key Components:
    parse_file / parse_bytes: lxml-backed parser adapter producing document trees
    collect_tag: recursive collection of every value stored under a tag
    clean_values: whitespace trimming and empty-value filtering
"""

from .builder import (
    TEXT_KEY,
    DocumentTree,
    Node,
    element_to_node,
    parse_bytes,
    parse_file,
)
from .collector import clean_values, collect_tag, is_composite

__all__ = [
    "TEXT_KEY",
    "DocumentTree",
    "Node",
    "element_to_node",
    "parse_bytes",
    "parse_file",
    "clean_values",
    "collect_tag",
    "is_composite",
]
