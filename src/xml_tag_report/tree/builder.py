"""Document tree construction on top of lxml.

This module turns raw XML into the generic nested document tree consumed by
the tag collector. Each element becomes either its text (no child elements)
or a mapping from child element name to the list of children carrying that
name, in document order.
"""

import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from lxml import etree

from xml_tag_report.shared import ParseError, ReadError, get_logger

# Mixed-content text of an element that also has child elements
TEXT_KEY = "#text"

# Text input is already decoded, so its declared encoding no longer applies
_XML_DECLARATION = re.compile(r"\A\s*<\?xml\b[^>]*\?>")

Node = Union[str, Dict[str, List[Any]]]
DocumentTree = Dict[str, List[Node]]


def _make_parser() -> etree.XMLParser:
    """Create a parser that never touches the network or expands entities.

    ``huge_tree`` lifts libxml2's default nesting limit of 256 levels.
    """
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
        huge_tree=True,
    )


def _local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def _is_element(node: Any) -> bool:
    # Entity references and other special nodes carry a non-string tag
    return isinstance(node.tag, str)


def _has_element_children(element: etree._Element) -> bool:
    return any(_is_element(child) for child in element)


def element_to_node(element: etree._Element) -> Node:
    """Convert one lxml element into a document tree node.

    Attributes are dropped. Repeated children are always grouped into a list,
    keyed by local name in order of first appearance. Conversion keeps one
    stack frame per open element, so document depth is not bounded by the
    interpreter recursion limit.
    """
    if not _has_element_children(element):
        return "".join(element.itertext())

    root_node: Dict[str, List[Any]] = {}
    # (children iterator, node being filled, direct text parts)
    stack = [(iter(element), root_node, [element.text or ""])]
    while stack:
        children, node, direct_text = stack[-1]
        child = next(children, None)
        if child is None:
            stack.pop()
            text = "".join(direct_text).strip()
            if text:
                node[TEXT_KEY] = [text]
            continue

        direct_text.append(child.tail or "")
        if not _is_element(child):
            continue

        siblings = node.setdefault(_local_name(child), [])
        if _has_element_children(child):
            child_node: Dict[str, List[Any]] = {}
            siblings.append(child_node)
            stack.append((iter(child), child_node, [child.text or ""]))
        else:
            siblings.append("".join(child.itertext()))

    return root_node


def parse_bytes(content: Union[bytes, str], source: str = "<memory>") -> DocumentTree:
    """Parse XML content into a document tree.

    Args:
        content: XML document as bytes (decoded per its declaration), or as
            already decoded text whose XML declaration is ignored
        source: Identifier used in error messages

    Returns:
        ``{root_tag: [root_node]}``

    Raises:
        ParseError: If the content is not well-formed XML
    """
    logger = get_logger(__name__, component="parser_adapter")

    if isinstance(content, str):
        content = _XML_DECLARATION.sub("", content, count=1)

    try:
        root = etree.fromstring(content, parser=_make_parser())
    except (etree.XMLSyntaxError, ValueError) as e:
        raise ParseError(source, e) from e

    logger.debug(
        "Document parsed",
        extra={
            "source": source,
            "root": _local_name(root),
            "element_count": sum(1 for _ in root.iter(tag=etree.Element)),
        }
    )
    return {_local_name(root): [element_to_node(root)]}


def parse_file(file_path: Union[str, Path], source: Optional[str] = None) -> DocumentTree:
    """Read and parse one XML file.

    Args:
        file_path: Path of the XML file
        source: Identifier used in error messages (defaults to ``file_path``)

    Raises:
        ReadError: If the file is missing or unreadable
        ParseError: If the file is not well-formed XML
    """
    path_obj = Path(file_path)
    source = source or str(file_path)

    try:
        content = path_obj.read_bytes()
    except OSError as e:
        raise ReadError(source, e) from e

    return parse_bytes(content, source)
