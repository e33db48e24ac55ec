"""Tag value collection over document trees.

The walk is pre-order: for each mapping, children are visited in their stored
order; a child whose name matches contributes its value(s) before the walk
descends into it looking for deeper occurrences of the same name.
"""

from collections.abc import Mapping
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from .builder import TEXT_KEY


def is_composite(value: Any) -> bool:
    """Check whether a node can hold named children."""
    return isinstance(value, (Mapping, list, tuple))


def _iter_children(node: Any) -> Iterator[Tuple[Optional[str], Any]]:
    if isinstance(node, Mapping):
        return iter(node.items())
    # Sequence positions have no name, so they never match a tag
    return ((None, item) for item in node)


def collect_tag(node: Any, tag: str) -> List[Any]:
    """Collect every raw value stored under ``tag`` anywhere in ``node``.

    A matched list contributes each of its items as-is. Matched values are
    still descended into, so a tag nested inside another occurrence of itself
    yields both values, outer first.

    Args:
        node: Document tree or any sub-node of one
        tag: Element name to collect

    Returns:
        Raw values in traversal order; empty when ``node`` is not composite
    """
    results: List[Any] = []
    if not is_composite(node):
        return results

    # One iterator per open composite, so depth is bounded by document nesting
    stack = [_iter_children(node)]
    while stack:
        try:
            name, value = next(stack[-1])
        except StopIteration:
            stack.pop()
            continue

        if name == tag:
            if isinstance(value, (list, tuple)):
                results.extend(value)
            else:
                results.append(value)

        if is_composite(value):
            stack.append(_iter_children(value))

    return results


def _value_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        text = value.get(TEXT_KEY, "")
        if isinstance(text, (list, tuple)):
            text = "".join(str(part) for part in text)
        return str(text)
    if value is None:
        return ""
    return str(value)


def clean_values(values: Iterable[Any]) -> List[str]:
    """Strip collected values and drop the ones left empty.

    A collected element that has children contributes its own direct text.
    """
    cleaned = []
    for value in values:
        text = _value_text(value).strip()
        if text:
            cleaned.append(text)
    return cleaned
