"""
Decoding helpers for BoardGameGeek XML API2 responses.

The API returns XML whose shape depends on cardinality: a tag that appears
once looks different from one that repeats, numbers arrive either as text
or wrapped in ``value`` attributes. Responses are turned into a plain dict
tree here, then the schemas in ``schemas.py`` apply the coercions below.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Any, Dict, Iterable, List, Optional

from ..config import UNKNOWN_GAME_NAME
from ..error_handling import UpstreamUnavailable

logger = logging.getLogger(__name__)

# Tags that are always collections, even with a single element
LIST_TAGS = frozenset({"item", "link", "name", "rank"})

TEXT_KEY = "#text"


def parse_xml(content: bytes) -> Dict[str, Any]:
    """
    Parse an XML document into a nested dict keyed by the root tag.

    Raises:
        UpstreamUnavailable: the document is not well-formed XML
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise UpstreamUnavailable(f"Malformed XML from catalog API: {e}") from e
    return {root.tag: element_to_tree(root)}


def element_to_tree(element: ET.Element) -> Any:
    """
    Convert one element into dicts, lists and strings.

    Attributes and child elements become keys. A leaf without attributes
    collapses to its text; otherwise text is kept under ``#text``.
    """
    children = list(element)
    text = (element.text or "").strip()
    if not element.attrib and not children:
        return text

    node: Dict[str, Any] = dict(element.attrib)
    for child in children:
        value = element_to_tree(child)
        if child.tag in LIST_TAGS:
            node.setdefault(child.tag, []).append(value)
        elif child.tag in node:
            existing = node[child.tag]
            if isinstance(existing, list):
                existing.append(value)
            else:
                node[child.tag] = [existing, value]
        else:
            node[child.tag] = value
    if text:
        node[TEXT_KEY] = text
    return node


def items_of(tree: Dict[str, Any]) -> List[Any]:
    """Return the ``item`` entries of an ``<items>`` document, or an empty list."""
    items = tree.get("items")
    if not isinstance(items, dict):
        return []
    found = items.get("item") or []
    return found if isinstance(found, list) else [found]


def unwrap(value: Any) -> Any:
    """Return the payload of a ``{"value": ...}`` wrapper, or ``value`` itself."""
    if isinstance(value, dict):
        if "value" in value:
            return value["value"]
        return value.get(TEXT_KEY)
    return value


def coerce_int(value: Any) -> Optional[int]:
    """Integer from a bare number or a wrapped/str value; ``None`` when unparseable."""
    value = unwrap(value)
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def coerce_float(value: Any) -> Optional[float]:
    """Float from a bare number or a wrapped/str value; ``None`` when unparseable."""
    value = unwrap(value)
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError:
        return None


def pick_name(value: Any) -> Optional[str]:
    """
    Choose a display name from a name field of any shape.

    A plain string is used as-is. From a collection, the entry with
    ``type == "primary"`` wins, else the first entry.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        name = value.get("value")
        return str(name) if name is not None else None
    if isinstance(value, (list, tuple)):
        if not value:
            return None
        primary = next(
            (entry for entry in value if isinstance(entry, dict) and entry.get("type") == "primary"),
            value[0],
        )
        return pick_name(primary)
    return str(value)


def normalize_name(value: Any) -> str:
    """Like ``pick_name`` but never empty-handed."""
    name = pick_name(value)
    return name if name is not None else UNKNOWN_GAME_NAME


def link_values(links: Iterable[Any], link_type: str) -> List[str]:
    """Values of the links tagged ``link_type``, dropping empty ones."""
    values = []
    for link in links or []:
        link_tag = link.get("type") if isinstance(link, dict) else getattr(link, "type", None)
        if link_tag != link_type:
            continue
        value = link.get("value") if isinstance(link, dict) else getattr(link, "value", None)
        if value:
            values.append(value)
    return values
