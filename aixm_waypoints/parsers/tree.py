"""
Helpers for the generic dictionary tree produced by xmltodict.

xmltodict maps a single child element to a scalar and repeated children
to a list, and an element carrying attributes as well as text to a dict
holding the text under '#text'. Every traversal goes through as_list and
every text read goes through resolve_text.
"""

import logging
from typing import Any, Dict, List, Optional
from xml.parsers.expat import ExpatError

import xmltodict

from ..exceptions import DocumentParseError
from .schema import TEXT_KEY

logger = logging.getLogger(__name__)


def as_list(value: Any) -> List[Any]:
    """
    Normalize a child value to a list.

    None gives an empty list, a list is returned as is and any other
    value is wrapped in a single element list.
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def resolve_text(value: Any, text_key: str = TEXT_KEY) -> Optional[str]:
    """
    Get the text of a leaf that is either a bare string or a dict wrapping it.

    Returns:
        The text, or None when the value carries no text
    """
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        text = value.get(text_key)
        if isinstance(text, str):
            return text
    return None


def get_path(node: Any, *keys: str) -> Any:
    """
    Follow keys down nested dicts.

    Returns:
        The value at the end of the path, or None if any step is missing
        or is not a dict
    """
    current = node
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
        if current is None:
            return None
    return current


def parse_xml(text: str) -> Dict[str, Any]:
    """
    Parse XML text into the generic tree.

    Namespace prefixes are kept in the keys (e.g. 'aixm:designator').

    Raises:
        DocumentParseError: If the text is not a well-formed XML document
    """
    try:
        tree = xmltodict.parse(text, process_namespaces=False)
    except ExpatError as e:
        raise DocumentParseError("Input is not a well-formed XML document", details=str(e)) from e
    logger.debug(f"Parsed XML document with root {list(tree.keys())}")
    return tree


def unparse_xml(tree: Dict[str, Any], pretty: bool = True) -> str:
    """Serialize a generic tree back to XML text."""
    return xmltodict.unparse(tree, pretty=pretty)
