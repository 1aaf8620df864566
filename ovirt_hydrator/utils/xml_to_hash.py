"""
XML to raw hash conversion.

Produces the nested dict shape the hydrator consumes: the document is
wrapped in a single root key, attributes are nested under a reserved key,
repeated children become lists and singular children single nodes.
"""

import logging
from collections.abc import Iterable
from typing import Any
import xml.etree.ElementTree as ET

from ovirt_hydrator.config import DEFAULT_ATTRIBUTE_KEY, DEFAULT_TEXT_KEY
from ovirt_hydrator.exceptions import XMLConversionError

logger = logging.getLogger(__name__)

DEFAULT_FORCE_LIST = ("link", "action", "special_objects")


def _local_name(tag: str) -> str:
    """Drop the ``{namespace}`` prefix ElementTree puts on qualified names."""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


class XMLToHashConverter:
    """
    Converts oVirt XML documents into raw nodes.

    Conversion rules:
    - Attributes are collected under ``attribute_key``
    - Children with the same tag are grouped; a group becomes a list when
      it has more than one member or its tag is in ``force_list``
    - Text-only elements become strings, empty elements become None
    - Text next to attributes or children is kept under ``text_key``
    """

    def __init__(
        self,
        attribute_key: str = DEFAULT_ATTRIBUTE_KEY,
        text_key: str = DEFAULT_TEXT_KEY,
        force_list: Iterable[str] = DEFAULT_FORCE_LIST,
    ):
        self.attribute_key = attribute_key
        self.text_key = text_key
        self.force_list = frozenset(force_list)

    def convert(self, xml: str | bytes) -> dict[str, Any]:
        """
        Convert an XML document.

        Args:
            xml: Document contents

        Returns:
            Single-key dict mapping the root tag to its converted content

        Raises:
            XMLConversionError: If the document is not well-formed
        """
        try:
            root = ET.fromstring(xml)
        except ET.ParseError as e:
            raise XMLConversionError(f"Malformed XML document: {e}") from e

        root_tag = _local_name(root.tag)
        logger.debug(f"Converting XML document with root <{root_tag}>")
        return {root_tag: self._convert_element(root)}

    def _convert_element(self, element: ET.Element) -> Any:
        attributes = {
            _local_name(name): value for name, value in element.attrib.items()
        }
        children = list(element)
        text = (element.text or "").strip()

        if not children and not attributes:
            return text or None

        node: dict[str, Any] = {}
        if attributes:
            node[self.attribute_key] = attributes

        grouped: dict[str, list[Any]] = {}
        for child in children:
            grouped.setdefault(_local_name(child.tag), []).append(
                self._convert_element(child)
            )

        for tag, values in grouped.items():
            if len(values) > 1 or tag in self.force_list:
                node[tag] = values
            else:
                node[tag] = values[0]

        if text:
            node[self.text_key] = text

        return node


def xml_to_hash(
    xml: str | bytes,
    attribute_key: str = DEFAULT_ATTRIBUTE_KEY,
    text_key: str = DEFAULT_TEXT_KEY,
    force_list: Iterable[str] = DEFAULT_FORCE_LIST,
) -> dict[str, Any]:
    """Convert an XML document into a raw node."""
    converter = XMLToHashConverter(
        attribute_key=attribute_key,
        text_key=text_key,
        force_list=force_list,
    )
    return converter.convert(xml)
