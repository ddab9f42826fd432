#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/delta2html/tree.py
"""Markup tree helpers built on BeautifulSoup.

The converter keeps its tree as plain ``bs4`` elements hanging off a
detached root tag. This module collects the small amount of glue needed on
top of ``bs4``: creating elements that know which names are void, parsing
HTML fragments into an element (the ``inner_html`` setter ``bs4`` lacks),
a distinct string type for embeds, and a formatter that serializes
deterministically.

Custom ``mutate`` callbacks should build new nodes with :func:`new_element`
so void elements serialize correctly.
"""

from __future__ import annotations

from typing import Any, Mapping

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

from delta2html.constants import ROOT_TAG, VOID_TAGS

# Only used as a tag factory; new_tag does not modify the soup.
_FACTORY = BeautifulSoup("", "html.parser")


class EmbedString(NavigableString):
    """Atomic stand-in for a non-text insert.

    An ``EmbedString`` is an empty string node, so it renders as nothing,
    but it keeps the raw embed value on :attr:`value` for format callbacks.

    Parameters
    ----------
    value : Any
        The embed value exactly as it appeared in the operation.

    """

    value: Any

    def __new__(cls, value: Any) -> EmbedString:
        """Create an empty string node carrying ``value``."""
        node = NavigableString.__new__(cls, "")
        node.value = value
        return node

    def __deepcopy__(self, memo: dict, recursive: bool = False) -> EmbedString:
        """Copy the node, keeping the embed value."""
        return type(self)(self.value)

    def __copy__(self) -> EmbedString:
        """Copy the node, keeping the embed value."""
        return type(self)(self.value)

    def __getnewargs__(self) -> tuple[Any]:
        """Support pickling with the embed value."""
        return (self.value,)


class MarkupFormatter(HTMLFormatter):
    """HTML formatter with deterministic, insertion-ordered attributes.

    Text and attribute values are escaped with XML rules (``&``, ``<``,
    ``>`` and quotes) so non-ASCII characters pass through untouched, and
    void elements are written without a closing slash (``<img src="x">``).
    """

    def __init__(self) -> None:
        """Initialize the formatter."""
        super().__init__(
            entity_substitution=EntitySubstitution.substitute_xml,
            void_element_close_prefix=None,
        )

    def attributes(self, tag: Tag) -> list[tuple[str, Any]]:
        """Return attributes in the order they were set."""
        if tag.attrs is None:
            return []
        return list(tag.attrs.items())


FORMATTER = MarkupFormatter()


def new_element(name: str, attrs: Mapping[str, Any] | None = None) -> Tag:
    """Create a detached element.

    Parameters
    ----------
    name : str
        Element name
    attrs : Mapping, optional
        Initial attributes

    Returns
    -------
    Tag
        New element; void names (``img``, ``br`` ...) serialize without a
        closing tag.

    """
    element = _FACTORY.new_tag(name, attrs=dict(attrs or {}))
    # html.parser does not list every name in VOID_TAGS as void (iframe)
    element.can_be_empty_element = is_void_tag(name)
    return element


def new_root() -> Tag:
    """Create the detached container that holds the top-level lines."""
    return new_element(ROOT_TAG)


def is_void_tag(name: str | None) -> bool:
    """Check whether ``name`` is an element that cannot contain children."""
    return name is not None and name.lower() in VOID_TAGS


def is_text(node: PageElement | None) -> bool:
    """Check whether ``node`` is a text (or embed) node rather than an element."""
    return isinstance(node, NavigableString)


def set_inner_html(tag: Tag, markup: str) -> Tag:
    """Replace the children of ``tag`` with the parsed ``markup`` fragment.

    Parameters
    ----------
    tag : Tag
        Element to fill
    markup : str
        HTML fragment

    Returns
    -------
    Tag
        The same element, for chaining

    """
    tag.clear()
    fragment = BeautifulSoup(markup, "html.parser")
    for child in list(fragment.contents):
        tag.append(child.extract())
    return tag


def attribute_text(value: Any) -> str:
    """Render a format value as attribute text.

    Booleans use their JSON spelling, lists are space-joined (the shape
    ``bs4`` gives multi-valued attributes such as ``class``), everything
    else goes through ``str``.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return " ".join(attribute_text(item) for item in value)
    return str(value)


def serialize(root: Tag) -> str:
    """Serialize the children of ``root`` without the root element itself."""
    return root.decode_contents(formatter=FORMATTER)
