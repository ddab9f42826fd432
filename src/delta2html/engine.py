#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/delta2html/engine.py
"""Delta to HTML conversion engine.

The converter walks the operations of a delta and grows a ``bs4`` tree one
line at a time:

- Text is appended to the *current line*, a block element created on
  demand. Inline formats (any category other than ``"line"``) are applied
  to each inserted piece of content.
- Every ``\\n`` closes the current line. Line formats carried by the
  operation that contains the line break are applied to the whole line,
  which may rename it (``h1``), wrap it (``blockquote``) or group it with
  the previous line (``ol``/``li``).

A converter builds exactly one tree. Create a new instance (or call
:func:`delta2html.api.convert`) for every delta; instances are not safe to
share between threads.

"""

from __future__ import annotations

import logging
from typing import Any, Union

from bs4.element import NavigableString, PageElement, Tag

from delta2html.exceptions import FormatCallbackError, InvalidOperationError, UnknownAttributeError
from delta2html.formats import FormatDescriptor, FormatRegistry
from delta2html.operations import AttributePairs, Operation, iter_operations
from delta2html.options import ConverterOptions
from delta2html.tree import (
    EmbedString,
    attribute_text,
    is_text,
    is_void_tag,
    new_element,
    new_root,
    serialize,
)
from delta2html.utils.decorators import debug_timer

logger = logging.getLogger(__name__)

Content = Union[str, NavigableString]


class DeltaConverter:
    """Convert delta operations into an HTML tree.

    Parameters
    ----------
    formats : FormatRegistry or Mapping, optional
        Attribute names mapped to format descriptors
    options : ConverterOptions or Mapping, optional
        Conversion options or a mapping of option names; defaults are used
        when omitted

    Attributes
    ----------
    root : Tag
        Detached container holding the top-level lines
    line : PageElement or None
        The line currently receiving content

    Examples
    --------
        >>> converter = DeltaConverter({"bold": {"tag": "b"}})
        >>> converter.convert({"ops": [{"insert": "Hi "}, {"insert": "there", "attributes": {"bold": True}}]})
        '<div>Hi <b>there</b></div>'

    """

    def __init__(
        self,
        formats: FormatRegistry | dict[str, Any] | None = None,
        options: ConverterOptions | dict[str, Any] | None = None,
    ):
        """Initialize the converter with an empty tree."""
        self.formats = FormatRegistry.coerce(formats)
        self.options = ConverterOptions.coerce(options)
        self.root: Tag = new_root()
        self.line: PageElement | None = None

    def convert(self, delta: Any) -> str:
        """Write every operation of ``delta`` and return the resulting HTML.

        Parameters
        ----------
        delta : Mapping or sequence
            A mapping with an ``ops`` list, or the list of operations itself

        Returns
        -------
        str
            Serialized HTML without newline characters

        Raises
        ------
        InvalidOperationError
            If an operation is not an insert or is malformed
        UnknownAttributeError
            If an attribute has no format and unknown attributes are errors
        FormatCallbackError
            If a ``mutate`` callback fails

        """
        count = 0
        with debug_timer(logger, "Delta conversion"):
            for index, op in enumerate(iter_operations(delta)):
                self.write_op(op, index)
                count += 1
        logger.debug(f"Converted {count} operations into {len(self.root.contents)} top-level elements")
        return self.to_html()

    def to_html(self) -> str:
        """Serialize the tree built so far."""
        return serialize(self.root).replace("\n", "")

    def write_op(self, op: Operation, index: int | None = None) -> None:
        """Write a single operation.

        Text is split on line breaks; each break finalizes the current line
        with the operation's line formats. Embeds are written as one atomic
        piece of content.

        Raises
        ------
        InvalidOperationError
            If the operation has no insert.

        """
        if op.insert is None:
            raise InvalidOperationError(operation_index=index, operation=op)

        if op.is_embed:
            self.write_text(self._embed_content(op.insert), op.attributes)
            return

        text = op.insert.replace("\r\n", "\n")
        *segments, rest = text.split("\n")
        for segment in segments:
            self.write_text(segment, op.attributes)
            self.format_line(op.attributes)
            self.line = None

        if rest:
            self.write_text(rest, op.attributes)

    def write_text(self, content: Content, attributes: AttributePairs = ()) -> None:
        """Append content to the current line, applying inline formats.

        Parameters
        ----------
        content : str or NavigableString
            Text to append, or a prebuilt string node (used for embeds)
        attributes : tuple of (str, Any) pairs
            Formats carried by the operation

        """
        self._ensure_line()
        if not isinstance(content, NavigableString):
            if not content:
                return
            content = NavigableString(content)

        node: PageElement = content
        applied = False
        for name, value in attributes:
            descriptor = self._lookup(name)
            if descriptor is None or descriptor.is_line:
                continue
            node = self.apply_format(node, descriptor, value, container=self.line, format_name=name)
            self._place(node)
            applied = True

        if not applied:
            self.line.append(node)

        # Grouping and hoisting can move the active line; the newest
        # top-level element is always the one receiving content.
        self.line = self.root.contents[-1] if self.root.contents else None

    def format_line(self, attributes: AttributePairs = ()) -> PageElement:
        """Apply the line formats in ``attributes`` to the current line.

        Returns
        -------
        PageElement
            The line after formatting, which may be a renamed, wrapped or
            replaced element

        """
        line = self._ensure_line()
        for name, value in attributes:
            descriptor = self._lookup(name)
            if descriptor is None or not descriptor.is_line:
                continue
            line = self.apply_format(line, descriptor, value, container=self.root, format_name=name)
        self.line = line
        return line

    def apply_format(
        self,
        node: PageElement,
        descriptor: FormatDescriptor,
        value: Any,
        container: Tag | None = None,
        format_name: str | None = None,
    ) -> PageElement:
        """Apply one format descriptor to a node.

        Steps run in a fixed order, each only when its field is set: tag,
        parent tag, attribute/class/style, then the custom callback.

        Parameters
        ----------
        node : PageElement
            Text node or element to format
        descriptor : FormatDescriptor
            The format to apply
        value : Any
            The attribute value from the operation
        container : Tag, optional
            Where a detached node is placed before parent-tag grouping.
            Defaults to the root.
        format_name : str, optional
            Registry key of the format, used in error messages

        Returns
        -------
        PageElement
            The formatted node, which may differ from ``node``

        """
        if descriptor.tag:
            node = self._apply_tag(node, descriptor)

        if descriptor.parent_tag:
            node = self._group(node, descriptor.parent_tag, self.root if container is None else container)

        if descriptor.sets_attributes:
            node = self._apply_attributes(node, descriptor, value)

        if descriptor.mutate is not None:
            node = self._mutate(node, descriptor, value, format_name)

        return node

    def _ensure_line(self) -> PageElement:
        if self.line is None:
            self.line = new_element(self.options.block_tag)
            self.root.append(self.line)
        return self.line

    def _embed_content(self, value: Any) -> NavigableString:
        if self.options.embed_mode == "node":
            return EmbedString(value)
        return NavigableString(self.options.embed_placeholder)

    def _lookup(self, name: str) -> FormatDescriptor | None:
        descriptor = self.formats.get(name)
        if descriptor is None:
            if self.options.unknown_attributes == "error":
                raise UnknownAttributeError(name)
            logger.debug(f"No format registered for attribute '{name}', ignoring")
        return descriptor

    def _in_tree(self, node: PageElement) -> bool:
        return any(ancestor is self.root for ancestor in node.parents)

    def _place(self, node: PageElement) -> None:
        """Attach an inline format result to the tree."""
        if self._in_tree(node):
            return

        if is_text(node) and node.parent is not None:
            # Text wrapped in a detached element by a callback: the wrapper
            # takes the place of the current line.
            holder = node.parent
            if self.line is not None and self.line.parent is not None:
                self.line.replace_with(holder)
            else:
                self.root.append(holder)
            self.line = holder
        else:
            self.line.append(node)

    def _apply_tag(self, node: PageElement, descriptor: FormatDescriptor) -> PageElement:
        tag = descriptor.tag
        if descriptor.is_line and isinstance(node, Tag):
            node.name = tag
            node.can_be_empty_element = is_void_tag(tag)
            return node

        if is_void_tag(tag):
            element = new_element(tag)
            if node.parent is not None:
                node.replace_with(element)
            return element

        return self._wrap(node, tag)

    def _group(self, node: PageElement, parent_tag: str, container: Tag) -> PageElement:
        if node.parent is None:
            container.append(node)

        previous = node.previous_sibling
        if previous is not None and previous.name == parent_tag:
            previous.append(node)
        else:
            self._wrap(node, parent_tag)
        return node

    def _apply_attributes(self, node: PageElement, descriptor: FormatDescriptor, value: Any) -> PageElement:
        if is_text(node):
            node = self._wrap(node, self.options.inline_tag)

        text = attribute_text(value)
        if descriptor.attribute:
            node[descriptor.attribute] = text
        if descriptor.class_prefix:
            node["class"] = attribute_text(node.get("class")) + f"{descriptor.class_prefix}{text}"
        if descriptor.style:
            node["style"] = attribute_text(node.get("style")) + f"{descriptor.style}: {text}; "
        return node

    def _mutate(
        self, node: PageElement, descriptor: FormatDescriptor, value: Any, format_name: str | None
    ) -> PageElement:
        label = format_name or "<unnamed>"
        try:
            result = descriptor.mutate(node, value)
        except Exception as e:
            raise FormatCallbackError(
                f"Format '{label}' callback failed: {e}", format_name=format_name, original_error=e
            ) from e

        if result is None:
            raise FormatCallbackError(f"Format '{label}' callback returned None", format_name=format_name)
        if not isinstance(result, PageElement):
            raise FormatCallbackError(
                f"Format '{label}' callback returned {type(result).__name__} instead of a markup node",
                format_name=format_name,
            )
        return result

    @staticmethod
    def _wrap(node: PageElement, name: str) -> Tag:
        wrapper = new_element(name)
        if node.parent is not None:
            node.wrap(wrapper)
        else:
            wrapper.append(node)
        return wrapper
