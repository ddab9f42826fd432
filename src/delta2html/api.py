#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/delta2html/api.py
"""Public conversion API for delta2html."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from delta2html.engine import DeltaConverter
from delta2html.formats import FormatRegistry
from delta2html.options import ConverterOptions

logger = logging.getLogger(__name__)


def _resolve_options(
    options: ConverterOptions | Mapping[str, Any] | None, kwargs: dict[str, Any]
) -> ConverterOptions:
    """Merge keyword overrides into the given (or default) options.

    ``options`` may be a mapping of option names, as read from JSON.

    Raises
    ------
    TypeError
        If a keyword does not name a converter option.

    """
    unknown = set(kwargs) - ConverterOptions.field_names()
    if unknown:
        raise TypeError(f"Unknown conversion option(s): {', '.join(sorted(unknown))}")

    resolved = ConverterOptions.coerce(options)
    if kwargs:
        return resolved.create_updated(**kwargs)
    return resolved


def convert(
    delta: Any,
    formats: FormatRegistry | Mapping[str, Any] | None = None,
    options: ConverterOptions | Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> str:
    """Convert a delta to an HTML string.

    This is the main entry point of the library. A fresh converter (and
    tree) is built for every call, so concurrent calls do not interfere.

    Parameters
    ----------
    delta : Mapping or sequence
        Either ``{"ops": [...]}`` or the list of operations. Each operation
        is a mapping with ``insert`` and optional ``attributes``, or an
        :class:`~delta2html.operations.Operation`.
    formats : FormatRegistry or Mapping, optional
        Attribute names mapped to format descriptors. Attributes without an
        entry are ignored unless ``unknown_attributes="error"``.
    options : ConverterOptions or Mapping, optional
        Pre-configured options, or a mapping of option names (camelCase
        spellings such as ``blockTag`` are accepted).
    kwargs : Any
        Individual option overrides (``block_tag``, ``inline_tag``,
        ``embed_mode``, ``embed_placeholder``, ``unknown_attributes``).

    Returns
    -------
    str
        HTML made of one element per line, with no newline characters.

    Raises
    ------
    InvalidOperationError
        If an operation has no ``insert`` or is malformed.
    UnknownAttributeError
        If an attribute is unknown and unknown attributes are errors.
    InvalidFormatError
        If a format descriptor is malformed.
    FormatCallbackError
        If a ``mutate`` callback raises.

    Examples
    --------
    Plain text:
        >>> convert([{"insert": "Hello world\\n"}])
        '<div>Hello world</div>'

    Inline and line formats:
        >>> formats = {"bold": {"tag": "b"}, "list": {"category": "line", "tag": "li", "parentTag": "ol"}}
        >>> convert({"ops": [
        ...     {"insert": "One", "attributes": {"bold": True}},
        ...     {"insert": "\\n", "attributes": {"list": True}},
        ...     {"insert": "Two"},
        ...     {"insert": "\\n", "attributes": {"list": True}},
        ... ]}, formats)
        '<ol><li><b>One</b></li><li>Two</li></ol>'

    Option overrides:
        >>> convert([{"insert": "Hello"}], block_tag="p")
        '<p>Hello</p>'

    """
    resolved = _resolve_options(options, kwargs)
    registry = FormatRegistry.coerce(formats)
    logger.debug(f"Converting delta with {len(registry)} registered formats (block tag '{resolved.block_tag}')")
    return DeltaConverter(registry, resolved).convert(delta)
