"""delta2html - Convert rich text deltas to HTML.

A delta is an ordered list of insert operations, each carrying text or an
embed plus optional formatting attributes. delta2html turns such a list
into HTML: one block element per line, inline elements for formatted text.

What an attribute does is decided by a caller-supplied format registry:

- ``tag`` wraps content in an element (or renames the line for line formats)
- ``parentTag`` groups consecutive lines, e.g. ``li`` elements into an ``ol``
- ``attribute``, ``classPrefix`` and ``style`` write element attributes
- ``mutate`` runs a custom callback for anything else

Examples
--------
    >>> from delta2html import convert
    >>> convert(
    ...     [{"insert": "Hello, "}, {"insert": "World!", "attributes": {"bold": True}}, {"insert": "\\n"}],
    ...     {"bold": {"tag": "b"}},
    ... )
    '<div>Hello, <b>World!</b></div>'

See Also
--------
delta2html.formats : Format descriptors and registry
delta2html.engine : The conversion engine

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "1.0.0"

from delta2html.api import convert
from delta2html.engine import DeltaConverter
from delta2html.exceptions import (
    ConfigurationError,
    Delta2HtmlError,
    FormatCallbackError,
    InvalidFormatError,
    InvalidOperationError,
    UnknownAttributeError,
    ValidationError,
)
from delta2html.formats import FormatDescriptor, FormatRegistry
from delta2html.operations import Operation, parse_delta
from delta2html.options import ConverterOptions
from delta2html.tree import EmbedString, new_element, set_inner_html

__all__ = [
    "__version__",
    "convert",
    "DeltaConverter",
    "ConverterOptions",
    "FormatDescriptor",
    "FormatRegistry",
    "Operation",
    "parse_delta",
    "EmbedString",
    "new_element",
    "set_inner_html",
    "Delta2HtmlError",
    "ValidationError",
    "InvalidOperationError",
    "UnknownAttributeError",
    "InvalidFormatError",
    "FormatCallbackError",
    "ConfigurationError",
]
