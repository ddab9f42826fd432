#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/delta2html/formats.py
"""Format descriptors and the format registry.

A format descriptor tells the converter what an attribute name does to the
tree. Every field is optional; the converter checks them in a fixed order
(``tag``, ``parent_tag``, ``attribute``/``class_prefix``/``style``,
``mutate``) and applies the ones that are present.

Descriptors can be written as plain mappings. Besides the field names,
the camelCase spellings (``parentTag``, ``classPrefix``) and the historical
keys ``type`` (category), ``class`` (class prefix) and ``add`` (mutate) are
accepted.

Examples
--------
    >>> registry = FormatRegistry({
    ...     "bold": {"tag": "b"},
    ...     "link": {"tag": "a", "attribute": "href"},
    ...     "bullet": {"category": "line", "tag": "li", "parentTag": "ul"},
    ... })
    >>> registry["bullet"].is_line
    True

"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable, Iterator, Mapping, Optional

from bs4.element import PageElement

from delta2html.constants import FORMAT_CATEGORIES, LINE_CATEGORY, FormatCategory
from delta2html.exceptions import InvalidFormatError


MutateCallback = Callable[[PageElement, Any], PageElement]

_KEY_ALIASES = {
    "parentTag": "parent_tag",
    "classPrefix": "class_prefix",
    "class": "class_prefix",
    "type": "category",
    "add": "mutate",
}


@dataclass(frozen=True)
class FormatDescriptor:
    """How one attribute name transforms the tree.

    Parameters
    ----------
    tag : str, optional
        Line formats rename the line to this tag. Other formats wrap the
        node in it, or replace the node when the tag is void.
    category : {"line", "embed"}, optional
        ``"line"`` formats apply to the whole line when its line break is
        written. Anything else applies to the inserted content.
    parent_tag : str, optional
        Group the node under an element of this name, merging into the
        preceding sibling when it already is one.
    attribute : str, optional
        Attribute set to the format value.
    class_prefix : str, optional
        ``f"{class_prefix}{value}"`` is appended to the ``class`` attribute.
    style : str, optional
        ``f"{style}: {value}; "`` is appended to the ``style`` attribute.
    mutate : callable, optional
        ``(node, value) -> node`` callback run last; its result replaces the node.

    """

    tag: Optional[str] = None
    category: Optional[FormatCategory] = None
    parent_tag: Optional[str] = None
    attribute: Optional[str] = None
    class_prefix: Optional[str] = None
    style: Optional[str] = None
    mutate: Optional[MutateCallback] = None

    def __post_init__(self) -> None:
        """Validate the descriptor fields.

        Raises
        ------
        InvalidFormatError
            If the category is unknown or ``mutate`` is not callable.

        """
        if self.category is not None and self.category not in FORMAT_CATEGORIES:
            raise InvalidFormatError(
                f"Unknown format category {self.category!r}; expected one of {FORMAT_CATEGORIES} or None"
            )
        if self.mutate is not None and not callable(self.mutate):
            raise InvalidFormatError(f"mutate must be callable, got {type(self.mutate).__name__}")
        for name in ("tag", "parent_tag", "attribute", "class_prefix", "style"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise InvalidFormatError(f"{name} must be a string, got {type(value).__name__}")

    @property
    def is_line(self) -> bool:
        """Whether the descriptor applies to whole lines."""
        return self.category == LINE_CATEGORY

    @property
    def sets_attributes(self) -> bool:
        """Whether the descriptor writes any element attribute."""
        return bool(self.attribute or self.class_prefix or self.style)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> FormatDescriptor:
        """Build a descriptor from a mapping.

        Parameters
        ----------
        data : Mapping
            Descriptor fields, in any of the accepted spellings

        Returns
        -------
        FormatDescriptor

        Raises
        ------
        InvalidFormatError
            If the mapping has unknown or duplicated keys.

        """
        valid = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _KEY_ALIASES.get(key, key)
            if name not in valid:
                raise InvalidFormatError(f"Unknown format descriptor key {key!r}")
            if name in kwargs:
                raise InvalidFormatError(f"Format descriptor key {key!r} duplicates {name!r}")
            kwargs[name] = value
        return cls(**kwargs)


class FormatRegistry(Mapping[str, FormatDescriptor]):
    """Read-only mapping from attribute name to :class:`FormatDescriptor`.

    Parameters
    ----------
    formats : Mapping, optional
        Attribute names mapped to descriptors or descriptor mappings

    Raises
    ------
    InvalidFormatError
        If any entry cannot be turned into a descriptor.

    """

    def __init__(self, formats: Mapping[str, FormatDescriptor | Mapping[str, Any]] | None = None):
        """Initialize the registry."""
        self._formats: dict[str, FormatDescriptor] = {}
        for name, entry in (formats or {}).items():
            self._formats[str(name)] = _build_descriptor(str(name), entry)

    def __getitem__(self, name: str) -> FormatDescriptor:
        return self._formats[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._formats)

    def __len__(self) -> int:
        return len(self._formats)

    def __repr__(self) -> str:
        return f"FormatRegistry({sorted(self._formats)!r})"

    def merged(self, other: Mapping[str, FormatDescriptor | Mapping[str, Any]]) -> FormatRegistry:
        """Return a new registry with ``other`` layered over this one."""
        combined: dict[str, FormatDescriptor | Mapping[str, Any]] = dict(self._formats)
        combined.update(other)
        return FormatRegistry(combined)

    @classmethod
    def coerce(cls, formats: FormatRegistry | Mapping[str, Any] | None) -> FormatRegistry:
        """Return ``formats`` as a registry, building one if needed."""
        if isinstance(formats, FormatRegistry):
            return formats
        return cls(formats)


def _build_descriptor(name: str, entry: FormatDescriptor | Mapping[str, Any]) -> FormatDescriptor:
    if isinstance(entry, FormatDescriptor):
        return entry
    if not isinstance(entry, Mapping):
        raise InvalidFormatError(
            f"Format '{name}' must be a mapping or FormatDescriptor, got {type(entry).__name__}",
            format_name=name,
        )
    try:
        return FormatDescriptor.from_mapping(entry)
    except InvalidFormatError as e:
        raise InvalidFormatError(f"Format '{name}': {e.message}", format_name=name, original_error=e) from e
