#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Converter options for delta2html.

Options are immutable dataclasses. Use ``create_updated`` to derive a
modified copy instead of mutating an instance.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping, get_args

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from delta2html.constants import (
    DEFAULT_BLOCK_TAG,
    DEFAULT_EMBED_MODE,
    DEFAULT_EMBED_PLACEHOLDER,
    DEFAULT_INLINE_TAG,
    DEFAULT_UNKNOWN_ATTRIBUTES,
    EmbedMode,
    UnknownAttributeMode,
)


_OPTION_ALIASES = {
    "blockTag": "block_tag",
    "inlineTag": "inline_tag",
    "embedMode": "embed_mode",
    "embedPlaceholder": "embed_placeholder",
    "unknownAttributes": "unknown_attributes",
}


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class ConverterOptions(CloneFrozenMixin):
    """Options controlling how a delta is turned into HTML.

    Parameters
    ----------
    block_tag : str, default "div"
        Element name used for each new line.
    inline_tag : str, default "span"
        Element name used when bare text must be wrapped to carry attributes.
    embed_mode : {"placeholder", "node"}, default "placeholder"
        How non-text inserts enter the tree. ``"placeholder"`` inserts
        ``embed_placeholder`` as text; ``"node"`` inserts an invisible
        ``EmbedString`` carrying the raw embed value.
    embed_placeholder : str, default "!"
        Text standing in for an embed in placeholder mode.
    unknown_attributes : {"ignore", "error"}, default "ignore"
        What to do with attributes that have no registry entry.

    """

    block_tag: str = field(
        default=DEFAULT_BLOCK_TAG,
        metadata={"help": "Element name used for each line", "importance": "core"},
    )
    inline_tag: str = field(
        default=DEFAULT_INLINE_TAG,
        metadata={"help": "Element name used to wrap bare text that receives attributes", "importance": "core"},
    )
    embed_mode: EmbedMode = field(
        default=DEFAULT_EMBED_MODE,
        metadata={
            "help": "How embeds enter the tree: 'placeholder' text or an invisible 'node'",
            "choices": ["placeholder", "node"],
            "importance": "advanced",
        },
    )
    embed_placeholder: str = field(
        default=DEFAULT_EMBED_PLACEHOLDER,
        metadata={"help": "Text inserted for embeds in placeholder mode", "importance": "advanced"},
    )
    unknown_attributes: UnknownAttributeMode = field(
        default=DEFAULT_UNKNOWN_ATTRIBUTES,
        metadata={
            "help": "Handling of attributes missing from the format registry",
            "choices": ["ignore", "error"],
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If a tag name is empty or a mode is not one of its choices.

        """
        if not self.block_tag or not self.block_tag.strip():
            raise ValueError("block_tag must be a non-empty element name")
        if not self.inline_tag or not self.inline_tag.strip():
            raise ValueError("inline_tag must be a non-empty element name")
        if self.embed_mode not in get_args(EmbedMode):
            raise ValueError(f"embed_mode must be one of {get_args(EmbedMode)}, got {self.embed_mode!r}")
        if self.unknown_attributes not in get_args(UnknownAttributeMode):
            raise ValueError(
                f"unknown_attributes must be one of {get_args(UnknownAttributeMode)}, "
                f"got {self.unknown_attributes!r}"
            )

    @classmethod
    def field_names(cls) -> set[str]:
        """Return the names of all option fields."""
        return {f.name for f in fields(cls)}

    @classmethod
    def coerce(cls, options: ConverterOptions | Mapping[str, Any] | None) -> ConverterOptions:
        """Return ``options`` as a ``ConverterOptions`` instance.

        Mappings may use the field names or their camelCase spellings
        (``blockTag``, ``inlineTag`` ...); ``None`` gives the defaults.

        Raises
        ------
        TypeError
            If a key does not name an option, or ``options`` is of another type.
        ValueError
            If a value is invalid.

        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if not isinstance(options, Mapping):
            raise TypeError(f"options must be ConverterOptions or a mapping, got {type(options).__name__}")

        kwargs = {_OPTION_ALIASES.get(key, key): value for key, value in options.items()}
        unknown = set(kwargs) - cls.field_names()
        if unknown:
            raise TypeError(f"Unknown conversion option(s): {', '.join(sorted(unknown))}")
        return cls(**kwargs)
