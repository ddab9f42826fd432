#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/delta2html/operations.py
"""Delta operations.

A delta is an ordered list of insert operations. Each operation inserts
either text or a single embed (any non-string value, such as an image
description) and may carry formatting attributes.

Attributes are stored as an ordered tuple of ``(name, value)`` pairs: the
order in which formats are applied follows the order the caller wrote them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping, Sequence, Union

from delta2html.exceptions import InvalidOperationError

AttributePairs = tuple[tuple[str, Any], ...]
AttributesInput = Union[Mapping[str, Any], Sequence[Sequence[Any]], None]


@dataclass(frozen=True)
class Operation:
    """A single insert operation.

    Parameters
    ----------
    insert : str or Any
        Text to insert, or an embed value. ``None`` marks an operation that
        is not an insert; the converter rejects it.
    attributes : tuple of (str, Any) pairs
        Formats applied to the inserted content, in application order

    """

    insert: Any
    attributes: AttributePairs = ()

    @property
    def is_embed(self) -> bool:
        """Whether the operation inserts an embed rather than text."""
        return self.insert is not None and not isinstance(self.insert, str)

    def attribute_dict(self) -> dict[str, Any]:
        """Return the attributes as a dict (later duplicates win)."""
        return dict(self.attributes)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], index: int | None = None) -> Operation:
        """Build an operation from a delta entry such as ``{"insert": "Hi", "attributes": {"bold": True}}``.

        A missing ``insert`` key is not rejected here; the converter raises
        :class:`InvalidOperationError` when it reaches the operation.

        Raises
        ------
        InvalidOperationError
            If ``data`` is not a mapping or its attributes are malformed.

        """
        if not isinstance(data, Mapping):
            raise InvalidOperationError(
                f"Operation {index} must be a mapping, got {type(data).__name__}",
                operation_index=index,
                operation=data,
            )
        return cls(insert=data.get("insert"), attributes=normalize_attributes(data.get("attributes"), index))


def normalize_attributes(attributes: AttributesInput, index: int | None = None) -> AttributePairs:
    """Turn an attribute mapping or pair sequence into an ordered tuple of pairs.

    Parameters
    ----------
    attributes : Mapping, sequence of pairs, or None
        Attributes as found in the delta
    index : int, optional
        Operation index, used in error messages

    Returns
    -------
    tuple of (str, Any)

    Raises
    ------
    InvalidOperationError
        If the attributes are neither a mapping nor a sequence of pairs.

    """
    if attributes is None:
        return ()
    if isinstance(attributes, Mapping):
        return tuple((str(name), value) for name, value in attributes.items())
    if isinstance(attributes, (str, bytes)) or not isinstance(attributes, Iterable):
        raise InvalidOperationError(
            f"Attributes of operation {index} must be a mapping or a sequence of pairs",
            operation_index=index,
            operation=attributes,
        )

    pairs = []
    for pair in attributes:
        if isinstance(pair, (str, bytes)) or not isinstance(pair, Sequence) or len(pair) != 2:
            raise InvalidOperationError(
                f"Attributes of operation {index} must be (name, value) pairs, got {pair!r}",
                operation_index=index,
                operation=attributes,
            )
        name, value = pair
        pairs.append((str(name), value))
    return tuple(pairs)


def iter_operations(delta: Any) -> Iterator[Operation]:
    """Yield the operations of a delta.

    Parameters
    ----------
    delta : Mapping, sequence, or iterable
        A mapping with an ``ops`` list, or the list itself. Entries may be
        :class:`Operation` objects or operation mappings.

    Yields
    ------
    Operation

    Raises
    ------
    InvalidOperationError
        If the delta or one of its entries is malformed.

    """
    if isinstance(delta, Mapping):
        if "ops" not in delta:
            raise InvalidOperationError("Delta mapping has no 'ops' list", operation=delta)
        delta = delta["ops"]
    if delta is None:
        return
    if isinstance(delta, (str, bytes)) or not isinstance(delta, Iterable):
        raise InvalidOperationError(f"Delta operations must be a list, got {type(delta).__name__}", operation=delta)

    for index, entry in enumerate(delta):
        if isinstance(entry, Operation):
            yield entry
        else:
            yield Operation.from_dict(entry, index)


def parse_delta(delta: Any) -> list[Operation]:
    """Read a whole delta into a list of operations.

    See :func:`iter_operations` for the accepted shapes.
    """
    return list(iter_operations(delta))
