"""Test utilities for the delta2html test suite.

This module holds the format catalogs shared by the tests. They mirror the
kind of registries host applications supply: a basic catalog exercising
every descriptor field and an editorial ("anthem") catalog layered on top
of it with custom callbacks for embeds.
"""

import copy

from bs4.element import NavigableString

from delta2html import FormatRegistry, new_element, set_inner_html


def parent_callback(node, value):
    """Put bare text under a new element named ``value``, or rename the node's parent."""
    if isinstance(node, NavigableString):
        new_element(value).append(node)
    else:
        node.parent.name = value
    return node


def reverse_callback(node, value):
    """Reverse the text of the node."""
    if isinstance(node, NavigableString):
        return NavigableString(str(node)[::-1])
    node.string = node.get_text()[::-1]
    return node


def repeat_callback(node, value):
    """Append ``value - 1`` copies of the node after it."""
    for _ in range(int(value) - 1):
        node.parent.append(copy.copy(node))
    return node


def data_callback(node, value):
    """Write each key of ``value`` as a ``data-`` attribute."""
    for key, item in value.items():
        node[f"data-{key}"] = item
    return node


def chorus_asset_callback(node, value):
    """Render an image embed as an asset block with an optional caption."""
    if isinstance(node, NavigableString):
        holder = new_element("div")
        holder.append(node)
    else:
        holder = node.parent
        holder.name = "div"

    blank = NavigableString("")
    node.replace_with(blank)
    holder["data-chorus-asset-id"] = str(value["id"])
    holder.append(new_element("img", {"src": value["src"]}))

    if value.get("caption"):
        caption = new_element("div", {"class": "caption"})
        set_inner_html(caption, value["caption"])
        holder.append(caption)

    return blank


BASIC_FORMATS = FormatRegistry(
    {
        "bold": {"tag": "b"},
        "color": {"style": "color"},
        "user": {"class": "user-"},
        "firstheader": {"type": "line", "tag": "h1"},
        "image": {"type": "embed", "tag": "img", "attribute": "src"},
        "link": {"tag": "a", "attribute": "href"},
        "class_name": {"attribute": "class"},
        "bullet": {"type": "line", "tag": "li", "parent_tag": "ul"},
        "list": {"type": "line", "tag": "li", "parent_tag": "ol"},
        "parent": {"type": "embed", "add": parent_callback},
        "reverse": {"add": reverse_callback},
        "repeat": {"add": repeat_callback},
        "data": {"type": "line", "add": data_callback},
    }
)

ANTHEM_FORMATS = BASIC_FORMATS.merged(
    {
        "bold": {"tag": "strong"},
        "italic": {"tag": "em"},
        "strike": {"tag": "s"},
        "link": {"tag": "a", "attribute": "href"},
        "firstheader": {"category": "line", "tag": "h1"},
        "secondheader": {"category": "line", "tag": "h2"},
        "thirdheader": {"category": "line", "tag": "h3"},
        "bullet": {"category": "line", "parentTag": "ul", "tag": "li"},
        "list": {"category": "line", "parentTag": "ol", "tag": "li"},
        "blockquote": {"category": "line", "parentTag": "blockquote"},
        "image": {"category": "embed", "mutate": chorus_asset_callback},
    }
)
