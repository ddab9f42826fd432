#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_reference_deltas.py
"""Reference conversions for complete deltas.

Tests cover:
- The basic catalog: inline tags, line formats, embeds, classes and styles,
  lists, custom callbacks and block tag overrides
- The editorial catalog: paragraphs, headers, blockquotes, lists and asset
  embeds rendered by a callback

"""

import pytest
from utils import ANTHEM_FORMATS, BASIC_FORMATS

from delta2html import ConverterOptions, convert

BASIC_CASES = [
    pytest.param(
        {"ops": [{"insert": "Hello world\n"}]},
        {},
        "<div>Hello world</div>",
        id="no-formats",
    ),
    pytest.param(
        {"ops": [{"insert": "Hello, "}, {"insert": "World!", "attributes": {"bold": True}}, {"insert": "\n"}]},
        {},
        "<div>Hello, <b>World!</b></div>",
        id="simple-inline-tags",
    ),
    pytest.param(
        {
            "ops": [
                {"insert": "Hello, World!\nThis is a second line.", "attributes": {"bold": True}},
                {"insert": "\n", "attributes": {"firstheader": True}},
                {"insert": "This is a demo of convert-rich-text "},
                {"insert": 1, "attributes": {"image": "http://i.imgur.com/2ockv.gif"}},
                {"insert": " "},
                {"insert": "Google", "attributes": {"link": "https://www.google.com"}},
                {"insert": "\n"},
            ]
        },
        {},
        "<div><b>Hello, World!</b></div>"
        "<h1><b>This is a second line.</b></h1>"
        "<div>This is a demo of convert-rich-text "
        '<img src="http://i.imgur.com/2ockv.gif"> '
        '<a href="https://www.google.com">Google</a></div>',
        id="line-formats-embeds-and-attributes",
    ),
    pytest.param(
        {"ops": [{"insert": "Hello world", "attributes": {"color": "red", "user": 1234}}, {"insert": "\n"}]},
        {},
        '<div><span style="color: red; " class="user-1234">Hello world</span></div>',
        id="classes-and-styles",
    ),
    pytest.param(
        {"ops": [{"insert": "hello world", "attributes": {"class_name": "greeting"}}, {"insert": "\n"}]},
        {},
        '<div><span class="greeting">hello world</span></div>',
        id="attribute-with-implicit-span",
    ),
    pytest.param(
        {
            "ops": [
                {"insert": "Consecutive list elements"},
                {"insert": "\n", "attributes": {"list": True}},
                {"insert": "Should create a parent tag"},
                {"insert": "\n", "attributes": {"list": True}},
                {"insert": "Consecutive bullet elements"},
                {"insert": "\n", "attributes": {"bullet": True}},
                {"insert": "Should create a parent tag"},
                {"insert": "\n", "attributes": {"bullet": True}},
            ]
        },
        {},
        "<ol><li>Consecutive list elements</li><li>Should create a parent tag</li></ol>"
        "<ul><li>Consecutive bullet elements</li><li>Should create a parent tag</li></ul>",
        id="lists",
    ),
    pytest.param(
        {
            "ops": [
                {"attributes": {"bold": True}, "insert": "hello"},
                {"insert": " "},
                {"attributes": {"link": "http://vox.com"}, "insert": "world"},
                {"insert": " this works...?\n"},
            ]
        },
        {},
        '<div><b>hello</b> <a href="http://vox.com">world</a> this works...?</div>',
        id="links",
    ),
    pytest.param(
        {
            "ops": [
                {"insert": "Some text "},
                {"insert": "a link", "attributes": {"link": "http://vox.com"}},
                {"insert": " more text"},
                {"insert": "\n", "attributes": {"list": True}},
            ]
        },
        {},
        '<ol><li>Some text <a href="http://vox.com">a link</a> more text</li></ol>',
        id="link-inside-list",
    ),
    pytest.param(
        {
            "ops": [
                {"insert": "hello world", "attributes": {"parent": "article"}},
                {"insert": "\n", "attributes": {"firstheader": True}},
            ]
        },
        {},
        "<h1>hello world</h1>",
        id="modify-parent",
    ),
    pytest.param(
        {
            "ops": [
                {"insert": "Hello World!", "attributes": {"reverse": True}},
                {"insert": "\n"},
                {"insert": "Foo Bar Baz", "attributes": {"bold": True, "repeat": 3}},
                {"insert": "\n", "attributes": {"data": {"foo": "bar"}}},
            ]
        },
        {},
        "<div>!dlroW olleH</div>"
        '<div data-foo="bar"><b>Foo Bar Baz</b><b>Foo Bar Baz</b><b>Foo Bar Baz</b></div>',
        id="custom-formats",
    ),
    pytest.param(
        {"ops": [{"insert": "Hello world"}]},
        {"block_tag": "p"},
        "<p>Hello world</p>",
        id="change-default-block-tag",
    ),
    pytest.param(
        {"ops": [{"insert": "\n", "attributes": {"firstheader": True}}]},
        {},
        "<h1></h1>",
        id="line-formats-with-no-contents",
    ),
]

GOLDFINGER_DELTA = {
    "ops": [
        {"insert": "This is gold, Mr. Bond"},
        {"insert": "\n", "attributes": {"firstheader": True}},
        {
            "insert": 1,
            "attributes": {
                "image": {
                    "id": 9,
                    "src": "http://www.independent.co.uk/incoming/article8435194.ece/alternates/w620/Goldfinger.jpg",
                    "caption": "<em>This cannot end well.</em>",
                }
            },
        },
        {"insert": "\n"},
        {"insert": "All my life, I've been in love with its colour, "},
        {"insert": "its brilliance, its divine heaviness. ", "attributes": {"italic": True}},
        {"insert": "I welcome any enterprise that will increase my stock, which is "},
        {"insert": "considerable.", "attributes": {"bold": True}},
        {"insert": "\n"},
        {"insert": "I think you've made your point. Thank you for the demonstration."},
        {"insert": "\n", "attributes": {"blockquote": True}},
        {
            "insert": "Choose your next witticism carefully,",
            "attributes": {
                "link": "http://www.script-o-rama.com/movie_scripts/g/goldfinger-script-transcript-james-bond.html"
            },
        },
        {"insert": "\n", "attributes": {"list": True}},
        {"insert": "Mr. Bond", "attributes": {"bold": True}},
        {"insert": "\n", "attributes": {"list": True}},
        {"insert": "It may be "},
        {"insert": "your last.", "attributes": {"italic": True}},
        {"insert": "\n", "attributes": {"list": True}},
        {
            "insert": "The purpose of our two encounters is now very clear to me. "
            "I do not intend to be distracted by another.\n"
        },
        {"insert": "Good night, Mr Bond."},
        {"insert": "\n", "attributes": {"secondheader": True}},
        {"insert": "Do you expect me to talk?"},
        {"insert": "\n", "attributes": {"blockquote": True}},
        {"insert": "No, Mr Bond!\nI expect you to die!"},
        {"insert": "\n", "attributes": {"firstheader": True}},
        {
            "insert": 1,
            "attributes": {
                "image": {
                    "id": 10,
                    "src": "http://www.filmchronicles.com/wp-content/uploads/2012/10/Goldfinger065.jpg",
                    "caption": "I knew this was going to go badly.",
                }
            },
        },
    ]
}

GOLDFINGER_HTML = (
    "<h1>This is gold, Mr. Bond</h1>"
    '<div data-chorus-asset-id="9">'
    '<img src="http://www.independent.co.uk/incoming/article8435194.ece/alternates/w620/Goldfinger.jpg">'
    '<div class="caption"><em>This cannot end well.</em></div></div>'
    "<p>All my life, I've been in love with its colour, <em>its brilliance, its divine heaviness. </em>"
    "I welcome any enterprise that will increase my stock, which is <strong>considerable.</strong></p>"
    "<blockquote><p>I think you've made your point. Thank you for the demonstration.</p></blockquote>"
    "<ol>"
    '<li><a href="http://www.script-o-rama.com/movie_scripts/g/goldfinger-script-transcript-james-bond.html">'
    "Choose your next witticism carefully,</a></li>"
    "<li><strong>Mr. Bond</strong></li>"
    "<li>It may be <em>your last.</em></li>"
    "</ol>"
    "<p>The purpose of our two encounters is now very clear to me. I do not intend to be distracted by another.</p>"
    "<h2>Good night, Mr Bond.</h2>"
    "<blockquote><p>Do you expect me to talk?</p></blockquote>"
    "<p>No, Mr Bond!</p>"
    "<h1>I expect you to die!</h1>"
    '<div data-chorus-asset-id="10">'
    '<img src="http://www.filmchronicles.com/wp-content/uploads/2012/10/Goldfinger065.jpg">'
    '<div class="caption">I knew this was going to go badly.</div></div>'
)

ANTHEM_CASES = [
    pytest.param({"ops": []}, "", id="empty-delta-into-empty-string"),
    pytest.param({"ops": [{"insert": "hello world"}]}, "<p>hello world</p>", id="plain-insert-into-paragraph"),
    pytest.param({"ops": [{"insert": "hello\nworld"}]}, "<p>hello</p><p>world</p>", id="multiple-lines"),
    pytest.param(
        {"ops": [{"insert": "abc", "attributes": {"italic": True}}]},
        "<p><em>abc</em></p>",
        id="italic-into-em",
    ),
    pytest.param(
        {
            "ops": [
                {"insert": "hello"},
                {"insert": "\n", "attributes": {"bullet": True}},
                {"insert": "world"},
                {"insert": "\n", "attributes": {"bullet": True}},
            ]
        },
        "<ul><li>hello</li><li>world</li></ul>",
        id="bullet-into-ul",
    ),
    pytest.param(
        {"ops": [{"insert": "hello world"}, {"insert": "\n", "attributes": {"firstheader": True}}]},
        "<h1>hello world</h1>",
        id="firstheader-into-h1",
    ),
    pytest.param(
        {"ops": [{"insert": "hello world"}, {"insert": "\n", "attributes": {"blockquote": True}}]},
        "<blockquote><p>hello world</p></blockquote>",
        id="blockquote-into-blockquote",
    ),
    pytest.param(
        {
            "ops": [
                {"insert": "hello "},
                {"insert": "world", "attributes": {"link": "http://vox.com"}},
                {"insert": " "},
                {"insert": "yay", "attributes": {"bold": True}},
            ]
        },
        '<p>hello <a href="http://vox.com">world</a> <strong>yay</strong></p>',
        id="multiple-inline-formats",
    ),
    pytest.param(
        {
            "ops": [
                {"insert": "hello world\n"},
                {
                    "insert": 1,
                    "attributes": {
                        "image": {
                            "id": 1234,
                            "src": "http://i.imgur.com/2ockv.gif",
                            "caption": "<em>Clickity-Clack</em>",
                        }
                    },
                },
            ]
        },
        "<p>hello world</p>"
        '<div data-chorus-asset-id="1234"><img src="http://i.imgur.com/2ockv.gif">'
        '<div class="caption"><em>Clickity-Clack</em></div></div>',
        id="image-into-asset-markup",
    ),
    pytest.param(
        {
            "ops": [
                {"insert": "hello "},
                {"insert": "world", "attributes": {"link": "http://vox.com"}},
                {"insert": " yay"},
                {"insert": "\n", "attributes": {"list": True}},
            ]
        },
        '<ol><li>hello <a href="http://vox.com">world</a> yay</li></ol>',
        id="links-inside-list-items",
    ),
    pytest.param(GOLDFINGER_DELTA, GOLDFINGER_HTML, id="big-complex-document"),
]


@pytest.mark.integration
class TestBasicCatalog:
    """Reference deltas converted with the basic catalog."""

    @pytest.mark.parametrize("delta, option_kwargs, expected", BASIC_CASES)
    def test_reference_delta(self, delta, option_kwargs, expected):
        """Test that each reference delta converts to its expected HTML."""
        result = convert(delta, BASIC_FORMATS, ConverterOptions(**option_kwargs))
        assert result == expected


@pytest.mark.integration
class TestAnthemCatalog:
    """Reference deltas converted with the editorial catalog and paragraph lines."""

    @pytest.mark.parametrize("delta, expected", ANTHEM_CASES)
    def test_reference_delta(self, delta, expected):
        """Test that each reference delta converts to its expected HTML."""
        result = convert(delta, ANTHEM_FORMATS, block_tag="p")
        assert result == expected

    def test_conversion_is_repeatable(self):
        """Test that converting the same delta twice gives identical output."""
        first = convert(GOLDFINGER_DELTA, ANTHEM_FORMATS, block_tag="p")
        second = convert(GOLDFINGER_DELTA, ANTHEM_FORMATS, block_tag="p")
        assert first == second
