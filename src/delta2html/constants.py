#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the delta2html library.

Constants are organized by category:
1. Type Definitions - Literal types shared by options and formats
2. Conversion Defaults - Tags and placeholder text
3. Markup - Element names with special handling
4. CLI - Exit codes and environment variables
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

FormatCategory = Literal["line", "embed"]
EmbedMode = Literal["placeholder", "node"]
UnknownAttributeMode = Literal["ignore", "error"]

# =============================================================================
# Conversion Defaults
# =============================================================================

DEFAULT_BLOCK_TAG = "div"
DEFAULT_INLINE_TAG = "span"
DEFAULT_EMBED_MODE: EmbedMode = "placeholder"
DEFAULT_EMBED_PLACEHOLDER = "!"
DEFAULT_UNKNOWN_ATTRIBUTES: UnknownAttributeMode = "ignore"

LINE_CATEGORY = "line"
EMBED_CATEGORY = "embed"
FORMAT_CATEGORIES = (LINE_CATEGORY, EMBED_CATEGORY)

# =============================================================================
# Markup
# =============================================================================

# Elements that cannot hold children; a format tag from this set replaces
# the node instead of wrapping it.
VOID_TAGS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "command",
        "embed",
        "hr",
        "iframe",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Name of the detached element holding the top-level lines
ROOT_TAG = "root"

# =============================================================================
# CLI
# =============================================================================

EXIT_SUCCESS = 0
EXIT_CONVERSION_ERROR = 1
EXIT_VALIDATION_ERROR = 2
EXIT_FILE_ERROR = 3

CONFIG_ENV_VAR = "DELTA2HTML_CONFIG"
CONFIG_SECTION = "delta2html"
