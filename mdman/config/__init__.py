"""Configuration and constants for mdman."""
from __future__ import annotations

import os
from pathlib import Path

# Paths
MDMAN_ROOT = Path(os.environ.get('MDMAN_ROOT', '.'))

DEFAULT_INPUT = MDMAN_ROOT / "doc" / "api" / "cli.md"
DEFAULT_OUTPUT = MDMAN_ROOT / "doc" / "node.1"

# Markdown structure recognized in the source document
SECTION_MARKER = "## "
HEADING_MARKER = "### "
COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"
BLOCKQUOTE_MARKER = ">"

# Top-level header titles that carry option records.
# Any other title puts the walk in the "other" section.
OPTIONS_TITLE = "Options"
V8_OPTIONS_TITLE = "Useful V8 options"
ENVIRONMENT_TITLE = "Environment variables"

# Headings that mark the end of options rather than an option
SENTINEL_HEADINGS = ('-', '--')

PLACEHOLDER_DESCRIPTION = "This option has no description."

ALIAS_SEPARATOR = ", "
