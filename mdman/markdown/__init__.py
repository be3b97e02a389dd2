"""Markdown source processing."""
from __future__ import annotations

from .sentences import extract_first_sentence
from .inline import replace_markdown
from .records import (
    OptionRecord,
    OptionTables,
    Section,
    classify_header,
    collation_key,
    extract_options,
    parse_heading,
)

__all__ = [
    'extract_first_sentence',
    'replace_markdown',
    'OptionRecord',
    'OptionTables',
    'Section',
    'classify_header',
    'collation_key',
    'extract_options',
    'parse_heading',
]
