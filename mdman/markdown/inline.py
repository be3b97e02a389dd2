"""Inline Markdown to roff conversion."""
from __future__ import annotations

import re

BOLD_RE = re.compile(r'\*\*(.*?)\*\*')
# [label](target) or [label][target]
LINK_RE = re.compile(r'\[(.*?)\][\[(].*?[\])]')
BACKTICK_BEFORE_QUOTE_RE = re.compile(r'`(["\'])')
BACKTICK_AFTER_QUOTE_RE = re.compile(r'(["\'])`')


def replace_markdown(text: str) -> str:
    """Convert the inline Markdown used in descriptions to roff."""
    text = BOLD_RE.sub(r'.B \1', text)
    text = LINK_RE.sub(r'\1', text)
    # Collapse `" and "` before code spans turn into quotes
    text = BACKTICK_BEFORE_QUOTE_RE.sub(r'\1', text)
    text = BACKTICK_AFTER_QUOTE_RE.sub(r'\1', text)
    return text.replace('`', '"')
