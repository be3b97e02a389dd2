"""First-sentence extraction from Markdown prose."""
from __future__ import annotations

from typing import List

from ..errors import MalformedDocument

QUOTE_CHARS = ('"', '`')


def _inside_quotes(text: str, end: int) -> bool:
    """Return True if position ``end`` of ``text`` lies inside a quotation.

    The state is derived by scanning backward from ``end`` to the start of
    the text, so it does not depend on any earlier candidate.
    """
    inside = False
    j = end - 1
    while j >= 0:
        if j > 0 and text[j - 1] == '\\':
            # Escaped character: skip it along with the backslash
            j -= 2
            continue

        char = text[j]
        if char in QUOTE_CHARS:
            inside = not inside
        elif char == "'" and j > 0 and text[j - 1] == ' ':
            # Only an apostrophe after a space opens or closes a quote,
            # contractions and possessives are left alone
            inside = not inside
        j -= 1
    return inside


def _is_terminator(text: str, i: int) -> bool:
    if text[i] != '.':
        return False
    return i + 1 == len(text) or text[i + 1] in (' ', '\n')


def extract_first_sentence(lines: List[str], start: int) -> str:
    """Extract the first complete sentence starting at ``lines[start]``.

    Args:
        lines: Document lines.
        start: Index of the line the sentence begins on.

    Returns:
        The sentence, trimmed, including its closing period.

    Raises:
        MalformedDocument: if the text runs out before an unquoted period.
    """
    text = '\n'.join(lines[start:])

    for i in range(len(text)):
        if _is_terminator(text, i) and not _inside_quotes(text, i):
            return text[:i + 1].strip()

    raise MalformedDocument("Could not find sentence.", line=start)
