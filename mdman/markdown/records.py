"""Option and environment variable extraction from cli.md style documents."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from ..config import (
    SECTION_MARKER,
    HEADING_MARKER,
    COMMENT_OPEN,
    COMMENT_CLOSE,
    BLOCKQUOTE_MARKER,
    OPTIONS_TITLE,
    V8_OPTIONS_TITLE,
    ENVIRONMENT_TITLE,
    SENTINEL_HEADINGS,
    PLACEHOLDER_DESCRIPTION,
)
from ..errors import MalformedDocument
from .inline import replace_markdown
from .sentences import extract_first_sentence

logger = logging.getLogger(__name__)

# A description must start like prose, anything else is leaked markup
DESCRIPTION_START_RE = re.compile(r'[A-Za-z0-9"\']')

# Root collation order of ASCII punctuation; it all sorts before digits and letters
PUNCTUATION_ORDER = " _-,;:!?.'\"()[]{}@*/\\&#%`^+<=>|~$"


class Section(Enum):
    """Document section a heading belongs to."""
    OPTIONS = "Options"
    V8_OPTIONS = "V8Options"
    ENVIRONMENT_VARIABLES = "EnvironmentVariables"
    OTHER = "Other"


SECTION_TITLES = {
    OPTIONS_TITLE: Section.OPTIONS,
    V8_OPTIONS_TITLE: Section.V8_OPTIONS,
    ENVIRONMENT_TITLE: Section.ENVIRONMENT_VARIABLES,
}

FLAG_SECTIONS = (Section.OPTIONS, Section.V8_OPTIONS)


@dataclass(frozen=True)
class OptionRecord:
    """A documented option or environment variable."""
    name: str
    description: str


@dataclass(frozen=True)
class OptionTables:
    """Records extracted from one document."""
    flags: Tuple[OptionRecord, ...]
    env_vars: Tuple[OptionRecord, ...]


def collation_key(name: str) -> Tuple[Tuple[Tuple[int, int], ...], Tuple[int, ...]]:
    """Sort key approximating locale-aware comparison of option names.

    Punctuation sorts before digits, digits before letters. Letters are
    compared case-insensitively first, lowercase winning ties.
    """
    primary = []
    tertiary = []
    for char in name:
        pos = PUNCTUATION_ORDER.find(char)
        if pos >= 0:
            primary.append((0, pos))
        elif char.isdigit():
            primary.append((1, ord(char)))
        elif char.isalpha():
            primary.append((2, ord(char.lower())))
        else:
            primary.append((3, ord(char)))
        tertiary.append(1 if char.isupper() else 0)
    return tuple(primary), tuple(tertiary)


def classify_header(line: str) -> Optional[Section]:
    """Return the section a top-level header opens, or None if ``line`` is not one."""
    if not line.startswith(SECTION_MARKER):
        return None
    return SECTION_TITLES.get(line[len(SECTION_MARKER):], Section.OTHER)


def _find_comment_close(lines: Sequence[str], index: int) -> int:
    for i in range(index + 1, len(lines)):
        if lines[i] == COMMENT_CLOSE:
            return i
    raise MalformedDocument("Unterminated comment after heading.", line=index)


def _find_description_line(lines: Sequence[str], index: int) -> int:
    """Advance past blank and blockquote lines to the first line of prose."""
    heading_index = index
    line = ''
    while not line or line.startswith(BLOCKQUOTE_MARKER):
        index += 1
        if index >= len(lines):
            raise MalformedDocument("Document ended before description.", line=heading_index)
        line = lines[index]
    return index


def parse_heading(lines: Sequence[str], index: int) -> Optional[OptionRecord]:
    """Parse the option heading at ``lines[index]`` into a record.

    Args:
        lines: Document lines.
        index: Index of the candidate heading line.

    Returns:
        The record, or None if the line is not an option heading or is
        one of the end-of-options sentinels.
    """
    line = lines[index]
    if not line.startswith(HEADING_MARKER):
        return None

    name = line[len(HEADING_MARKER):].replace('`', '')
    if not name:
        return None
    if name in SENTINEL_HEADINGS:
        logger.debug("Skipping sentinel heading %r", name)
        return None

    lookahead = lines[index + 2] if index + 2 < len(lines) else None
    if lookahead is not None and lookahead.startswith(COMMENT_OPEN):
        index = _find_comment_close(lines, index)
    elif lookahead is not None and lookahead.startswith(HEADING_MARKER):
        logger.debug("No description for %s", name)
        return OptionRecord(name, PLACEHOLDER_DESCRIPTION)

    index = _find_description_line(lines, index)
    description = replace_markdown(extract_first_sentence(lines, index))
    if not DESCRIPTION_START_RE.match(description):
        logger.debug("Discarding description of %s: %r", name, description[:40])
        description = PLACEHOLDER_DESCRIPTION

    return OptionRecord(name, description)


def extract_options(lines: Sequence[str], section: Section = Section.OTHER) -> OptionTables:
    """Walk the document and collect flag and environment variable records.

    Args:
        lines: Document lines.
        section: Section in effect before the first line, for walking a
                 range that starts inside a section.

    Returns:
        Flags deduplicated by name (last definition wins) and sorted,
        environment variables in document order.
    """
    flags: Dict[str, OptionRecord] = {}
    env_vars: List[OptionRecord] = []

    for index, line in enumerate(lines):
        header = classify_header(line)
        if header is not None:
            section = header
            continue

        if section is Section.OTHER:
            continue

        record = parse_heading(lines, index)
        if record is None:
            continue

        logger.debug("%s: %s", section.value, record.name)
        if section in FLAG_SECTIONS:
            flags[record.name] = record
        else:
            env_vars.append(record)

    sorted_flags = sorted(flags.values(), key=lambda record: collation_key(record.name))
    return OptionTables(flags=tuple(sorted_flags), env_vars=tuple(env_vars))
