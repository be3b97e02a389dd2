"""Documentation coverage of option spellings in a compiled page."""
from __future__ import annotations

import re
from typing import Iterable, List


def read_option_list(text: str) -> List[str]:
    """Parse an option list file: one spelling per line, ``#`` starts a comment line."""
    options = []
    for line in text.split('\n'):
        stripped = line.strip()
        if stripped and not stripped.startswith('#'):
            options.append(stripped)
    return options


def manpage_entry(option: str) -> str:
    """Text an option's ``Fl`` macro puts in the page (``--foo`` -> ``-foo``)."""
    return option[1:] if option.startswith('-') else option


def find_undocumented(options: Iterable[str], page: str) -> List[str]:
    """Return the option spellings that have no list item in ``page``.

    Only ``.It`` lines count, so mentions in the SYNOPSIS do not document
    an option.

    Args:
        options: Option spellings, e.g. ``--foo`` or ``--no-bar``.
        page: Compiled manual page text.

    Returns:
        Missing spellings in input order, without duplicates.
    """
    missing = []
    for option in options:
        if option in missing:
            continue
        pattern = r'^\.It (?:.*\s)?Fl ' + re.escape(manpage_entry(option)) + r'(?=\s|$)'
        if re.search(pattern, page, re.MULTILINE) is None:
            missing.append(option)
    return missing
