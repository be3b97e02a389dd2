"""mdoc(7) rendering of extracted option records."""
from __future__ import annotations

import re
from typing import Iterable

from ..config import ALIAS_SEPARATOR
from ..markdown import OptionRecord

# Null request used instead of blank lines between list items
ITEM_SEPARATOR = '\n.\n'

VALUE_SEPARATOR_RE = re.compile(r'[= ]')
FLAG_NAME_RE = re.compile(r'\[?[= ]')


def apply_value(flag: str) -> str:
    """Return the macro arguments for the value placeholder of ``flag``.

    ``--eval=script`` and ``--eval[=script]`` give `` Ns = Ns Ar script``.
    A space-separated placeholder (``-C condition``) gives nothing.
    """
    parts = VALUE_SEPARATOR_RE.split(flag)
    separator = VALUE_SEPARATOR_RE.search(flag)
    if separator is None or separator.group(0) == ' ':
        return ''
    value = parts[1]
    if not value:
        return ''
    if value.endswith(']'):
        value = value[:-1]
    return f" Ns {separator.group(0)} Ns Ar {value}"


def flag_macro(flag: str) -> str:
    """Render one alias spelling as an ``Fl`` macro call."""
    name = FLAG_NAME_RE.split(flag)[0]
    if name.startswith('-'):
        name = name[1:]
    return f"Fl {name}{apply_value(flag)}"


def _join_items(items: Iterable[str]) -> str:
    return ITEM_SEPARATOR.join(items) + ITEM_SEPARATOR


def create_flag_section(flags: Iterable[OptionRecord]) -> str:
    """Render the OPTIONS list body, one ``.It`` per record."""
    items = []
    for record in flags:
        aliases = ' , '.join(flag_macro(flag) for flag in record.name.split(ALIAS_SEPARATOR))
        items.append(f".It {aliases.strip()}\n{record.description}")
    return _join_items(items)


def create_env_var_section(env_vars: Iterable[OptionRecord]) -> str:
    """Render the ENVIRONMENT list body, one ``.It`` per record."""
    items = []
    for record in env_vars:
        parts = record.name.split('=')
        value = f" Ar {parts[1]}" if len(parts) > 1 and parts[1] else ''
        items.append(f".It Ev {parts[0]}{value}\n{record.description}")
    return _join_items(items)


def assemble_page(header: str, flag_section: str, env_header: str, env_section: str, footer: str) -> str:
    """Splice the rendered sections between the static page blocks."""
    return header + flag_section + env_header + env_section + footer + '\n'
