"""Markdown to mdoc compilation pipeline."""
from __future__ import annotations

import logging

from .markdown import extract_options
from .mdoc import create_flag_section, create_env_var_section, assemble_page

logger = logging.getLogger(__name__)


def compile_manpage(text: str, header: str, env_header: str, footer: str) -> str:
    """Compile a cli.md style document into an mdoc manual page.

    Args:
        text: Markdown source.
        header: Page text up to and including the start of the options list.
        env_header: Text closing the options list and opening the environment list.
        footer: Text closing the environment list through the end of the page.

    Returns:
        The complete page, newline terminated.

    Raises:
        MalformedDocument: if a description cannot be extracted. No partial
            page is produced.
    """
    tables = extract_options(text.split('\n'))
    logger.info("Extracted %d options and %d environment variables",
                len(tables.flags), len(tables.env_vars))

    return assemble_page(
        header,
        create_flag_section(tables.flags),
        env_header,
        create_env_var_section(tables.env_vars),
        footer,
    )
