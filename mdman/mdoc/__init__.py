"""mdoc(7) manual page generation."""
from __future__ import annotations

from .emitter import (
    apply_value,
    flag_macro,
    create_flag_section,
    create_env_var_section,
    assemble_page,
)
from .templates import HEADER, ENV_HEADER, FOOTER

__all__ = [
    'apply_value',
    'flag_macro',
    'create_flag_section',
    'create_env_var_section',
    'assemble_page',
    'HEADER',
    'ENV_HEADER',
    'FOOTER',
]
