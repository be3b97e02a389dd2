from __future__ import annotations

import pytest

from mdman.config import PLACEHOLDER_DESCRIPTION
from mdman.errors import MalformedDocument
from mdman.markdown import (
    OptionRecord,
    Section,
    classify_header,
    collation_key,
    extract_options,
    parse_heading,
)

CLI_MD = """# Command-line API

## Synopsis

### `--not-an-option`

Ignored because synopsis.

## Options

### `-`

Alias for stdin.

### `--`

End of options.

### `-e, --eval=script`

Evaluates **script**.

### `--abort-on-uncaught-exception`

<!-- YAML
added: v0.10.8
-->

> Stability: 1 - Experimental

Aborting instead of exiting. Second sentence.

### `--empty`

### `-C condition, --conditions=condition`

> Stability: 1

Provide custom conditions.

## Useful V8 options

### `--max-old-space-size=SIZE`

Sets the max memory size.

### `--empty`

Redefined later.

## Environment variables

### `NODE_OPTIONS=options...`

A space-separated list.

### `FORCE_COLOR=[1, 2, 3]`

Colors output.

### `NODE_DEBUG=module[,…]`

- A bullet first.

## Other section

### `--also-ignored`

Nope.
"""


def _tables():
    return extract_options(CLI_MD.split('\n'))


def test_flags_sorted_and_deduplicated() -> None:
    names = [record.name for record in _tables().flags]
    assert names == [
        '--abort-on-uncaught-exception',
        '--empty',
        '--max-old-space-size=SIZE',
        '-C condition, --conditions=condition',
        '-e, --eval=script',
    ]


def test_later_definition_wins() -> None:
    flags = {record.name: record for record in _tables().flags}
    assert flags['--empty'].description == 'Redefined later.'


def test_descriptions_extracted_and_converted() -> None:
    flags = {record.name: record.description for record in _tables().flags}
    assert flags['-e, --eval=script'] == 'Evaluates .B script.'
    assert flags['--abort-on-uncaught-exception'] == 'Aborting instead of exiting.'
    assert flags['-C condition, --conditions=condition'] == 'Provide custom conditions.'
    assert flags['--max-old-space-size=SIZE'] == 'Sets the max memory size.'


def test_env_vars_keep_document_order() -> None:
    env_vars = _tables().env_vars
    assert env_vars == (
        OptionRecord('NODE_OPTIONS=options...', 'A space-separated list.'),
        OptionRecord('FORCE_COLOR=[1, 2, 3]', 'Colors output.'),
        OptionRecord('NODE_DEBUG=module[,…]', PLACEHOLDER_DESCRIPTION),
    )


def test_env_vars_are_not_deduplicated() -> None:
    lines = [
        '## Environment variables', '',
        '### `FOO`', '', 'First.', '',
        '### `FOO`', '', 'Second.',
    ]
    env_vars = extract_options(lines).env_vars
    assert [record.description for record in env_vars] == ['First.', 'Second.']


def test_sentinels_and_other_sections_excluded() -> None:
    tables = _tables()
    names = {record.name for record in tables.flags + tables.env_vars}
    assert '-' not in names
    assert '--' not in names
    assert '--not-an-option' not in names
    assert '--also-ignored' not in names


def test_heading_followed_by_heading_gets_placeholder() -> None:
    lines = ['### `--empty`', '', '### `--next`', '', 'Next.']
    assert parse_heading(lines, 0) == OptionRecord('--empty', 'This option has no description.')


def test_parse_heading_ignores_non_headings() -> None:
    assert parse_heading(['Plain prose.'], 0) is None
    assert parse_heading(['#### `--deeper`', '', 'Text.'], 0) is None


def test_empty_code_heading_gives_no_record() -> None:
    lines = ['## Options', '', '### ``', '', 'Text.']
    assert parse_heading(lines, 2) is None
    assert extract_options(lines).flags == ()


def test_classify_header() -> None:
    assert classify_header('## Options') is Section.OPTIONS
    assert classify_header('## Useful V8 options') is Section.V8_OPTIONS
    assert classify_header('## Environment variables') is Section.ENVIRONMENT_VARIABLES
    assert classify_header('## Synopsis') is Section.OTHER
    assert classify_header('## Options ') is Section.OTHER
    assert classify_header('### `--x`') is None


def test_walk_can_start_inside_a_section() -> None:
    lines = ['### `--x`', '', 'Does x.']
    tables = extract_options(lines, section=Section.OPTIONS)
    assert tables.flags == (OptionRecord('--x', 'Does x.'),)
    assert tables.env_vars == ()


def test_collation_key_orders_punctuation_digits_letters() -> None:
    assert sorted(['b', 'A', 'a', '-z', '1'], key=collation_key) == ['-z', '1', 'a', 'A', 'b']


def test_missing_terminator_is_malformed() -> None:
    lines = ['## Options', '', '### `--x`', '', 'No terminator here']
    with pytest.raises(MalformedDocument):
        extract_options(lines)


def test_unterminated_comment_is_malformed() -> None:
    lines = ['## Options', '', '### `--x`', '', '<!-- YAML', 'added: v1']
    with pytest.raises(MalformedDocument) as excinfo:
        extract_options(lines)
    assert excinfo.value.line == 2


def test_document_ending_after_heading_is_malformed() -> None:
    with pytest.raises(MalformedDocument):
        extract_options(['## Options', '', '### `--x`'])
