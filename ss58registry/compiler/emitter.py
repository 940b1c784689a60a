# Python SS58 Registry Library
#
# Copyright 2018-2024 Stichting Polkascan (Polkascan Foundation).
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

""" Renders RegistryTables as the `ss58registry.registry_gen` module

"""
import logging
import os
import tempfile

from ..exceptions import OutputWriteException
from .tables import RegistryTables

__all__ = ['render_module', 'write_module']

logger = logging.getLogger(__name__)

HEADER = '''\
# Python SS58 Registry Library
#
# Copyright 2018-2024 Stichting Polkascan (Polkascan Foundation).
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# Generated from ss58-registry.json by `python -m ss58registry.compiler`, do not edit.

from .known import KnownAddressFormat
from .token import TokenRegistryBase

__all__ = [
    'TokenRegistry',
    'AddressFormatRegistry',
    'ALL_FORMATS',
    'ALL_NAMES',
    'PREFIX_TO_INDEX',
    'RESERVED_PREFIXES',
    'RUN_STARTS',
    'RUN_ENDS',
    'TOKENS',
]
'''


def _comment(text: str) -> str:
    return ' '.join(text.splitlines())


def _tuple(items: list) -> str:
    if len(items) == 1:
        return f'({items[0]},)'
    return f'({", ".join(items)})'


def _block(opening: str, items: list, closing: str) -> list:
    return [opening] + [f'    {item},' for item in items] + [closing]


def render_module(tables: RegistryTables) -> str:
    """
    Python source of the generated registry module

    Parameters
    ----------
    tables: RegistryTables

    Returns
    -------
    str
    """
    lines = [HEADER, '']

    lines.append('class TokenRegistry(TokenRegistryBase):')
    lines.append('    """')
    lines.append('    Every distinct token (symbol and decimals) of the registered networks')
    lines.append('    """')
    for token in tables.tokens:
        lines.append(f'    {token.identifier} = ({token.symbol!r}, {token.decimals})')
    lines.extend(['', ''])

    lines.append('class AddressFormatRegistry(KnownAddressFormat):')
    lines.append('    """')
    lines.append('    A known address (sub)format/network ID for SS58, sorted by network name')
    lines.append('    """')
    for record, identifier in zip(tables.records, tables.identifiers):
        lines.append(f'    #: {_comment(record.description())}')
        lines.append(f'    {identifier} = {record.prefix}')
    lines.extend(['', ''])

    formats = [f'AddressFormatRegistry.{identifier}' for identifier in tables.identifiers]

    lines.append('#: All known address formats (sorted by network name)')
    lines.extend(_block('ALL_FORMATS = (', formats, ')'))
    lines.append('')

    lines.append('#: Network names of all known address formats (sorted by network name)')
    lines.extend(_block('ALL_NAMES = (', [repr(name) for name in tables.names], ')'))
    lines.append('')

    lines.append('#: (prefix, index into ALL_FORMATS), sorted by prefix')
    lines.extend(_block(
        'PREFIX_TO_INDEX = (', [f'({prefix}, {index})' for prefix, index in tables.prefix_to_index], ')'
    ))
    lines.append('')

    lines.append('#: Prefixes reserved for future use')
    lines.extend(_block('RESERVED_PREFIXES = frozenset((', [str(p) for p in tables.reserved_prefixes], '))'))
    lines.append('')

    lines.append('#: Known prefixes as inclusive ranges RUN_STARTS[k]..RUN_ENDS[k]')
    lines.extend(_block('RUN_STARTS = (', [str(start) for start in tables.run_starts], ')'))
    lines.extend(_block('RUN_ENDS = (', [str(end) for end in tables.run_ends], ')'))
    lines.append('')

    lines.append('#: Tokens of each known address format, in declaration order')
    lines.extend(_block('TOKENS = {', [
        f'{address_format}: {_tuple([f"TokenRegistry.{token}" for token in tokens])}'
        for address_format, tokens in zip(formats, tables.record_tokens)
    ], '}'))

    return '\n'.join(lines) + '\n'


def write_module(source: str, path: str):
    """
    Atomically replaces `path` with `source`: the content is written to a temporary file in the same directory
    which is then renamed over the target.

    Raises
    ------
    OutputWriteException
    """
    directory = os.path.dirname(os.path.abspath(path))

    try:
        fd, tmp_path = tempfile.mkstemp(prefix='.registry_gen_', suffix='.tmp', dir=directory)
    except OSError as e:
        raise OutputWriteException(f'failed to write to {path!r}: {e}') from e

    try:
        with os.fdopen(fd, 'w', encoding='utf-8', newline='\n') as fp:
            fp.write(source)
        os.replace(tmp_path, path)
    except OSError as e:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise OutputWriteException(f'failed to write to {path!r}: {e}') from e

    logger.info(f'Wrote registry module to {path}')
