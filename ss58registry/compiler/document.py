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

""" Loading of the SS58 registry document (ss58-registry.json)

"""
import json
from typing import List, Optional, Union

from ..constants import U8_MAX, U16_MAX
from ..exceptions import RegistryParseException
from .identifier import derive_identifier

__all__ = ['AccountRecord', 'parse_registry', 'load_registry']


class AccountRecord:
    """
    A single network entry of the registry document. When `standard_account` is None the prefix is reserved.
    """

    def __init__(self, prefix: int, network: str, display_name: str, standard_account: Optional[str] = None,
                 symbols: List[str] = None, decimals: List[int] = None, website: Optional[str] = None):
        self.prefix = prefix
        self.network = network
        self.display_name = display_name
        self.standard_account = standard_account
        self.symbols = list(symbols or [])
        self.decimals = list(decimals or [])
        self.website = website

    def name(self) -> str:
        return derive_identifier(self.network)

    def is_reserved(self) -> bool:
        return self.standard_account is None

    def description(self) -> str:
        if self.website is not None:
            return f'{self.display_name} - <{self.website}>'
        return self.display_name

    def token_pairs(self) -> list:
        return list(zip(self.symbols, self.decimals))

    def dump(self) -> str:
        """
        Multi-line structural representation, used in compile error messages
        """
        fields = [
            ('prefix', self.prefix),
            ('network', self.network),
            ('display_name', self.display_name),
            ('standard_account', self.standard_account),
            ('symbols', self.symbols),
            ('decimals', self.decimals),
            ('website', self.website),
        ]
        lines = ''.join(f'    {key}: {value!r},\n' for key, value in fields)
        return f'AccountRecord {{\n{lines}}}'

    def __eq__(self, other):
        if not isinstance(other, AccountRecord):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def __repr__(self):
        return f'<AccountRecord(prefix={self.prefix}, network={self.network!r})>'


def _is_int(value) -> bool:
    return type(value) is int


def _require(entry: dict, key: str, index: int):
    if key not in entry:
        raise RegistryParseException(f'registry entry {index}: missing field `{key}`')
    return entry[key]


def _optional_str(entry: dict, key: str, index: int) -> Optional[str]:
    value = entry.get(key)
    if value is not None and type(value) is not str:
        raise RegistryParseException(f'registry entry {index}: `{key}` must be a string or null, got {value!r}')
    return value


def _parse_record(entry, index: int) -> AccountRecord:
    if type(entry) is not dict:
        raise RegistryParseException(f'registry entry {index}: expected an object, got {entry!r}')

    prefix = _require(entry, 'prefix', index)
    if not _is_int(prefix) or not 0 <= prefix <= U16_MAX:
        raise RegistryParseException(f'registry entry {index}: `prefix` must be an u16, got {prefix!r}')

    network = _require(entry, 'network', index)
    if type(network) is not str:
        raise RegistryParseException(f'registry entry {index}: `network` must be a string, got {network!r}')

    display_name = _require(entry, 'displayName', index)
    if type(display_name) is not str:
        raise RegistryParseException(
            f'registry entry {index}: `displayName` must be a string, got {display_name!r}'
        )

    symbols = entry.get('symbols')
    if symbols is None:
        symbols = []
    if type(symbols) is not list or not all(type(symbol) is str for symbol in symbols):
        raise RegistryParseException(f'registry entry {index}: `symbols` must be a list of strings')

    decimals = entry.get('decimals')
    if decimals is None:
        decimals = []
    if type(decimals) is not list or not all(_is_int(value) and 0 <= value <= U8_MAX for value in decimals):
        raise RegistryParseException(f'registry entry {index}: `decimals` must be a list of u8')

    return AccountRecord(
        prefix=prefix,
        network=network,
        display_name=display_name,
        standard_account=_optional_str(entry, 'standardAccount', index),
        symbols=symbols,
        decimals=decimals,
        website=_optional_str(entry, 'website', index)
    )


def parse_registry(json_data: Union[str, bytes, dict]) -> List[AccountRecord]:
    """
    Parses the registry document into AccountRecords, in document order. Unknown fields are ignored.

    Parameters
    ----------
    json_data: JSON string/bytes or an already decoded dict

    Returns
    -------
    list of AccountRecord
    """
    if type(json_data) in (str, bytes):
        try:
            json_data = json.loads(json_data)
        except ValueError as e:
            raise RegistryParseException(f'invalid registry JSON: {e}') from e

    if type(json_data) is not dict or type(json_data.get('registry')) is not list:
        raise RegistryParseException('registry document must be an object with a `registry` list')

    return [_parse_record(entry, index) for index, entry in enumerate(json_data['registry'])]


def load_registry(path: str) -> List[AccountRecord]:
    """
    Reads and parses the registry document at `path`
    """
    try:
        with open(path, 'rb') as fp:
            json_data = fp.read()
    except OSError as e:
        raise RegistryParseException(f'unable to read registry {path}: {e}') from e

    return parse_registry(json_data)
