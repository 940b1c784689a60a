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

""" AddressFormat: any SS58 prefix, known to the registry or custom

"""
import re
from bisect import bisect_left, bisect_right
from typing import Optional, Tuple, Union

from .constants import NUMERIC_FORMAT_TYPES, RESERVED_PREFIX_LIMIT, U8_MAX, U16_MAX
from .exceptions import ParseError
from .known import KnownAddressFormat
from .registry_gen import AddressFormatRegistry, ALL_FORMATS, ALL_NAMES, PREFIX_TO_INDEX, RESERVED_PREFIXES, \
    RUN_STARTS, RUN_ENDS

__all__ = ['AddressFormat', 'lookup_prefix', 'lookup_name', 'is_known_prefix']

# Sorted search keys of PREFIX_TO_INDEX
PREFIXES = tuple(prefix for prefix, _ in PREFIX_TO_INDEX)

DECIMAL_U16 = re.compile(r'[0-9]+', re.ASCII)


def lookup_prefix(prefix: int) -> Optional[int]:
    """
    Index in ALL_FORMATS of the known address format with `prefix`, None for custom prefixes
    """
    position = bisect_left(PREFIXES, prefix)
    if position < len(PREFIXES) and PREFIXES[position] == prefix:
        return PREFIX_TO_INDEX[position][1]
    return None


def lookup_name(name: str) -> Optional[int]:
    """
    Index in ALL_FORMATS of the known address format with network `name`
    """
    position = bisect_left(ALL_NAMES, name)
    if position < len(ALL_NAMES) and ALL_NAMES[position] == name:
        return position
    return None


def is_known_prefix(prefix: int) -> bool:
    run = bisect_right(RUN_STARTS, prefix) - 1
    return run >= 0 and prefix <= RUN_ENDS[run]


def _check_u16(value, field='prefix') -> int:
    if type(value) is bool or not isinstance(value, int):
        raise TypeError(f'{field} must be an int, got {value!r}')
    if not 0 <= value <= U16_MAX:
        raise ValueError(f'{field} {value} out of range for u16')
    return int(value)


class AddressFormat:
    """
    SS58 address format, a plain u16 prefix. Custom prefixes (not in the registry) are allowed.

    Parameters
    ----------
    prefix: prefix as int or an AddressFormatRegistry member
    """

    __slots__ = ('_prefix',)

    def __init__(self, prefix: Union[int, KnownAddressFormat]):
        self._prefix = _check_u16(prefix)

    @classmethod
    def custom(cls, prefix: int) -> 'AddressFormat':
        return cls(prefix)

    @classmethod
    def from_u8(cls, value: int) -> 'AddressFormat':
        if type(value) is not bool and isinstance(value, int) and value > U8_MAX:
            raise ValueError(f'{value} out of range for u8')
        return cls(value)

    @classmethod
    def from_name(cls, name: str) -> 'AddressFormat':
        """
        Address format for a network name (e.g. 'polkadot') or a decimal prefix (e.g. '432')

        Parameters
        ----------
        name: network name or decimal u16 without sign or whitespace

        Returns
        -------
        AddressFormat

        Raises
        ------
        ParseError
        """
        index = lookup_name(name)
        if index is not None:
            return cls(ALL_FORMATS[index])

        if DECIMAL_U16.fullmatch(name) and len(name.lstrip('0')) <= 5:
            prefix = int(name)
            if prefix <= U16_MAX:
                return cls(prefix)

        raise ParseError()

    @staticmethod
    def all() -> Tuple[AddressFormatRegistry, ...]:
        """
        All known address formats, sorted by network name
        """
        return ALL_FORMATS

    @staticmethod
    def all_names() -> Tuple[str, ...]:
        """
        Network names of all known address formats, sorted
        """
        return ALL_NAMES

    def prefix(self) -> int:
        return self._prefix

    def registry(self) -> AddressFormatRegistry:
        """
        Known address format for this prefix

        Raises
        ------
        ParseError for custom prefixes
        """
        return AddressFormatRegistry.try_from(self)

    def is_reserved(self) -> bool:
        """
        Prefix is reserved for future use: either above 16384 or a reserved entry of the registry
        """
        return self._prefix > RESERVED_PREFIX_LIMIT or self._prefix in RESERVED_PREFIXES

    def is_custom(self) -> bool:
        """
        Prefix is not in the registry
        """
        return not is_known_prefix(self._prefix)

    def __int__(self):
        return self._prefix

    def __index__(self):
        return self._prefix

    def __eq__(self, other):
        if not isinstance(other, AddressFormat):
            return NotImplemented
        return self._prefix == other._prefix

    def __hash__(self):
        return hash((AddressFormat, self._prefix))

    def __str__(self):
        index = lookup_prefix(self._prefix)
        if index is None:
            return str(self._prefix)
        return ALL_NAMES[index]

    def __format__(self, format_spec):
        """
        Formats the network name like a string, or the prefix when the spec has a numeric type, e.g. `{:04d}`
        """
        if format_spec[-1:] in NUMERIC_FORMAT_TYPES:
            return format(self._prefix, format_spec)
        return format(str(self), format_spec)

    def __repr__(self):
        return f'<AddressFormat(prefix={self._prefix})>'
