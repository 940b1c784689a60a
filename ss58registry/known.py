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

from enum import IntEnum
from typing import List, Union, TYPE_CHECKING

from .constants import NUMERIC_FORMAT_TYPES
from .exceptions import ParseError

if TYPE_CHECKING:
    from .address_format import AddressFormat

__all__ = ['KnownAddressFormat']


class KnownAddressFormat(IntEnum):
    """
    Base of the generated AddressFormatRegistry. Member values are the SS58 prefixes of the networks.

    The set of members grows with the registry, code matching on members should always handle unknown ones.
    """

    def prefix(self) -> int:
        return int(self)

    def address_format(self) -> 'AddressFormat':
        from .address_format import AddressFormat
        return AddressFormat(self)

    def is_reserved(self) -> bool:
        return self.address_format().is_reserved()

    def is_custom(self) -> bool:
        return self.address_format().is_custom()

    def tokens(self) -> list:
        """
        Tokens of this network, in the order they are declared in the registry

        Returns
        -------
        list of TokenRegistry
        """
        from .registry_gen import TOKENS
        return list(TOKENS[self])

    @classmethod
    def try_from(cls, address_format: Union['AddressFormat', int]) -> 'KnownAddressFormat':
        """
        Known address format with the prefix of `address_format`

        Parameters
        ----------
        address_format: AddressFormat or prefix

        Returns
        -------
        AddressFormatRegistry member

        Raises
        ------
        ParseError when the prefix is not in the registry
        """
        from .address_format import lookup_prefix
        from .registry_gen import ALL_FORMATS

        index = lookup_prefix(int(address_format))
        if index is None:
            raise ParseError()
        return ALL_FORMATS[index]

    @classmethod
    def from_name(cls, name: str) -> 'KnownAddressFormat':
        """
        Known address format by network name, e.g. 'kusama'

        Raises
        ------
        ParseError when no network has this name
        """
        from .address_format import lookup_name
        from .registry_gen import ALL_FORMATS

        index = lookup_name(name)
        if index is None:
            raise ParseError()
        return ALL_FORMATS[index]

    @classmethod
    def all_names(cls) -> List[str]:
        from .registry_gen import ALL_NAMES
        return list(ALL_NAMES)

    def __str__(self):
        from .address_format import lookup_prefix
        from .registry_gen import ALL_NAMES

        return ALL_NAMES[lookup_prefix(int(self))]

    def __format__(self, format_spec):
        if format_spec[-1:] in NUMERIC_FORMAT_TYPES:
            return format(int(self), format_spec)
        return format(str(self), format_spec)
