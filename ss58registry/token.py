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

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .constants import U8_MAX, U128_MAX

__all__ = ['Token', 'TokenRegistryBase']


def _check_int(value, maximum: int, field: str):
    if type(value) is bool or not isinstance(value, int):
        raise TypeError(f'{field} must be an int, got {value!r}')
    if not 0 <= value <= maximum:
        raise ValueError(f'{field} {value} out of range 0..{maximum}')


@dataclass(frozen=True, order=True, repr=False)
class Token:
    """
    An amount of a token, in the smallest granularity of that token. Formats as "1_000,000 DOT";
    `repr()` adds the raw amount: "1000,000 DOT (10_000_000_000_000)".
    """
    # Short name (ticker) of the token
    name: str
    # Number of decimals of the token
    decimals: int
    # Amount in the smallest granularity of the token
    amount: int

    def __post_init__(self):
        _check_int(self.decimals, U8_MAX, 'decimals')
        _check_int(self.amount, U128_MAX, 'amount')

    def _split(self) -> Tuple[int, int]:
        multiplier = 10 ** self.decimals
        # First three digits of the fractional part
        fraction = self.amount % multiplier * 1000 // multiplier
        return self.amount // multiplier, fraction

    def __str__(self):
        integer, fraction = self._split()
        return f'{integer:_},{fraction:03} {self.name}'

    def __repr__(self):
        integer, fraction = self._split()
        return f'{integer},{fraction:03} {self.name} ({self.amount:_})'


class TokenRegistryBase(Enum):
    """
    Base of the generated TokenRegistry: every member value is a (name, decimals) tuple
    """

    def attributes(self) -> Tuple[str, int]:
        """
        Returns
        -------
        tuple of token name (ticker) and decimals
        """
        return self.value

    def create_token(self, amount: int) -> Token:
        """
        Creates the given amount (in smallest granularity) of this token

        Parameters
        ----------
        amount: u128

        Returns
        -------
        Token
        """
        name, decimals = self.attributes()
        return Token(name=name, decimals=decimals, amount=amount)

    def __repr__(self):
        name, decimals = self.attributes()
        return f'{self.__class__.__name__}(name={name!r}, decimals={decimals})'
