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

""" Derivation of enum member identifiers from network names and token symbols

"""
import keyword
import re
import unicodedata

from ..constants import ACCOUNT_SUFFIX

__all__ = ['to_pascal_case', 'derive_identifier', 'check_identifier']

# Runs of letters and digits, underscores excluded
WORD_CHUNK = re.compile(r'[^\W_]+')


def _split_case(chunk: str) -> list:
    """
    Splits an alphanumeric chunk on case boundaries: 'BareSr25519' -> ['Bare', 'Sr25519'],
    'USDv' -> ['US', 'Dv']. Digits stay attached to the preceding word.
    """
    words = []
    start = 0

    for i in range(1, len(chunk)):
        current = chunk[i]
        if not current.isupper():
            continue

        previous = chunk[i - 1]

        if previous.islower() or previous.isdigit():
            boundary = True
        elif previous.isupper() and i + 1 < len(chunk) and chunk[i + 1].islower():
            boundary = True
        else:
            boundary = False

        if boundary:
            words.append(chunk[start:i])
            start = i

    words.append(chunk[start:])
    return words


def _pascal_case_pass(value: str) -> str:
    words = []
    for chunk in WORD_CHUNK.findall(value):
        words.extend(_split_case(chunk))

    return ''.join(word[:1].title() + word[1:].lower() for word in words)


def to_pascal_case(value: str) -> str:
    """
    Converts a string to PascalCase. Applying it to its own output returns the same string.

    A one-letter word followed by an uppercase letter reads as an acronym on the next pass ('xY' -> 'XY' -> 'Xy'),
    so the conversion is repeated until it no longer changes the result. A pass only merges words and lowercases
    letters.

    Parameters
    ----------
    value: any (UTF-8) string, e.g. 'dock-testnet'

    Returns
    -------
    str, e.g. 'DockTestnet'
    """
    result = _pascal_case_pass(value)

    while True:
        again = _pascal_case_pass(result)
        if again == result:
            return result
        result = again


def derive_identifier(network: str) -> str:
    """
    Enum member identifier for a network, e.g. 'polkadex' -> 'PolkadexAccount'
    """
    return f'{to_pascal_case(network)}{ACCOUNT_SUFFIX}'


def check_identifier(identifier: str):
    """
    Returns None when `identifier` is usable as an enum member name, otherwise a reason why not.

    The first character must be XID_Start and the others XID_Continue. Python normalizes identifiers with NFKC,
    so identifiers that change under it are refused as well, as are keywords such as `None` or `True`.
    """
    if not identifier:
        return 'empty identifier'

    first = identifier[0]
    if first == '_' or not first.isidentifier():
        return f'`{identifier}` starts with `{first}` which is not valid at the start'

    for char in identifier[1:]:
        if not f'_{char}'.isidentifier():
            return f'Invalid char `{char}` in `{identifier}`'

    if unicodedata.normalize('NFKC', identifier) != identifier:
        return f'`{identifier}` is not NFKC normalized'

    if keyword.iskeyword(identifier):
        return f'`{identifier}` is a reserved keyword'

    return None
