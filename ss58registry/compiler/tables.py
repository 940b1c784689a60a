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

""" Derives the static lookup tables of the SS58 registry from validated records

"""
import logging
from typing import List, Tuple

from ..exceptions import DuplicateTokenException, InvalidIdentifierException
from .document import AccountRecord
from .identifier import to_pascal_case, check_identifier

__all__ = ['TokenEntry', 'RegistryTables', 'consecutive_runs', 'build_prefix_to_index', 'build_token_table',
           'build_tables']

logger = logging.getLogger(__name__)


class TokenEntry:
    """
    A distinct (symbol, decimals) pair and the TokenRegistry member name it is emitted as
    """

    def __init__(self, identifier: str, symbol: str, decimals: int):
        self.identifier = identifier
        self.symbol = symbol
        self.decimals = decimals

    def pair(self) -> Tuple[str, int]:
        return self.symbol, self.decimals

    def __eq__(self, other):
        if not isinstance(other, TokenEntry):
            return NotImplemented
        return (self.identifier, self.symbol, self.decimals) == (other.identifier, other.symbol, other.decimals)

    def __repr__(self):
        return f'<TokenEntry({self.identifier}: {self.symbol!r}, {self.decimals})>'


class RegistryTables:
    """
    All tables emitted for a registry. `records`, `identifiers` and `names` are index-aligned and sorted by
    network name; `prefix_to_index` is sorted by prefix and points into them.
    """

    def __init__(self, records: List[AccountRecord], prefix_to_index: List[Tuple[int, int]],
                 reserved_prefixes: List[int], run_starts: List[int], run_ends: List[int],
                 tokens: List[TokenEntry], record_tokens: List[List[str]]):
        self.records = records
        self.identifiers = [record.name() for record in records]
        self.names = [record.network for record in records]
        self.prefix_to_index = prefix_to_index
        self.reserved_prefixes = reserved_prefixes
        self.run_starts = run_starts
        self.run_ends = run_ends
        self.tokens = tokens
        self.record_tokens = record_tokens


def sort_records(records: List[AccountRecord]) -> List[AccountRecord]:
    # Raw network string, not the derived identifier
    return sorted(records, key=lambda record: record.network)


def build_prefix_to_index(records: List[AccountRecord]) -> List[Tuple[int, int]]:
    """
    (prefix, index) pairs sorted by prefix, where index is the position of the record in `records`
    """
    return sorted((record.prefix, index) for index, record in enumerate(records))


def reserved_prefixes(records: List[AccountRecord]) -> List[int]:
    return sorted(record.prefix for record in records if record.is_reserved())


def consecutive_runs(prefixes: List[int]) -> Tuple[List[int], List[int]]:
    """
    Compresses sorted prefixes into inclusive ranges [starts[k], ends[k]].

    Example: [1, 2, 3, 7, 8, 10] -> ([1, 7, 10], [3, 8, 10])

    Parameters
    ----------
    prefixes: unique prefixes in ascending order

    Returns
    -------
    tuple of run starts and run ends
    """
    starts = []
    ends = []

    if not prefixes:
        return starts, ends

    start = previous = prefixes[0]

    for prefix in prefixes[1:]:
        if prefix != previous + 1:
            starts.append(start)
            ends.append(previous)
            start = prefix
        previous = prefix

    starts.append(start)
    ends.append(previous)

    return starts, ends


def build_token_table(records: List[AccountRecord]) -> Tuple[List[TokenEntry], List[List[str]]]:
    """
    Deduplicates the (symbol, decimals) pairs of all records into TokenEntries, sorted by identifier.

    The identifier of a token is the PascalCase of its symbol. Distinct pairs sharing an identifier (same ticker
    with different decimals) are all suffixed with their decimals.

    Returns
    -------
    tuple of the token entries and, per record, the identifiers of its tokens in declaration order
    """
    by_identifier = {}

    for record in records:
        for pair in record.token_pairs():
            pairs = by_identifier.setdefault(to_pascal_case(pair[0]), [])
            if pair not in pairs:
                pairs.append(pair)

    identifier_of_pair = {}

    for base_identifier, pairs in by_identifier.items():
        for symbol, decimals in pairs:
            identifier = base_identifier if len(pairs) == 1 else f'{base_identifier}{decimals}'

            reason = check_identifier(identifier)
            if reason:
                raise InvalidIdentifierException(f'token symbol {symbol!r} not valid: {reason}')

            identifier_of_pair[(symbol, decimals)] = identifier

    tokens = []
    seen = {}

    for (symbol, decimals), identifier in sorted(identifier_of_pair.items(), key=lambda item: item[1]):
        if identifier in seen:
            raise DuplicateTokenException(
                f'tokens {seen[identifier]!r} and {(symbol, decimals)!r} both map to `{identifier}`'
            )
        seen[identifier] = (symbol, decimals)
        tokens.append(TokenEntry(identifier, symbol, decimals))

    record_tokens = [[identifier_of_pair[pair] for pair in record.token_pairs()] for record in records]

    return tokens, record_tokens


def build_tables(records: List[AccountRecord]) -> RegistryTables:
    """
    Builds every emitted table from validated records

    Parameters
    ----------
    records: validated AccountRecords, in any order

    Returns
    -------
    RegistryTables
    """
    records = sort_records(records)

    prefix_to_index = build_prefix_to_index(records)
    run_starts, run_ends = consecutive_runs([prefix for prefix, _ in prefix_to_index])
    tokens, record_tokens = build_token_table(records)

    tables = RegistryTables(
        records=records,
        prefix_to_index=prefix_to_index,
        reserved_prefixes=reserved_prefixes(records),
        run_starts=run_starts,
        run_ends=run_ends,
        tokens=tokens,
        record_tokens=record_tokens
    )

    logger.debug(
        f'Built tables: {len(records)} formats, {len(run_starts)} prefix runs, '
        f'{len(tables.reserved_prefixes)} reserved, {len(tokens)} tokens'
    )

    return tables
