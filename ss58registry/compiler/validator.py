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

import logging
from typing import List

from ..constants import SIGNATURE_KINDS
from ..exceptions import DuplicatePrefixException, DuplicateNetworkException, EmptyNetworkException, \
    InvalidIdentifierException, SymbolDecimalMismatchException, UnknownSignatureKindException
from .document import AccountRecord
from .identifier import check_identifier

__all__ = ['validate_registry']

logger = logging.getLogger(__name__)


def validate_registry(records: List[AccountRecord]):
    """
    Checks the structural rules of the registry, record by record. The first violation is raised.

    Parameters
    ----------
    records: AccountRecords in document order

    Raises
    ------
    DuplicatePrefixException, DuplicateNetworkException, EmptyNetworkException, InvalidIdentifierException,
    SymbolDecimalMismatchException, UnknownSignatureKindException
    """
    used_prefixes = {}
    used_networks = {}

    for record in records:
        if record.prefix in used_prefixes:
            raise DuplicatePrefixException(record, used_prefixes[record.prefix])
        used_prefixes[record.prefix] = record

        identifier = record.name()

        if identifier in used_networks:
            raise DuplicateNetworkException(record, used_networks[identifier])
        used_networks[identifier] = record

        if not record.network:
            raise EmptyNetworkException(record)

        reason = check_identifier(identifier)
        if reason:
            raise InvalidIdentifierException(f'network not valid: {reason} for\n{record.dump()}')

        if len(record.symbols) != len(record.decimals):
            raise SymbolDecimalMismatchException(record)

        if record.standard_account is not None and record.standard_account not in SIGNATURE_KINDS:
            raise UnknownSignatureKindException(record)

    logger.debug(f'Validated {len(records)} registry records')
