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

from .constants import PARSE_ERROR_MESSAGE


class ParseError(ValueError):
    """
    Raised when a network name or prefix does not resolve to a known address format
    """
    def __init__(self, message=PARSE_ERROR_MESSAGE):
        super().__init__(message)


class RegistryException(Exception):
    """
    Base class of all errors raised while compiling the registry document
    """
    pass


class RegistryParseException(RegistryException):
    pass


class DuplicatePrefixException(RegistryException):

    def __init__(self, record, clash):
        self.record = record
        self.clash = clash
        super().__init__(
            f'prefixes must be unique but this account\'s prefix:\n{record.dump()}\nclashed with\n{clash.dump()}'
        )


class DuplicateNetworkException(RegistryException):

    def __init__(self, record, clash):
        self.record = record
        self.clash = clash
        super().__init__(
            f'networks must be unique but this account\'s network:\n{record.dump()}\nclashed with\n{clash.dump()}'
        )


class EmptyNetworkException(RegistryException):

    def __init__(self, record):
        self.record = record
        super().__init__(f'network is mandatory:\n{record.dump()}')


class InvalidIdentifierException(RegistryException):
    pass


class SymbolDecimalMismatchException(RegistryException):

    def __init__(self, record):
        self.record = record
        super().__init__(f'decimals must be specified for each symbol:\n{record.dump()}')


class UnknownSignatureKindException(RegistryException):

    def __init__(self, record):
        self.record = record
        super().__init__(
            'Unknown sig type in standardAccount: expected one of Sr25519, Ed25519, secp256k1, *25519:\n'
            f'{record.dump()}'
        )


class DuplicateTokenException(RegistryException):
    pass


class OutputWriteException(RegistryException):
    pass
