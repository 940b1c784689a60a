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

import unittest

from ss58registry.compiler import AccountRecord, load_registry, validate_registry
from ss58registry.constants import DEFAULT_REGISTRY_PATH
from ss58registry.exceptions import DuplicatePrefixException, DuplicateNetworkException, EmptyNetworkException, \
    InvalidIdentifierException, SymbolDecimalMismatchException, UnknownSignatureKindException, RegistryException


def record(prefix, network, standard_account='*25519', symbols=None, decimals=None, website=None):
    return AccountRecord(
        prefix=prefix, network=network, display_name=network.title(), standard_account=standard_account,
        symbols=symbols, decimals=decimals, website=website
    )


class ValidatorTestCase(unittest.TestCase):

    def test_shipped_registry_is_valid(self):
        validate_registry(load_registry(DEFAULT_REGISTRY_PATH))

    def test_empty_registry_is_valid(self):
        validate_registry([])

    def test_duplicate_prefix(self):
        first = record(0, 'polkadot')
        second = record(0, 'kusama')

        with self.assertRaises(DuplicatePrefixException) as cm:
            validate_registry([first, second])

        self.assertIs(cm.exception.record, second)
        self.assertIs(cm.exception.clash, first)
        self.assertIn("'kusama'", str(cm.exception))
        self.assertIn("'polkadot'", str(cm.exception))

    def test_duplicate_network(self):
        with self.assertRaises(DuplicateNetworkException):
            validate_registry([record(0, 'polkadot'), record(1, 'polkadot')])

    def test_duplicate_derived_identifier(self):
        # Different networks, same identifier DockTestnetAccount
        with self.assertRaises(DuplicateNetworkException) as cm:
            validate_registry([record(21, 'dock-testnet'), record(22, 'dock_testnet')])

        self.assertEqual(cm.exception.clash.network, 'dock-testnet')

    def test_empty_network(self):
        with self.assertRaises(EmptyNetworkException):
            validate_registry([record(0, '')])

    def test_invalid_identifier(self):
        with self.assertRaises(InvalidIdentifierException) as cm:
            validate_registry([record(71, '3dpass')])

        self.assertIn('network not valid', str(cm.exception))
        self.assertIn("'3dpass'", str(cm.exception))

    def test_symbol_decimal_mismatch(self):
        with self.assertRaises(SymbolDecimalMismatchException):
            validate_registry([record(18, 'darwinia', symbols=['RING', 'KTON'], decimals=[9])])

    def test_unknown_signature_kind(self):
        with self.assertRaises(UnknownSignatureKindException) as cm:
            validate_registry([record(0, 'polkadot', standard_account='sr25519')])

        self.assertIn('expected one of Sr25519, Ed25519, secp256k1, *25519', str(cm.exception))

    def test_signature_kinds(self):
        validate_registry([
            record(0, 'a', standard_account='Sr25519'),
            record(1, 'b', standard_account='Ed25519'),
            record(2, 'c', standard_account='secp256k1'),
            record(3, 'd', standard_account='*25519'),
            record(4, 'e', standard_account=None),
        ])

    def test_first_failure_wins(self):
        # Prefix clash is checked before the invalid signature kind of the same record
        with self.assertRaises(DuplicatePrefixException):
            validate_registry([record(0, 'polkadot'), record(0, 'kusama', standard_account='bogus')])

        # Earlier record fails first
        with self.assertRaises(SymbolDecimalMismatchException):
            validate_registry([record(0, 'polkadot', symbols=['DOT']), record(0, 'kusama')])

    def test_exception_hierarchy(self):
        with self.assertRaises(RegistryException):
            validate_registry([record(0, '')])


if __name__ == '__main__':
    unittest.main()
