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

import json
import unittest

from ss58registry.compiler.identifier import to_pascal_case, derive_identifier, check_identifier
from ss58registry.constants import DEFAULT_REGISTRY_PATH


class PascalCaseTestCase(unittest.TestCase):

    def test_lowercase_network(self):
        self.assertEqual(to_pascal_case('polkadot'), 'Polkadot')
        self.assertEqual(to_pascal_case('reserved46'), 'Reserved46')

    def test_separators(self):
        self.assertEqual(to_pascal_case('dock-testnet'), 'DockTestnet')
        self.assertEqual(to_pascal_case('quartz_mainnet'), 'QuartzMainnet')
        self.assertEqual(to_pascal_case('sora_kusama_para'), 'SoraKusamaPara')
        self.assertEqual(to_pascal_case('  spaced out  '), 'SpacedOut')

    def test_case_boundaries(self):
        self.assertEqual(to_pascal_case('BareSr25519'), 'BareSr25519')
        self.assertEqual(to_pascal_case('BareSecp256k1'), 'BareSecp256k1')
        self.assertEqual(to_pascal_case('KICO'), 'Kico')
        self.assertEqual(to_pascal_case('HTTPServer'), 'HttpServer')
        self.assertEqual(to_pascal_case('jDOT'), 'JDot')
        self.assertEqual(to_pascal_case('camelCase'), 'CamelCase')

    def test_unicode(self):
        self.assertEqual(to_pascal_case('ğ1'), 'Ğ1')
        self.assertEqual(to_pascal_case('I❤U'), 'Iu')
        self.assertEqual(to_pascal_case('éclair-ñu'), 'ÉclairÑu')

    def test_single_letter_words(self):
        self.assertEqual(to_pascal_case('xY'), 'Xy')
        self.assertEqual(to_pascal_case('XY'), 'Xy')
        self.assertEqual(to_pascal_case('aB1C'), 'Ab1C')
        self.assertEqual(to_pascal_case('x-y-z'), 'Xyz')
        self.assertEqual(to_pascal_case('x-yz'), 'XYz')

    def test_empty(self):
        self.assertEqual(to_pascal_case(''), '')
        self.assertEqual(to_pascal_case('--'), '')

    def test_idempotent(self):
        with open(DEFAULT_REGISTRY_PATH, encoding='utf-8') as fp:
            registry = json.load(fp)['registry']

        values = [entry['network'] for entry in registry]
        values += [symbol for entry in registry for symbol in entry['symbols']]
        values += ['HTTPServer', 'USDv', 'éclair-ñu', 'I❤U', 'a1B2c3', 'xY', 'aB1C', 'x-y-z', 'vDOT', 'A1']

        for value in values:
            once = to_pascal_case(value)
            self.assertEqual(to_pascal_case(once), once, value)


class IdentifierTestCase(unittest.TestCase):

    def test_derive_identifier(self):
        self.assertEqual(derive_identifier('polkadex'), 'PolkadexAccount')
        self.assertEqual(derive_identifier('reserved46'), 'Reserved46Account')
        self.assertEqual(derive_identifier('bifrost'), 'BifrostAccount')
        self.assertEqual(derive_identifier(''), 'Account')

    def test_valid_identifiers(self):
        for identifier in ['PolkadotAccount', 'Ğ1Account', 'T3rnAccount', 'Ab_c']:
            self.assertIsNone(check_identifier(identifier), identifier)

    def test_invalid_start(self):
        self.assertIn('not valid at the start', check_identifier('3dpassAccount'))
        self.assertIn('not valid at the start', check_identifier('_Account'))

    def test_invalid_char(self):
        self.assertIn('Invalid char', check_identifier('Dock-Account'))
        self.assertIn('Invalid char', check_identifier('I❤UAccount'))

    def test_empty(self):
        self.assertEqual(check_identifier(''), 'empty identifier')

    def test_not_nfkc_normalized(self):
        self.assertIn('NFKC', check_identifier('ﬁnanceAccount'))

    def test_keyword(self):
        for identifier in ['None', 'True', 'False']:
            self.assertIn('reserved keyword', check_identifier(identifier), identifier)

        self.assertIsNone(check_identifier('NoneAccount'))


if __name__ == '__main__':
    unittest.main()
