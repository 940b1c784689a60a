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

from ss58registry import AddressFormat, AddressFormatRegistry, TokenRegistry, ParseError
from ss58registry.constants import DEFAULT_REGISTRY_PATH, RESERVED_PREFIX_LIMIT
from ss58registry.registry_gen import ALL_FORMATS, ALL_NAMES, PREFIX_TO_INDEX, RESERVED_PREFIXES, RUN_STARTS, \
    RUN_ENDS, TOKENS


class AddressFormatRegistryTestCase(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        with open(DEFAULT_REGISTRY_PATH, encoding='utf-8') as fp:
            cls.registry = json.load(fp)['registry']

        cls.prefix_of_network = {entry['network']: entry['prefix'] for entry in cls.registry}

    def test_one_member_per_record(self):
        self.assertEqual(len(AddressFormatRegistry), len(self.registry))
        self.assertEqual(len(ALL_FORMATS), len(self.registry))
        self.assertEqual(len(ALL_NAMES), len(self.registry))
        self.assertEqual(len(PREFIX_TO_INDEX), len(self.registry))

    def test_formats_and_names_aligned(self):
        for address_format, name in zip(ALL_FORMATS, ALL_NAMES):
            self.assertEqual(address_format.prefix(), self.prefix_of_network[name])
            self.assertEqual(str(address_format), name)

    def test_enum_order_matches_all_formats(self):
        self.assertEqual(list(AddressFormatRegistry), list(ALL_FORMATS))

    def test_names_sorted(self):
        self.assertEqual(list(ALL_NAMES), sorted(ALL_NAMES))

    def test_prefix_to_index(self):
        prefixes = [prefix for prefix, _ in PREFIX_TO_INDEX]
        self.assertEqual(prefixes, sorted(prefixes))
        self.assertEqual(sorted(index for _, index in PREFIX_TO_INDEX), list(range(len(ALL_FORMATS))))

        for prefix, index in PREFIX_TO_INDEX:
            self.assertEqual(ALL_FORMATS[index].prefix(), prefix)

    def test_prefix_runs_cover_prefixes_once(self):
        self.assertEqual(len(RUN_STARTS), len(RUN_ENDS))

        for prefix, _ in PREFIX_TO_INDEX:
            covering = [k for k in range(len(RUN_STARTS)) if RUN_STARTS[k] <= prefix <= RUN_ENDS[k]]
            self.assertEqual(len(covering), 1, prefix)

        # Every value inside a run is a known prefix
        known = {prefix for prefix, _ in PREFIX_TO_INDEX}
        for start, end in zip(RUN_STARTS, RUN_ENDS):
            self.assertTrue(set(range(start, end + 1)) <= known)

    def test_reserved_law(self):
        for entry in self.registry:
            expected = entry.get('standardAccount') is None or entry['prefix'] > RESERVED_PREFIX_LIMIT
            self.assertEqual(AddressFormat(entry['prefix']).is_reserved(), expected, entry['network'])

        self.assertEqual(
            RESERVED_PREFIXES,
            {entry['prefix'] for entry in self.registry if entry.get('standardAccount') is None}
        )

    def test_try_from_round_trip(self):
        for address_format in AddressFormatRegistry:
            self.assertIs(AddressFormatRegistry.try_from(AddressFormat(address_format)), address_format)
            self.assertIs(AddressFormatRegistry.try_from(address_format.address_format()), address_format)

    def test_try_from_custom(self):
        self.assertRaises(ParseError, AddressFormatRegistry.try_from, AddressFormat.custom(432))
        self.assertRaises(ParseError, AddressFormatRegistry.try_from, 432)

    def test_enum_to_name_and_back(self):
        for name in AddressFormat.all_names():
            address_format = AddressFormatRegistry.from_name(name)
            self.assertEqual(str(address_format), name)
            self.assertEqual(str(AddressFormat(address_format)), name)

    def test_from_name_unknown(self):
        self.assertRaises(ParseError, AddressFormatRegistry.from_name, 'unknown')
        # No numeric fallback for known formats
        self.assertRaises(ParseError, AddressFormatRegistry.from_name, '0')

    def test_prefix(self):
        self.assertEqual(AddressFormatRegistry.PolkadotAccount.prefix(), 0)
        self.assertEqual(AddressFormatRegistry.KusamaAccount.prefix(), 2)
        self.assertEqual(int(AddressFormatRegistry.PolkadexAccount), 89)

    def test_is_reserved(self):
        self.assertTrue(AddressFormatRegistry.Reserved46Account.is_reserved())
        self.assertFalse(AddressFormatRegistry.PolkadexAccount.is_reserved())

    def test_is_custom(self):
        for address_format in AddressFormatRegistry:
            self.assertFalse(address_format.is_custom())

    def test_display(self):
        self.assertEqual(str(AddressFormatRegistry.DockTestnetAccount), 'dock-testnet')
        self.assertEqual(f'{AddressFormatRegistry.QuartzMainnetAccount}', 'quartz_mainnet')
        self.assertEqual(format(AddressFormatRegistry.KusamaAccount, '>8'), '  kusama')

    def test_format_numeric(self):
        self.assertEqual(format(AddressFormatRegistry.KusamaAccount, 'd'), '2')
        self.assertEqual(f'{AddressFormatRegistry.PolkadotAccount:03d}', '000')
        self.assertEqual(f'{AddressFormatRegistry.KusamaAccount:#x}', '0x2')
        self.assertEqual(f'{AddressFormatRegistry.KusamaAccount:s}', 'kusama')

    def test_all_names(self):
        self.assertEqual(AddressFormatRegistry.all_names(), list(ALL_NAMES))

    def test_tokens(self):
        self.assertEqual(AddressFormatRegistry.PolkadotAccount.tokens(), [TokenRegistry.Dot])
        self.assertEqual(AddressFormatRegistry.KusamaAccount.tokens(), [TokenRegistry.Ksm])
        self.assertEqual(AddressFormatRegistry.DarwiniaAccount.tokens(), [TokenRegistry.Ring, TokenRegistry.Kton])
        self.assertEqual(AddressFormatRegistry.Reserved46Account.tokens(), [])

    def test_tokens_shared_between_networks(self):
        self.assertEqual(
            AddressFormatRegistry.InterlayAccount.tokens(),
            [TokenRegistry.Intr, TokenRegistry.Ibtc, TokenRegistry.Dot]
        )
        self.assertIn(TokenRegistry.Ksm, AddressFormatRegistry.KintsugiAccount.tokens())

    def test_tokens_match_registry(self):
        networks = {entry['network']: entry for entry in self.registry}

        for address_format in AddressFormatRegistry:
            entry = networks[str(address_format)]
            self.assertEqual(
                [token.attributes() for token in address_format.tokens()],
                list(zip(entry['symbols'], entry['decimals']))
            )

        self.assertEqual(set(TOKENS), set(AddressFormatRegistry))

    def test_same_symbol_different_decimals(self):
        self.assertEqual(AddressFormatRegistry.TotemAccount.tokens(), [TokenRegistry.Ctx0])
        self.assertEqual(AddressFormatRegistry.ContextfreeAccount.tokens(), [TokenRegistry.Ctx18])
        self.assertEqual(TokenRegistry.Ctx0.attributes(), ('CTX', 0))
        self.assertEqual(TokenRegistry.Ctx18.attributes(), ('CTX', 18))


if __name__ == '__main__':
    unittest.main()
