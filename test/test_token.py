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

from ss58registry import Token, TokenRegistry


class TokenTestCase(unittest.TestCase):

    def test_display(self):
        token = Token(name='I❤U', decimals=8, amount=100_000_000_000)
        self.assertEqual(str(token), '1_000,000 I❤U')

    def test_debug(self):
        token = Token(name='I❤U', decimals=8, amount=100_000_000_000)
        self.assertEqual(repr(token), '1000,000 I❤U (100_000_000_000)')

    def test_fraction_is_truncated_to_three_digits(self):
        token = Token(name='KSM', decimals=12, amount=1_234_567_890_123)
        self.assertEqual(str(token), '1,234 KSM')
        self.assertEqual(repr(token), '1,234 KSM (1_234_567_890_123)')

    def test_fraction_zero_padded(self):
        token = Token(name='DOT', decimals=10, amount=10_500_000_000)
        self.assertEqual(str(token), '1,050 DOT')

        token = Token(name='DOT', decimals=10, amount=12_345_678_901_000_000_050)
        self.assertEqual(str(token), '1_234_567_890,100 DOT')

    def test_few_decimals(self):
        self.assertEqual(str(Token(name='GM', decimals=0, amount=1234)), '1_234,000 GM')
        self.assertEqual(str(Token(name='G1', decimals=2, amount=1234)), '12,340 G1')

    def test_max_amount(self):
        token = Token(name='XX', decimals=0, amount=2 ** 128 - 1)
        self.assertEqual(str(token), '340_282_366_920_938_463_463_374_607_431_768_211_455,000 XX')

    def test_invalid_fields(self):
        self.assertRaises(ValueError, Token, 'DOT', 256, 1)
        self.assertRaises(ValueError, Token, 'DOT', 10, -1)
        self.assertRaises(ValueError, Token, 'DOT', 10, 2 ** 128)
        self.assertRaises(TypeError, Token, 'DOT', 10, 1.5)

    def test_value_semantics(self):
        self.assertEqual(Token('DOT', 10, 1), Token('DOT', 10, 1))
        self.assertLess(Token('DOT', 10, 1), Token('DOT', 10, 2))
        self.assertEqual(len({Token('DOT', 10, 1), Token('DOT', 10, 1)}), 1)


class TokenRegistryTestCase(unittest.TestCase):

    def test_attributes(self):
        self.assertEqual(TokenRegistry.Dot.attributes(), ('DOT', 10))
        self.assertEqual(TokenRegistry.Ksm.attributes(), ('KSM', 12))
        self.assertEqual(TokenRegistry.JDot.attributes(), ('jDOT', 10))

    def test_create_token(self):
        token = TokenRegistry.Dot.create_token(100_000_000)
        self.assertEqual(token, Token(name='DOT', decimals=10, amount=100_000_000))
        self.assertEqual(str(token), '0,010 DOT')
        self.assertEqual(repr(token), '0,010 DOT (100_000_000)')

    def test_pairs_are_unique(self):
        pairs = [token.attributes() for token in TokenRegistry]
        self.assertEqual(len(pairs), len(set(pairs)))

    def test_repr(self):
        self.assertEqual(repr(TokenRegistry.Ksm), "TokenRegistry(name='KSM', decimals=12)")


if __name__ == '__main__':
    unittest.main()
