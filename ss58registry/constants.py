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

import os

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))

DEFAULT_REGISTRY_PATH = os.path.join(PACKAGE_DIR, 'data', 'ss58-registry.json')
DEFAULT_OUTPUT_PATH = os.path.join(PACKAGE_DIR, 'registry_gen.py')

# Prefixes above this value are reserved regardless of the registry contents
RESERVED_PREFIX_LIMIT = 16384

SIGNATURE_KINDS = ('Sr25519', 'Ed25519', 'secp256k1', '*25519')

ACCOUNT_SUFFIX = 'Account'

U8_MAX = 2 ** 8 - 1
U16_MAX = 2 ** 16 - 1
U128_MAX = 2 ** 128 - 1

PARSE_ERROR_MESSAGE = 'failed to parse network value as u16'

# Presentation types of the format mini-language that render the prefix as a number
NUMERIC_FORMAT_TYPES = frozenset('bcdoxXneEfFgG%')
