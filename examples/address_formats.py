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

from ss58registry import AddressFormat, AddressFormatRegistry, ParseError


# Known network by name or by prefix
kusama = AddressFormat.from_name('kusama')
print(f"{kusama}: prefix {kusama.prefix()}, custom: {kusama.is_custom()}, reserved: {kusama.is_reserved()}")

polkadot = AddressFormatRegistry.try_from(AddressFormat(0))
print(f"Prefix 0 is {polkadot} ({polkadot.name})")

# Prefixes outside the registry are custom, above 16384 also reserved
for prefix in [432, 16385]:
    address_format = AddressFormat.custom(prefix)
    print(f"{address_format}: custom: {address_format.is_custom()}, reserved: {address_format.is_reserved()}")

try:
    AddressFormatRegistry.from_name('not-a-network')
except ParseError as e:
    print("Lookup failed:", e)

# Token amounts of a network
for token in AddressFormatRegistry.DarwiniaAccount.tokens():
    print(token.create_token(1_234_500_000_000))

print(f"{len(AddressFormat.all())} known address formats")
