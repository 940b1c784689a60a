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

""" Registry of the well-known SS58 address formats (network prefixes) and their tokens

"""
from .address_format import AddressFormat
from .exceptions import ParseError
from .registry_gen import AddressFormatRegistry, TokenRegistry
from .token import Token

__all__ = ['AddressFormat', 'AddressFormatRegistry', 'TokenRegistry', 'Token', 'ParseError']

__version__ = '1.0.0'
