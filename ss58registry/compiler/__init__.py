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

""" Build-time compiler of the SS58 registry: parse, validate, derive and emit `ss58registry.registry_gen`

"""
import logging
from typing import List, Union

from ..constants import DEFAULT_REGISTRY_PATH, DEFAULT_OUTPUT_PATH
from .document import AccountRecord, parse_registry, load_registry
from .emitter import render_module, write_module
from .identifier import to_pascal_case, derive_identifier, check_identifier
from .tables import RegistryTables, TokenEntry, build_tables, consecutive_runs
from .validator import validate_registry

__all__ = ['compile_registry', 'compile_tables', 'build', 'is_up_to_date', 'AccountRecord', 'RegistryTables', 'TokenEntry',
           'parse_registry', 'load_registry', 'validate_registry', 'build_tables', 'consecutive_runs',
           'render_module', 'write_module', 'to_pascal_case', 'derive_identifier', 'check_identifier']

logger = logging.getLogger(__name__)


def compile_tables(records: List[AccountRecord]) -> RegistryTables:
    logger.debug(f'Parsed {len(records)} registry records')

    validate_registry(records)

    return build_tables(records)


def compile_registry(json_data: Union[str, bytes, dict]) -> str:
    """
    Compiles a registry document to the source of the generated registry module

    Parameters
    ----------
    json_data: registry document as JSON string/bytes or decoded dict

    Returns
    -------
    str: Python source
    """
    return render_module(compile_tables(parse_registry(json_data)))


def _compile_file(registry_path: str) -> str:
    logger.debug(f'Loading registry from {registry_path}')
    return render_module(compile_tables(load_registry(registry_path)))


def build(registry_path: str = DEFAULT_REGISTRY_PATH, output_path: str = DEFAULT_OUTPUT_PATH) -> str:
    """
    Runs the full pipeline and atomically writes the generated module

    Parameters
    ----------
    registry_path: path of ss58-registry.json
    output_path: path of the module to (over)write

    Returns
    -------
    str: the generated source
    """
    source = _compile_file(registry_path)
    write_module(source, output_path)
    return source


def is_up_to_date(registry_path: str = DEFAULT_REGISTRY_PATH, output_path: str = DEFAULT_OUTPUT_PATH) -> bool:
    """
    Whether the module at `output_path` equals what `build()` would write
    """
    source = _compile_file(registry_path)

    try:
        with open(output_path, encoding='utf-8') as fp:
            current = fp.read()
    except FileNotFoundError:
        return False

    return current == source
