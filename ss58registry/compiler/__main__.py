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

import argparse
import logging
import sys

from ..constants import DEFAULT_REGISTRY_PATH, DEFAULT_OUTPUT_PATH
from ..exceptions import RegistryException
from . import build, is_up_to_date

logger = logging.getLogger('ss58registry.compiler')


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog='python -m ss58registry.compiler',
        description='Compile ss58-registry.json into the ss58registry.registry_gen module'
    )
    parser.add_argument('--registry', default=DEFAULT_REGISTRY_PATH, help='registry JSON document')
    parser.add_argument('--output', default=DEFAULT_OUTPUT_PATH, help='generated Python module')
    parser.add_argument('--check', action='store_true', help='only verify that the output is up to date')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s'
    )

    try:
        if args.check:
            if not is_up_to_date(args.registry, args.output):
                logger.error(f'{args.output} is out of date with {args.registry}')
                return 1
            logger.info(f'{args.output} is up to date')
        else:
            build(args.registry, args.output)
    except RegistryException as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
