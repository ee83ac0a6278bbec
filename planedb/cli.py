"""
Standalone lookup tool.

Usage:
    planedb <icao code>
    python -m planedb.cli a1b2c3 --types ACFTREF.txt --master MASTER.txt
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from planedb.config import config
from planedb.database import init_db, close_db

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='planedb',
        usage='planedb <icao code>',
        description='Look up an aircraft registration by ICAO hex code.',
    )
    parser.add_argument('icao', help='ICAO24 hex address, e.g. a1b2c3')
    parser.add_argument('--types', default=config.data.types_path,
                        help='path to ACFTREF.txt (default: %(default)s)')
    parser.add_argument('--master', default=config.data.planes_path,
                        help='path to MASTER.txt (default: %(default)s)')
    parser.add_argument('--json', action='store_true', help='print the result as JSON')
    parser.add_argument('-v', '--verbose', action='store_true', help='log loading progress')
    return parser


def lookup(icao: str, types_path: str, planes_path: str, as_json: bool = False) -> bool:
    """
    Look up and print one ICAO code.

    Returns True if the plane was found.
    """
    if not as_json:
        print(icao)

    db = init_db(types_path, planes_path)
    if db is None:
        print('Could not initialize plane database')
        return False

    try:
        plane = db.lookup(icao)
        if as_json:
            result = None
            if plane is not None:
                type_info = db.resolve(plane)
                result = plane.to_dict()
                result['type'] = type_info.to_dict() if type_info else None
            print(json.dumps(result, indent=2))
        else:
            print(db.render(plane))
        return plane is not None
    finally:
        close_db(db)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )

    found = lookup(args.icao, args.types, args.master, as_json=args.json)
    return 0 if found else 1


if __name__ == '__main__':
    sys.exit(main())
