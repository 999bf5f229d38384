"""Command line interface to the shortening engine.

CLI usage:
    # Shorten a URL for one hour
    $ python -m tinylinks shorten https://example.com --expiration 60
    1

    # Resolve a short link
    $ python -m tinylinks unshorten 1
    https://example.com

    # Print the detail document of a short link
    $ python -m tinylinks info 1
    {"url": "https://example.com", "created_at": "2025-10-15T12:00:00+00:00", "expiration_in_minutes": 60}

    # Check Redis connectivity
    $ python -m tinylinks healthcheck
    OK

Behavior:
    - Connects to Redis using the TINYURL_APP_REDIS_* environment variables.
    - --memory uses an in-process store instead (nothing persists between runs).

Exit codes:
    0: success
    1: short link not found, or invalid input
    2: data store or configuration error
"""

import sys
import argparse
import logging

from tinylinks.exceptions import InvalidInputError, ConfigurationError
from tinylinks.dao.base import KeyValueBaseDAO
from tinylinks.dao.memory import KeyValueMemoryDAO
from tinylinks.dao.redis import KeyValueRedisDAO
from tinylinks.dao.exceptions import DataStoreError, ShortLinkNotFoundError
from tinylinks.services import ShortLinkService
from tinylinks.utils import load_config, initialize_logging


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_UNAVAILABLE = 2


def _non_negative_int(value: str) -> int:
    try:
        iv = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError('must be an integer') from None
    if iv < 0:
        raise argparse.ArgumentTypeError('must be >= 0')
    return iv


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='tinylinks',
        description='Shorten URLs and resolve short links',
    )
    parser.add_argument('--memory', action='store_true', help='Use an in-process store instead of Redis')

    subparsers = parser.add_subparsers(dest='command', required=True)

    shorten = subparsers.add_parser('shorten', help='Shorten a URL')
    shorten.add_argument('url', help='Absolute URL to shorten')
    shorten.add_argument(
        '-e',
        '--expiration',
        type=_non_negative_int,
        default=0,
        help='Lifetime of the short link in minutes (default: 0, never expires)',
    )

    unshorten = subparsers.add_parser('unshorten', help='Resolve a short link to its URL')
    unshorten.add_argument('shortcode', help='Short link code')

    info = subparsers.add_parser('info', help='Print the detail document of a short link')
    info.add_argument('shortcode', help='Short link code')

    subparsers.add_parser('healthcheck', help='Check data store connectivity')
    return parser


def build_dao(memory: bool = False) -> KeyValueBaseDAO:
    """Create the DAO selected on the command line

    Raises:
        ConfigurationError: On invalid environment configuration.
        DataStoreError: If Redis is unreachable.
    """
    if memory:
        return KeyValueMemoryDAO()

    app_config = load_config()
    redis_config = {f'redis_{k}': v for k, v in app_config['redis'].items()}
    return KeyValueRedisDAO(**redis_config, prefix=app_config['prefix'])


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.

    Steps:
        - Parse CLI arguments
        - Build the data store and the shortening service
        - Run the requested command and print its result

    Returns:
        int: process exit code.
    """
    args = build_parser().parse_args(argv)
    initialize_logging(stream='ext://sys.stderr')  # keep stdout for command output

    try:
        dao = build_dao(memory=args.memory)
        service = ShortLinkService(dao=dao)

        if args.command == 'shorten':
            print(service.shorten(args.url, args.expiration))
        elif args.command == 'unshorten':
            print(service.unshorten(args.shortcode))
        elif args.command == 'info':
            print(service.short_link_info(args.shortcode).to_json())
        elif args.command == 'healthcheck':
            dao.ping()
            print('OK')

    except (ShortLinkNotFoundError, InvalidInputError) as e:
        print(f'error: {e}', file=sys.stderr)
        return EXIT_NOT_FOUND
    except (DataStoreError, ConfigurationError) as e:
        logger.error('Command failed.', extra={'command': args.command, 'reason': str(e)})
        print(f'error: {e}', file=sys.stderr)
        return EXIT_UNAVAILABLE

    return EXIT_OK
