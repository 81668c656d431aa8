"""
Command-line interface for API Headers SDK
Generates signed request headers, salts and timestamps
"""

import argparse
import json
import logging
import os
import sys
from typing import Dict, List, Optional

from . import __version__
from .exceptions import ApiHeadersSDKError, ConfigurationError
from .signing import (
    SigningConfig,
    SigningError,
    create_signer,
    create_signing_config,
    generate_headers,
    generate_salt,
    generate_timestamp,
    read_config_file,
    DEFAULT_ENV_PREFIX,
)
from .signing.types import DEFAULT_SALT_LENGTH


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog='api-headers',
        description='Generate HMAC-SHA256 authentication headers for API calls'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'API Headers SDK {__version__}'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable DEBUG logging (prints signing material, never use in production)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    setup_sign_parser(subparsers)
    setup_salt_parser(subparsers)

    subparsers.add_parser('timestamp', help='Print the current Unix timestamp')

    return parser


def setup_sign_parser(subparsers):
    """Setup sign subcommand."""
    sign_parser = subparsers.add_parser('sign', help='Generate signed headers for a request')
    sign_parser.add_argument('method', help='HTTP method (GET, POST, PUT, DELETE, HEAD, OPTIONS)')
    sign_parser.add_argument('path', help='Request path, e.g. /v1/data/countries')

    body_group = sign_parser.add_mutually_exclusive_group()
    body_group.add_argument('--body', help='Request body text, signed as given')
    body_group.add_argument('--body-file', help='Read request body text from file')

    sign_parser.add_argument('--salt', help='Use this salt instead of a random one')
    sign_parser.add_argument('--timestamp', type=int, help='Use this Unix timestamp instead of the clock')
    sign_parser.add_argument(
        '--header',
        action='append',
        default=[],
        metavar='NAME=VALUE',
        help='Additional header to include in the output (repeatable)'
    )
    sign_parser.add_argument('--access-key', help='Access key (default: config file, then API_HEADERS_ACCESS_KEY)')
    sign_parser.add_argument('--secret-key', help='Secret key (default: config file, then API_HEADERS_SECRET_KEY)')
    sign_parser.add_argument('--config', help='JSON file holding access_key and/or secret_key')


def setup_salt_parser(subparsers):
    """Setup salt subcommand."""
    salt_parser = subparsers.add_parser('salt', help='Generate a random alphanumeric salt')
    salt_parser.add_argument(
        '--length',
        type=int,
        default=DEFAULT_SALT_LENGTH,
        help=f'Salt length (default: {DEFAULT_SALT_LENGTH})'
    )


def parse_headers(values: List[str]) -> Dict[str, str]:
    """Parse NAME=VALUE pairs into a header dict."""
    headers = {}
    for value in values:
        name, sep, header_value = value.partition('=')
        if not sep or not name:
            raise ValueError(f"Invalid header '{value}', expected NAME=VALUE")
        headers[name] = header_value
    return headers


def resolve_config(args, environ=None) -> SigningConfig:
    """
    Resolve credentials key by key.

    Each key comes from its command-line argument, then the config file,
    then the API_HEADERS_* environment variable.
    """
    environ = os.environ if environ is None else environ
    file_data = read_config_file(args.config) if args.config else {}

    builder = create_signing_config()
    missing = []
    for name, cli_value in (('access_key', args.access_key), ('secret_key', args.secret_key)):
        env_name = f"{DEFAULT_ENV_PREFIX}{name.upper()}"
        value = cli_value or file_data.get(name) or environ.get(env_name)
        if value:
            getattr(builder, name)(value)
        else:
            missing.append(f"{name} (--{name.replace('_', '-')}, config file or {env_name})")

    if missing:
        raise ConfigurationError(
            f"Missing credentials: {', '.join(missing)}",
            "MISSING_CREDENTIALS",
            {"missing": missing}
        )

    return builder.build()


def handle_sign_command(args) -> int:
    """Handle header signing."""
    try:
        additional_headers = parse_headers(args.header)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    body = args.body
    if args.body_file:
        try:
            with open(args.body_file, 'r', encoding='utf-8') as f:
                body = f.read()
        except UnicodeDecodeError as e:
            print(f"Error: body file {args.body_file} is not valid UTF-8 text: {e}", file=sys.stderr)
            return 1

    signer = create_signer(resolve_config(args))
    headers = generate_headers(
        signer,
        args.method,
        args.path,
        body=body,
        additional_headers=additional_headers,
        salt=args.salt,
        timestamp=args.timestamp
    )

    print(json.dumps(headers, indent=2))
    return 0


def handle_salt_command(args) -> int:
    """Handle salt generation."""
    print(generate_salt(args.length))
    return 0


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for the CLI

    Args:
        argv: Command line arguments (None to use sys.argv)

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    try:
        if args.command == 'sign':
            return handle_sign_command(args)
        elif args.command == 'salt':
            return handle_salt_command(args)
        elif args.command == 'timestamp':
            print(generate_timestamp())
            return 0
        else:
            # No command specified, show help
            parser.print_help()
            return 1

    except (ApiHeadersSDKError, SigningError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130


if __name__ == '__main__':
    sys.exit(main())
