"""
Command line entry point.

Every option falls back to the environment variable used by the original
example script, so a ``.env`` file is enough to drive a trade::

    predator-sdk buy --amount 0.001
    predator-sdk sell --percentage 10
    predator-sdk create --name "Example Token" --symbol EXT
"""

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import Dict, List, Optional

from dotenv import load_dotenv

from predator_sdk.client.predator_client import PredatorClient
from predator_sdk.utils.config import config_from_env
from predator_sdk.utils.errors import DomainError

# flag dest -> environment fallback, per command
ENV_FALLBACKS: Dict[str, Dict[str, str]] = {
    "buy": {
        "private_keys": "PRIVATE_KEYS",
        "token_address": "TOKEN_ADDRESS",
        "amount": "BUY_AMOUNT",
    },
    "sell": {
        "private_keys": "PRIVATE_KEYS",
        "token_address": "TOKEN_ADDRESS",
        "percentage": "SELL_PERCENTAGE",
    },
    "create": {
        "private_keys": "PRIVATE_KEYS",
        "dev_private_key": "DEV_PRIVATE_KEY",
        "amount": "CREATE_AMOUNT",
        "name": "TOKEN_NAME",
        "symbol": "TOKEN_SYMBOL",
        "description": "TOKEN_DESCRIPTION",
        "telegram": "TOKEN_TELEGRAM",
        "twitter": "TOKEN_TWITTER",
        "website": "TOKEN_WEBSITE",
        "file": "TOKEN_LOGO_URL",
    },
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="predator-sdk", description="Predator trading bot client")
    parser.add_argument("--base-url", help="API base URL (default: PREDATOR_BASE_URL or the public endpoint)")
    parser.add_argument("--config", dest="config_path", help="Path to config file (YAML)")
    parser.add_argument("--env-file", help="dotenv file to load before reading the environment")
    parser.add_argument("--log-level", default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])

    sub = parser.add_subparsers(dest="command", required=True)
    for command, fields in ENV_FALLBACKS.items():
        cmd = sub.add_parser(command, help=f"{command} tokens")
        for dest, env in fields.items():
            cmd.add_argument(f"--{dest.replace('_', '-')}", dest=dest, help=f"defaults to ${env}")
    return parser


def collect_options(args: argparse.Namespace) -> Dict[str, str]:
    """Merge flags with their environment fallbacks, dropping unset values"""
    options = {}
    for dest, env in ENV_FALLBACKS[args.command].items():
        value = getattr(args, dest, None) or os.environ.get(env)
        if value:
            options[dest] = value
    return options


async def run(args: argparse.Namespace) -> object:
    config = None
    if not args.config_path:
        config = config_from_env(logging.getLogger(__name__), args.env_file)
    async with PredatorClient(
        args.base_url, config=config, config_path=args.config_path, log_level=args.log_level
    ) as client:
        client.logger.info(f"Running {args.command}...")
        return await client.execute(args.command, collect_options(args))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    load_dotenv(args.env_file)

    try:
        result = asyncio.run(run(args))
    except DomainError as e:
        print(f"{args.command.capitalize()} operation failed: {e}", file=sys.stderr)
        return 1
    except (ValueError, OSError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("Stopped by user", file=sys.stderr)
        return 130

    print(json.dumps(result, indent=2) if not isinstance(result, str) else result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
