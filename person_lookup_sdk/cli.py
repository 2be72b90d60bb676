"""CLI entry point for Person Lookup SDK."""

import argparse
import asyncio
import json
import logging
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from .api.client import LookupClient
from .models.envelope import CanonicalResult
from .models.lookup import ProviderType


def parse_params(pairs: List[str]) -> Dict[str, str]:
    """Turn ``key=value`` arguments into a parameter mapping."""
    params = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"Expected key=value, got {pair!r}")
        params[key.strip()] = value
    return params


async def run_lookup(
    provider: str,
    params: Dict[str, str],
    endpoint: Optional[str] = None,
    body: Optional[str] = None
) -> CanonicalResult:
    """Run a single lookup with settings taken from the environment."""
    async with LookupClient() as client:
        return await client.lookup(provider, params, endpoint=endpoint, body=body)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Person Lookup SDK CLI")
    parser.add_argument(
        "provider",
        choices=[p.value for p in ProviderType],
        help="Lookup provider"
    )
    parser.add_argument(
        "params",
        nargs="*",
        metavar="key=value",
        help='Query parameters (e.g. phone=5551234567 firstName=Jane)'
    )
    parser.add_argument("--endpoint", help="Provider endpoint or Twilio action")
    parser.add_argument(
        "--body",
        help="Request body (Twilio: selects the POST identity actions)"
    )
    parser.add_argument("--debug", action="store_true", help="Pass through raw non-JSON upstream bodies")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI function. Prints the JSON envelope; exit code 0 when status < 400."""
    parser = build_parser()
    args = parser.parse_args(argv)
    load_dotenv()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s"
    )

    try:
        params: Dict[str, Any] = parse_params(args.params)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))
    if args.debug:
        params["_debug"] = "1"

    result = asyncio.run(run_lookup(args.provider, params, args.endpoint, args.body))
    print(json.dumps(result.to_payload(), indent=2))
    return 0 if result.status < 400 else 1


if __name__ == "__main__":
    raise SystemExit(main())
