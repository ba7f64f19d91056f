"""Command line entry point for manual testing of the cr-api client."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pprint import pprint
from typing import List, Optional

from .api_client import RoyaleApiClient, RoyaleApiError
from .config import ApiConfig
from .validation import InvalidArgumentError


def create_client(
    developer_key: Optional[str], base_url: Optional[str] = None
) -> RoyaleApiClient:
    """Create a client, falling back to the default service URL."""

    config = ApiConfig(developer_key=developer_key, base_url=base_url or ApiConfig.base_url)
    return RoyaleApiClient(config)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Fetch a Clash Royale player profile from cr-api."
    )
    parser.add_argument("tag", help="Player tag, without the leading #")
    parser.add_argument(
        "--key",
        default=os.environ.get("CR_API_KEY"),
        help="Developer key (default: $CR_API_KEY)",
    )
    parser.add_argument("--url", help="Override the API base URL")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests to stderr")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="[%(asctime)s] %(levelname)s - %(message)s"
        )

    try:
        client = create_client(args.key, args.url)
        profile = client.get_profile(args.tag)
    except InvalidArgumentError as exc:
        print(f"Invalid argument: {exc}", file=sys.stderr)
        return 2
    except RoyaleApiError as exc:
        print(f"Request failed: {exc}", file=sys.stderr)
        return 1

    pprint(profile.model_dump())
    return 0


if __name__ == "__main__":
    sys.exit(main())
